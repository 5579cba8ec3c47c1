"""Application composition root.

This module wires configuration into the pieces the command line needs: the reference instant for
relative expressions and the display offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from nldate.config.settings import Settings


@dataclass(frozen=True)
class App:
    """Shared dependencies for the command line entry point."""

    settings: Settings

    def reference_now(self) -> datetime:
        """Return the pinned `NLDATE_NOW` instant, or the current UTC time."""

        if self.settings.reference_now is not None:
            return self.settings.reference_now
        return datetime.now(UTC)


def create_app(settings: Settings) -> App:
    """Create the application container."""

    return App(settings=settings)
