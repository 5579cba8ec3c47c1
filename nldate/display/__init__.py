"""Human-friendly rendering of parsed timestamps."""
