"""Natural-language date parsing.

The parsing layer translates free-form English or Polish text into a canonical vocabulary, runs an
ordered cascade of extraction rules over it and validates the result into an aware `datetime`.
"""
