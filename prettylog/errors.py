"""
Errors raised by prettylog. Malformed input lines are not errors: they pass through unchanged.
"""


class PrettyLogError(Exception):
    """Base class for prettylog errors."""


class UnknownColorSchemeError(PrettyLogError, KeyError):
    """Requested color scheme is not in the built-in table."""
    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(name)
        self.name = name
        self.available = list(available or [])

    def __str__(self) -> str:
        return f"Unknown color scheme: {self.name}"
