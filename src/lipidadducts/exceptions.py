"""
Exceptions raised by the adduct arithmetic.

All errors derive from AdductError, itself a ValueError, so callers that
already guard numeric input with ``except ValueError`` keep working.
"""


class AdductError(ValueError):
    """Base class for adduct related errors."""


class InvalidAdductFormat(AdductError):
    """Adduct notation cannot be parsed (e.g. it has no ``M`` token)."""

    def __init__(self, adduct: str, reason: str = "missing 'M' token"):
        self.adduct = adduct
        super().__init__(f"Invalid adduct format {adduct!r}: {reason}")


class UnknownAdduct(AdductError):
    """Adduct notation is not present in any consulted adduct table."""

    def __init__(self, adduct: str):
        self.adduct = adduct
        super().__init__(f"Unknown adduct: {adduct!r}")


class ZeroReferenceMass(AdductError, ZeroDivisionError):
    """A ppm difference was requested against a zero (or vanishing) theoretical mass."""

    def __init__(self, experimental: float, theoretical: float = 0.0):
        self.experimental = experimental
        self.theoretical = theoretical
        super().__init__(
            f"Cannot compute ppm difference of {experimental} "
            f"against a theoretical mass of {theoretical}"
        )
