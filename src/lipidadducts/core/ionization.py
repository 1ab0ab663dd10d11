"""
Ionization polarity for adduct lookups.

The polarity selects which adduct table is consulted and which default
adduct is assumed when nothing in a peak cluster can be explained.
"""

from enum import Enum, auto


class IonizationMode(Enum):
    """Ion polarity mode."""
    POSITIVE = auto()
    NEGATIVE = auto()

    @property
    def sign(self) -> str:
        """Trailing polarity character used in adduct notation."""
        return '+' if self is IonizationMode.POSITIVE else '-'

    @classmethod
    def from_adduct(cls, adduct: str) -> 'IonizationMode':
        """
        Infer the polarity from the trailing sign of an adduct string.

        Raises:
            ValueError: If the string does not end in '+' or '-'.
        """
        stripped = adduct.strip().replace('−', '-')
        if stripped.endswith('+'):
            return cls.POSITIVE
        if stripped.endswith('-'):
            return cls.NEGATIVE
        raise ValueError(f"Adduct {adduct!r} has no trailing polarity sign")
