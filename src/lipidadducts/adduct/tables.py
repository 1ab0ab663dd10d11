"""
Static adduct tables.

Each table maps an adduct notation to the signed mass shift (Da) that links
the observed ion to the neutral molecule:

    multimer * M = charge * m/z + shift

so protonated/cationized species carry a negative shift and deprotonated
species a positive one. Shifts include the electron mass correction.

Iteration order is significant: adduct inference visits adduct pairs in
the insertion order of these dicts and keeps the first best match.
"""

from collections.abc import Mapping
from types import MappingProxyType

from ..core.ionization import IonizationMode


PROTON_MASS = 1.007276
WATER_MASS = 18.010565

POSITIVE_ADDUCTS: Mapping[str, float] = MappingProxyType({
    '[M+H]+': -PROTON_MASS,
    '[2M+H]+': -PROTON_MASS,
    '[M+2H]2+': -2 * PROTON_MASS,
    '[M+3H]3+': -3 * PROTON_MASS,
    '[M+Na]+': -22.989218,
    '[2M+Na]+': -22.989218,
    '[M+K]+': -38.963158,
    '[M+Li]+': -7.015455,
    '[M+NH4]+': -18.033823,
    '[2M+NH4]+': -18.033823,
    '[M+H-H2O]+': WATER_MASS - PROTON_MASS,
    '[M+H-2H2O]+': 2 * WATER_MASS - PROTON_MASS,
    '[M+H+NH4]2+': -(PROTON_MASS + 18.033823),
    '[M+H+Na]2+': -(PROTON_MASS + 22.989218),
    '[M+2Na]2+': -2 * 22.989218,
})

NEGATIVE_ADDUCTS: Mapping[str, float] = MappingProxyType({
    '[M-H]-': PROTON_MASS,
    '[M-H-H2O]-': WATER_MASS + PROTON_MASS,
    '[M+Na-2H]-': -20.974666,
    '[M+Cl]-': -34.969402,
    '[M+HCOOH-H]-': -44.998201,
    '[M+CH3COOH-H]-': -59.013851,
    '[2M-H]-': PROTON_MASS,
    '[2M+HCOOH-H]-': -44.998201,
    '[3M-H]-': PROTON_MASS,
    '[M-2H]2-': 2 * PROTON_MASS,
    '[M-3H]3-': 3 * PROTON_MASS,
})

_TABLES: dict[IonizationMode, Mapping[str, float]] = {
    IonizationMode.POSITIVE: POSITIVE_ADDUCTS,
    IonizationMode.NEGATIVE: NEGATIVE_ADDUCTS,
}


def adduct_table(mode: IonizationMode) -> Mapping[str, float]:
    """Return the read-only adduct table for an ionization mode."""
    try:
        return _TABLES[mode]
    except KeyError:
        raise ValueError(f"No adduct table for ionization mode {mode!r}") from None


def known_adducts(mode: IonizationMode | None = None) -> list[str]:
    """
    List known adduct notations, in table order.

    Args:
        mode: Restrict to one polarity; both tables (positive first) if None.
    """
    if mode is not None:
        return list(adduct_table(mode))
    return [*POSITIVE_ADDUCTS, *NEGATIVE_ADDUCTS]
