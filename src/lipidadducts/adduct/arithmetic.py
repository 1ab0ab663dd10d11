"""
Adduct mass arithmetic.

Parses adduct notation such as ``[M+H]+``, ``[2M+Na]+`` or ``[M+2H]2+`` into
its multimer count and charge, converts between measured m/z and neutral
monoisotopic mass, and computes ppm mass errors.

All functions are pure; the adduct tables are only read.
"""

import re
from collections.abc import Mapping
from typing import Optional

import numpy as np

from .tables import POSITIVE_ADDUCTS, NEGATIVE_ADDUCTS
from ..exceptions import InvalidAdductFormat, UnknownAdduct, ZeroReferenceMass


_MULTIMER_PATTERN = re.compile(r'(\d+)M')
_CHARGE_PATTERN = re.compile(r'(\d+)([+-])$')


def _round_half_up(value: float) -> float:
    """Round to the nearest integer, halves rounding towards +inf."""
    return float(np.floor(value + 0.5))


def normalize_adduct(adduct: str) -> str:
    """Strip whitespace and replace the Unicode minus sign with '-'."""
    return adduct.strip().replace('−', '-')


def parse_multimer(adduct: str) -> int:
    """
    Number of neutral molecules in the ion (the digits before ``M``).

    Args:
        adduct: Adduct notation, e.g. "[2M+H]+".

    Returns:
        Multimer count, 1 when no digit precedes ``M``.

    Raises:
        InvalidAdductFormat: If the notation has no ``M`` token.
    """
    adduct = normalize_adduct(adduct)
    if 'M' not in adduct:
        raise InvalidAdductFormat(adduct)
    match = _MULTIMER_PATTERN.search(adduct)
    if match is None:
        return 1
    multimer = int(match.group(1))
    if multimer < 1:
        raise InvalidAdductFormat(adduct, "multimer count must be >= 1")
    return multimer


def parse_charge(adduct: str) -> int:
    """
    Charge magnitude of the ion (the digits before the trailing sign).

    Args:
        adduct: Adduct notation, e.g. "[M+2H]2+".

    Returns:
        Charge magnitude, 1 when no digit precedes the sign.
    """
    adduct = normalize_adduct(adduct)
    match = _CHARGE_PATTERN.search(adduct)
    if match is None:
        return 1
    charge = int(match.group(1))
    if charge < 1:
        raise InvalidAdductFormat(adduct, "charge must be >= 1")
    return charge


def adduct_shift(adduct: str, table: Optional[Mapping[str, float]] = None) -> float:
    """
    Signed mass shift of an adduct.

    The notation is looked up as given first, then with the Unicode minus
    sign normalized, so caller tables keyed either way match.

    Args:
        adduct: Adduct notation.
        table: Table to consult. If None, the positive-mode table is tried
            first and the negative-mode table second.

    Raises:
        UnknownAdduct: If the adduct is not in any consulted table.
    """
    normalized = normalize_adduct(adduct)
    keys = (adduct.strip(), normalized)
    tables = (table,) if table is not None else (POSITIVE_ADDUCTS, NEGATIVE_ADDUCTS)
    for candidate in tables:
        for key in keys:
            shift = candidate.get(key)
            if shift is not None:
                return float(shift)
    raise UnknownAdduct(normalized)


def neutral_mass_from_mz(
    mz: float,
    adduct: str,
    table: Optional[Mapping[str, float]] = None,
) -> float:
    """
    Neutral monoisotopic mass for an m/z observed as ``adduct``.

    Computed as ``(mz * charge + shift) / multimer``, the exact inverse of
    :func:`mz_from_neutral_mass`. For multimers this differs from the
    ``(mz * charge) + shift / multimer`` form found in older annotation
    code, which does not round-trip; both agree when multimer is 1.

    Args:
        mz: Measured m/z.
        adduct: Adduct hypothesis, e.g. "[M+Na]+".
        table: Adduct table; both static tables are tried when None.

    Raises:
        UnknownAdduct: If the adduct is not in any consulted table.
        InvalidAdductFormat: If the notation has no ``M`` token.
    """
    shift = adduct_shift(adduct, table)
    multimer = parse_multimer(adduct)
    charge = parse_charge(adduct)
    return (mz * charge + shift) / multimer


def mz_from_neutral_mass(
    mass: float,
    adduct: str,
    table: Optional[Mapping[str, float]] = None,
) -> float:
    """
    m/z at which a neutral mass is observed as ``adduct``.

    Computed as ``(mass * multimer - shift) / charge``.

    Raises:
        UnknownAdduct: If the adduct is not in any consulted table.
        InvalidAdductFormat: If the notation has no ``M`` token.
    """
    shift = adduct_shift(adduct, table)
    multimer = parse_multimer(adduct)
    charge = parse_charge(adduct)
    return (mass * multimer - shift) / charge


def ppm_difference(experimental: float, theoretical: float) -> int:
    """
    Mass error in ppm, rounded to the nearest integer.

    The error is relative to ``theoretical``, so the metric is not symmetric
    in its arguments.

    Raises:
        ZeroReferenceMass: If ``theoretical`` is zero, or so close to zero
            that the ratio is not finite.
    """
    if theoretical == 0:
        raise ZeroReferenceMass(experimental, theoretical)
    ratio = abs((experimental - theoretical) * 1e6 / theoretical)
    if not np.isfinite(ratio):
        raise ZeroReferenceMass(experimental, theoretical)
    return int(_round_half_up(ratio))


def delta_for_ppm(mass: float, ppm: float) -> float:
    """Absolute mass window (Da) for a ppm tolerance, rounded to an integer."""
    return _round_half_up(abs(mass * ppm / 1e6))
