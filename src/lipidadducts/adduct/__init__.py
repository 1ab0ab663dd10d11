"""
Adduct arithmetic and inference.

This module provides:

Arithmetic:
- parse_multimer(), parse_charge(): Read n and z from notation like "[2M+H]+"
- neutral_mass_from_mz(), mz_from_neutral_mass(): Convert under an adduct
- ppm_difference(), delta_for_ppm(): Mass accuracy metrics

Tables:
- POSITIVE_ADDUCTS, NEGATIVE_ADDUCTS: Adduct notation to signed mass shift
- adduct_table(): Table for an ionization mode

Inference:
- infer_adduct(): Best adduct for a peak cluster
- InferenceOptions: Tolerance and fallback settings
"""

from .tables import (
    POSITIVE_ADDUCTS,
    NEGATIVE_ADDUCTS,
    adduct_table,
    known_adducts,
)
from .arithmetic import (
    normalize_adduct,
    parse_multimer,
    parse_charge,
    adduct_shift,
    neutral_mass_from_mz,
    mz_from_neutral_mass,
    ppm_difference,
    delta_for_ppm,
)
from .inference import (
    AdductInference,
    InferenceOptions,
    InferenceStatus,
    infer_adduct,
    detect_adduct,
)

__all__ = [
    # Tables
    "POSITIVE_ADDUCTS",
    "NEGATIVE_ADDUCTS",
    "adduct_table",
    "known_adducts",
    # Arithmetic
    "normalize_adduct",
    "parse_multimer",
    "parse_charge",
    "adduct_shift",
    "neutral_mass_from_mz",
    "mz_from_neutral_mass",
    "ppm_difference",
    "delta_for_ppm",
    # Inference
    "AdductInference",
    "InferenceOptions",
    "InferenceStatus",
    "infer_adduct",
    "detect_adduct",
]
