"""
lipidadducts: adduct mass arithmetic and adduct inference for lipidomics.

Converts between measured m/z and neutral monoisotopic mass under an adduct
hypothesis, and infers the most likely adduct of a feature from the spacing
of its co-eluting peaks.
"""

from .core import (
    Annotation,
    IonizationMode,
    Lipid,
    Peak,
    PeakCluster,
    ScoreAccumulator,
)
from .adduct import (
    NEGATIVE_ADDUCTS,
    POSITIVE_ADDUCTS,
    AdductInference,
    InferenceOptions,
    InferenceStatus,
    adduct_table,
    delta_for_ppm,
    detect_adduct,
    infer_adduct,
    mz_from_neutral_mass,
    neutral_mass_from_mz,
    parse_charge,
    parse_multimer,
    ppm_difference,
)
from .exceptions import (
    AdductError,
    InvalidAdductFormat,
    UnknownAdduct,
    ZeroReferenceMass,
)

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "IonizationMode",
    "Lipid",
    "Peak",
    "PeakCluster",
    "ScoreAccumulator",
    "NEGATIVE_ADDUCTS",
    "POSITIVE_ADDUCTS",
    "AdductInference",
    "InferenceOptions",
    "InferenceStatus",
    "adduct_table",
    "delta_for_ppm",
    "detect_adduct",
    "infer_adduct",
    "mz_from_neutral_mass",
    "neutral_mass_from_mz",
    "parse_charge",
    "parse_multimer",
    "ppm_difference",
    "AdductError",
    "InvalidAdductFormat",
    "UnknownAdduct",
    "ZeroReferenceMass",
]
