"""
Core data structures for lipidadducts.

This module provides the value types handed to the adduct arithmetic and
inference:

- IonizationMode: Acquisition polarity (positive/negative)
- Peak: A single m/z-intensity signal
- PeakCluster: Co-eluting peaks of one species, sorted by m/z
- Lipid: A candidate lipid identity
- Annotation: A lipid assigned to an observed feature
- ScoreAccumulator: Running score of an annotation
"""

from .ionization import IonizationMode
from .peaks import Peak, PeakCluster
from .lipid import Lipid
from .annotation import Annotation, ScoreAccumulator

__all__ = [
    # Main classes
    "Peak",
    "PeakCluster",
    "Lipid",
    "Annotation",
    "ScoreAccumulator",
    # Enums
    "IonizationMode",
]
