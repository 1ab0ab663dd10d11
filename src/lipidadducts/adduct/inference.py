"""
Adduct inference from a cluster of co-eluting peaks.

Two ions of the same molecule observed with different adducts are separated
by the difference of the adducts' mass shifts. Given a cluster of peaks and
the m/z of the signal being annotated, the search below compares every
observed peak spacing against every pair of adducts from a table and keeps
the pair that explains a spacing with the smallest ppm error.

Search order:
    for each other peak (ascending m/z, base peak excluded)
        for each name1 in table order
            for each name2 in table order, name2 != name1

Only a strictly smaller ppm replaces the current best, so among equally
good matches the first one visited wins.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .arithmetic import ppm_difference, normalize_adduct
from .tables import adduct_table
from ..core.ionization import IonizationMode
from ..core.peaks import PeakCluster


logger = logging.getLogger(__name__)


class InferenceStatus(Enum):
    """How an inferred adduct was obtained."""
    MATCHED = auto()        # A peak spacing matched an adduct pair
    FALLBACK = auto()       # Nothing matched; polarity default used
    UNDETERMINED = auto()   # Fewer than two peaks


@dataclass(frozen=True)
class InferenceOptions:
    """Tunables for adduct inference."""

    # Maximum ppm error for a peak spacing to count as a match
    ppm_tolerance: int = 10

    # Adduct pairs whose shift magnitudes differ by less than this are skipped
    min_shift_difference: float = 1e-6

    # Defaults when no spacing matches
    positive_fallback: str = '[M+H]+'
    negative_fallback: str = '[M-H]-'

    def __post_init__(self) -> None:
        """Validate options."""
        if self.ppm_tolerance < 0:
            raise ValueError(f"ppm_tolerance must be >= 0, got {self.ppm_tolerance}")
        if self.min_shift_difference <= 0:
            raise ValueError(
                f"min_shift_difference must be > 0, got {self.min_shift_difference}"
            )
        object.__setattr__(self, 'positive_fallback', normalize_adduct(self.positive_fallback))
        object.__setattr__(self, 'negative_fallback', normalize_adduct(self.negative_fallback))

    def fallback_for(self, mode: IonizationMode) -> str:
        """Default adduct for an ionization mode."""
        if mode is IonizationMode.POSITIVE:
            return self.positive_fallback
        return self.negative_fallback


DEFAULT_OPTIONS = InferenceOptions()


@dataclass(frozen=True, slots=True)
class AdductInference:
    """
    Outcome of an adduct inference.

    Attributes:
        status: Whether the adduct was matched, defaulted or undetermined.
        adduct: Inferred adduct notation, None when undetermined.
        ppm: ppm error of the winning match (MATCHED only).
        base_peak_mz: m/z of the peak closest to the reference m/z.
        partner_mz: m/z of the peak that produced the winning match.
    """
    status: InferenceStatus
    adduct: Optional[str] = None
    ppm: Optional[int] = None
    base_peak_mz: Optional[float] = None
    partner_mz: Optional[float] = None

    @property
    def is_matched(self) -> bool:
        return self.status == InferenceStatus.MATCHED

    @property
    def is_determined(self) -> bool:
        return self.adduct is not None


def _pick_candidate(
    name1: str, shift1: float, name2: str, shift2: float, base_is_higher: bool
) -> str:
    # The higher m/z peak carries the adduct with the larger shift
    if base_is_higher:
        return name1 if shift1 > shift2 else name2
    return name1 if shift1 < shift2 else name2


def infer_adduct(
    cluster: PeakCluster,
    reference_mz: float,
    ionization_mode: IonizationMode,
    table: Optional[Mapping[str, float]] = None,
    ppm_tolerance: Optional[int] = None,
    options: Optional[InferenceOptions] = None,
) -> AdductInference:
    """
    Infer the adduct of the peak at ``reference_mz`` from its cluster.

    Args:
        cluster: Co-eluting peaks of one species.
        reference_mz: m/z of the signal being annotated. The cluster peak
            closest to it is the base peak (lowest m/z on ties).
        ionization_mode: Selects the default table and fallback adduct.
        table: Adduct table to search; the static table for
            ``ionization_mode`` when None.
        ppm_tolerance: Overrides ``options.ppm_tolerance``.
        options: Inference options.

    Returns:
        AdductInference. Clusters of fewer than two peaks are UNDETERMINED;
        when no spacing matches within tolerance the polarity fallback is
        returned with status FALLBACK.
    """
    options = options or DEFAULT_OPTIONS
    tolerance = options.ppm_tolerance if ppm_tolerance is None else ppm_tolerance
    if table is None:
        table = adduct_table(ionization_mode)

    if len(cluster) < 2:
        logger.debug(f"Cluster has {len(cluster)} peak(s); adduct undetermined")
        return AdductInference(status=InferenceStatus.UNDETERMINED)

    mz = cluster.mz
    base_index = cluster.closest_index(reference_mz)
    base_mz = float(mz[base_index])
    logger.debug(f"Base peak m/z {base_mz:.4f} for reference m/z {reference_mz:.4f}")

    shifts = [(name, abs(float(shift))) for name, shift in table.items()]

    best_adduct: Optional[str] = None
    best_ppm: Optional[int] = None
    partner_mz: Optional[float] = None

    for index, other_mz in enumerate(mz):
        if index == base_index:
            continue
        other_mz = float(other_mz)
        delta_mz = abs(base_mz - other_mz)

        for name1, shift1 in shifts:
            for name2, shift2 in shifts:
                if name1 == name2:
                    continue
                expected_diff = abs(shift1 - shift2)
                if expected_diff < options.min_shift_difference:
                    continue

                ppm = ppm_difference(delta_mz, expected_diff)
                if ppm <= tolerance and (best_ppm is None or ppm < best_ppm):
                    best_adduct = _pick_candidate(
                        name1, shift1, name2, shift2, base_mz > other_mz
                    )
                    best_ppm = ppm
                    partner_mz = other_mz
                    logger.debug(
                        f"Candidate {best_adduct} ({name1} / {name2}) at {ppm} ppm "
                        f"from spacing {delta_mz:.5f}"
                    )

    if best_adduct is None:
        fallback = options.fallback_for(ionization_mode)
        logger.info(
            f"No adduct pair within {tolerance} ppm for m/z {reference_mz:.4f}; "
            f"falling back to {fallback}"
        )
        return AdductInference(
            status=InferenceStatus.FALLBACK,
            adduct=fallback,
            base_peak_mz=base_mz,
        )

    return AdductInference(
        status=InferenceStatus.MATCHED,
        adduct=best_adduct,
        ppm=best_ppm,
        base_peak_mz=base_mz,
        partner_mz=partner_mz,
    )


def detect_adduct(
    cluster: PeakCluster,
    reference_mz: float,
    ionization_mode: IonizationMode,
    table: Optional[Mapping[str, float]] = None,
    ppm_tolerance: Optional[int] = None,
) -> Optional[str]:
    """Adduct label for ``reference_mz``, or None when undetermined."""
    return infer_adduct(
        cluster, reference_mz, ionization_mode, table, ppm_tolerance
    ).adduct
