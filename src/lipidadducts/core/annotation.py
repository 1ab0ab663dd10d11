"""
Lipid annotations.

An Annotation ties a candidate Lipid to an observed feature (m/z, retention
time, intensity) and the cluster of co-eluting peaks grouped with it. The
adduct is inferred from that cluster; scoring rules applied downstream are
accumulated in an immutable ScoreAccumulator.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from .ionization import IonizationMode
from .lipid import Lipid
from .peaks import Peak, PeakCluster


@dataclass(frozen=True, slots=True)
class ScoreAccumulator:
    """
    Running score: a sum of rule deltas plus how many rules contributed.

    Attributes:
        total: Sum of all deltas applied.
        applied: Number of deltas applied.
    """
    total: int = 0
    applied: int = 0

    def add(self, delta: int) -> 'ScoreAccumulator':
        """Return a new accumulator with ``delta`` applied."""
        return ScoreAccumulator(self.total + delta, self.applied + 1)

    @property
    def normalized(self) -> float:
        """Mean delta clamped to [-1, 1]; 0 when nothing was applied."""
        if self.applied == 0:
            return 0.0
        return min(1.0, max(-1.0, self.total / self.applied))


class Annotation:
    """
    Annotation of an observed feature with a candidate lipid.

    Two annotations are equal when they share m/z, retention time and lipid;
    the adduct and score do not take part in equality.

    Example:
        >>> from lipidadducts.core import Lipid, Peak
        >>> lipid = Lipid(1, "PC 34:1", "C42H82NO8P", "PC", 34, 1)
        >>> annotation = Annotation(
        ...     lipid, mz=760.5851, intensity=1e6, rt_min=12.3,
        ...     ionization_mode=IonizationMode.POSITIVE,
        ...     grouped_signals=[Peak(760.5851, 1e6), Peak(782.5670, 2e5)],
        ... )
        >>> annotation.detect_adduct(ppm_tolerance=10)
        '[M+H]+'
    """

    __slots__ = (
        'lipid', 'mz', 'intensity', 'rt_min', 'ionization_mode',
        'grouped_signals', 'adduct', 'scores',
    )

    def __init__(
        self,
        lipid: Lipid,
        mz: float,
        intensity: float,
        rt_min: float,
        ionization_mode: IonizationMode,
        grouped_signals: Optional[Union[Iterable[Peak], PeakCluster]] = None,
    ):
        """
        Initialize an Annotation.

        Args:
            lipid: Candidate lipid.
            mz: Observed m/z of the feature.
            intensity: Intensity of the most abundant grouped peak.
            rt_min: Retention time in minutes.
            ionization_mode: Acquisition polarity.
            grouped_signals: Co-eluting peaks (sorted by m/z internally).
        """
        if rt_min < 0:
            raise ValueError(f"rt_min must be >= 0, got {rt_min}")
        self.lipid = lipid
        self.mz = float(mz)
        self.intensity = float(intensity)
        self.rt_min = float(rt_min)
        self.ionization_mode = ionization_mode
        if isinstance(grouped_signals, PeakCluster):
            self.grouped_signals = grouped_signals
        else:
            self.grouped_signals = PeakCluster(grouped_signals)
        self.adduct: Optional[str] = None
        self.scores = ScoreAccumulator()

    @property
    def score(self) -> int:
        """Raw summed score."""
        return self.scores.total

    @property
    def normalized_score(self) -> float:
        """Score normalized to [-1, 1]."""
        return self.scores.normalized

    def add_score(self, delta: int) -> None:
        """Apply one scoring rule's delta."""
        self.scores = self.scores.add(delta)

    def detect_adduct(self, ppm_tolerance: int = 10) -> Optional[str]:
        """
        Infer and store the adduct from the grouped signals.

        Args:
            ppm_tolerance: Maximum ppm error for a peak spacing to match an
                adduct pair.

        Returns:
            The stored adduct; None when fewer than two signals are grouped.
        """
        from ..adduct.inference import infer_adduct

        result = infer_adduct(
            self.grouped_signals,
            self.mz,
            self.ionization_mode,
            ppm_tolerance=ppm_tolerance,
        )
        self.adduct = result.adduct
        return self.adduct

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Annotation):
            return NotImplemented
        return (
            self.mz == other.mz
            and self.rt_min == other.rt_min
            and self.lipid == other.lipid
        )

    def __hash__(self) -> int:
        return hash((self.lipid, self.mz, self.rt_min))

    def __repr__(self) -> str:
        return (
            f"Annotation({self.lipid.name}, mz={self.mz:.4f}, "
            f"RT={self.rt_min:.2f}, adduct={self.adduct}, "
            f"intensity={self.intensity:.1f}, score={self.score})"
        )
