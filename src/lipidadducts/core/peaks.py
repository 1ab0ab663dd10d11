"""
Peaks and peak clusters.

A PeakCluster groups co-eluting signals believed to originate from the same
species (an [M+H]+ peak next to its [M+Na]+ peak, for instance). Peaks are
kept sorted by ascending m/z; that order is what the adduct inference uses
to break ties.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class Peak:
    """
    A single centroided signal.

    Attributes:
        mz: Measured m/z value.
        intensity: Signal intensity (not used for adduct inference).
    """
    mz: float
    intensity: float = 0.0

    def __post_init__(self) -> None:
        """Validate peak values."""
        if not np.isfinite(self.mz) or self.mz <= 0:
            raise ValueError(f"mz must be a positive finite number, got {self.mz}")
        if self.intensity < 0:
            raise ValueError(f"intensity must be >= 0, got {self.intensity}")


class PeakCluster:
    """
    A set of co-eluting peaks, ordered by ascending m/z.

    The cluster behaves like a set keyed by m/z: when two peaks share exactly
    the same m/z only the first one supplied is kept.

    Example:
        >>> cluster = PeakCluster([Peak(782.567, 2e5), Peak(760.585, 1e6)])
        >>> cluster.mz
        array([760.585, 782.567])
        >>> cluster.base_peak
        Peak(mz=760.585, intensity=1000000.0)
    """

    __slots__ = ('_mz', '_intensity')

    def __init__(self, peaks: Optional[Iterable[Peak]] = None):
        unique: dict[float, Peak] = {}
        for peak in peaks or ():
            unique.setdefault(float(peak.mz), peak)
        ordered = sorted(unique.values(), key=lambda p: p.mz)
        self._mz: NDArray[np.float64] = np.array(
            [p.mz for p in ordered], dtype=np.float64
        )
        self._intensity: NDArray[np.float64] = np.array(
            [p.intensity for p in ordered], dtype=np.float64
        )

    @classmethod
    def from_arrays(
        cls,
        mz: Union[NDArray[np.float64], list[float]],
        intensity: Optional[Union[NDArray[np.float64], list[float]]] = None,
    ) -> 'PeakCluster':
        """
        Build a cluster from parallel m/z and intensity arrays.

        Args:
            mz: m/z values, in any order.
            intensity: Intensities matching mz (zeros if omitted).

        Returns:
            New PeakCluster.
        """
        mz = np.asarray(mz, dtype=np.float64)
        if mz.ndim != 1:
            raise ValueError(f"mz must be 1-dimensional, got shape {mz.shape}")
        if intensity is None:
            intensity = np.zeros_like(mz)
        else:
            intensity = np.asarray(intensity, dtype=np.float64)
        if len(mz) != len(intensity):
            raise ValueError(
                f"mz and intensity must have same length, "
                f"got {len(mz)} and {len(intensity)}"
            )
        return cls(Peak(float(m), float(i)) for m, i in zip(mz, intensity))

    @property
    def mz(self) -> NDArray[np.float64]:
        """Sorted m/z values (read-only view)."""
        view = self._mz.view()
        view.flags.writeable = False
        return view

    @property
    def intensity(self) -> NDArray[np.float64]:
        """Intensities aligned with mz (read-only view)."""
        view = self._intensity.view()
        view.flags.writeable = False
        return view

    @property
    def is_empty(self) -> bool:
        """Check if the cluster holds no peaks."""
        return len(self._mz) == 0

    @property
    def mz_range(self) -> tuple[float, float]:
        """
        Return (min_mz, max_mz) tuple.

        Raises:
            ValueError: If cluster is empty.
        """
        if self.is_empty:
            raise ValueError("Cannot get mz_range of empty cluster")
        return float(self._mz[0]), float(self._mz[-1])

    @property
    def base_peak(self) -> Peak:
        """Most intense peak (first in m/z order on ties)."""
        if self.is_empty:
            raise ValueError("Cannot get base_peak of empty cluster")
        return self[int(np.argmax(self._intensity))]

    def closest_index(self, mz: float) -> int:
        """
        Index of the peak whose m/z is closest to ``mz``.

        Ties resolve to the lowest index, i.e. the first peak in
        ascending m/z order.
        """
        if self.is_empty:
            raise ValueError("Cannot search an empty cluster")
        return int(np.argmin(np.abs(self._mz - mz)))

    def slice_mz(self, mz_min: float, mz_max: float) -> 'PeakCluster':
        """
        Return a new cluster containing only peaks within the m/z range.

        Args:
            mz_min: Minimum m/z value (inclusive).
            mz_max: Maximum m/z value (inclusive).
        """
        mask = (self._mz >= mz_min) & (self._mz <= mz_max)
        return PeakCluster.from_arrays(self._mz[mask], self._intensity[mask])

    def filter_by_intensity(
        self,
        min_intensity: Optional[float] = None,
        relative: bool = False,
    ) -> 'PeakCluster':
        """
        Drop peaks below an intensity threshold.

        Args:
            min_intensity: Minimum intensity (inclusive).
            relative: If True, the threshold is a fraction of the base peak.
        """
        if min_intensity is None or self.is_empty:
            return PeakCluster(self)
        if relative:
            min_intensity = min_intensity * float(np.max(self._intensity))
        mask = self._intensity >= min_intensity
        return PeakCluster.from_arrays(self._mz[mask], self._intensity[mask])

    def __getitem__(self, index: int) -> Peak:
        return Peak(float(self._mz[index]), float(self._intensity[index]))

    def __iter__(self) -> Iterator[Peak]:
        for index in range(len(self)):
            yield self[index]

    def __len__(self) -> int:
        return len(self._mz)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeakCluster):
            return NotImplemented
        return (
            np.array_equal(self._mz, other._mz)
            and np.array_equal(self._intensity, other._intensity)
        )

    def __hash__(self) -> int:
        return hash((self._mz.tobytes(), self._intensity.tobytes()))

    def __repr__(self) -> str:
        if self.is_empty:
            return "PeakCluster(empty)"
        mz_min, mz_max = self.mz_range
        return f"PeakCluster({len(self)} peaks, m/z {mz_min:.4f}-{mz_max:.4f})"
