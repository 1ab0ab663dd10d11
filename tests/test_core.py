"""
Tests for peaks, peak clusters, lipids and annotations.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lipidadducts.adduct import mz_from_neutral_mass
from lipidadducts.core import (
    Annotation,
    IonizationMode,
    Lipid,
    Peak,
    PeakCluster,
    ScoreAccumulator,
)


class TestPeak:
    """Test single peak validation."""

    def test_creation(self):
        peak = Peak(760.5851, 1e6)

        assert peak.mz == 760.5851
        assert peak.intensity == 1e6

    def test_non_positive_mz_raises(self):
        with pytest.raises(ValueError):
            Peak(0.0)
        with pytest.raises(ValueError):
            Peak(-1.0)

    def test_non_finite_mz_raises(self):
        with pytest.raises(ValueError):
            Peak(float("nan"))

    def test_negative_intensity_raises(self):
        with pytest.raises(ValueError):
            Peak(100.0, -1.0)


class TestPeakCluster:
    """Test peak cluster ordering and helpers."""

    def test_sorted_by_mz(self):
        cluster = PeakCluster([Peak(782.567, 2.0), Peak(760.585, 1.0), Peak(761.588, 0.5)])

        assert_allclose(cluster.mz, [760.585, 761.588, 782.567])
        assert_allclose(cluster.intensity, [1.0, 0.5, 2.0])
        assert [p.mz for p in cluster] == [760.585, 761.588, 782.567]

    def test_duplicate_mz_keeps_first(self):
        cluster = PeakCluster([Peak(500.0, 10.0), Peak(500.0, 20.0), Peak(501.0, 5.0)])

        assert len(cluster) == 2
        assert cluster[0] == Peak(500.0, 10.0)

    def test_from_arrays(self):
        cluster = PeakCluster.from_arrays(np.array([502.0, 500.0]), [3.0, 4.0])

        assert cluster[0] == Peak(500.0, 4.0)
        assert cluster[1] == Peak(502.0, 3.0)

    def test_from_arrays_without_intensity(self):
        cluster = PeakCluster.from_arrays([500.0, 501.0])

        assert_allclose(cluster.intensity, [0.0, 0.0])

    def test_from_arrays_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            PeakCluster.from_arrays([500.0, 501.0], [1.0])

    def test_from_arrays_2d_raises(self):
        with pytest.raises(ValueError):
            PeakCluster.from_arrays(np.ones((2, 2)))

    def test_mz_is_read_only(self):
        cluster = PeakCluster([Peak(500.0)])

        with pytest.raises(ValueError):
            cluster.mz[0] = 1.0

    def test_empty(self):
        cluster = PeakCluster()

        assert cluster.is_empty
        assert len(cluster) == 0
        with pytest.raises(ValueError):
            cluster.mz_range
        with pytest.raises(ValueError):
            cluster.base_peak

    def test_mz_range_and_base_peak(self):
        cluster = PeakCluster([Peak(500.0, 1.0), Peak(510.0, 9.0), Peak(520.0, 3.0)])

        assert cluster.mz_range == (500.0, 520.0)
        assert cluster.base_peak == Peak(510.0, 9.0)

    def test_closest_index_tie_goes_to_lower_mz(self):
        cluster = PeakCluster([Peak(500.0), Peak(502.0)])

        assert cluster.closest_index(501.0) == 0
        assert cluster.closest_index(501.5) == 1

    def test_slice_mz(self):
        cluster = PeakCluster([Peak(500.0), Peak(510.0), Peak(520.0)])

        sliced = cluster.slice_mz(505.0, 520.0)

        assert_allclose(sliced.mz, [510.0, 520.0])

    def test_filter_by_intensity_absolute(self):
        cluster = PeakCluster([Peak(500.0, 1.0), Peak(510.0, 9.0), Peak(520.0, 3.0)])

        assert_allclose(cluster.filter_by_intensity(3.0).mz, [510.0, 520.0])

    def test_filter_by_intensity_relative(self):
        cluster = PeakCluster([Peak(500.0, 1.0), Peak(510.0, 10.0), Peak(520.0, 5.0)])

        assert_allclose(cluster.filter_by_intensity(0.5, relative=True).mz, [510.0, 520.0])

    def test_equality(self):
        a = PeakCluster([Peak(500.0, 1.0), Peak(501.0, 2.0)])
        b = PeakCluster([Peak(501.0, 2.0), Peak(500.0, 1.0)])

        assert a == b
        assert hash(a) == hash(b)


class TestIonizationMode:
    """Test polarity helpers."""

    def test_from_adduct(self):
        assert IonizationMode.from_adduct("[M+H]+") is IonizationMode.POSITIVE
        assert IonizationMode.from_adduct("[M-H]-") is IonizationMode.NEGATIVE
        assert IonizationMode.from_adduct("[M-H]−") is IonizationMode.NEGATIVE

    def test_from_adduct_without_sign_raises(self):
        with pytest.raises(ValueError):
            IonizationMode.from_adduct("[M+H]")

    def test_sign(self):
        assert IonizationMode.POSITIVE.sign == "+"
        assert IonizationMode.NEGATIVE.sign == "-"


class TestLipid:
    """Test lipid validation."""

    def test_negative_carbons_raises(self):
        with pytest.raises(ValueError):
            Lipid(1, "PC 34:1", carbon_count=-1)

    def test_value_equality(self, pc_34_1):
        assert pc_34_1 == Lipid(1, "PC 34:1", "C42H82NO8P", "PC", 34, 1)


class TestScoreAccumulator:
    """Test running score normalization."""

    def test_empty_is_zero(self):
        assert ScoreAccumulator().normalized == 0.0

    def test_mean_of_deltas(self):
        scores = ScoreAccumulator().add(1).add(1).add(-1)

        assert scores.total == 1
        assert scores.applied == 3
        assert_allclose(scores.normalized, 1 / 3)

    def test_clamped(self):
        assert ScoreAccumulator().add(5).normalized == 1.0
        assert ScoreAccumulator().add(-5).normalized == -1.0

    def test_add_returns_new_accumulator(self):
        scores = ScoreAccumulator()
        scores.add(1)

        assert scores.applied == 0


class TestAnnotation:
    """Test annotation behaviour."""

    def _annotation(self, lipid, mz, signals, mode=IonizationMode.POSITIVE):
        return Annotation(lipid, mz=mz, intensity=1e6, rt_min=12.3,
                          ionization_mode=mode, grouped_signals=signals)

    def test_detect_adduct_protonated(self, pc_34_1, neutral_mass):
        mz_h = mz_from_neutral_mass(neutral_mass, "[M+H]+")
        mz_na = mz_from_neutral_mass(neutral_mass, "[M+Na]+")
        annotation = self._annotation(pc_34_1, mz_h, [Peak(mz_na, 2e5), Peak(mz_h, 1e6)])

        assert annotation.detect_adduct(ppm_tolerance=10) == "[M+H]+"
        assert annotation.adduct == "[M+H]+"

    def test_detect_adduct_sodiated(self, pc_34_1, neutral_mass):
        mz_h = mz_from_neutral_mass(neutral_mass, "[M+H]+")
        mz_na = mz_from_neutral_mass(neutral_mass, "[M+Na]+")
        annotation = self._annotation(pc_34_1, mz_na, [Peak(mz_h, 1e6), Peak(mz_na, 2e5)])

        assert annotation.detect_adduct() == "[M+Na]+"

    def test_detect_adduct_single_signal(self, pc_34_1):
        annotation = self._annotation(pc_34_1, 760.5851, [Peak(760.5851, 1e6)])

        assert annotation.detect_adduct() is None
        assert annotation.adduct is None

    def test_detect_adduct_fallback_negative(self, pc_34_1):
        annotation = self._annotation(
            pc_34_1, 758.5705, [Peak(758.5705), Peak(758.8705)],
            mode=IonizationMode.NEGATIVE,
        )

        assert annotation.detect_adduct() == "[M-H]-"

    def test_grouped_signals_sorted(self, pc_34_1):
        annotation = self._annotation(pc_34_1, 500.0, [Peak(502.0), Peak(500.0)])

        assert_allclose(annotation.grouped_signals.mz, [500.0, 502.0])

    def test_accepts_peak_cluster(self, pc_34_1):
        cluster = PeakCluster([Peak(500.0), Peak(501.0)])

        assert self._annotation(pc_34_1, 500.0, cluster).grouped_signals is cluster

    def test_no_signals(self, pc_34_1):
        annotation = Annotation(pc_34_1, 500.0, 1.0, 1.0, IonizationMode.POSITIVE)

        assert len(annotation.grouped_signals) == 0

    def test_equality_ignores_adduct_and_score(self, pc_34_1):
        a = self._annotation(pc_34_1, 760.5851, [])
        b = self._annotation(pc_34_1, 760.5851, [Peak(760.5851)])
        b.adduct = "[M+Na]+"
        b.add_score(1)

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_inequality_on_retention_time(self, pc_34_1):
        a = Annotation(pc_34_1, 760.5851, 1.0, 12.3, IonizationMode.POSITIVE)
        b = Annotation(pc_34_1, 760.5851, 1.0, 12.4, IonizationMode.POSITIVE)

        assert a != b

    def test_scores(self, pc_34_1):
        annotation = self._annotation(pc_34_1, 760.5851, [])
        annotation.add_score(1)
        annotation.add_score(0)

        assert annotation.score == 1
        assert_allclose(annotation.normalized_score, 0.5)

    def test_negative_rt_raises(self, pc_34_1):
        with pytest.raises(ValueError):
            Annotation(pc_34_1, 760.5851, 1.0, -1.0, IonizationMode.POSITIVE)

    def test_repr(self, pc_34_1):
        annotation = self._annotation(pc_34_1, 760.5851, [])

        assert repr(annotation) == (
            "Annotation(PC 34:1, mz=760.5851, RT=12.30, adduct=None, "
            "intensity=1000000.0, score=0)"
        )
