"""Tests for centromere-relative position normalization."""
import numpy as np
import numpy.testing as npt
import pytest

from PyXOI.core.exceptions import InvalidCentromere
from PyXOI.core.models import Sample, SampleSet
from PyXOI.core.normalize import normalize_position, normalize_positions, normalize_sample_set


class TestNormalizePosition:
    """Scalar normalization."""

    def test_short_arm_position(self):
        assert normalize_position(5.0, 10.0, 20.0) == 0.25

    def test_long_arm_position(self):
        assert normalize_position(15.0, 10.0, 20.0) == 0.75

    @pytest.mark.parametrize("centromere,sclength", [(10.0, 20.0), (3.0, 50.0), (47.5, 50.0)])
    def test_fixed_points(self, centromere, sclength):
        assert normalize_position(0.0, centromere, sclength) == 0.0
        assert normalize_position(centromere, centromere, sclength) == 0.5
        assert normalize_position(sclength, centromere, sclength) == 1.0

    def test_centromere_belongs_to_short_arm(self):
        """A crossover exactly at the centromere takes the short-arm branch."""
        u = normalize_position(7.0, 7.0, 30.0)
        assert u == 7.0 / 7.0 / 2.0

    def test_range_and_monotonicity_per_arm(self):
        centromere, sclength = 13.0, 41.0
        short = [normalize_position(p, centromere, sclength) for p in np.linspace(0, centromere, 50)]
        long = [normalize_position(p, centromere, sclength)
                for p in np.linspace(centromere, sclength, 50)[1:]]

        assert all(0.0 <= u <= 0.5 for u in short)
        assert all(0.5 < u <= 1.0 for u in long)
        assert short == sorted(short)
        assert long == sorted(long)

    @pytest.mark.parametrize("centromere", [0.0, 20.0, -1.0, 25.0])
    def test_invalid_centromere_raises(self, centromere):
        with pytest.raises(InvalidCentromere):
            normalize_position(5.0, centromere, 20.0)

    def test_invalid_centromere_message_names_sample(self):
        with pytest.raises(InvalidCentromere, match="cell7"):
            normalize_position(5.0, 0.0, 20.0, sample="cell7")


class TestNormalizePositions:
    """Vectorized normalization."""

    def test_matches_scalar_bitwise(self):
        positions = np.array([0.0, 1.3, 10.0, 10.0000001, 17.2, 20.0])
        expected = [normalize_position(p, 10.0, 20.0) for p in positions]

        npt.assert_array_equal(normalize_positions(positions, 10.0, 20.0), expected)

    def test_empty_input(self):
        assert normalize_positions([], 10.0, 20.0).size == 0

    def test_invalid_centromere_raises(self):
        with pytest.raises(InvalidCentromere):
            normalize_positions([1.0], 20.0, 20.0)


class TestNormalizeSampleSet:
    """Normalization across several samples of a SampleSet."""

    @pytest.fixture
    def samples(self):
        return SampleSet.from_samples([
            Sample((5.0, 15.0), 20.0, 10.0, 1),
            Sample((), 30.0, 10.0, 1),
            Sample((0.0, 30.0), 30.0, 20.0, 2),
        ])

    def test_all_samples(self, samples):
        npt.assert_array_equal(normalize_sample_set(samples), [0.25, 0.75, 0.0, 1.0])

    def test_selected_samples_in_given_order(self, samples):
        npt.assert_array_equal(normalize_sample_set(samples, [2, 0]), [0.0, 1.0, 0.25, 0.75])

    def test_no_samples(self, samples):
        assert normalize_sample_set(samples, []).size == 0

    def test_matches_scalar_on_random_data(self, random_samples):
        expected = [
            normalize_position(p, random_samples.centromere[i], random_samples.sclength[i])
            for i in range(len(random_samples)) for p in random_samples.positions(i)
        ]
        npt.assert_array_equal(normalize_sample_set(random_samples), expected)

    def test_invalid_centromere_names_sample(self):
        samples = SampleSet.from_samples([
            Sample((1.0, ), 20.0, 10.0, 1, "ok"),
            Sample((1.0, ), 20.0, 20.0, 1, "broken"),
        ])
        with pytest.raises(InvalidCentromere, match="broken"):
            normalize_sample_set(samples)
