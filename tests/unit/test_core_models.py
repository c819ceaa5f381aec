"""Tests for PyXOI.core.models data structures."""
import unittest

import numpy as np
import numpy.testing as npt

from PyXOI.core.models import IntensityResult, QueryGrid, Sample, SampleSet


class TestSampleSetFromFlat(unittest.TestCase):
    """Arena construction from a flat buffer plus per-sample counts."""

    def setUp(self):
        self.samples = SampleSet.from_flat(
            xoloc=[1.0, 2.0, 3.0, 4.0, 5.0],
            n_xo=[2, 0, 3],
            sclength=[10.0, 10.0, 20.0],
            centromere=[5.0, 4.0, 8.0],
            group=[1, 2, 1]
        )

    def test_rows(self):
        self.assertEqual(len(self.samples), 3)
        npt.assert_array_equal(self.samples.positions(0), [1.0, 2.0])
        npt.assert_array_equal(self.samples.positions(1), [])
        npt.assert_array_equal(self.samples.positions(2), [3.0, 4.0, 5.0])
        npt.assert_array_equal(self.samples.n_xo, [2, 0, 3])
        npt.assert_array_equal(self.samples.offsets, [0, 2, 2, 5])

    def test_default_names(self):
        self.assertEqual(self.samples.names, ("1", "2", "3"))

    def test_select(self):
        npt.assert_array_equal(self.samples.select(1), [0, 2])
        npt.assert_array_equal(self.samples.select(2), [1])
        self.assertEqual(self.samples.select(3).size, 0)

    def test_iteration_yields_samples(self):
        samples = list(self.samples)
        self.assertEqual(samples[2], Sample((3.0, 4.0, 5.0), 20.0, 8.0, 1, "3"))
        self.assertEqual(samples[1].n_xo, 0)

    def test_arrays_are_read_only(self):
        with self.assertRaises(ValueError):
            self.samples.xoloc[0] = 0.0
        with self.assertRaises(ValueError):
            self.samples.group[0] = 3

    def test_input_buffers_are_copied(self):
        xoloc = np.array([1.0, 2.0])
        samples = SampleSet.from_flat(xoloc, [2], [10.0], [5.0], [1])
        xoloc[0] = 9.0
        self.assertEqual(samples.positions(0)[0], 1.0)

    def test_counts_must_match_buffer(self):
        with self.assertRaises(ValueError):
            SampleSet.from_flat([1.0, 2.0], [1], [10.0], [5.0], [1])

    def test_negative_counts_rejected(self):
        with self.assertRaises(ValueError):
            SampleSet.from_flat([1.0], [2, -1], [10.0, 10.0], [5.0, 5.0], [1, 1])

    def test_mismatched_columns_rejected(self):
        with self.assertRaises(ValueError):
            SampleSet.from_flat([], [0, 0], [10.0, 10.0], [5.0], [1, 1])

    def test_names_length_checked(self):
        with self.assertRaises(ValueError):
            SampleSet.from_flat([], [0], [10.0], [5.0], [1], names=["a", "b"])


class TestSampleSetFromSamples(unittest.TestCase):

    def test_round_trip(self):
        records = [
            Sample((1.0, 7.5), 10.0, 5.0, 1, "cellA"),
            Sample((), 12.0, 3.0, 2, None),
        ]
        samples = SampleSet.from_samples(records)

        self.assertEqual(samples.names, ("cellA", "2"))
        self.assertEqual(list(samples)[0], records[0])
        npt.assert_array_equal(samples.group, [1, 2])

    def test_empty(self):
        samples = SampleSet.from_samples([])
        self.assertEqual(len(samples), 0)
        self.assertEqual(samples.xoloc.size, 0)


class TestQueryGrid(unittest.TestCase):

    def test_positions_converted_and_frozen(self):
        grid = QueryGrid([0, 0.5, 1], 0.1)
        self.assertEqual(grid.positions.dtype, np.float64)
        self.assertEqual(len(grid), 3)
        with self.assertRaises(ValueError):
            grid.positions[0] = 0.3


class TestIntensityResult(unittest.TestCase):

    def setUp(self):
        self.result = IntensityResult(
            groups=(1, 2),
            positions=np.array([0.0, 1.0]),
            window=0.1,
            values=np.array([[1.0, 2.0], [3.0, 4.0]])
        )

    def test_mapping_access(self):
        npt.assert_array_equal(self.result[2], [3.0, 4.0])
        self.assertEqual(len(self.result), 2)

    def test_missing_group(self):
        with self.assertRaises(KeyError):
            self.result[3]

    def test_as_dict(self):
        d = self.result.as_dict()
        self.assertEqual(sorted(d), [1, 2])
        npt.assert_array_equal(d[1], [1.0, 2.0])
