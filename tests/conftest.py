"""Shared fixtures for PyXOI tests."""
import numpy as np
import pytest

from PyXOI.core.models import Sample, SampleSet


def make_random_samples(n_samples=40, n_group=3, max_xo=4, seed=0):
    """Random but valid crossover data with crossovers on arm ends and centromeres."""
    rng = np.random.default_rng(seed)
    samples = []
    for i in range(n_samples):
        sclength = float(rng.uniform(20.0, 80.0))
        centromere = float(rng.uniform(0.1, 0.9) * sclength)
        positions = list(rng.uniform(0.0, sclength, rng.integers(0, max_xo + 1)))
        if i % 7 == 0:
            positions.append(centromere)
        if i % 11 == 0:
            positions.extend([0.0, sclength])
        samples.append(Sample(
            positions=tuple(sorted(positions)),
            sclength=sclength,
            centromere=centromere,
            group=int(i % n_group) + 1,
            name="cell{}".format(i + 1)
        ))
    return SampleSet.from_samples(samples)


@pytest.fixture
def random_samples():
    return make_random_samples()


@pytest.fixture
def two_group_samples():
    """Two groups: group 1 has crossovers at the centromere, group 2 near the ends."""
    return SampleSet.from_samples([
        Sample((10.0, ), 20.0, 10.0, 1, "a1"),
        Sample((5.0, 10.0), 20.0, 10.0, 1, "a2"),
        Sample((1.0, 19.0), 20.0, 10.0, 2, "b1"),
        Sample((), 40.0, 10.0, 2, "b2"),
    ])
