"""Input validation for intensity estimation.

All checks run before any group is estimated, so an estimation either
completes for every group or fails without producing partial output.
Each check raises the InputContractError subclass naming the offending
sample, group or query position.
"""
import logging

import numpy as np

from PyXOI.core.exceptions import (
    EmptyGroup, InvalidCentromere, InvalidCrossoverPosition, InvalidGroupCount,
    InvalidWindow, OutOfRangeQuery
)
from PyXOI.core.models import QueryGrid, SampleSet

logger = logging.getLogger(__name__)


def validate_window(window: float) -> None:
    """Raise InvalidWindow unless ``0 < window <= 1``."""
    if not (np.isfinite(window) and 0 < window <= 1):
        raise InvalidWindow(window)


def validate_query_grid(grid: QueryGrid) -> None:
    """Check the window width and that every query position is in [0, 1]."""
    validate_window(grid.window)

    positions = grid.positions
    bad = np.flatnonzero(~(np.isfinite(positions) & (positions >= 0) & (positions <= 1)))
    if bad.size:
        raise OutOfRangeQuery(float(positions[bad[0]]), int(bad[0]))


def validate_samples(samples: SampleSet) -> None:
    """Check centromeres and crossover positions of every sample."""
    for i in range(len(samples)):
        name = samples.names[i]
        sclength = float(samples.sclength[i])
        centromere = float(samples.centromere[i])

        if not (np.isfinite(centromere) and np.isfinite(sclength) and 0 < centromere < sclength):
            raise InvalidCentromere(centromere, sclength, name)

        positions = samples.positions(i)
        bad = np.flatnonzero(~(np.isfinite(positions) & (positions >= 0) & (positions <= sclength)))
        if bad.size:
            raise InvalidCrossoverPosition(float(positions[bad[0]]), sclength, name)


def validate_groups(samples: SampleSet, n_group: int) -> None:
    """Check that every group label from 1 to ``n_group`` has samples.

    Samples labelled outside 1..n_group are never selected; they are
    reported with a warning but are not an error.
    """
    if n_group < 1:
        raise InvalidGroupCount(n_group)

    labels = samples.group
    for group in range(1, n_group + 1):
        if not np.any(labels == group):
            raise EmptyGroup(group)

    n_outside = int(np.count_nonzero((labels < 1) | (labels > n_group)))
    if n_outside:
        logger.warning("{} sample(s) have a group label outside 1..{} and are ignored.".format(
            n_outside, n_group))


def validate_inputs(samples: SampleSet, grid: QueryGrid, n_group: int) -> None:
    """Run every precondition check of an estimation call.

    Raises:
        InvalidWindow, OutOfRangeQuery, InvalidGroupCount, InvalidCentromere,
        InvalidCrossoverPosition, EmptyGroup
    """
    validate_query_grid(grid)
    if n_group < 1:
        raise InvalidGroupCount(n_group)
    validate_samples(samples)
    validate_groups(samples, n_group)
