"""Windowed crossover intensity estimation for one group.

For each query position ``q`` the crossovers of the group's samples whose
normalized position falls in the closed window ``[q - w/2, q + w/2]`` are
counted, averaged over the samples of the group and divided by the width of
the window that actually lies inside [0, 1]:

    q <  w/2:      q + w/2
    q >  1 - w/2:  1 - q + w/2
    otherwise:     w

Two calculators implement the count:
- NaiveIntensityCalculator: loops over query x sample x crossover
- SortedIntensityCalculator: sorts the group's normalized positions once and
  counts each window with binary search

Both produce identical results.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
import numpy.typing as npt

from PyXOI.core.exceptions import EmptyGroup
from PyXOI.core.models import QueryGrid, SampleSet
from PyXOI.core.normalize import check_centromeres, normalize_position, normalize_sample_set
from PyXOI.interfaces.config import Algorithm

logger = logging.getLogger(__name__)


def effective_window_width(position: float, window: float) -> float:
    """Width of the window around ``position`` that lies inside [0, 1]."""
    if position < window / 2.0:
        return position + window / 2.0
    elif position > 1.0 - window / 2.0:
        return 1.0 - position + window / 2.0
    return window


def effective_window_widths(positions: npt.ArrayLike, window: float) -> npt.NDArray[np.float64]:
    """Vectorized :func:`effective_window_width`."""
    q = np.asarray(positions, dtype=np.float64)
    return np.where(
        q < window / 2.0,
        q + window / 2.0,
        np.where(q > 1.0 - window / 2.0, 1.0 - q + window / 2.0, window)
    )


class IntensityCalculator(ABC):
    """Base class of the per-group intensity calculators.

    Attributes:
        samples: Samples of all groups
        grid: Query positions and window width
    """

    def __init__(self, samples: SampleSet, grid: QueryGrid) -> None:
        self.samples = samples
        self.grid = grid

    def _prepare_out(self, out: Optional[np.ndarray]) -> np.ndarray:
        if out is None:
            return np.zeros(len(self.grid), dtype=np.float64)
        if out.shape != (len(self.grid), ) or out.dtype != np.float64:
            raise ValueError(
                "output buffer must be a float64 array of shape ({},)".format(len(self.grid))
            )
        return out

    def _select(self, group: int) -> npt.NDArray[np.intp]:
        indices = self.samples.select(group)
        if indices.size == 0:
            raise EmptyGroup(group)
        check_centromeres(self.samples, indices)

        logger.debug("Calc group {} ({} samples)...".format(group, indices.size))
        return indices

    @abstractmethod
    def calc(self, group: int, out: Optional[np.ndarray] = None) -> npt.NDArray[np.float64]:
        """Estimate the intensity of ``group`` at every query position.

        Args:
            group: Group label to select
            out: Optional float64 buffer of length ``len(grid)`` to write into

        Returns:
            The intensity vector (``out`` if given)

        Raises:
            EmptyGroup: If no sample carries the label ``group``
        """
        pass


class NaiveIntensityCalculator(IntensityCalculator):
    """Direct scan over every crossover for every query position.

    O(n_positions x n_samples x n_crossovers); fine for cytological data
    sets of a few hundred cells.
    """

    def calc(self, group: int, out: Optional[np.ndarray] = None) -> npt.NDArray[np.float64]:
        indices = self._select(group)
        out = self._prepare_out(out)
        samples = self.samples
        window = self.grid.window

        for i, q in enumerate(self.grid.positions):
            q = float(q)
            count = 0
            for j in indices:
                centromere = float(samples.centromere[j])
                sclength = float(samples.sclength[j])
                for p in samples.positions(j):
                    adjpos = normalize_position(float(p), centromere, sclength, samples.names[j])
                    if adjpos >= q - window / 2.0 and adjpos <= q + window / 2.0:
                        count += 1

            out[i] = count / indices.size / effective_window_width(q, window)

        return out


class SortedIntensityCalculator(IntensityCalculator):
    """Binary-search window counts over the group's sorted positions.

    The lower bound is searched with ``side="left"`` and the upper bound with
    ``side="right"`` so both window edges are inclusive, as in the naive scan.
    """

    def calc(self, group: int, out: Optional[np.ndarray] = None) -> npt.NDArray[np.float64]:
        indices = self._select(group)
        out = self._prepare_out(out)
        window = self.grid.window
        positions = self.grid.positions

        adjpos = np.sort(normalize_sample_set(self.samples, indices))
        counts = (np.searchsorted(adjpos, positions + window / 2.0, side="right") -
                  np.searchsorted(adjpos, positions - window / 2.0, side="left"))

        out[:] = counts / indices.size / effective_window_widths(positions, window)
        return out


def create_calculator(algorithm: Algorithm, samples: SampleSet, grid: QueryGrid) -> IntensityCalculator:
    """Create the intensity calculator implementing ``algorithm``."""
    if algorithm is Algorithm.NAIVE:
        return NaiveIntensityCalculator(samples, grid)
    elif algorithm is Algorithm.SORTED:
        return SortedIntensityCalculator(samples, grid)
    raise ValueError("Unknown algorithm: {}".format(algorithm))
