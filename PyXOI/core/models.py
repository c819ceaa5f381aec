"""Data models for crossover intensity estimation.

Samples are stored as an arena: one flat buffer holding every crossover
position of every sample plus an offset index, so that row ``i`` is
``xoloc[offsets[i]:offsets[i + 1]]``. This is the layout the host side
naturally produces (a flat buffer plus per-sample crossover counts) and it
keeps per-sample slicing free of copies.

Key components:
- Sample: One measured cell/chromosome
- SampleSet: Read-only collection of samples in arena layout
- QueryGrid: Normalized query positions with the smoothing window width
- IntensityResult: Per-group intensity vectors on a shared query grid
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

import sys
if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

import numpy as np
import numpy.typing as npt


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Sample:
    """One measured cell/chromosome.

    Attributes:
        positions: Crossover positions in physical units (may be empty)
        sclength: Total SC length in physical units
        centromere: Centromere position in physical units
        group: Group label
        name: Optional identifier used in messages and tables
    """
    positions: Tuple[float, ...]
    sclength: float
    centromere: float
    group: int
    name: Optional[str] = None

    @property
    def n_xo(self) -> int:
        return len(self.positions)


class SampleSet:
    """Read-only set of samples stored as a flat buffer with offsets.

    Attributes:
        xoloc: All crossover positions, sample after sample
        offsets: Row boundaries into ``xoloc`` (length ``n + 1``)
        sclength: SC length of each sample
        centromere: Centromere position of each sample
        group: Group label of each sample
        names: Identifier of each sample
    """

    def __init__(self,
                 xoloc: npt.ArrayLike,
                 offsets: npt.ArrayLike,
                 sclength: npt.ArrayLike,
                 centromere: npt.ArrayLike,
                 group: npt.ArrayLike,
                 names: Optional[Sequence[str]] = None) -> None:
        self.xoloc = _readonly(np.array(xoloc, dtype=np.float64).reshape(-1))
        self.offsets = _readonly(np.array(offsets, dtype=np.int64).reshape(-1))
        self.sclength = _readonly(np.array(sclength, dtype=np.float64).reshape(-1))
        self.centromere = _readonly(np.array(centromere, dtype=np.float64).reshape(-1))
        self.group = _readonly(np.array(group, dtype=np.int64).reshape(-1))

        n = self.sclength.size
        if self.centromere.size != n or self.group.size != n:
            raise ValueError(
                "sclength, centromere and group must have the same length "
                "({}, {}, {})".format(n, self.centromere.size, self.group.size)
            )
        if self.offsets.size != n + 1:
            raise ValueError("offsets must have length {}, got {}".format(n + 1, self.offsets.size))
        if self.offsets[0] != 0 or self.offsets[-1] != self.xoloc.size:
            raise ValueError("offsets must start at 0 and end at the number of crossovers")
        if np.any(np.diff(self.offsets) < 0):
            raise ValueError("offsets must be non-decreasing")

        if names is None:
            self.names: Tuple[str, ...] = tuple(str(i + 1) for i in range(n))
        else:
            self.names = tuple(str(name) for name in names)
            if len(self.names) != n:
                raise ValueError("names must have length {}, got {}".format(n, len(self.names)))

    @classmethod
    def from_flat(cls,
                  xoloc: npt.ArrayLike,
                  n_xo: npt.ArrayLike,
                  sclength: npt.ArrayLike,
                  centromere: npt.ArrayLike,
                  group: npt.ArrayLike,
                  names: Optional[Sequence[str]] = None) -> Self:
        """Build a sample set from a flat position buffer plus per-sample counts.

        Args:
            xoloc: Crossover positions of all samples, concatenated
            n_xo: Number of crossovers of each sample

        Raises:
            ValueError: If counts are negative or do not sum to ``len(xoloc)``
        """
        counts = np.asarray(n_xo, dtype=np.int64).reshape(-1)
        positions = np.asarray(xoloc, dtype=np.float64).reshape(-1)
        if np.any(counts < 0):
            raise ValueError("crossover counts must be non-negative")
        if counts.sum() != positions.size:
            raise ValueError(
                "crossover counts sum to {} but {} positions were given".format(
                    counts.sum(), positions.size)
            )
        offsets = np.concatenate(([0], np.cumsum(counts)))
        return cls(positions, offsets, sclength, centromere, group, names)

    @classmethod
    def from_samples(cls, samples: Iterable[Sample]) -> Self:
        """Build a sample set from Sample records."""
        samples = list(samples)
        names = [s.name if s.name is not None else str(i + 1) for i, s in enumerate(samples)]
        xoloc = [p for s in samples for p in s.positions]
        return cls.from_flat(
            xoloc,
            [s.n_xo for s in samples],
            [s.sclength for s in samples],
            [s.centromere for s in samples],
            [s.group for s in samples],
            names
        )

    def __len__(self) -> int:
        return self.sclength.size

    def __iter__(self) -> Iterator[Sample]:
        for i in range(len(self)):
            yield self.sample(i)

    @property
    def n_xo(self) -> npt.NDArray[np.int64]:
        """Number of crossovers of each sample."""
        return np.diff(self.offsets)

    def positions(self, i: int) -> npt.NDArray[np.float64]:
        """Crossover positions of the i-th sample (a read-only view)."""
        return self.xoloc[self.offsets[i]:self.offsets[i + 1]]

    def sample(self, i: int) -> Sample:
        return Sample(
            positions=tuple(float(p) for p in self.positions(i)),
            sclength=float(self.sclength[i]),
            centromere=float(self.centromere[i]),
            group=int(self.group[i]),
            name=self.names[i]
        )

    def select(self, group: int) -> npt.NDArray[np.intp]:
        """Indices of the samples labelled with ``group``."""
        return np.flatnonzero(self.group == group)


@dataclass(frozen=True)
class QueryGrid:
    """Normalized query positions and the smoothing window shared by all groups.

    Attributes:
        positions: Query positions on the normalized [0, 1] axis, any order
        window: Full window width; the window spans ``window / 2`` on each side
    """
    positions: npt.NDArray[np.float64]
    window: float

    def __post_init__(self) -> None:
        positions = np.array(self.positions, dtype=np.float64).reshape(-1)
        object.__setattr__(self, "positions", _readonly(positions))
        object.__setattr__(self, "window", float(self.window))

    def __len__(self) -> int:
        return self.positions.size


@dataclass
class IntensityResult:
    """Estimated intensity functions, one row per group.

    Attributes:
        groups: Group labels in row order
        positions: Query positions (columns)
        window: Window width used for the estimation
        values: Array of shape ``(len(groups), len(positions))``
    """
    groups: Tuple[int, ...]
    positions: npt.NDArray[np.float64]
    window: float
    values: npt.NDArray[np.float64] = field(repr=False)

    def __getitem__(self, group: int) -> npt.NDArray[np.float64]:
        try:
            return self.values[self.groups.index(group)]
        except ValueError:
            raise KeyError(group) from None

    def __len__(self) -> int:
        return len(self.groups)

    def as_dict(self) -> Dict[int, npt.NDArray[np.float64]]:
        """Map each group label to its intensity vector."""
        return {g: self.values[i] for i, g in enumerate(self.groups)}
