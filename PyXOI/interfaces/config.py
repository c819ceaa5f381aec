"""Configuration models and type definitions for PyXOI.

Defines the algorithm enum and the main PyXOIConfig dataclass holding the
estimation parameters collected from the command line.
"""
from dataclasses import dataclass
from typing import Optional
from enum import Enum
from argparse import Namespace

import sys

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

import numpy as np
import numpy.typing as npt


class Algorithm(Enum):
    """How to count crossovers falling in each window."""
    NAIVE = "naive"
    SORTED = "sorted"


DEFAULT_WINDOW = 0.05
DEFAULT_N_POSITIONS = 101


@dataclass
class PyXOIConfig:
    """Configuration for PyXOI intensity estimation.

    Attributes:
        window: Full smoothing window width on the normalized axis
        positions: Normalized query positions shared by all groups
        algorithm: Window counting algorithm
        nproc: Number of group worker processes
        n_group: Number of groups; taken from the data when None
    """
    window: float
    positions: npt.NDArray[np.float64]
    algorithm: Algorithm = Algorithm.SORTED
    nproc: int = 1
    n_group: Optional[int] = None

    @property
    def multiprocess(self) -> bool:
        """Check if the configuration is set for multiprocess execution."""
        return self.nproc > 1

    @classmethod
    def from_args(cls, args: Namespace) -> Self:
        """Create configuration from parsed command-line arguments."""
        if args.positions is not None:
            start, stop, step = args.positions
            n_positions = int(np.floor((stop - start) / step + 1e-9)) + 1
            # rounding in start + i * step must not push the grid past STOP
            positions = np.minimum(start + step * np.arange(n_positions), stop)
        else:
            positions = np.linspace(0.0, 1.0, args.n_positions)

        return cls(
            window=args.window,
            positions=positions,
            algorithm=Algorithm(args.algorithm),
            nproc=args.process,
            n_group=args.n_group
        )
