"""Centromere-relative normalization of crossover positions.

Positions are rescaled piecewise-linearly so that the distal end of the
short arm maps to 0, the centromere to 0.5 and the distal end of the long
arm to 1:

    p <= c:  u = p / c / 2
    p >  c:  u = (p - c) / (L - c) / 2 + 0.5

The scalar and vectorized forms evaluate the same expressions in the same
order, so their results are bit-identical.
"""
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from PyXOI.core.exceptions import InvalidCentromere
from PyXOI.core.models import SampleSet


def _check_centromere(centromere: float, sclength: float, sample: Optional[str]) -> None:
    if not 0 < centromere < sclength:
        raise InvalidCentromere(centromere, sclength, sample)


def check_centromeres(samples: SampleSet, indices: Sequence[int]) -> None:
    """Raise InvalidCentromere for the first of ``indices`` with a bad centromere.

    Samples without crossovers are checked too.
    """
    for i in indices:
        _check_centromere(samples.centromere[i], samples.sclength[i], samples.names[i])


def normalize_position(position: float, centromere: float, sclength: float,
                       sample: Optional[str] = None) -> float:
    """Normalize one crossover position to the [0, 1] arm-relative axis.

    Args:
        position: Crossover position in physical units
        centromere: Centromere position in physical units
        sclength: SC length in physical units
        sample: Sample identifier for error messages

    Returns:
        Normalized position; [0, 0.5] on the short arm, (0.5, 1] on the long arm

    Raises:
        InvalidCentromere: If the centromere is not strictly inside (0, sclength)
    """
    _check_centromere(centromere, sclength, sample)
    if position <= centromere:
        return position / centromere / 2.0
    return (position - centromere) / (sclength - centromere) / 2.0 + 0.5


def normalize_positions(positions: npt.ArrayLike, centromere: float, sclength: float,
                        sample: Optional[str] = None) -> npt.NDArray[np.float64]:
    """Vectorized :func:`normalize_position` for the crossovers of one sample."""
    _check_centromere(centromere, sclength, sample)
    pos = np.asarray(positions, dtype=np.float64)
    return np.where(
        pos <= centromere,
        pos / centromere / 2.0,
        (pos - centromere) / (sclength - centromere) / 2.0 + 0.5
    )


def normalize_sample_set(samples: SampleSet,
                         indices: Optional[Sequence[int]] = None) -> npt.NDArray[np.float64]:
    """Normalize the crossovers of several samples at once.

    Args:
        samples: Sample set to read from
        indices: Samples to include (all samples if None)

    Returns:
        Flat array of normalized positions, sample after sample, in the order
        of ``indices``

    Raises:
        InvalidCentromere: For the first included sample with a bad centromere
    """
    if indices is None:
        indices = np.arange(len(samples))
    indices = np.asarray(indices, dtype=np.intp)

    check_centromeres(samples, indices)

    if indices.size == 0:
        return np.empty(0, dtype=np.float64)

    positions = np.concatenate([samples.positions(i) for i in indices])
    n_xo = samples.n_xo[indices]
    centromere = np.repeat(samples.centromere[indices], n_xo)
    sclength = np.repeat(samples.sclength[indices], n_xo)

    return np.where(
        positions <= centromere,
        positions / centromere / 2.0,
        (positions - centromere) / (sclength - centromere) / 2.0 + 0.5
    )
