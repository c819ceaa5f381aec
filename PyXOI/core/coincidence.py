"""Coincidence as a function of physical distance between crossovers.

Only the interface is declared. The quantity to be estimated at each
distance has not been defined, so the function refuses to produce numbers
rather than guessing at a definition.
"""
from typing import NoReturn

import numpy.typing as npt


def estimate_coincidence(coi_window: float, coi_positions: npt.ArrayLike) -> NoReturn:
    """Estimate the coincidence function at ``coi_positions``.

    Args:
        coi_window: Smoothing window width for coincidence
        coi_positions: Distances at which to estimate coincidence

    Raises:
        NotImplementedError: Always
    """
    raise NotImplementedError("coincidence estimation is not implemented")
