"""Per-group intensity estimation entry point.

Validates every input up front, then runs one intensity calculator per group
label 1..n_group. Groups share the read-only samples and query grid and write
to disjoint rows of the result, so they may be estimated in any order or in
parallel worker processes with the same outcome.
"""
import logging
from multiprocessing import Lock, Queue
from typing import List, Optional, Union

import numpy as np
import numpy.typing as npt

from PyXOI.core.exceptions import WorkerError
from PyXOI.core.intensity import create_calculator
from PyXOI.core.models import IntensityResult, QueryGrid, SampleSet
from PyXOI.core.validation import validate_inputs
from PyXOI.core.worker import ERROR_TAG, IntensityWorker
from PyXOI.interfaces.config import Algorithm
from PyXOI.utils.calc import exec_worker_pool

logger = logging.getLogger(__name__)


def estimate_intensity(samples: SampleSet,
                       n_group: int,
                       int_window: float,
                       query_positions: Union[npt.ArrayLike, QueryGrid],
                       algorithm: Algorithm = Algorithm.SORTED,
                       nproc: int = 1,
                       out: Optional[np.ndarray] = None) -> IntensityResult:
    """Estimate the crossover intensity function of every group.

    Args:
        samples: Crossover data of all samples; ``samples.group`` holds labels
        n_group: Number of groups; labels 1..n_group are estimated
        int_window: Full smoothing window width in (0, 1]
        query_positions: Normalized query positions in [0, 1]
        algorithm: Window counting algorithm
        nproc: Number of worker processes (1 estimates in this process)
        out: Optional float64 buffer of shape ``(n_group, len(query_positions))``

    Returns:
        IntensityResult with one row per group

    Raises:
        InputContractError: If any precondition fails; nothing is estimated
        WorkerError: If a worker process fails
    """
    if isinstance(query_positions, QueryGrid):
        grid = QueryGrid(query_positions.positions, int_window)
    else:
        grid = QueryGrid(query_positions, int_window)

    validate_inputs(samples, grid, n_group)

    shape = (n_group, len(grid))
    if out is None:
        values = np.zeros(shape, dtype=np.float64)
    elif out.shape != shape or out.dtype != np.float64:
        raise ValueError("output buffer must be a float64 array of shape {}".format(shape))
    else:
        values = out

    groups = list(range(1, n_group + 1))
    logger.info("Estimate intensity of {} group(s) from {} sample(s) at {} position(s) "
                "with window {}".format(n_group, len(samples), len(grid), grid.window))

    if nproc > 1 and n_group > 1:
        _estimate_parallel(samples, grid, algorithm, groups, nproc, values)
    else:
        calculator = create_calculator(algorithm, samples, grid)
        for group in groups:
            calculator.calc(group, values[group - 1])
            logger.debug("Group {} done.".format(group))

    return IntensityResult(
        groups=tuple(groups),
        positions=grid.positions,
        window=grid.window,
        values=values
    )


def _estimate_parallel(samples: SampleSet,
                       grid: QueryGrid,
                       algorithm: Algorithm,
                       groups: List[int],
                       nproc: int,
                       values: np.ndarray) -> None:
    order_queue: Queue = Queue()
    report_queue: Queue = Queue()
    logger_lock = Lock()

    workers = [
        IntensityWorker(samples, grid, algorithm, order_queue, report_queue, logger_lock)
        for _ in range(min(nproc, len(groups)))
    ]
    logger.debug("Start {} worker(s).".format(len(workers)))

    with exec_worker_pool(workers, groups, order_queue):
        remaining = set(groups)
        while remaining:
            group, payload = report_queue.get()
            if group == ERROR_TAG:
                raise WorkerError(payload)

            values[group - 1] = payload
            remaining.discard(group)
            with logger_lock:
                logger.debug("Group {} done.".format(group))
