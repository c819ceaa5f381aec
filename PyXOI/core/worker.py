"""Worker processes estimating one group at a time.

Each worker receives group labels on an order queue and reports
``(group, intensity)`` tuples on a report queue until it receives ``None``.
Failures are reported as ``("__ERROR__", traceback)``.
"""
import logging
import traceback
from multiprocessing import Process, Queue
from multiprocessing.synchronize import Lock

from PyXOI.core.intensity import create_calculator
from PyXOI.core.models import QueryGrid, SampleSet
from PyXOI.interfaces.config import Algorithm

logger = logging.getLogger(__name__)

ERROR_TAG = "__ERROR__"


class IntensityWorker(Process):
    """Process estimating the intensity of the groups it is ordered to.

    Attributes:
        samples: Samples of all groups (read only)
        grid: Query positions and window (read only)
        algorithm: Window counting algorithm
        order_queue: Queue of group labels, ``None`` to stop
        report_queue: Queue receiving results and errors
        logger_lock: Lock serializing log output across workers
    """

    def __init__(self,
                 samples: SampleSet,
                 grid: QueryGrid,
                 algorithm: Algorithm,
                 order_queue: Queue,
                 report_queue: Queue,
                 logger_lock: Lock) -> None:
        super().__init__()

        self.samples = samples
        self.grid = grid
        self.algorithm = algorithm
        self.order_queue = order_queue
        self.report_queue = report_queue
        self.logger_lock = logger_lock

    def run(self) -> None:
        try:
            calculator = create_calculator(self.algorithm, self.samples, self.grid)

            while True:
                group = self.order_queue.get()
                if group is None:
                    break

                with self.logger_lock:
                    logger.debug("{}: Processing group {}".format(self.name, group))
                self.report_queue.put((group, calculator.calc(group)))

        except KeyboardInterrupt:
            if 0 < logger.level <= logging.DEBUG:
                raise

        except Exception as e:
            with self.logger_lock:
                logger.error("{}: Error in worker: {}".format(self.name, e))
            self.report_queue.put((ERROR_TAG, traceback.format_exc()))

        finally:
            with self.logger_lock:
                logger.debug("{}: Shutting down worker".format(self.name))
