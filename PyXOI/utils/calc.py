"""Multiprocessing utilities for per-group estimation."""
import logging
from multiprocessing import Process
from multiprocessing.queues import Queue
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)


class exec_worker_pool(object):
    """Context manager for multiprocessing worker pool execution.

    Starts the workers, queues every task followed by one ``None`` sentinel
    per worker, and terminates and joins the workers on exit.

    Attributes:
        workers: List of worker process instances
        tasks: Tasks to distribute to workers
        task_queue: Queue for distributing tasks to workers
    """
    def __init__(self, workers: Sequence[Process], tasks: Sequence[Any], task_queue: Queue) -> None:
        self.workers = workers
        self.tasks = tasks
        self.task_queue = task_queue

    def __enter__(self) -> None:
        for w in self.workers:
            w.start()
        for t in self.tasks:
            self.task_queue.put(t)
        for _ in range(len(self.workers)):
            self.task_queue.put(None)

    def __exit__(self, type: Optional[type], value: Optional[Exception], traceback: Optional[Any]) -> None:
        for w in self.workers:
            if w.is_alive():
                w.terminate()
            w.join()
        logger.debug("{} worker(s) joined.".format(len(self.workers)))
