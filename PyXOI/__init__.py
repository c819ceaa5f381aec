"""PyXOI package initialization with version and common utilities.

Provides package constants, version information, and common utilities
for the PyXOI command-line tool.

The module provides:
- VERSION: Package version string
- logging_version(): Version logging utility
- entrypoint(): Decorator for main entry point exception handling
"""
import logging
import sys
import traceback
import multiprocessing
from functools import wraps
from typing import Any, Callable

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def logging_version(logger: Any) -> None:
    """Log PyXOI and Python version information.

    Args:
        logger: Logger instance to use for version output
    """
    logger.info("PyXOI version {} with Python{}.{}.{}".format(
                *[VERSION] + list(sys.version_info[:3])))
    for line in sys.version.split('\n'):
        logger.debug(line)


def _ensure_spawn() -> None:
    """Ensure the multiprocessing start method is set to `spawn`."""
    try:
        current = multiprocessing.get_start_method(allow_none=True)
    except TypeError:
        current = None
    if current != "spawn":
        try:
            multiprocessing.set_start_method("spawn")
        except RuntimeError:
            logger.warning(
                "Failed to set multiprocessing start method to 'spawn'. "
                "Group workers will use the platform default."
            )


def entrypoint(logger: Any) -> Callable[[Callable[[], int]], Callable[[], int]]:
    """Decorator for main entry point exception handling.

    Sets up worker process spawning, returns the wrapped function's exit
    status and handles KeyboardInterrupt quietly.

    Args:
        logger: Logger instance for status messages

    Returns:
        Decorator function that wraps main entry point functions

    Example:
        @entrypoint(logger)
        def main():
            ...
            return 0
    """
    def _entrypoint_wrapper_base(main_func: Callable[[], int]) -> Callable[[], int]:
        @wraps(main_func)
        def _inner() -> int:
            try:
                _ensure_spawn()
                status = main_func()
                if not status:
                    logger.info("PyXOI finished.")
                return status
            except KeyboardInterrupt:
                sys.stderr.write("\r\033[K")
                sys.stderr.flush()
                logger.info("Got KeyboardInterrupt. bye")
                if 0 < logger.level <= logging.DEBUG:
                    traceback.print_exc()
                return 1
        return _inner
    return _entrypoint_wrapper_base
