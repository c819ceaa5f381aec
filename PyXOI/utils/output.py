"""File output utilities with error handling.

Key functionality:
- catch_IOError(): Decorator logging I/O and parse failures before re-raising
- prepare_outdir(): Output directory creation and validation
"""
import os
from functools import wraps
from pathlib import Path
from typing import Any, Callable, TypeVar, Union
import logging


F = TypeVar('F', bound=Callable[..., Any])


def catch_IOError(logger: logging.Logger) -> Callable[[F], F]:
    """Decorator for I/O error handling.

    Logs the failing file name and errno of an IOError, or the message of
    an invalid-input error, and re-raises the exception.

    Args:
        logger: Logger instance for error reporting

    Returns:
        Decorator function that wraps I/O operations
    """
    def _inner(func: F) -> F:
        @wraps(func)
        def _io_func(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except IOError as e:
                logger.error("Failed to access '{}':\n[Errno {}] {}".format(
                    e.filename, e.errno, e.strerror or '')
                )
                raise e
            except (IndexError, StopIteration, ValueError) as e:
                logger.error("Invalid input file: {}".format(e))
                raise e
        return _io_func  # type: ignore
    return _inner


def prepare_outdir(outdir: Union[str, Path], logger: logging.Logger) -> bool:
    """Create and validate output directory.

    Args:
        outdir: Path to output directory
        logger: Logger instance for status messages

    Returns:
        True if directory is ready for use, False if preparation failed
    """
    outdir_path = Path(outdir)
    if outdir_path.exists():
        if not outdir_path.is_dir():
            logger.critical("Specified path as a output directory is not directory.")
            logger.critical(str(outdir))
            return False
    else:
        logger.info("Make output directory: {}".format(outdir))
        try:
            outdir_path.mkdir(parents=True, exist_ok=True)
        except IOError as e:
            logger.critical("Failed to make output directory: [Errno {}] {}".format(e.errno, e.strerror or ''))
            return False

    if not os.access(str(outdir), os.W_OK):
        logger.critical("Output directory '{}' is not writable.".format(outdir))
        return False

    return True
