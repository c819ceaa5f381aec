"""Main PyXOI CLI application for crossover intensity estimation.

This module provides the ``pyxoi`` entry point: it reads sample tables,
estimates the intensity function of every group and writes one intensity
table per input.
"""
from __future__ import annotations

import argparse
import logging
from itertools import zip_longest
from pathlib import Path
from typing import List, Optional

from . import entrypoint, logging_version
from .utils.logfmt import set_rootlogger
from .utils.parsearg import get_pyxoi_parser
from .utils.output import prepare_outdir
from .interfaces.config import PyXOIConfig
from .core.estimate import estimate_intensity
from .core.exceptions import InputContractError, WorkerError
from .core.models import SampleSet
from .reader.table import SampleTableError, read_sample_table
from .output.table import INTENSITY_SUFFIX, output_intensity

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    """Parse and validate command-line arguments and set up logging.

    Raises:
        SystemExit: If argument validation fails
    """
    parser = get_pyxoi_parser()
    args = parser.parse_args()

    if args.name and len(args.name) > len(args.samples):
        parser.error("argument -n/--name: too many names for {} input(s).".format(len(args.samples)))

    set_rootlogger(args.color, args.log_level)
    logging_version(logger)

    return args


@entrypoint(logger)
def main() -> int:
    """Main PyXOI application entry point.

    Returns:
        0 if every input was estimated and written, 1 otherwise
    """
    args = _parse_args()
    config = PyXOIConfig.from_args(args)
    if config.multiprocess:
        logger.info("Estimate groups in up to {} worker processes.".format(config.nproc))

    if not prepare_outdir(args.outdir, logger):
        return 1
    basenames = prepare_output(args.samples, args.name, args.outdir)

    status = 0
    for path, basename in zip(args.samples, basenames):
        logger.info("Process {}".format(path))
        try:
            samples = read_sample_table(path)
        except (IOError, SampleTableError):
            status = 1
            continue

        if not run_estimation(config, samples, basename):
            status = 1

    return status


def prepare_output(samples: List[Path], names: Optional[List[str]], outdir: Path) -> List[Path]:
    """Generate output basenames and warn about files to be overwritten.

    Args:
        samples: Input sample table paths
        names: Custom basenames; missing entries fall back to the input stem
        outdir: Output directory

    Returns:
        One output basename per input
    """
    basenames = []
    for path, name in zip_longest(samples, names or [], fillvalue=None):
        if path is None:
            break
        basename = Path(outdir) / (name if name else Path(path).stem)

        outfile = Path(str(basename) + INTENSITY_SUFFIX)
        if outfile.exists():
            logger.warning("Existing file '{}' will be overwritten.".format(outfile))

        basenames.append(basename)

    return basenames


def run_estimation(config: PyXOIConfig, samples: SampleSet, basename: Path) -> bool:
    """Estimate intensities for one sample set and write the table.

    Returns:
        True on success; False if the input violates a precondition, a worker
        fails or the output cannot be written (the reason is logged)
    """
    n_group = config.n_group
    if n_group is None:
        if not len(samples):
            logger.error("No cells in input.")
            return False
        n_group = int(samples.group.max())

    try:
        result = estimate_intensity(
            samples, n_group, config.window, config.positions,
            algorithm=config.algorithm, nproc=config.nproc
        )
    except InputContractError as e:
        logger.error("Invalid input: {}".format(e))
        return False
    except WorkerError as e:
        logger.error("Estimation failed in a worker process:\n{}".format(e))
        return False

    try:
        output_intensity(str(basename) + INTENSITY_SUFFIX, result)
    except IOError:
        return False

    return True
