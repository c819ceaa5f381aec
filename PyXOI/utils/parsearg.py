"""Command-line argument parsing for the pyxoi entry point.

Key functionality:
- Common arguments (logging level, color, version)
- Custom argparse actions for validation and type conversion
- Parser factory for the pyxoi command
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import PyXOI
from PyXOI.interfaces.config import Algorithm, DEFAULT_N_POSITIONS, DEFAULT_WINDOW


def _make_upper(s: str) -> str:
    return s.upper()


class StoreLoggingLevel(argparse.Action):
    """Convert a logging level name into the logging module constant."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, str), "Logging level must be a string"
        setattr(namespace, self.dest, getattr(logging, values))


class ForceNaturalNumber(argparse.Action):
    """Reject integer arguments smaller than 1."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, int), "Argument must be an integer"
        if values < 1:
            parser.error("argument {} must be > 0.".format('/'.join(self.option_strings)))
        setattr(namespace, self.dest, values)


class StoreWindowWidth(argparse.Action):
    """Accept a smoothing window width in (0, 1]."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, float), "Window width must be a float"
        if not 0 < values <= 1:
            parser.error("argument {} must be in (0, 1].".format('/'.join(self.option_strings)))
        setattr(namespace, self.dest, values)


class StorePositionRange(argparse.Action):
    """Accept ``START STOP STEP`` with ``0 <= START <= STOP <= 1`` and ``STEP > 0``."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, list) and len(values) == 3, "Position range must be 3 floats"
        start, stop, step = values
        if not 0 <= start <= stop <= 1:
            parser.error("argument {}: START and STOP must satisfy 0 <= START <= STOP <= 1.".format(
                '/'.join(self.option_strings)))
        if step <= 0:
            parser.error("argument {}: STEP must be > 0.".format('/'.join(self.option_strings)))
        setattr(namespace, self.dest, (start, stop, step))


class ToColorizeOption(argparse.Action):
    """Convert 'TRUE'/'FALSE'/'AUTO' into a colorization flag."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, str), "Colorization option must be a string"
        if values == "TRUE":
            colorize = True
        elif values == "FALSE":
            colorize = False
        else:
            colorize = sys.stderr.isatty()
        setattr(namespace, self.dest, colorize)


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add logging, color and version arguments."""
    parser.add_argument(
        "-v", "--log-level", type=_make_upper, default=logging.INFO,
        action=StoreLoggingLevel, choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Set verbosity. (Default: INFO)"
    )
    parser.add_argument(
        "--color", type=_make_upper, default=sys.stderr.isatty(), action=ToColorizeOption,
        choices=("TRUE", "FALSE", "AUTO"),
        help="Coloring log. (Default: auto)"
    )
    parser.add_argument(
        "--version", action="version", version="PyXOI " + PyXOI.VERSION
    )


def add_estimation_args(group: argparse._ArgumentGroup) -> None:
    """Add window, query grid, group count and algorithm arguments."""
    group.add_argument(
        "-w", "--window", type=float, action=StoreWindowWidth, default=DEFAULT_WINDOW,
        help="Full width of the smoothing window on the normalized [0, 1] axis. "
             "(Default: {})".format(DEFAULT_WINDOW)
    )
    positions = group.add_mutually_exclusive_group()
    positions.add_argument(
        "--positions", nargs=3, type=float, metavar=("START", "STOP", "STEP"),
        action=StorePositionRange,
        help="Estimate intensity at START, START+STEP, ... up to STOP."
    )
    positions.add_argument(
        "--n-positions", type=int, action=ForceNaturalNumber, default=DEFAULT_N_POSITIONS,
        help="Estimate intensity at N evenly spaced positions on [0, 1]. "
             "(Default: {})".format(DEFAULT_N_POSITIONS)
    )
    group.add_argument(
        "-g", "--n-group", type=int, action=ForceNaturalNumber,
        help="Number of groups. Groups 1 to N_GROUP are estimated. "
             "(Default: largest group label in the input)"
    )
    group.add_argument(
        "--algorithm", choices=tuple(a.value for a in Algorithm), default=Algorithm.SORTED.value,
        help="Window counting algorithm. (Default: {})".format(Algorithm.SORTED.value)
    )


def add_multiprocess_args(group: argparse._ArgumentGroup) -> None:
    group.add_argument(
        "-p", "--process", type=int, default=1, action=ForceNaturalNumber,
        help="Number of worker processes estimating groups in parallel. (Default: 1)"
    )


def get_pyxoi_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the pyxoi command."""
    parser = argparse.ArgumentParser(
        prog="pyxoi",
        description="Estimate crossover intensity functions along normalized "
                    "chromosome arms from per-cell crossover positions.",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "samples", nargs='+', type=Path,
        help="Tab-delimited sample table(s) with columns "
             "cell, group, sclength, centromere and xoloc."
    )
    add_common_args(parser)

    output = parser.add_argument_group("Output file arguments")
    output.add_argument(
        "-o", "--outdir", type=Path, default=Path('.'),
        help="Output directory. (Default: the current directory)"
    )
    output.add_argument(
        "-n", "--name", nargs='*', metavar="NAME",
        help="Basename(s) for output files. (Default: input file basename)"
    )

    estimation = parser.add_argument_group("Estimation parameters")
    add_estimation_args(estimation)
    add_multiprocess_args(estimation)

    return parser
