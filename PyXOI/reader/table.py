"""Tab-delimited sample table reader.

The table has one row per cell with the columns

    cell    group   sclength    centromere  xoloc

where ``xoloc`` holds the cell's crossover positions separated by commas
(empty for a cell without crossovers). Extra columns are ignored.
"""
import csv
import logging
import os
from typing import List, Union

from PyXOI.core.models import SampleSet
from PyXOI.utils.output import catch_IOError

logger = logging.getLogger(__name__)

DIALECT = "excel-tab"
REQUIRED_COLUMNS = ("cell", "group", "sclength", "centromere", "xoloc")
XOLOC_SEPARATOR = ','
ENCODING = "utf-8"


class SampleTableError(ValueError):
    """Exception raised for a malformed sample table."""

    def __init__(self, path: Union[str, os.PathLike], lineno: int, message: str) -> None:
        self.path = path
        self.lineno = lineno
        super().__init__("{}:{}: {}".format(path, lineno, message))


def _parse_xoloc(field: str) -> List[float]:
    field = field.strip()
    if not field:
        return []
    return [float(v) for v in field.split(XOLOC_SEPARATOR)]


@catch_IOError(logger)
def read_sample_table(path: Union[str, os.PathLike]) -> SampleSet:
    """Load a sample table into a SampleSet.

    Args:
        path: Tab-delimited sample table

    Returns:
        SampleSet in row order, named by the ``cell`` column

    Raises:
        SampleTableError: On a missing column or a non-numeric value
        IOError: If the file cannot be read
    """
    names: List[str] = []
    groups: List[int] = []
    sclengths: List[float] = []
    centromeres: List[float] = []
    n_xo: List[int] = []
    xoloc: List[float] = []

    with open(path, newline='', encoding=ENCODING) as f:
        tab = csv.DictReader(f, dialect=DIALECT)
        try:
            fieldnames = tab.fieldnames or ()
            missing = [c for c in REQUIRED_COLUMNS if c not in fieldnames]
            if missing:
                raise SampleTableError(path, 1, "missing column(s): {}".format(', '.join(missing)))

            for row in tab:
                lineno = tab.line_num
                try:
                    positions = _parse_xoloc(row["xoloc"] or '')
                    groups.append(int(row["group"]))
                    sclengths.append(float(row["sclength"]))
                    centromeres.append(float(row["centromere"]))
                except (TypeError, ValueError) as e:
                    raise SampleTableError(path, lineno, str(e)) from e

                names.append(row["cell"])
                n_xo.append(len(positions))
                xoloc.extend(positions)
        except UnicodeDecodeError as e:
            # input is decoded in chunks, so the bad byte may sit on a later line
            raise SampleTableError(path, tab.line_num + 1, "not a text file ({})".format(e)) from e

    logger.info("Loaded {} cell(s) with {} crossover(s) from '{}'".format(
        len(names), len(xoloc), path))

    return SampleSet.from_flat(xoloc, n_xo, sclengths, centromeres, groups, names)
