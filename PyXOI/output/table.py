"""Tab-delimited intensity table output.

One row per query position; the first column is the normalized position
and each following column holds one group's intensity.
"""
import csv
import logging
import os
from typing import Union

from PyXOI.core.models import IntensityResult
from PyXOI.utils.output import catch_IOError

logger = logging.getLogger(__name__)

INTENSITY_SUFFIX = "_intensity.tab"
DIALECT = "excel-tab"


@catch_IOError(logger)
def output_intensity(outfile: Union[str, os.PathLike], result: IntensityResult) -> None:
    """Write an intensity table.

    Args:
        outfile: Output path
        result: Estimated intensities
    """
    logger.info("Output '{}'".format(outfile))

    with open(outfile, 'w', newline='') as f:
        tab = csv.writer(f, dialect=DIALECT)
        tab.writerow(("position", ) + tuple("group{}".format(g) for g in result.groups))
        for i, position in enumerate(result.positions):
            tab.writerow(
                (repr(float(position)), ) +
                tuple(repr(float(v)) for v in result.values[:, i])
            )
