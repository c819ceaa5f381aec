"""Colored logging formatter for terminal output.

Key components:
- set_rootlogger(): Attaches a colored stream handler to the root logger
- ColorfulFormatter: Formatter coloring the level name by severity
"""
import logging
from typing import Dict, Optional

LOGGING_FORMAT: str = "[%(asctime)s | %(levelname)s] %(name)10s : %(message)s"


def set_rootlogger(colorize: bool, log_level: int) -> logging.Logger:
    """Configure the root logger for command-line use.

    Args:
        colorize: Whether to emit ANSI color codes
        log_level: Logging level (e.g., logging.INFO, logging.DEBUG)

    Returns:
        Configured root logger instance
    """
    rl = logging.getLogger('')

    h = logging.StreamHandler()
    h.setFormatter(ColorfulFormatter(fmt=LOGGING_FORMAT, colorize=colorize))

    rl.addHandler(h)
    rl.setLevel(log_level)

    return rl


class ColorfulFormatter(logging.Formatter):
    """Formatter padding the level name and coloring it by severity.

    INFO is cyan, WARNING yellow, ERROR red and CRITICAL magenta; messages of
    ERROR and above are bold.
    """
    DEFAULT_COLOR: int = 39
    LOGLEVEL2COLOR: Dict[int, int] = {20: 36, 30: 33, 40: 31, 50: 35}

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, colorize: bool = True) -> None:
        super(ColorfulFormatter, self).__init__(fmt=fmt, datefmt=datefmt)
        self.colorize = colorize
        self._plain_fmt = self._style._fmt.replace("%(levelname)s", "%(levelname)8s")

    def _level_fmt(self, levelno: int) -> str:
        if not self.colorize:
            return self._plain_fmt
        color = self.LOGLEVEL2COLOR.get(levelno, self.DEFAULT_COLOR)
        bold = 1 if levelno >= logging.ERROR else 0
        return self._plain_fmt.replace(
            "%(levelname)8s", "\033[{}m%(levelname)8s\033[0m".format(color)
        ).replace(
            "%(message)s", "\033[{}m%(message)s\033[0m".format(bold)
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        return self._level_fmt(record.levelno) % record.__dict__
