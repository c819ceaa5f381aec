"""Exceptions for PyXOI intensity estimation.

Every input contract violation derives from InputContractError and is
raised before any group is estimated.
"""
from typing import Optional


class InputContractError(ValueError):
    """Base class for precondition violations of the estimation inputs."""
    pass


class InvalidCentromere(InputContractError):
    """Exception raised when a centromere is not strictly inside the SC.

    A centromere at 0 or at the SC length would divide by zero while
    normalizing positions on one of the arms.
    """

    def __init__(self, centromere: float, sclength: float, sample: Optional[str] = None) -> None:
        self.centromere = centromere
        self.sclength = sclength
        self.sample = sample
        where = "" if sample is None else "sample '{}': ".format(sample)
        super().__init__(
            "{}centromere position {} must be strictly between 0 and SC length {}".format(
                where, centromere, sclength)
        )


class InvalidCrossoverPosition(InputContractError):
    """Exception raised when a crossover lies outside [0, SC length]."""

    def __init__(self, position: float, sclength: float, sample: Optional[str] = None) -> None:
        self.position = position
        self.sclength = sclength
        self.sample = sample
        where = "" if sample is None else "sample '{}': ".format(sample)
        super().__init__(
            "{}crossover position {} is outside [0, {}]".format(where, position, sclength)
        )


class EmptyGroup(InputContractError):
    """Exception raised when a requested group has no samples."""

    def __init__(self, group: int) -> None:
        self.group = group
        super().__init__("group {} has no samples".format(group))


class InvalidWindow(InputContractError):
    """Exception raised when the smoothing window is not in (0, 1]."""

    def __init__(self, window: float) -> None:
        self.window = window
        super().__init__("window width must be in (0, 1], got {}".format(window))


class OutOfRangeQuery(InputContractError):
    """Exception raised when a query position is outside [0, 1]."""

    def __init__(self, position: float, index: int) -> None:
        self.position = position
        self.index = index
        super().__init__(
            "query position #{} ({}) is outside [0, 1]".format(index, position)
        )


class InvalidGroupCount(InputContractError):
    """Exception raised when the number of groups is less than one."""

    def __init__(self, n_group: int) -> None:
        self.n_group = n_group
        super().__init__("number of groups must be >= 1, got {}".format(n_group))


class WorkerError(RuntimeError):
    """Exception raised when a group worker process fails."""
    pass
