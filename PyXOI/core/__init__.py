"""Crossover intensity estimation core.

- models: Sample, SampleSet, QueryGrid and IntensityResult
- normalize: Centromere-relative position normalization
- intensity: Per-group windowed intensity calculators
- estimate: Validation plus per-group orchestration
- coincidence: Declared coincidence interface
"""
from PyXOI.core.coincidence import estimate_coincidence
from PyXOI.core.estimate import estimate_intensity
from PyXOI.core.exceptions import (
    EmptyGroup, InputContractError, InvalidCentromere, InvalidCrossoverPosition,
    InvalidGroupCount, InvalidWindow, OutOfRangeQuery, WorkerError
)
from PyXOI.core.models import IntensityResult, QueryGrid, Sample, SampleSet
from PyXOI.core.normalize import normalize_position, normalize_positions

__all__ = [
    "estimate_intensity", "estimate_coincidence",
    "Sample", "SampleSet", "QueryGrid", "IntensityResult",
    "normalize_position", "normalize_positions",
    "InputContractError", "InvalidCentromere", "InvalidCrossoverPosition",
    "EmptyGroup", "InvalidWindow", "OutOfRangeQuery", "InvalidGroupCount",
    "WorkerError",
]
