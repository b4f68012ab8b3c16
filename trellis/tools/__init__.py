"""Console helpers for inspecting models and records."""

from .annotate import annotate, column_validations
from .bench import BenchmarkReport, bench, resolve_callable
from .dependents import Dependent, dependents, format_dependent
from .errors import RecordError, ResolutionError, ToolError, UnknownModelError
from .records import (
    attribute_keys,
    data_hash,
    diff_objects,
    normalize_value,
    object_data,
    record_attributes,
)
from .required import required

__all__ = [
    "annotate",
    "column_validations",
    "BenchmarkReport",
    "bench",
    "resolve_callable",
    "Dependent",
    "dependents",
    "format_dependent",
    "RecordError",
    "ResolutionError",
    "ToolError",
    "UnknownModelError",
    "attribute_keys",
    "data_hash",
    "diff_objects",
    "normalize_value",
    "object_data",
    "record_attributes",
    "required",
]
