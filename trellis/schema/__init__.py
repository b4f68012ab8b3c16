"""Schema layer for parsing and validating YAML model schemas."""

from .errors import LoadError, RecordLoadError, SchemaLoadError, SchemaValidationError
from .models import (
    Association,
    CheckConstraint,
    Column,
    Index,
    ModelSchema,
    Schema,
    Validation,
)
from .loader import load_record, load_yaml, parse_schema, parse_schema_from_string

__all__ = [
    "LoadError",
    "RecordLoadError",
    "SchemaLoadError",
    "SchemaValidationError",
    "Association",
    "CheckConstraint",
    "Column",
    "Index",
    "ModelSchema",
    "Schema",
    "Validation",
    "load_record",
    "load_yaml",
    "parse_schema",
    "parse_schema_from_string",
]
