"""Read YAML files for Trellis.

Two kinds of file are read: schema files, validated into a ``Schema``,
and record files, plain attribute mappings compared by ``trellis diff``.
Both must hold a mapping at the top level; an empty file is an empty
mapping.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import LoadError, RecordLoadError, SchemaLoadError, SchemaValidationError
from .models import Schema


def load_yaml(path: str | Path, error: type[LoadError] = LoadError) -> dict:
    """Load a YAML file holding a mapping.

    Args:
        path: Path to the YAML file.
        error: Exception class to raise, naming the kind of file in its
            message.

    Returns:
        The parsed mapping.

    Raises:
        LoadError: (as ``error``) If the file is missing, unreadable, not
            valid YAML or not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise error(f"{error.document.capitalize()} file not found: {path}", str(path))
    if not path.is_file():
        raise error(f"{error.document.capitalize()} path is not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise error(f"Invalid YAML in {error.document} file: {e}", str(path)) from e
    except OSError as e:
        raise error(f"Cannot read {error.document} file: {e}", str(path)) from e

    return _as_mapping(data, error, str(path))


def load_record(path: str | Path) -> dict:
    """Load a record file: attribute names mapped to values.

    Raises:
        RecordLoadError: If the file cannot be read as a mapping.
    """
    return load_yaml(path, RecordLoadError)


def parse_schema(path: str | Path) -> Schema:
    """Load and validate a schema file.

    Raises:
        SchemaLoadError: If the file cannot be read as a mapping.
        SchemaValidationError: If the data does not describe valid models.
    """
    return _validate_schema(load_yaml(path, SchemaLoadError))


def parse_schema_from_string(yaml_string: str) -> Schema:
    """Validate a schema given as a YAML string.

    Raises:
        SchemaLoadError: If the string is not a YAML mapping.
        SchemaValidationError: If the data does not describe valid models.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in schema: {e}") from e

    return _validate_schema(_as_mapping(data, SchemaLoadError))


def _as_mapping(data: Any, error: type[LoadError], path: str | None = None) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise error(
            f"Expected a mapping at the root of the {error.document}, "
            f"got {type(data).__name__}",
            path,
        )
    return data


def _validate_schema(data: dict) -> Schema:
    try:
        return Schema.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"{len(errors)} problem(s) in the model definitions", errors
        ) from e
