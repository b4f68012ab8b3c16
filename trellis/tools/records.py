"""Attribute extraction and comparison for in-memory records."""

import dataclasses
from datetime import date, datetime, time
from itertools import islice
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from ..schema.models import Schema
from .annotate import get_model
from .errors import RecordError


def attribute_keys(schema: Schema, model_name: str) -> list[str]:
    """Sorted column names of a model."""
    return get_model(schema, model_name).attribute_keys()


def record_attributes(record: Any) -> dict[str, Any]:
    """Read a record's attributes into a plain dictionary.

    Accepts mappings, objects with an ``attributes`` mapping (or method
    returning one), pydantic models and dataclass instances.

    Raises:
        RecordError: If the record exposes no attributes.
    """
    if isinstance(record, Mapping):
        return dict(record)

    if isinstance(record, BaseModel):
        return record.model_dump()

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.asdict(record)

    attributes = getattr(record, "attributes", None)
    if callable(attributes):
        attributes = attributes()
    if isinstance(attributes, Mapping):
        return dict(attributes)

    raise RecordError(f"{type(record).__name__} does not expose attributes")


def normalize_value(value: Any) -> Any:
    """Render dates and times as strings; leave other values unchanged."""
    if isinstance(value, (datetime, date, time)):
        return str(value)
    return value


def object_data(record: Any, keys: Iterable[str]) -> dict[str, Any]:
    """Pick ``keys`` from a record, with dates and times as strings.

    Missing attributes come back as None.
    """
    attributes = record_attributes(record)
    return {key: normalize_value(attributes.get(key)) for key in keys}


def data_hash(
    records: Iterable[Any],
    keys: Iterable[str],
    limit: int | None = 1000,
    offset: int = 0,
) -> list[dict[str, Any]]:
    """Extract ``keys`` from a page of records.

    Args:
        records: The records to read.
        keys: Attribute names to extract, usually ``attribute_keys(...)``.
        limit: Maximum number of records, or None for all of them.
        offset: Number of records to skip first.
    """
    keys = list(keys)
    stop = None if limit is None else offset + limit
    return [object_data(record, keys) for record in islice(records, offset, stop)]


def diff_objects(
    first: Any,
    second: Any,
    ignore_keys: Iterable[str] = (),
    normalize: bool = True,
) -> dict[str, tuple[Any, Any]]:
    """Compare the attributes of two records.

    Args:
        first: The first record.
        second: The second record.
        ignore_keys: Attribute names to leave out of the comparison,
            matched against the string form of each key.
        normalize: Compare dates and times by their string form.

    Returns:
        Differing attribute names mapped to ``(first_value, second_value)``,
        in the order the keys first appear. Keys present on only one side
        compare against None.

    Raises:
        RecordError: If either record exposes no attributes.
    """
    try:
        attrs1 = record_attributes(first)
        attrs2 = record_attributes(second)
    except RecordError as e:
        raise RecordError(f"Both objects must expose attributes: {e}") from e

    ignored = {str(key) for key in ignore_keys}
    keys = [key for key in dict.fromkeys([*attrs1, *attrs2]) if str(key) not in ignored]

    diffs = {}
    for key in keys:
        val1 = attrs1.get(key)
        val2 = attrs2.get(key)
        if normalize:
            val1 = normalize_value(val1)
            val2 = normalize_value(val2)
        if val1 != val2:
            diffs[key] = (val1, val2)

    return diffs
