"""Schema annotations for models."""

from typing import Any

from ..schema.models import Column, ModelSchema, Schema
from .errors import UnknownModelError

TIMESTAMP_COLUMNS = ("created_at", "updated_at")
TYPE_WIDTH = 15


def annotate(schema: Schema, model_name: str) -> list[str]:
    """Build the annotation comment block for a model.

    The primary key is listed first, then the remaining columns in
    alphabetical order, with ``created_at``/``updated_at`` moved to the
    end. Indexes and check constraints follow when the model has any.

    Args:
        schema: The parsed schema.
        model_name: The model to annotate.

    Returns:
        The annotation lines, each starting with ``#``.

    Raises:
        UnknownModelError: If the model is not in the schema.
    """
    model = get_model(schema, model_name)

    lines = [
        f"# --- Model: '{model.name}' Annotation",
        f"# Table Name: {model.table}",
        "#",
    ]

    width = max((len(c.name) for c in model.columns), default=0) + 3
    columns = sorted(model.columns, key=lambda c: c.name)
    primary = [c for c in columns if c.name == model.primary_key]
    others = [c for c in columns if c.name != model.primary_key]

    timestamps: dict[str, str] = {}
    for column in primary + others:
        line = _column_line(model, column, width)
        if column.name in TIMESTAMP_COLUMNS:
            timestamps[column.name] = line
        else:
            lines.append(line)

    if timestamps:
        lines.append("#")
        lines.extend(timestamps[name] for name in TIMESTAMP_COLUMNS if name in timestamps)

    if model.indexes:
        lines.append("#")
        lines.append("# Indexes")
        for index in model.indexes:
            unique = " (unique)" if index.unique else ""
            lines.append(f"#  {index.name}: {', '.join(index.columns)}{unique}")

    if model.check_constraints:
        lines.append("#")
        lines.append("# Check Constraints")
        for constraint in model.check_constraints:
            lines.append(f"#  {constraint.name}: {constraint.definition}")

    return lines


def column_validations(model: ModelSchema, column_name: str) -> list[str]:
    """Describe the validations that apply to a column.

    Foreign key columns of ``belongs_to`` associations also report the
    presence/associated validations declared on the association name.
    """
    validations = [v.describe() for v in model.validations_on(column_name)]

    for association in model.associations:
        if association.kind != "belongs_to":
            continue
        if association.resolved_foreign_key != column_name:
            continue
        for validation in model.validations_on(association.name):
            if validation.kind in ("presence", "associated"):
                validations.append(validation.kind)

    # Deduplicate, keeping first occurrence
    return list(dict.fromkeys(validations))


def get_model(schema: Schema, model_name: str) -> ModelSchema:
    """Look up a model, raising UnknownModelError when it is missing."""
    model = schema.get_model(model_name)
    if model is None:
        raise UnknownModelError(model_name)
    return model


def _column_line(model: ModelSchema, column: Column, width: int) -> str:
    opts = []
    if column.name == model.primary_key:
        opts.append("Primary Key")
    if _is_present(column.default):
        opts.append(f"default({_format_default(column)})")
    if not column.null:
        opts.append("not null")
    if column.name in model.enums:
        opts.append("enum")

    validations = column_validations(model, column.name)
    opts_str = ", ".join(opts)
    validations_str = f" ~ {', '.join(validations)}" if validations else ""

    type_str = column.type_with_limit
    # Pad only if something follows the type
    if opts_str or validations_str:
        type_str = type_str.ljust(TYPE_WIDTH)

    return f"#  {column.name.ljust(width)}:{type_str}{opts_str}{validations_str}"


def _is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    return str(value).strip() != ""


def _format_default(column: Column) -> str:
    value = column.default
    if column.type in ("string", "text"):
        return f'"{value}"'
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
