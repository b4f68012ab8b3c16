"""Fields that must be set to save a model."""

from typing import Any

from ..schema.models import Schema
from .annotate import get_model

AUTO_COLUMNS = ("id", "created_at", "updated_at")


def required(
    schema: Schema, model_name: str, validators_only: bool = True
) -> dict[str, Any]:
    """Collect the required fields of a model.

    A field is required when it has a presence validation, or, unless
    ``validators_only`` is set, when its column is NOT NULL. Presence
    validations on a ``belongs_to`` association are reported under the
    association's foreign key.

    Args:
        schema: The parsed schema.
        model_name: The model to inspect.
        validators_only: Skip the NOT NULL column check.

    Returns:
        Field names mapped to their column default (or None), sorted by name.

    Raises:
        UnknownModelError: If the model is not in the schema.
    """
    model = get_model(schema, model_name)
    fields: dict[str, Any] = {}

    if not validators_only:
        for column in model.columns:
            if column.name in AUTO_COLUMNS:
                continue
            if not column.null:
                fields[column.name] = column.default

    for validation in model.validations:
        if validation.kind != "presence":
            continue
        for attribute in validation.attributes:
            association = model.get_association(attribute)
            if association is not None and association.kind == "belongs_to":
                attribute = association.resolved_foreign_key
            fields.setdefault(attribute, None)

    return dict(sorted(fields.items()))
