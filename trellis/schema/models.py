"""Pydantic models for Trellis schema files."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .inflection import camelize, classify, tableize, underscore

ASSOCIATION_KINDS = ("belongs_to", "has_many", "has_one", "has_and_belongs_to_many")
VALIDATION_KINDS = (
    "presence",
    "uniqueness",
    "length",
    "numericality",
    "associated",
    "custom",
)

AssociationKind = Literal["belongs_to", "has_many", "has_one", "has_and_belongs_to_many"]


class Column(BaseModel):
    """A database column of a model."""

    name: str
    type: str = "string"
    limit: int | None = None
    null: bool = True
    default: str | int | float | bool | None = None

    @property
    def type_with_limit(self) -> str:
        """The column type, with its limit when one is set."""
        if self.limit is not None:
            return f"{self.type}({self.limit})"
        return self.type


class Validation(BaseModel):
    """A validation rule declared on one or more attributes."""

    kind: Literal[
        "presence", "uniqueness", "length", "numericality", "associated", "custom"
    ]
    attributes: list[str] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None  # validator name, for custom validations

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data: Any) -> Any:
        """Expand ``{presence: [email, name]}`` style rules."""
        if not isinstance(data, dict) or "kind" in data:
            return data

        data = dict(data)
        for kind in VALIDATION_KINDS:
            if kind not in data:
                continue
            value = data.pop(kind)
            attributes = data.pop("attributes", None)
            if kind == "custom":
                # custom: validator_name, attributes: [...]
                name = value
            else:
                name = data.pop("name", None)
                attributes = value
            if isinstance(attributes, str):
                attributes = [attributes]
            return {
                "kind": kind,
                "name": name,
                "attributes": attributes or [],
                "options": data,
            }
        return data

    def describe(self) -> str:
        """Short label used in column annotations."""
        if self.kind == "length":
            bounds = ", ".join(
                f"{key}={self.options[key]}"
                for key in ("minimum", "maximum")
                if key in self.options
            )
            return f"length({bounds})"
        if self.kind == "custom":
            return f"custom({underscore(self.name or 'validator')})"
        return self.kind


class Index(BaseModel):
    """A table index."""

    name: str
    columns: list[str] = Field(default_factory=list)
    unique: bool = False

    @model_validator(mode="before")
    @classmethod
    def normalize_columns(cls, data: Any) -> Any:
        """Allow a single column name instead of a list."""
        if isinstance(data, dict) and isinstance(data.get("columns"), str):
            data = {**data, "columns": [data["columns"]]}
        return data


class CheckConstraint(BaseModel):
    """A table-level CHECK constraint."""

    name: str
    definition: str


class Association(BaseModel):
    """An association declared on a model."""

    model_config = ConfigDict(populate_by_name=True)

    kind: AssociationKind
    name: str
    owner: str = ""  # Set from the declaring model
    class_name: str | None = None
    foreign_key: str | None = None
    polymorphic: bool = False
    as_: str | None = Field(default=None, alias="as")
    through: str | None = None
    dependent: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data: Any) -> Any:
        """Expand ``{has_many: posts}`` into ``kind``/``name``."""
        if not isinstance(data, dict) or "kind" in data:
            return data

        data = dict(data)
        for kind in ASSOCIATION_KINDS:
            if kind in data:
                data["name"] = data.pop(kind)
                data["kind"] = kind
                break
        return data

    @property
    def target(self) -> str | None:
        """Name of the associated model, or None for polymorphic belongs_to."""
        if self.class_name:
            return self.class_name
        if self.kind == "belongs_to" and self.polymorphic:
            return None
        if self.kind in ("has_many", "has_and_belongs_to_many"):
            return classify(self.name)
        return camelize(self.name)

    @property
    def resolved_foreign_key(self) -> str:
        """The explicit foreign key, or the conventional one."""
        if self.foreign_key:
            return self.foreign_key
        if self.kind == "belongs_to":
            return f"{self.name}_id"
        if self.as_:
            return f"{self.as_}_id"
        return f"{underscore(self.owner)}_id"

    def describe(self) -> str:
        """Label used in path and dependency listings, e.g. ``has_many :posts``."""
        return f"{self.kind} :{self.name}"


class ModelSchema(BaseModel):
    """A model: its table, columns, validations and associations."""

    name: str = ""  # Will be set from the key
    table: str | None = None
    primary_key: str = "id"
    columns: list[Column] = Field(default_factory=list)
    enums: dict[str, dict[str, int | str]] = Field(default_factory=dict)
    validations: list[Validation] = Field(default_factory=list)
    indexes: list[Index] = Field(default_factory=list)
    check_constraints: list[CheckConstraint] = Field(default_factory=list)
    associations: list[Association] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_model(cls, data: Any) -> Any:
        """Normalize shorthand columns and associations."""
        if not isinstance(data, dict):
            return data

        # Columns given as bare names are strings
        columns = data.get("columns", [])
        if columns:
            data["columns"] = [
                {"name": col, "type": "string"} if isinstance(col, str) else col
                for col in columns
            ]

        associations = data.get("associations", [])
        if not isinstance(associations, list):
            associations = []

        # Model-level shorthand (has_many: [posts, comments])
        for kind in ASSOCIATION_KINDS:
            if kind in data:
                names = data.pop(kind)
                if isinstance(names, str):
                    names = [names]
                for name in names:
                    associations.append({"kind": kind, "name": name})

        data["associations"] = associations
        return data

    @model_validator(mode="after")
    def fill_defaults(self) -> "ModelSchema":
        """Derive the table name and tag associations with their owner."""
        if self.name and not self.table:
            self.table = tableize(self.name)
        for association in self.associations:
            association.owner = self.name
        return self

    def get_column(self, name: str) -> Column | None:
        """Get a column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def get_association(self, name: str) -> Association | None:
        """Get an association by name."""
        for association in self.associations:
            if association.name == name:
                return association
        return None

    def attribute_keys(self) -> list[str]:
        """Column names, sorted alphabetically."""
        return sorted(column.name for column in self.columns)

    def validations_on(self, attribute: str) -> list[Validation]:
        """All validations that cover an attribute."""
        return [v for v in self.validations if attribute in v.attributes]


class Schema(BaseModel):
    """Root model for a Trellis schema file."""

    models: dict[str, ModelSchema] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_schema(cls, data: Any) -> Any:
        """Set model names from their keys."""
        if not isinstance(data, dict):
            return data

        models = data.get("models") or {}
        if isinstance(models, dict):
            for name, model_data in list(models.items()):
                if model_data is None:
                    model_data = models[name] = {}
                if isinstance(model_data, dict):
                    model_data["name"] = name
            data["models"] = models

        return data

    def get_model(self, name: str) -> ModelSchema | None:
        """Get a model by name."""
        return self.models.get(name)

    def get_all_model_names(self) -> list[str]:
        """Get all model names."""
        return list(self.models.keys())
