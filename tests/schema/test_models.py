"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from trellis.schema.models import (
    Association,
    Column,
    Index,
    ModelSchema,
    Schema,
    Validation,
)


class TestColumn:
    def test_defaults(self):
        column = Column(name="email")
        assert column.type == "string"
        assert column.null is True
        assert column.limit is None
        assert column.default is None

    def test_type_with_limit(self):
        assert Column(name="id", type="integer", limit=8).type_with_limit == "integer(8)"
        assert Column(name="title").type_with_limit == "string"


class TestValidation:
    def test_shorthand_list(self):
        validation = Validation.model_validate({"presence": ["email", "name"]})
        assert validation.kind == "presence"
        assert validation.attributes == ["email", "name"]

    def test_shorthand_single_attribute_with_options(self):
        validation = Validation.model_validate(
            {"length": "name", "minimum": 2, "maximum": 50}
        )
        assert validation.attributes == ["name"]
        assert validation.options == {"minimum": 2, "maximum": 50}
        assert validation.describe() == "length(minimum=2, maximum=50)"

    def test_length_with_one_bound(self):
        validation = Validation.model_validate({"length": "name", "maximum": 50})
        assert validation.describe() == "length(maximum=50)"

    def test_custom_validator(self):
        validation = Validation.model_validate(
            {"custom": "EmailFormatValidator", "attributes": "email"}
        )
        assert validation.kind == "custom"
        assert validation.attributes == ["email"]
        assert validation.describe() == "custom(email_format_validator)"

    def test_explicit_form(self):
        validation = Validation(kind="uniqueness", attributes=["email"])
        assert validation.describe() == "uniqueness"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Validation.model_validate({"kind": "format", "attributes": ["email"]})


class TestIndex:
    def test_single_column_string(self):
        index = Index.model_validate({"name": "idx", "columns": "email"})
        assert index.columns == ["email"]


class TestAssociation:
    def test_shorthand(self):
        association = Association.model_validate({"has_many": "posts"})
        assert association.kind == "has_many"
        assert association.name == "posts"

    def test_target_singularized_for_collections(self):
        association = Association(kind="has_many", name="organization_users")
        assert association.target == "OrganizationUser"

        habtm = Association(kind="has_and_belongs_to_many", name="categories")
        assert habtm.target == "Category"

    def test_target_for_singular_associations(self):
        assert Association(kind="belongs_to", name="organization").target == "Organization"
        assert Association(kind="has_one", name="profile_photo").target == "ProfilePhoto"

    def test_class_name_wins(self):
        association = Association(kind="belongs_to", name="author", class_name="User")
        assert association.target == "User"

    def test_polymorphic_belongs_to_has_no_target(self):
        association = Association(kind="belongs_to", name="commentable", polymorphic=True)
        assert association.target is None

    def test_foreign_keys(self):
        assert Association(kind="belongs_to", name="author").resolved_foreign_key == "author_id"
        assert (
            Association(kind="has_many", name="posts", owner="BlogAuthor").resolved_foreign_key
            == "blog_author_id"
        )
        assert (
            Association.model_validate(
                {"has_many": "comments", "as": "commentable", "owner": "Post"}
            ).resolved_foreign_key
            == "commentable_id"
        )
        assert (
            Association(kind="has_many", name="posts", foreign_key="writer_id").resolved_foreign_key
            == "writer_id"
        )

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Association.model_validate({"kind": "references", "name": "user"})

    def test_describe(self):
        assert Association(kind="has_one", name="profile").describe() == "has_one :profile"


class TestModelSchema:
    def test_shorthand_columns(self):
        model = ModelSchema.model_validate({"name": "User", "columns": ["email"]})
        assert model.columns[0].name == "email"
        assert model.columns[0].type == "string"

    def test_model_level_association_shorthand(self):
        model = ModelSchema.model_validate(
            {"name": "Post", "belongs_to": "user", "has_many": ["comments", "tags"]}
        )
        kinds = [(a.kind, a.name) for a in model.associations]
        assert kinds == [
            ("belongs_to", "user"),
            ("has_many", "comments"),
            ("has_many", "tags"),
        ]

    def test_table_and_owner_defaults(self):
        model = ModelSchema.model_validate(
            {"name": "OrderItem", "associations": [{"belongs_to": "order"}]}
        )
        assert model.table == "order_items"
        assert model.associations[0].owner == "OrderItem"

    def test_explicit_table(self):
        model = ModelSchema.model_validate({"name": "Person", "table": "humans"})
        assert model.table == "humans"

    def test_attribute_keys_sorted(self):
        model = ModelSchema.model_validate(
            {"name": "User", "columns": ["name", "email", "age"]}
        )
        assert model.attribute_keys() == ["age", "email", "name"]

    def test_validations_on(self):
        model = ModelSchema.model_validate(
            {
                "name": "User",
                "validations": [{"presence": ["email", "name"]}, {"uniqueness": "email"}],
            }
        )
        assert [v.kind for v in model.validations_on("email")] == ["presence", "uniqueness"]
        assert [v.kind for v in model.validations_on("name")] == ["presence"]


class TestSchema:
    def test_names_from_keys(self):
        schema = Schema.model_validate({"models": {"User": {}, "Post": None}})
        assert schema.get_all_model_names() == ["User", "Post"]
        assert schema.get_model("Post").name == "Post"
        assert schema.get_model("Post").table == "posts"

    def test_get_missing_model(self):
        assert Schema().get_model("User") is None
