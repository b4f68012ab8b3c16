"""Tests for tools.annotate."""

import pytest

from trellis.schema.loader import parse_schema_from_string
from trellis.tools.annotate import annotate, column_validations
from trellis.tools.errors import UnknownModelError


class TestAnnotate:
    def test_post_annotation(self, blog_schema):
        lines = annotate(blog_schema, "Post")

        assert lines == [
            "# --- Model: 'Post' Annotation",
            "# Table Name: posts",
            "#",
            "#  id           :integer(8)     Primary Key, not null",
            "#  author_id    :integer        not null ~ presence, associated",
            "#  project_id   :integer",
            "#  published    :boolean",
            '#  title        :string         default("Untitled"), not null ~ presence',
            "#",
            "#  created_at   :datetime       not null",
            "#  updated_at   :datetime       not null",
            "#",
            "# Check Constraints",
            "#  title_length_check: CHECK ((char_length(title) <= 200))",
        ]

    def test_user_annotation(self, blog_schema):
        lines = annotate(blog_schema, "User")

        assert lines[3] == "#  id           :integer(8)     Primary Key, not null"
        assert "#  email        :string         not null ~ presence, uniqueness" in lines
        assert "#  name         :string(100)     ~ length(minimum=2, maximum=50)" in lines
        assert "#  role         :integer        default(0), not null, enum" in lines
        assert lines[-3:] == [
            "#",
            "# Indexes",
            "#  index_users_on_email: email (unique)",
        ]

    def test_model_without_extras(self):
        schema = parse_schema_from_string(
            """
models:
  Tag:
    columns:
      - name: id
        type: integer
      - label
"""
        )

        assert annotate(schema, "Tag") == [
            "# --- Model: 'Tag' Annotation",
            "# Table Name: tags",
            "#",
            "#  id      :integer        Primary Key",
            "#  label   :string",
        ]

    def test_blank_string_default_is_omitted(self):
        schema = parse_schema_from_string(
            """
models:
  Tag:
    columns:
      - name: label
        default: ""
"""
        )

        assert annotate(schema, "Tag")[-1] == "#  label   :string"

    def test_model_without_columns(self):
        schema = parse_schema_from_string("models:\n  Empty: {}\n")

        assert annotate(schema, "Empty") == [
            "# --- Model: 'Empty' Annotation",
            "# Table Name: empties",
            "#",
        ]

    def test_unknown_model(self, blog_schema):
        with pytest.raises(UnknownModelError) as exc_info:
            annotate(blog_schema, "Invoice")
        assert exc_info.value.model == "Invoice"


class TestColumnValidations:
    def test_foreign_key_picks_up_association_validations(self, blog_schema):
        post = blog_schema.get_model("Post")

        assert column_validations(post, "author_id") == ["presence", "associated"]
        assert column_validations(post, "project_id") == []

    def test_duplicates_removed(self):
        schema = parse_schema_from_string(
            """
models:
  Post:
    validations:
      - presence: [user_id, user]
    associations:
      - belongs_to: user
"""
        )

        assert column_validations(schema.get_model("Post"), "user_id") == ["presence"]
