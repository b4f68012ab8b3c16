"""Tests for relations.models."""

from trellis.relations.models import (
    PathSearchResult,
    PathStep,
    RelationPath,
    SearchOutcome,
)
from trellis.schema.models import Association


def _assoc(kind, name, owner, target):
    return Association(kind=kind, name=name, owner=owner, class_name=target)


class TestRelationPath:
    def test_format(self):
        path = RelationPath(
            [
                PathStep("User", _assoc("has_many", "organization_users", "User", "OrganizationUser")),
                PathStep(
                    "OrganizationUser",
                    _assoc("belongs_to", "organization", "OrganizationUser", "Organization"),
                ),
                PathStep("Organization"),
            ]
        )

        assert path.format() == (
            "User has_many :organization_users -> OrganizationUser "
            "belongs_to :organization -> Organization"
        )
        assert path.length == 2
        assert path.models == ["User", "OrganizationUser", "Organization"]

    def test_single_model(self):
        path = RelationPath([PathStep("User")])

        assert path.format() == "User"
        assert path.length == 0

    def test_empty(self):
        assert RelationPath().format() == ""


class TestPathSearchResult:
    def test_found_message(self):
        result = PathSearchResult(
            outcome=SearchOutcome.FOUND,
            source="A",
            destination="B",
            paths=["A has_one :b -> B"],
        )

        assert result.found
        assert result.message == "Found 1 path(s) between A and B"

    def test_invalid_message(self):
        result = PathSearchResult(
            outcome=SearchOutcome.INVALID_ARGUMENT,
            source="A",
            destination="B",
            error="Source must be a model in the schema: 'A'",
        )

        assert not result.found
        assert result.message.startswith("Error: Source")

    def test_outcome_values(self):
        assert SearchOutcome("traversal_aborted") is SearchOutcome.TRAVERSAL_ABORTED
