"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from trellis.graph.builder import build_graph
from trellis.graph.model_graph import ModelGraph
from trellis.logging import reset_logging
from trellis.schema.loader import parse_schema, parse_schema_from_string
from trellis.schema.models import Association


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give every test an unconfigured trellis logger."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def blog_schema(examples_dir):
    """Return the parsed example blog schema."""
    return parse_schema(examples_dir / "blog.yaml")


@pytest.fixture
def blog_graph(blog_schema):
    """Return the graph built from the blog schema."""
    return build_graph(blog_schema)


@pytest.fixture
def minimal_schema_yaml() -> str:
    """Return a minimal valid schema YAML string."""
    return """
models:
  User:
    columns:
      - name: email
        type: string
    associations:
      - has_many: posts

  Post:
    belongs_to: user
    columns:
      - name: title
        type: string
"""


@pytest.fixture
def minimal_schema(minimal_schema_yaml):
    """Return a parsed minimal schema."""
    return parse_schema_from_string(minimal_schema_yaml)


@pytest.fixture
def minimal_graph(minimal_schema):
    """Return a graph built from the minimal schema."""
    return build_graph(minimal_schema)


@pytest.fixture
def make_graph():
    """Build a ModelGraph from ``(owner, kind, name, target)`` tuples.

    Models are added in order of first mention; a target of None makes a
    polymorphic belongs_to.
    """

    def _make(edges, extra_models=()):
        graph = ModelGraph()
        names = []
        for owner, _, _, target in edges:
            for name in (owner, target):
                if name is not None and name not in names:
                    names.append(name)
        for name in [*names, *extra_models]:
            if not graph.has_model(name):
                graph.add_model(name)
        for owner, kind, name, target in edges:
            if target is None:
                association = Association(
                    kind=kind, name=name, owner=owner, polymorphic=True
                )
            else:
                association = Association(
                    kind=kind, name=name, owner=owner, class_name=target
                )
            graph.add_association(association)
        return graph

    return _make
