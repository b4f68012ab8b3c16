"""Node and edge type definitions for the model graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the model graph."""

    MODEL = "model"


class EdgeType(str, Enum):
    """Association macros, one per edge in the model graph."""

    BELONGS_TO = "belongs_to"
    HAS_MANY = "has_many"
    HAS_ONE = "has_one"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"
