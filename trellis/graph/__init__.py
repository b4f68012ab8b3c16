"""Graph layer for representing model associations as a networkx graph."""

from .node_types import NodeType, EdgeType
from .model_graph import ModelGraph
from .builder import build_graph

__all__ = [
    "NodeType",
    "EdgeType",
    "ModelGraph",
    "build_graph",
]
