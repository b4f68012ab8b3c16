"""ModelGraph wrapper around networkx for model associations."""

from typing import Any

import networkx as nx

from ..schema.models import Association
from .node_types import EdgeType, NodeType


def _node_id(model_name: str) -> str:
    return f"model:{model_name}"


class ModelGraph:
    """A graph of models and the associations between them.

    Wraps a networkx MultiDiGraph, since a model may declare several
    associations to the same target. Every model node keeps its
    associations in declaration order, including the ones that do not
    resolve to a known model; only resolvable associations become edges.
    """

    def __init__(self):
        """Initialize an empty model graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Node management
    # -------------------------------------------------------------------------

    def add_model(self, name: str, **attrs: Any) -> str:
        """Add a model node to the graph.

        Args:
            name: The model name.
            **attrs: Additional attributes for the node.

        Returns:
            The node ID.
        """
        node_id = _node_id(name)
        self._graph.add_node(
            node_id,
            node_type=NodeType.MODEL,
            name=name,
            associations=[],
            **attrs,
        )
        return node_id

    def add_association(self, association: Association) -> None:
        """Record an association on its owning model.

        An edge is added only when the association resolves to a model
        already in the graph.

        Args:
            association: The association, with ``owner`` set.
        """
        owner_id = _node_id(association.owner)
        if not self._graph.has_node(owner_id):
            self.add_model(association.owner)

        self._graph.nodes[owner_id]["associations"].append(association)

        target = self.resolve(association)
        if target is None:
            return

        self._graph.add_edge(
            owner_id,
            _node_id(target),
            key=association.name,
            edge_type=EdgeType(association.kind),
            association=association,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_model(self, name: Any) -> bool:
        """Check if a model node with this name exists."""
        if not isinstance(name, str):
            return False
        node_id = _node_id(name)
        return (
            self._graph.has_node(node_id)
            and self._graph.nodes[node_id].get("node_type") == NodeType.MODEL
        )

    def model_names(self) -> list[str]:
        """Get all model names, in insertion order."""
        return [
            data["name"]
            for _, data in self._graph.nodes(data=True)
            if data.get("node_type") == NodeType.MODEL
        ]

    def get_model_node(self, name: str) -> dict[str, Any] | None:
        """Get a model node's attributes by name."""
        node_id = _node_id(name)
        if self._graph.has_node(node_id):
            return dict(self._graph.nodes[node_id])
        return None

    def associations(self, model_name: str) -> list[Association]:
        """Outgoing associations of a model, in declaration order."""
        node_id = _node_id(model_name)
        if not self._graph.has_node(node_id):
            return []
        return list(self._graph.nodes[node_id]["associations"])

    def resolve(self, association: Association) -> str | None:
        """Resolve an association to the name of its target model.

        Returns None for polymorphic associations and for targets that
        are not part of the graph.
        """
        target = association.target
        if target is None or not self.has_model(target):
            return None
        return target

    def incoming_associations(self, model_name: str) -> list[Association]:
        """Associations from any model that resolve to this model.

        Read from the incoming edges, so unresolved associations never
        appear. Grouped by declaring model, in the order each model first
        pointed here, then by declaration order. Since build_graph adds
        each model's associations together, that is schema order.
        """
        node_id = _node_id(model_name)
        if not self._graph.has_node(node_id):
            return []
        return [
            data["association"]
            for _, _, data in self._graph.in_edges(node_id, data=True)
        ]
