"""Builder for converting a Schema to a ModelGraph."""

from ..schema.models import Schema
from .model_graph import ModelGraph


def build_graph(schema: Schema) -> ModelGraph:
    """Build a ModelGraph from a Schema.

    Args:
        schema: The parsed schema.

    Returns:
        A ModelGraph with one node per model and one edge per
        resolvable association.
    """
    graph = ModelGraph()

    # Add all models first so association targets can resolve
    for model_name, model in schema.models.items():
        graph.add_model(model_name, table=model.table)

    for model in schema.models.values():
        for association in model.associations:
            graph.add_association(association)

    return graph
