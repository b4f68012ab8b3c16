"""Find the models whose associations point at a given model."""

import logging
from dataclasses import asdict, dataclass

from ..graph.model_graph import ModelGraph
from ..logging import get_logger, verbose_logging
from .errors import UnknownModelError

logger = get_logger(__name__)


@dataclass
class Dependent:
    """An association in another model that references the target model."""

    model: str
    association_name: str
    macro: str
    foreign_key: str
    dependent: str | None = None
    polymorphic: bool = False
    as_: str | None = None

    def to_dict(self) -> dict:
        """Plain dictionary form, with ``as`` spelled out."""
        data = asdict(self)
        data["as"] = data.pop("as_")
        return data


def dependents(graph: ModelGraph, model_name: str, verbose: bool = False) -> list[Dependent]:
    """List every association, in any model, that resolves to ``model_name``.

    Useful before deleting, renaming or refactoring a model.

    Args:
        graph: The model graph.
        model_name: The referenced model.
        verbose: Log each dependency at INFO instead of DEBUG, and let
            INFO records through while doing so.

    Returns:
        Dependencies ordered by declaring model, then declaration order.

    Raises:
        UnknownModelError: If the model is not in the graph.
    """
    if not graph.has_model(model_name):
        raise UnknownModelError(model_name)

    level = logging.INFO if verbose else logging.DEBUG
    found = []

    with verbose_logging(verbose):
        for association in graph.incoming_associations(model_name):
            dependency = Dependent(
                model=association.owner,
                association_name=association.name,
                macro=association.kind,
                foreign_key=association.resolved_foreign_key,
                dependent=association.dependent,
                polymorphic=association.polymorphic,
                as_=association.as_,
            )
            found.append(dependency)
            logger.log(level, "%s", format_dependent(dependency, model_name))

        if found:
            logger.log(level, "Found %d dependent association(s) of %s", len(found), model_name)
        else:
            logger.log(level, "No models reference %s", model_name)

    return found


def format_dependent(dependency: Dependent, model_name: str) -> str:
    """Render as ``Comment belongs_to :post → Post [dependent: destroy]``."""
    text = f"{dependency.model} {dependency.macro} :{dependency.association_name} → {model_name}"
    if dependency.polymorphic:
        text += " (polymorphic)"
    if dependency.dependent:
        text += f" [dependent: {dependency.dependent}]"
    return text
