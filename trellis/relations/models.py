"""Data models for association path searches."""

from dataclasses import dataclass, field
from enum import Enum

from ..schema.models import Association

PATH_SEPARATOR = " -> "


class SearchOutcome(str, Enum):
    """How a path search ended."""

    FOUND = "found"
    NO_PATH_FOUND = "no_path_found"
    TRAVERSAL_ABORTED = "traversal_aborted"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class PathStep:
    """A model on a path and the association taken out of it.

    The last step of a completed path has no association.
    """

    model: str
    association: Association | None = None


@dataclass
class RelationPath:
    """An ordered walk from one model to another through associations."""

    steps: list[PathStep] = field(default_factory=list)

    @property
    def length(self) -> int:
        """Number of associations traversed."""
        return sum(1 for step in self.steps if step.association is not None)

    @property
    def models(self) -> list[str]:
        """Model names along the path."""
        return [step.model for step in self.steps]

    def format(self) -> str:
        """Render as ``User has_many :posts -> Post belongs_to :blog -> Blog``."""
        if not self.steps:
            return ""
        hops = [
            f"{step.model} {step.association.describe()}"
            for step in self.steps[:-1]
            if step.association is not None
        ]
        return PATH_SEPARATOR.join(hops + [self.steps[-1].model])


@dataclass
class PathSearchResult:
    """Result of a path search between two models.

    Exactly one of the outcomes applies. ``paths`` is non-empty only for
    ``FOUND``; ``steps`` counts every dequeued item.
    """

    outcome: SearchOutcome
    source: str
    destination: str
    paths: list[str] = field(default_factory=list)
    raw_paths: list[RelationPath] = field(default_factory=list)
    steps: int = 0
    error: str | None = None

    @property
    def found(self) -> bool:
        """Check if at least one path was found."""
        return self.outcome == SearchOutcome.FOUND

    @property
    def message(self) -> str:
        """Human-readable summary of the outcome."""
        if self.outcome == SearchOutcome.FOUND:
            return (
                f"Found {len(self.paths)} path(s) between {self.source} "
                f"and {self.destination}"
            )
        if self.outcome == SearchOutcome.NO_PATH_FOUND:
            return (
                f"No relationship path found between {self.source} "
                f"and {self.destination}"
            )
        if self.outcome == SearchOutcome.TRAVERSAL_ABORTED:
            return f"Traversal aborted after {self.steps} steps."
        return f"Error: {self.error}"
