"""Association path search between models."""

from .models import PathSearchResult, PathStep, RelationPath, SearchOutcome
from .path_finder import find_paths

__all__ = [
    "find_paths",
    "PathSearchResult",
    "PathStep",
    "RelationPath",
    "SearchOutcome",
]
