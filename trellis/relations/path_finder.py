"""Find association paths between two models."""

import logging
from collections import deque

from ..graph.model_graph import ModelGraph
from ..logging import get_logger, verbose_logging
from .models import (
    PATH_SEPARATOR,
    PathSearchResult,
    PathStep,
    RelationPath,
    SearchOutcome,
)

logger = get_logger(__name__)


def find_paths(
    graph: ModelGraph,
    source: str,
    destination: str,
    max_depth: int = 10,
    max_steps: int = 100_000,
    verbose: bool = False,
    progress_interval: int = 100,
) -> PathSearchResult:
    """Find every association path from ``source`` to ``destination``.

    Breadth-first search over the model graph. A model is marked visited
    when it is expanded, not when it is queued, so the same model can sit
    in the queue several times: every copy that is the destination counts
    as a completed path, but only the first copy of any other model is
    expanded. Associations leading to an already visited model, or that
    do not resolve (polymorphic, unknown target), are skipped.

    Out-of-range limits are not rejected: a negative ``max_depth`` drops
    the source itself, and a ``max_steps`` below 1 aborts on the first step.

    Args:
        graph: The model graph.
        source: Name of the starting model.
        destination: Name of the model to reach.
        max_depth: Longest path to report, in associations (inclusive).
        max_steps: Abort once this many queue items have been dequeued.
        verbose: Log progress at INFO instead of DEBUG, and let INFO
            records through for the duration of the search.
        progress_interval: Log progress every this many steps.

    Returns:
        PathSearchResult. On success its paths are sorted by their first
        hop; aborted searches carry no partial paths.
    """
    if not graph.has_model(source):
        return _invalid(source, destination, f"Source must be a model in the schema: {source!r}")
    if not graph.has_model(destination):
        return _invalid(
            source, destination, f"Destination must be a model in the schema: {destination!r}"
        )

    with verbose_logging(verbose):
        return _search(
            graph,
            source,
            destination,
            max_depth,
            max_steps,
            logging.INFO if verbose else logging.DEBUG,
            progress_interval,
        )


def _search(
    graph: ModelGraph,
    source: str,
    destination: str,
    max_depth: int,
    max_steps: int,
    level: int,
    progress_interval: int,
) -> PathSearchResult:
    queue: deque[tuple[str, list[PathStep]]] = deque()
    queue.append((source, []))
    visited: set[str] = set()
    completed: list[RelationPath] = []
    steps = 0

    while queue:
        current, path = queue.popleft()
        steps += 1

        if progress_interval > 0 and steps % progress_interval == 0:
            logger.log(
                level, "Checked %d steps. Current: %s, Depth: %d", steps, current, len(path)
            )

        if steps >= max_steps:
            logger.log(level, "Traversal aborted after %d steps", steps)
            return PathSearchResult(
                outcome=SearchOutcome.TRAVERSAL_ABORTED,
                source=source,
                destination=destination,
                steps=steps,
            )

        if len(path) > max_depth:
            continue

        if current == destination:
            completed.append(RelationPath(path + [PathStep(current)]))
            continue

        if current in visited:
            continue
        visited.add(current)

        for association in graph.associations(current):
            target = graph.resolve(association)
            if target is None or target in visited:
                continue
            queue.append((target, path + [PathStep(current, association)]))

    logger.log(level, "Done. Checked %d steps. Found %d path(s).", steps, len(completed))

    if not completed:
        return PathSearchResult(
            outcome=SearchOutcome.NO_PATH_FOUND,
            source=source,
            destination=destination,
            steps=steps,
        )

    # Stable sort: paths sharing a first hop keep discovery order
    completed.sort(key=lambda p: p.format().split(PATH_SEPARATOR)[0])

    return PathSearchResult(
        outcome=SearchOutcome.FOUND,
        source=source,
        destination=destination,
        paths=[p.format() for p in completed],
        raw_paths=completed,
        steps=steps,
    )


def _invalid(source, destination, error: str) -> PathSearchResult:
    return PathSearchResult(
        outcome=SearchOutcome.INVALID_ARGUMENT,
        source=str(source),
        destination=str(destination),
        error=error,
    )
