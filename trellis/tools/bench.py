"""Compare the running time of two callables."""

import importlib
import time
from dataclasses import dataclass
from typing import Any, Callable

from ..logging import get_logger
from .errors import ResolutionError, ToolError

logger = get_logger(__name__)


@dataclass
class BenchmarkReport:
    """Timing of one callable over a number of calls."""

    label: str
    iterations: int
    cpu: float  # seconds of process time, user + system
    real: float  # wall-clock seconds

    @property
    def per_call(self) -> float:
        """Average wall-clock seconds per call."""
        return self.real / self.iterations if self.iterations else 0.0


def resolve_callable(target: Any) -> tuple[str, Callable[[], Any]]:
    """Turn a callable or a ``module:attr`` string into a labelled callable.

    ``attr`` may be dotted (``package.module:Class.method``). A string
    without a colon is split at its last dot.

    Raises:
        ResolutionError: If the target cannot be imported or is not callable.
    """
    if callable(target):
        label = getattr(target, "__qualname__", None) or repr(target)
        return label, target

    if not isinstance(target, str) or not target:
        raise ResolutionError(f"Cannot benchmark {target!r}")

    if ":" in target:
        module_name, _, attr_path = target.partition(":")
    else:
        module_name, _, attr_path = target.rpartition(".")
    if not module_name or not attr_path:
        raise ResolutionError(f"Expected 'module:attribute', got {target!r}", target)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ResolutionError(f"Cannot import {module_name!r}: {e}", target) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ResolutionError(f"{target!r} has no attribute {part!r}", target) from e

    if not callable(obj):
        raise ResolutionError(f"{target!r} is not callable", target)

    return target, obj


def bench(old: Any, new: Any = None, n: int = 250) -> list[BenchmarkReport]:
    """Call each target ``n`` times and time it.

    Args:
        old: The first callable, or its ``module:attr`` import path.
        new: An optional second callable to compare against.
        n: Number of calls per target.

    Returns:
        One report per target, in argument order.

    Raises:
        ResolutionError: If a target cannot be resolved.
        ToolError: If ``n`` is not positive.
    """
    if n < 1:
        raise ToolError(f"Iteration count must be positive, got {n}")

    targets = [resolve_callable(old)]
    if new is not None:
        targets.append(resolve_callable(new))

    reports = []
    for label, func in targets:
        cpu_start = time.process_time()
        real_start = time.perf_counter()
        for _ in range(n):
            func()
        report = BenchmarkReport(
            label=label,
            iterations=n,
            cpu=time.process_time() - cpu_start,
            real=time.perf_counter() - real_start,
        )
        logger.debug("Benchmarked %s: %d calls in %.6fs", label, n, report.real)
        reports.append(report)

    return reports
