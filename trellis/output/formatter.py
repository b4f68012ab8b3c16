"""Output formatting for command results."""

import json
from typing import Any, Literal

from ..relations.models import PathSearchResult
from ..tools.bench import BenchmarkReport
from ..tools.dependents import Dependent, format_dependent

OutputFormat = Literal["text", "json"]


def format_path_result(
    result: PathSearchResult,
    format: OutputFormat = "text",
) -> str:
    """Format a path search result for output.

    Args:
        result: The search result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _dumps(
            {
                "outcome": result.outcome.value,
                "source": result.source,
                "destination": result.destination,
                "steps": result.steps,
                "paths": result.paths,
                "message": result.message,
            }
        )

    if not result.found:
        return result.message

    lines = [f"  {path}" for path in result.paths]
    lines.append("")
    lines.append(f"{result.message} ({result.steps} steps)")
    return "\n".join(lines)


def format_dependents(
    found: list[Dependent],
    model_name: str,
    format: OutputFormat = "text",
) -> str:
    """Format the dependents of a model."""
    if format == "json":
        return _dumps([d.to_dict() for d in found])

    if not found:
        return f"No models reference {model_name}"

    lines = [format_dependent(d, model_name) for d in found]
    lines.append("")
    plural = "s" if len(found) != 1 else ""
    lines.append(f"Found {len(found)} dependent association{plural}.")
    return "\n".join(lines)


def format_diff(
    diffs: dict[str, tuple[Any, Any]],
    format: OutputFormat = "text",
) -> str:
    """Format an attribute diff."""
    if format == "json":
        return _dumps({key: list(values) for key, values in diffs.items()})

    if not diffs:
        return "No differences"

    width = max(len(str(key)) for key in diffs)
    return "\n".join(
        f"{str(key).ljust(width)}  {first!r} != {second!r}"
        for key, (first, second) in diffs.items()
    )


def format_bench(reports: list[BenchmarkReport]) -> str:
    """Format benchmark reports as a table."""
    width = max((len(r.label) for r in reports), default=0)
    lines = [f"{'':<{width}}  {'cpu':>10}  {'real':>10}  {'per call':>12}"]
    for report in reports:
        lines.append(
            f"{report.label:<{width}}  {report.cpu:>10.6f}  "
            f"{report.real:>10.6f}  {report.per_call:>12.9f}"
        )
    return "\n".join(lines)


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, default=str)
