"""Output formatting for graphs, MROs and validation results."""

import json
from typing import Any, Literal

from ..graph.errors import InconsistentHierarchyError
from ..graph.type_graph import TypeGraph
from ..graph.type_node import TypeNode
from ..validators.base import Severity, ValidationIssue, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_result_json(result)
    return _format_result_text(result)


def _format_result_text(result: ValidationResult) -> str:
    lines: list[str] = []

    errors = result.errors
    warnings = result.warnings

    lines.append("ERRORS:")
    if errors:
        for issue in errors:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("WARNINGS:")
    if warnings:
        for issue in warnings:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    location = f"[{issue.type_name}] " if issue.type_name else ""

    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    return f"{symbol} {issue.code}: {location}{issue.message}"


def _format_result_json(result: ValidationResult) -> str:
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "type": issue.type_name,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


# -----------------------------------------------------------------------------
# Graphs
# -----------------------------------------------------------------------------


def _names(nodes: list[TypeNode]) -> list[str]:
    return [node.name for node in nodes]


def _mro_or_error(graph: TypeGraph, node: TypeNode) -> tuple[list[str] | None, str | None]:
    try:
        return graph.mro_names(node), None
    except InconsistentHierarchyError as e:
        return None, str(e)


def _node_to_dict(graph: TypeGraph, node: TypeNode) -> dict[str, Any]:
    mro, error = _mro_or_error(graph, node)
    data: dict[str, Any] = {
        "name": node.name,
        "packagetype": node.packagetype.value,
        "categories": sorted(node.categories),
        "super": _names(node.super),
        "roles": _names(node.roles),
        "sub": _names(node.sub),
        "doers": _names(node.doers),
        "mro": mro,
    }
    if error is not None:
        data["mro_error"] = error
    return data


def format_graph(graph: TypeGraph, format: Literal["text", "json"] = "text") -> str:
    """Format every type of a graph, in sorted order.

    A type without a consistent MRO is shown with its error instead.

    Args:
        graph: A built type graph.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        data = {"types": [_node_to_dict(graph, node) for node in graph.sorted]}
        return json.dumps(data, indent=2)

    lines: list[str] = []
    for node in graph.sorted:
        header = f"{node.packagetype.value} {node.name}"
        if node.categories:
            header += f"  [{' '.join(sorted(node.categories))}]"
        lines.append(header)
        if node.super:
            lines.append(f"  is:    {', '.join(_names(node.super))}")
        if node.roles:
            lines.append(f"  does:  {', '.join(_names(node.roles))}")
        if node.sub:
            lines.append(f"  sub:   {', '.join(_names(node.sub))}")
        if node.doers:
            lines.append(f"  doers: {', '.join(_names(node.doers))}")
        mro, error = _mro_or_error(graph, node)
        if error is not None:
            lines.append(f"  mro:   ✘ {error}")
        else:
            lines.append(f"  mro:   {' -> '.join(mro)}")

    lines.append("")
    lines.append(f"{len(graph)} type(s)")
    return "\n".join(lines)


def format_mro(
    graph: TypeGraph, name: str, format: Literal["text", "json"] = "text"
) -> str:
    """Format the MRO of one type.

    Raises:
        KeyError: If the type is not in the graph.
        InconsistentHierarchyError: If the type has no linearization.
    """
    mro = graph.mro_names(name)
    if format == "json":
        return json.dumps({"name": name, "mro": mro}, indent=2)
    return " -> ".join(mro)
