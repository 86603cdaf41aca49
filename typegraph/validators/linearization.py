"""MRO consistency validator."""

from ..graph.errors import InconsistentHierarchyError
from ..graph.type_graph import TypeGraph
from .base import ValidationResult


def check_linearization(graph: TypeGraph) -> ValidationResult:
    """Check that every type in the graph has a C3 linearization.

    Each failing type is reported once, under the type whose own merge
    failed. Descendants that fail only because of it are not repeated.

    Args:
        graph: A built type graph.

    Returns:
        ValidationResult with errors for inconsistent hierarchies.
    """
    result = ValidationResult()
    reported: set[str] = set()

    for node in graph.sorted:
        try:
            graph.mro(node)
        except InconsistentHierarchyError as e:
            if e.name in reported:
                continue
            reported.add(e.name)
            result.add_error(
                code="INCONSISTENT_HIERARCHY",
                message=str(e),
                type_name=e.name,
                requested=e.requested,
            )

    return result
