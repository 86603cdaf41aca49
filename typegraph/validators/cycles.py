"""Cycle detection over the declared `is` and `does` edges.

Both checks work on the declarations rather than a built graph: a role
cycle would keep the builder from terminating at all.
"""

import networkx as nx

from ..graph.node_types import EdgeType
from ..schema.models import TypeModel
from .base import ValidationResult


def declaration_graph(model: TypeModel, edge_type: EdgeType) -> nx.DiGraph:
    """Build a DiGraph of the declared edges of one kind.

    Args:
        model: The parsed declarations.
        edge_type: EdgeType.IS for parents, EdgeType.DOES for roles.

    Returns:
        A graph with an edge from each declared name to each referenced name.
    """
    graph = nx.DiGraph()
    for declaration in model.declarations:
        graph.add_node(declaration.name)
        targets = (
            declaration.super_names
            if edge_type == EdgeType.IS
            else declaration.role_names
        )
        for target in targets:
            graph.add_edge(declaration.name, target, edge_type=edge_type)
    return graph


def _report_cycles(
    graph: nx.DiGraph, code: str, label: str, result: ValidationResult
) -> None:
    cycles = [_rotate(cycle) for cycle in nx.simple_cycles(graph)]
    for cycle in sorted(cycles):
        path = " -> ".join([*cycle, cycle[0]])
        result.add_error(
            code=code,
            message=f"{label} cycle: {path}",
            type_name=cycle[0],
            cycle=cycle,
        )


def _rotate(cycle: list[str]) -> list[str]:
    """Rotate a cycle to start at its smallest name, for stable output."""
    start = cycle.index(min(cycle))
    return cycle[start:] + cycle[:start]


def check_role_cycles(model: TypeModel) -> ValidationResult:
    """Check that role composition is acyclic.

    Building a graph from declarations with a role cycle does not
    terminate, so this must pass before `build_graph` is called.

    Args:
        model: The parsed declarations.

    Returns:
        ValidationResult with one error per elementary cycle.
    """
    result = ValidationResult()
    _report_cycles(
        declaration_graph(model, EdgeType.DOES), "ROLE_CYCLE", "Role composition", result
    )
    return result


def check_inheritance_cycles(model: TypeModel) -> ValidationResult:
    """Check that declared inheritance is acyclic.

    Such cycles are otherwise only noticed when an MRO is requested, and
    the global ordering silently cuts them short.
    """
    result = ValidationResult()
    _report_cycles(
        declaration_graph(model, EdgeType.IS), "INHERITANCE_CYCLE", "Inheritance", result
    )
    return result
