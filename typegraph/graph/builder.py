"""Builder for turning declarations into a frozen TypeGraph."""

import logging
from typing import Iterable

from ..config import GraphConfig
from ..schema.models import Declaration, TypeModel
from .node_types import PackageType
from .topo import topo_sort
from .type_graph import TypeGraph

logger = logging.getLogger(__name__)


def build_graph(
    declarations: TypeModel | Iterable[Declaration],
    config: GraphConfig | None = None,
) -> TypeGraph:
    """Build a frozen TypeGraph from declarations.

    The role composition graph must be acyclic; flattening does not
    terminate otherwise (see `check_role_cycles`). Any error aborts the
    build and no graph is returned.

    Args:
        declarations: A TypeModel or declarations in source order.
        config: Names of the absolute root and the universal base.

    Returns:
        The built, frozen graph.
    """
    if isinstance(declarations, TypeModel):
        declarations = declarations.declarations

    graph = TypeGraph(config)

    ingest_declarations(graph, declarations)
    flatten_roles(graph)
    assign_default_roots(graph)
    build_inverse_relations(graph)
    graph.freeze(topo_sort(graph.types.values()))

    logger.debug("Built type graph with %d types", len(graph))
    return graph


def ingest_declarations(graph: TypeGraph, declarations: Iterable[Declaration]) -> None:
    """Create and link nodes for each declaration, in order."""
    count = 0
    for declaration in declarations:
        node = graph.fetch_or_create(declaration.name)
        node.packagetype = declaration.packagetype
        node.categories = set(declaration.categories)

        for parent_name in declaration.super_names:
            node.super.append(graph.fetch_or_create(parent_name))
        for role_name in declaration.role_names:
            node.roles.append(graph.fetch_or_create(role_name))
        count += 1

    logger.debug("Ingested %d declarations into %d types", count, len(graph))


def flatten_roles(graph: TypeGraph) -> None:
    """Give each type the parents of every role it composes, transitively.

    Requires an acyclic role composition graph.
    """
    for node in graph.types.values():
        worklist = list(node.roles)
        while worklist:
            role = worklist.pop()
            node.super.extend(role.super)
            worklist.extend(role.roles)


def assign_default_roots(graph: TypeGraph) -> None:
    """Attach the universal base to every rootless non-role type."""
    root_name = graph.config.root_name
    base_name = graph.config.base_name

    rootless = [
        node
        for node in graph.types.values()
        if node.packagetype != PackageType.ROLE
        and not node.super
        and node.name not in (root_name, base_name)
    ]
    if not rootless:
        return

    base = graph.fetch_or_create(base_name)
    for node in rootless:
        node.super.append(base)

    logger.debug("Attached %s to %d rootless types", base_name, len(rootless))


def build_inverse_relations(graph: TypeGraph) -> None:
    """Fill `sub` and `doers` from `super` and `roles`, in registry order."""
    for node in graph.types.values():
        for parent in node.super:
            parent.sub.append(node)
        for role in node.roles:
            role.doers.append(node)
