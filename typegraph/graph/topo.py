"""Deterministic global ordering of a type graph."""

from typing import Iterable

from .type_node import TypeNode


def topo_sort(nodes: Iterable[TypeNode]) -> list[TypeNode]:
    """Order nodes so that parents and roles come before their dependants.

    Nodes are seeded in name order. Each node's `super` entries are visited
    first, then its `roles`, in stored order, and the node is emitted after
    them. A node already visited is never descended into again, so a cycle
    is cut short rather than reported.

    Args:
        nodes: Every node of the graph.

    Returns:
        The ordered nodes.
    """
    order: list[TypeNode] = []
    visited: set[TypeNode] = set()

    for start in sorted(nodes, key=lambda n: n.name):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, iter([*start.super, *start.roles]))]

        while stack:
            node, dependencies = stack[-1]
            for dependency in dependencies:
                if dependency not in visited:
                    visited.add(dependency)
                    stack.append(
                        (dependency, iter([*dependency.super, *dependency.roles]))
                    )
                    break
            else:
                stack.pop()
                order.append(node)

    return order
