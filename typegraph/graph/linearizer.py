"""Method resolution order via C3 linearization."""

import logging
from typing import Sequence, TypeVar

from .errors import InconsistentHierarchyError
from .type_node import TypeNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def c3_merge(sequences: Sequence[Sequence[T]], owner: str = "<merge>") -> list[T]:
    """Merge linearizations with the C3 rule.

    Heads are tried left to right; a head is taken when it does not occur
    in the tail of any sequence. Elements are compared with ==, which for
    TypeNode is identity.

    Args:
        sequences: The linearizations to merge. Not modified.
        owner: Name reported if the merge fails.

    Returns:
        The merged sequence. Empty input gives an empty list.

    Raises:
        InconsistentHierarchyError: If no head can be taken while some
            sequence is still non-empty.
    """
    pending = [list(seq) for seq in sequences if seq]
    result: list[T] = []

    while pending:
        for seq in pending:
            candidate = seq[0]
            if not any(candidate in other[1:] for other in pending):
                break
        else:
            heads = ", ".join(str(seq[0]) for seq in pending)
            raise InconsistentHierarchyError(
                owner, f"Cannot compute a consistent MRO for '{owner}': no valid head among {heads}"
            )

        result.append(candidate)
        for seq in pending:
            if seq[0] == candidate:
                del seq[0]
        pending = [seq for seq in pending if seq]

    return result


def _linearize(node: TypeNode) -> tuple[TypeNode, ...]:
    """Linearize a node whose parents are all memoized."""
    parents = node.super
    if not parents:
        return (node,)
    if len(parents) == 1:
        return (node, *parents[0]._mro)
    merged = c3_merge([parent._mro for parent in parents], owner=node.name)
    return (node, *merged)


def compute_mro(node: TypeNode) -> list[TypeNode]:
    """Compute (or fetch the memoized) MRO of a node.

    Ancestors are linearized first, depth first with an explicit stack, and
    each finished linearization is memoized on its node. A node met again
    while it is still being linearized means an inheritance cycle.

    Args:
        node: The node to linearize.

    Returns:
        A new list starting with `node`.

    Raises:
        InconsistentHierarchyError: If the hierarchy above `node` is cyclic
            or has no C3 linearization. Nodes finished before the failure
            stay memoized; `node` does not.
    """
    if node._mro is not None:
        return list(node._mro)

    stack = [node]
    in_progress: set[TypeNode] = set()

    try:
        while stack:
            current = stack[-1]
            if current._mro is not None:
                stack.pop()
                continue

            missing = [parent for parent in current.super if parent._mro is None]

            if current not in in_progress:
                in_progress.add(current)
                for parent in reversed(missing):
                    if parent in in_progress:
                        raise InconsistentHierarchyError(
                            current.name,
                            f"Inheritance cycle through '{parent.name}' and '{current.name}'",
                            requested=node.name,
                        )
                    stack.append(parent)
                if missing:
                    continue

            current._mro = _linearize(current)
            in_progress.discard(current)
            stack.pop()
    except InconsistentHierarchyError as e:
        logger.debug("MRO failed for %s: %s", node.name, e)
        if e.requested != node.name:
            raise InconsistentHierarchyError(e.name, str(e), requested=node.name) from e
        raise

    return list(node._mro)
