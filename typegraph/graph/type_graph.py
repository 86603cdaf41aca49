"""TypeGraph: the owning registry of TypeNodes."""

from types import MappingProxyType
from typing import Iterator, Mapping

import networkx as nx

from ..config import GraphConfig
from .errors import GraphFrozenError
from .linearizer import compute_mro
from .node_types import EdgeType, PackageType
from .type_node import TypeNode


class TypeGraph:
    """A registry of types and their inheritance and composition edges.

    The graph has two phases. While building, nodes are created and linked
    through `fetch_or_create`. `freeze` records the global order and ends
    the build phase; any later attempt to create nodes raises
    GraphFrozenError. Use `build_graph` rather than driving this by hand.
    """

    def __init__(self, config: GraphConfig | None = None):
        self.config = config or GraphConfig()
        self._types: dict[str, TypeNode] = {}
        self._sorted: tuple[TypeNode, ...] = ()
        self._frozen = False

    # -------------------------------------------------------------------------
    # Build phase
    # -------------------------------------------------------------------------

    def fetch_or_create(self, name: str) -> TypeNode:
        """Get a node by name, creating a placeholder class if it is new."""
        self._check_mutable()
        node = self._types.get(name)
        if node is None:
            node = TypeNode(name, PackageType.CLASS)
            self._types[name] = node
        return node

    def freeze(self, sorted_nodes: list[TypeNode]) -> None:
        """End the build phase and record the global order."""
        self._check_mutable()
        if len(sorted_nodes) != len(self._types):
            raise ValueError(
                f"Sorted order has {len(sorted_nodes)} nodes, registry has {len(self._types)}"
            )
        self._sorted = tuple(sorted_nodes)
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def types(self) -> Mapping[str, TypeNode]:
        """Read-only view of the registry, in insertion order."""
        return MappingProxyType(self._types)

    @property
    def sorted(self) -> tuple[TypeNode, ...]:
        """All nodes with every parent and role before its dependants."""
        return self._sorted

    def snapshot(self) -> dict[str, TypeNode]:
        """Copy of the registry."""
        return dict(self._types)

    def get(self, name: str) -> TypeNode | None:
        return self._types.get(name)

    def __getitem__(self, name: str) -> TypeNode:
        return self._types[name]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(self._sorted)

    def get_type_names(self) -> list[str]:
        return list(self._types)

    def mro(self, node: TypeNode | str) -> list[TypeNode]:
        """Get the MRO of a node or a node name.

        Raises:
            KeyError: If the name is not in the graph.
            InconsistentHierarchyError: If no linearization exists.
        """
        if isinstance(node, str):
            node = self._types[node]
        return compute_mro(node)

    def mro_names(self, node: TypeNode | str) -> list[str]:
        return [n.name for n in self.mro(node)]

    def to_networkx(self) -> nx.DiGraph:
        """Export the graph as a networkx DiGraph.

        Edges point from a type to its parent (`is`) or role (`does`).
        A pair linked both ways keeps the `is` edge.
        """
        graph = nx.DiGraph()
        for node in self._types.values():
            graph.add_node(
                node.name,
                packagetype=node.packagetype,
                categories=sorted(node.categories),
            )
        for node in self._types.values():
            for role in node.roles:
                graph.add_edge(node.name, role.name, edge_type=EdgeType.DOES)
            for parent in node.super:
                graph.add_edge(node.name, parent.name, edge_type=EdgeType.IS)
        return graph
