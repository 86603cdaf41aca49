"""Graph layer: type nodes, the registry, linearization and ordering."""

from .node_types import EdgeType, PackageType
from .errors import GraphFrozenError, InconsistentHierarchyError, TypeGraphError
from .type_node import TypeNode
from .linearizer import c3_merge, compute_mro
from .type_graph import TypeGraph
from .topo import topo_sort
from .builder import build_graph

__all__ = [
    "EdgeType",
    "PackageType",
    "GraphFrozenError",
    "InconsistentHierarchyError",
    "TypeGraphError",
    "TypeNode",
    "c3_merge",
    "compute_mro",
    "TypeGraph",
    "topo_sort",
    "build_graph",
]
