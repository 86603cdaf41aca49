"""typegraph: type hierarchy graphs with C3 method resolution order."""

from .config import GraphConfig
from .graph import InconsistentHierarchyError, TypeGraph, TypeNode, build_graph
from .schema import Declaration, PackageType, TypeModel, parse_model

__all__ = [
    "GraphConfig",
    "InconsistentHierarchyError",
    "TypeGraph",
    "TypeNode",
    "build_graph",
    "Declaration",
    "PackageType",
    "TypeModel",
    "parse_model",
]
