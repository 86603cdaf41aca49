"""Node and edge type definitions for the type graph."""

from enum import Enum

from ..schema.models import PackageType


class EdgeType(str, Enum):
    """Types of edges in the type graph."""

    IS = "is"  # Type -> declared or flattened parent
    DOES = "does"  # Type -> composed role


__all__ = ["PackageType", "EdgeType"]
