"""The vertex type of the type graph."""

from .node_types import PackageType


class TypeNode:
    """A declared or referenced type.

    Relations hold direct references to other nodes of the same graph.
    Nodes compare by identity.
    """

    def __init__(self, name: str, packagetype: PackageType = PackageType.CLASS):
        self._name = name
        self.packagetype = packagetype
        self.categories: set[str] = set()
        self.super: list["TypeNode"] = []
        self.sub: list["TypeNode"] = []
        self.roles: list["TypeNode"] = []
        self.doers: list["TypeNode"] = []
        self._mro: tuple["TypeNode", ...] | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def mro(self) -> list["TypeNode"]:
        """The method resolution order, computed on first access."""
        from .linearizer import compute_mro

        return compute_mro(self)

    @property
    def is_role(self) -> bool:
        return self.packagetype == PackageType.ROLE

    @property
    def has_mro(self) -> bool:
        """Whether the MRO has already been computed."""
        return self._mro is not None

    def __repr__(self) -> str:
        return f"TypeNode({self._name!r}, {self.packagetype.value})"

    def __str__(self) -> str:
        return self._name
