"""Type graph exceptions."""


class TypeGraphError(Exception):
    """Base exception for type graph errors."""

    pass


class InconsistentHierarchyError(TypeGraphError):
    """Raised when no C3 linearization exists for a type.

    `name` is the type whose linearization failed; `requested` is the type
    mro() was called for, which may be one of its descendants.
    """

    def __init__(self, name: str, message: str | None = None, requested: str | None = None):
        self.name = name
        self.requested = requested or name
        if message is None:
            message = f"Cannot compute a consistent MRO for '{name}'"
        if self.requested != name:
            message = f"{message} (while linearizing '{self.requested}')"
        super().__init__(message)


class GraphFrozenError(TypeGraphError):
    """Raised when a frozen graph is mutated."""

    def __init__(self, message: str = "Type graph is frozen and cannot be modified"):
        super().__init__(message)
