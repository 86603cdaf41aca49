"""Schema-related exceptions."""


class SchemaLoadError(Exception):
    """Raised when a declaration file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(Exception):
    """Raised when declarations fail schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class MalformedDeclarationError(SchemaLoadError):
    """Raised when a line of the declaration text format cannot be parsed."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        path: str | None = None,
    ):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, path)
