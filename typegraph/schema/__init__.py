"""Schema layer: declaration records and the formats that produce them."""

from .errors import MalformedDeclarationError, SchemaLoadError, SchemaValidationError
from .models import Declaration, PackageType, TypeModel
from .parser import parse_declaration_line, parse_declarations
from .loader import load_text, load_yaml, parse_model, parse_model_from_string

__all__ = [
    "MalformedDeclarationError",
    "SchemaLoadError",
    "SchemaValidationError",
    "Declaration",
    "PackageType",
    "TypeModel",
    "parse_declaration_line",
    "parse_declarations",
    "load_text",
    "load_yaml",
    "parse_model",
    "parse_model_from_string",
]
