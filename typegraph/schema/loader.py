"""Loading of declaration files (YAML or the line-oriented text format)."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import MalformedDeclarationError, SchemaLoadError, SchemaValidationError
from .models import TypeModel
from .parser import parse_declarations

YAML_SUFFIXES = {".yaml", ".yml"}


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    _check_file(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def load_text(path: str | Path) -> TypeModel:
    """Load a declaration text file.

    Raises:
        SchemaLoadError: If the file cannot be read.
        MalformedDeclarationError: If a line cannot be parsed.
    """
    path = Path(path)
    _check_file(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    try:
        return parse_declarations(text)
    except MalformedDeclarationError as e:
        e.path = str(path)
        raise


def parse_model(path: str | Path) -> TypeModel:
    """Load a declaration file into a TypeModel.

    Files ending in .yaml or .yml are read as YAML; anything else is read
    as the declaration text format.

    Args:
        path: Path to the declaration file.

    Returns:
        The parsed TypeModel.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If YAML data fails validation.
    """
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return _parse_model_data(load_yaml(path))
    return load_text(path)


def parse_model_from_string(yaml_string: str) -> TypeModel:
    """Parse a YAML string into a TypeModel.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return _parse_model_data(data)


def _check_file(path: Path) -> None:
    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))


def _parse_model_data(data: dict) -> TypeModel:
    """Validate raw data into a TypeModel.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    try:
        return TypeModel.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
