"""Validation runner that orchestrates all validators."""

import logging
from pathlib import Path

from ..config import GraphConfig
from ..graph.builder import build_graph
from ..graph.type_graph import TypeGraph
from ..schema.loader import parse_model
from ..schema.models import TypeModel
from .base import ValidationResult
from .cycles import check_inheritance_cycles, check_role_cycles
from .linearization import check_linearization
from .reference_integrity import check_packagetype_changes, check_reference_integrity

logger = logging.getLogger(__name__)


def run_validators(
    model: TypeModel,
    graph: TypeGraph | None,
    config: GraphConfig | None = None,
) -> ValidationResult:
    """Run all validators on a set of declarations.

    Args:
        model: The parsed declarations.
        graph: The graph built from them, or None if it could not be built.
            Graph-level checks are skipped when it is None.
        config: Supplies the root names.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    # Declaration-level checks
    result.merge(check_role_cycles(model))
    result.merge(check_inheritance_cycles(model))
    result.merge(check_reference_integrity(model, config))
    result.merge(check_packagetype_changes(model))

    # Graph-level checks
    if graph is not None:
        result.merge(check_linearization(graph))

    return result


def validate_model(
    model: TypeModel, config: GraphConfig | None = None
) -> tuple[ValidationResult, TypeGraph | None]:
    """Validate declarations, building the graph when it is safe to.

    Returns:
        The validation result and the built graph, or None when role
        cycles made building impossible.
    """
    graph = None
    if check_role_cycles(model).is_valid:
        graph = build_graph(model, config)
    else:
        logger.debug("Skipping graph build: role composition is cyclic")
    return run_validators(model, graph, config), graph


def validate_model_file(
    path: str | Path, config: GraphConfig | None = None
) -> ValidationResult:
    """Load and validate a declaration file.

    Args:
        path: Path to a YAML or text declaration file.
        config: Supplies the root names.

    Returns:
        ValidationResult from all validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded or parsed.
        SchemaValidationError: If YAML declarations fail schema validation.
    """
    model = parse_model(path)
    result, _ = validate_model(model, config)
    return result
