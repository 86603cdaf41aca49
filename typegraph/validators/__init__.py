"""Validators for structural checks of type declarations."""

from .base import Severity, ValidationIssue, ValidationResult
from .cycles import check_inheritance_cycles, check_role_cycles
from .linearization import check_linearization
from .reference_integrity import check_packagetype_changes, check_reference_integrity
from .runner import run_validators, validate_model, validate_model_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_inheritance_cycles",
    "check_role_cycles",
    "check_linearization",
    "check_packagetype_changes",
    "check_reference_integrity",
    "run_validators",
    "validate_model",
    "validate_model_file",
]
