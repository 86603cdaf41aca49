"""Reference integrity validators."""

from ..config import GraphConfig
from ..schema.models import PackageType, TypeModel
from .base import ValidationResult


def check_reference_integrity(
    model: TypeModel, config: GraphConfig | None = None
) -> ValidationResult:
    """Check that `is` and `does` clauses reference sensible types.

    This validator checks:
    - Every referenced name is declared somewhere (the root and the
      universal base are exempt)
    - `is` does not name a role
    - `does` names a role

    Undeclared names still get a placeholder class when the graph is built,
    so all of these are warnings.

    Args:
        model: The parsed declarations.
        config: Supplies the exempt root names.

    Returns:
        ValidationResult with warnings for questionable references.
    """
    config = config or GraphConfig()
    result = ValidationResult()

    declared = set(model.get_declared_names())
    exempt = {config.root_name, config.base_name}
    reported_undeclared: set[str] = set()

    for declaration in model.declarations:
        references = [("is", name) for name in declaration.super_names] + [
            ("does", name) for name in declaration.role_names
        ]

        for clause, target in references:
            if target not in declared:
                if target not in exempt and target not in reported_undeclared:
                    reported_undeclared.add(target)
                    result.add_warning(
                        code="UNDECLARED_TYPE",
                        message=f"'{declaration.name} {clause} {target}' references undeclared type '{target}'",
                        type_name=declaration.name,
                        referenced_type=target,
                    )
                continue

            target_type = model.get_packagetype(target)
            if clause == "is" and target_type == PackageType.ROLE:
                result.add_warning(
                    code="INHERITS_ROLE",
                    message=f"'{declaration.name}' inherits from role '{target}'; use 'does' to compose it",
                    type_name=declaration.name,
                    referenced_type=target,
                )
            elif clause == "does" and target_type != PackageType.ROLE:
                result.add_warning(
                    code="DOES_NON_ROLE",
                    message=f"'{declaration.name}' composes '{target}', which is a {target_type.value}, not a role",
                    type_name=declaration.name,
                    referenced_type=target,
                )

    return result


def check_packagetype_changes(model: TypeModel) -> ValidationResult:
    """Warn when a later declaration changes a name's packagetype.

    The last declaration wins, which silently discards the earlier kind.
    """
    result = ValidationResult()
    seen: dict[str, PackageType] = {}

    for declaration in model.declarations:
        previous = seen.get(declaration.name)
        if previous is not None and previous != declaration.packagetype:
            result.add_warning(
                code="PACKAGETYPE_CHANGED",
                message=(
                    f"'{declaration.name}' redeclared as {declaration.packagetype.value}, "
                    f"previously {previous.value}"
                ),
                type_name=declaration.name,
                previous=previous.value,
                current=declaration.packagetype.value,
            )
        seen[declaration.name] = declaration.packagetype

    return result
