"""Parser for the line-oriented declaration text format.

    # comment
    [ Basic Numeric ]
    role Real
    class Int is Cool does Real
    role Positional[::T = Mu]
    class List is Cool does Positional[Mu]

A category line applies to every following declaration until the next
blank line or category line.
"""

import re

from .errors import MalformedDeclarationError
from .models import Declaration, PackageType, TypeModel

_IDENT = r"[A-Za-z_]\w*(?:['\-][A-Za-z_]\w*)*"
_LONGNAME = rf"{_IDENT}(?:::{_IDENT})*"
_SIGNATURE = r"\[[^\[\]]*\]"
_PACKAGETYPES = "|".join(p.value for p in PackageType)

DECLARATION_PATTERN = re.compile(
    rf"^(?P<packagetype>{_PACKAGETYPES})\s+"
    rf"(?P<name>{_LONGNAME})(?P<signature>{_SIGNATURE})?"
    rf"(?P<clauses>(?:\s+(?:is|does)\s+{_LONGNAME}(?:{_SIGNATURE})?)*)$"
)

CLAUSE_PATTERN = re.compile(
    rf"\s+(?P<kind>is|does)\s+(?P<name>{_LONGNAME})(?P<signature>{_SIGNATURE})?"
)

CATEGORY_PATTERN = re.compile(r"^\[(?P<categories>[^\[\]]*)\]$")


def parse_declaration_line(
    line: str,
    categories: set[str] | None = None,
    line_number: int | None = None,
) -> Declaration:
    """Parse a single declaration line.

    Args:
        line: The declaration text, without comments.
        categories: Active categories to attach to the record.
        line_number: Line number used in error messages.

    Returns:
        The parsed Declaration.

    Raises:
        MalformedDeclarationError: If the line does not match the grammar.
    """
    match = DECLARATION_PATTERN.match(line.strip())
    if match is None:
        raise MalformedDeclarationError(
            f"Cannot parse declaration: {line.strip()!r}", line_number, line
        )

    super_names: list[str] = []
    role_names: list[str] = []
    role_signatures: dict[str, str] = {}

    for clause in CLAUSE_PATTERN.finditer(match.group("clauses")):
        if clause.group("kind") == "is":
            super_names.append(clause.group("name"))
        else:
            role_names.append(clause.group("name"))
            if clause.group("signature"):
                role_signatures[clause.group("name")] = clause.group("signature")

    return Declaration(
        name=match.group("name"),
        packagetype=PackageType(match.group("packagetype")),
        categories=set(categories or ()),
        super_names=super_names,
        role_names=role_names,
        signature=match.group("signature"),
        role_signatures=role_signatures,
    )


def parse_declarations(text: str) -> TypeModel:
    """Parse a whole declaration document into a TypeModel.

    Args:
        text: The document contents.

    Returns:
        A TypeModel holding the declarations in document order.

    Raises:
        MalformedDeclarationError: On the first line that is neither blank,
            a comment, a category header nor a declaration.
    """
    declarations: list[Declaration] = []
    categories: set[str] = set()

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()

        if not line:
            categories = set()
            continue
        if line.startswith("#"):
            continue

        category_match = CATEGORY_PATTERN.match(line)
        if category_match:
            categories = {
                c.casefold() for c in category_match.group("categories").split()
            }
            continue

        declarations.append(parse_declaration_line(line, categories, line_number))

    return TypeModel(declarations=declarations)
