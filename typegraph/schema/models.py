"""Pydantic models for type declarations."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PackageType(str, Enum):
    """Kinds of package a declaration can introduce."""

    CLASS = "class"
    ROLE = "role"
    MODULE = "module"
    ENUM = "enum"


class Declaration(BaseModel):
    """A single declared type and the edges it introduces.

    Repeated declarations of the same name are allowed: the later one
    overwrites packagetype and categories, while parents and roles
    accumulate.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    packagetype: PackageType = Field(default=PackageType.CLASS, alias="type")
    categories: set[str] = Field(default_factory=set)
    super_names: list[str] = Field(default_factory=list, alias="is")
    role_names: list[str] = Field(default_factory=list, alias="does")

    # Opaque bracketed signatures, carried along but never interpreted.
    signature: str | None = None
    role_signatures: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_declaration(cls, data: dict) -> dict:
        """Expand `class: Name` shorthand and single-string edge lists."""
        if not isinstance(data, dict):
            return data

        if "name" not in data:
            for packagetype in PackageType:
                if packagetype.value in data:
                    data["name"] = data.pop(packagetype.value)
                    data.setdefault("type", packagetype.value)
                    break

        for key in ("is", "does", "super_names", "role_names", "categories"):
            value = data.get(key)
            if isinstance(value, str):
                data[key] = [value]

        return data

    @field_validator("categories", mode="after")
    @classmethod
    def casefold_categories(cls, value: set[str]) -> set[str]:
        return {category.casefold() for category in value}


class TypeModel(BaseModel):
    """Root model: an ordered list of declarations."""

    declarations: list[Declaration] = Field(default_factory=list)

    def get_declarations(self, name: str) -> list[Declaration]:
        """Get every declaration of a name, in order."""
        return [d for d in self.declarations if d.name == name]

    def get_declared_names(self) -> list[str]:
        """Get declared names in first-declaration order."""
        return list(dict.fromkeys(d.name for d in self.declarations))

    def get_packagetype(self, name: str) -> PackageType | None:
        """Get the effective packagetype of a declared name (last one wins)."""
        declarations = self.get_declarations(name)
        if not declarations:
            return None
        return declarations[-1].packagetype
