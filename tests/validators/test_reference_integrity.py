"""Tests for reference integrity validators."""

from typegraph.config import GraphConfig
from typegraph.schema.parser import parse_declarations
from typegraph.validators.reference_integrity import (
    check_packagetype_changes,
    check_reference_integrity,
)


class TestReferenceIntegrity:
    def test_valid_references(self, core_model):
        result = check_reference_integrity(core_model)
        assert result.issues == []

    def test_undeclared_type(self):
        model = parse_declarations("class A is Missing\nclass B does Missing\n")

        result = check_reference_integrity(model)

        assert len(result.warnings) == 1
        assert result.warnings[0].code == "UNDECLARED_TYPE"
        assert result.warnings[0].details["referenced_type"] == "Missing"

    def test_root_names_exempt(self):
        model = parse_declarations("class A is Any\nclass B is Mu\n")
        assert check_reference_integrity(model).issues == []

    def test_custom_root_names_exempt(self):
        model = parse_declarations("class A is Object\n")
        config = GraphConfig(root_name="Object", base_name="Base")
        assert check_reference_integrity(model, config).issues == []

    def test_inherits_role(self):
        model = parse_declarations("role R\nclass X is R\n")

        result = check_reference_integrity(model)

        assert [w.code for w in result.warnings] == ["INHERITS_ROLE"]
        assert result.warnings[0].type_name == "X"

    def test_does_non_role(self):
        model = parse_declarations("class C\nclass X does C\n")

        result = check_reference_integrity(model)

        assert [w.code for w in result.warnings] == ["DOES_NON_ROLE"]

    def test_uses_final_packagetype(self):
        model = parse_declarations("class R\nclass X does R\nrole R\n")
        assert check_reference_integrity(model).issues == []


class TestPackagetypeChanges:
    def test_no_changes(self):
        model = parse_declarations("class A\nclass A is B\n")
        assert check_packagetype_changes(model).issues == []

    def test_change_reported(self):
        model = parse_declarations("class A\nrole A\n")

        result = check_packagetype_changes(model)

        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.code == "PACKAGETYPE_CHANGED"
        assert warning.details == {"previous": "class", "current": "role"}
