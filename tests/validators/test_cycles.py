"""Tests for cycle validators."""

from typegraph.graph.node_types import EdgeType
from typegraph.schema.parser import parse_declarations
from typegraph.validators.cycles import (
    check_inheritance_cycles,
    check_role_cycles,
    declaration_graph,
)


class TestDeclarationGraph:
    def test_edges_by_kind(self):
        model = parse_declarations("class X is A does R\n")

        assert list(declaration_graph(model, EdgeType.IS).edges) == [("X", "A")]
        assert list(declaration_graph(model, EdgeType.DOES).edges) == [("X", "R")]


class TestRoleCycles:
    def test_acyclic_roles(self, core_model):
        assert check_role_cycles(core_model).is_valid

    def test_detects_role_cycle(self):
        model = parse_declarations("role Left does Right\nrole Right does Left\n")

        result = check_role_cycles(model)

        assert len(result.errors) == 1
        issue = result.errors[0]
        assert issue.code == "ROLE_CYCLE"
        assert issue.type_name == "Left"
        assert issue.details["cycle"] == ["Left", "Right"]
        assert "Left -> Right -> Left" in issue.message

    def test_self_composition(self):
        result = check_role_cycles(parse_declarations("role R does R"))
        assert [e.code for e in result.errors] == ["ROLE_CYCLE"]

    def test_inheritance_not_counted(self):
        model = parse_declarations("class A is B\nclass B is A\n")
        assert check_role_cycles(model).is_valid


class TestInheritanceCycles:
    def test_acyclic(self, diamond_model):
        assert check_inheritance_cycles(diamond_model).is_valid

    def test_detects_cycle(self):
        model = parse_declarations("class A is B\nclass B is C\nclass C is A\n")

        result = check_inheritance_cycles(model)

        assert len(result.errors) == 1
        assert result.errors[0].code == "INHERITANCE_CYCLE"
        assert result.errors[0].details["cycle"] == ["A", "B", "C"]
