"""Tests for the graph build pipeline."""

import pytest

from typegraph.config import GraphConfig
from typegraph.graph.builder import (
    assign_default_roots,
    build_graph,
    build_inverse_relations,
    flatten_roles,
    ingest_declarations,
)
from typegraph.graph.node_types import PackageType
from typegraph.graph.type_graph import TypeGraph
from typegraph.schema.models import Declaration
from typegraph.schema.parser import parse_declarations


def names(nodes):
    return [n.name for n in nodes]


class TestIngestDeclarations:
    def test_forward_references_become_placeholders(self):
        graph = TypeGraph()
        ingest_declarations(graph, parse_declarations("class Int is Cool does Real").declarations)

        assert graph.get_type_names() == ["Int", "Cool", "Real"]
        real = graph["Real"]
        assert real.packagetype == PackageType.CLASS
        assert real.categories == set()

    def test_relations_accumulate_across_declarations(self):
        graph = TypeGraph()
        text = "class Int is Cool\nrole Real\nclass Int is Numeric does Real\n"
        ingest_declarations(graph, parse_declarations(text).declarations)

        assert names(graph["Int"].super) == ["Cool", "Numeric"]
        assert names(graph["Int"].roles) == ["Real"]

    def test_packagetype_and_categories_overwritten(self):
        graph = TypeGraph()
        ingest_declarations(
            graph,
            [
                Declaration(name="Thing", categories={"old"}),
                Declaration(name="Thing", packagetype=PackageType.ROLE, categories={"new"}),
            ],
        )
        assert graph["Thing"].packagetype == PackageType.ROLE
        assert graph["Thing"].categories == {"new"}

    def test_placeholder_filled_by_later_declaration(self):
        graph = TypeGraph()
        text = "class List does Positional\n[ Composite ]\nrole Positional\n"
        ingest_declarations(graph, parse_declarations(text).declarations)

        positional = graph["Positional"]
        assert positional.packagetype == PackageType.ROLE
        assert positional.categories == {"composite"}
        assert graph["List"].roles == [positional]


class TestFlattenRoles:
    def test_role_parents_granted_to_doer(self):
        graph = build_graph(parse_declarations("role R is A\nclass X does R\n"))

        assert graph["A"] in graph["X"].super
        assert names(graph["X"].roles) == ["R"]

    def test_nested_roles_flattened(self):
        text = "role Inner is Base\nrole Outer does Inner\nclass X does Outer\n"
        graph = TypeGraph()
        ingest_declarations(graph, parse_declarations(text).declarations)
        flatten_roles(graph)

        assert graph["Base"] in graph["X"].super
        assert graph["Base"] in graph["Outer"].super

    def test_flattened_parents_follow_declared_ones(self):
        graph = TypeGraph()
        ingest_declarations(graph, parse_declarations("role R is B\nclass X is A does R\n").declarations)
        flatten_roles(graph)

        assert names(graph["X"].super) == ["A", "B"]

    def test_roles_without_parents_add_nothing(self):
        graph = TypeGraph()
        ingest_declarations(graph, parse_declarations("role R\nclass X does R\n").declarations)
        flatten_roles(graph)

        assert graph["X"].super == []


class TestAssignDefaultRoots:
    def test_bare_class_gets_any(self):
        graph = build_graph(parse_declarations("class Thing"))
        assert names(graph["Thing"].super) == ["Any"]

    def test_mu_keeps_empty_super(self):
        graph = build_graph(parse_declarations("class Mu\nclass Thing\n"))
        assert graph["Mu"].super == []

    def test_any_never_rooted_to_itself(self):
        graph = build_graph(parse_declarations("class Thing"))
        assert graph["Any"].super == []

    def test_declared_any_keeps_its_parent(self):
        graph = build_graph(parse_declarations("class Mu\nclass Any is Mu\nclass Thing\n"))
        assert names(graph["Any"].super) == ["Mu"]

    def test_roles_not_rooted(self):
        graph = build_graph(parse_declarations("role R"))
        assert graph["R"].super == []
        assert "Any" not in graph

    @pytest.mark.parametrize("packagetype", ["module", "enum"])
    def test_other_packagetypes_rooted(self, packagetype):
        graph = build_graph(parse_declarations(f"{packagetype} Thing"))
        assert names(graph["Thing"].super) == ["Any"]

    def test_type_with_role_parents_not_rooted(self):
        graph = build_graph(parse_declarations("role R is Cool\nclass X does R\n"))
        assert names(graph["X"].super) == ["Cool"]

    def test_custom_root_names(self):
        config = GraphConfig(root_name="Object", base_name="Base")
        graph = build_graph(parse_declarations("class Object\nclass Thing\n"), config)

        assert graph["Object"].super == []
        assert names(graph["Thing"].super) == ["Base"]

    def test_runs_on_partial_graph(self):
        graph = TypeGraph()
        ingest_declarations(graph, parse_declarations("class Thing").declarations)
        assign_default_roots(graph)
        assert names(graph["Thing"].super) == ["Any"]


class TestInverseRelations:
    def test_sub_and_doers(self):
        graph = build_graph(parse_declarations("role R\nclass A\nclass B is A does R\nclass C is A does R\n"))

        assert names(graph["A"].sub) == ["B", "C"]
        assert names(graph["R"].doers) == ["B", "C"]
        assert names(graph["Any"].sub) == ["A"]

    def test_empty_before_inversion(self):
        graph = TypeGraph()
        ingest_declarations(graph, parse_declarations("class B is A").declarations)
        assert graph["A"].sub == []

        build_inverse_relations(graph)
        assert names(graph["A"].sub) == ["B"]

    def test_every_edge_inverted(self, core_graph):
        for node in core_graph.types.values():
            for parent in node.super:
                assert node in parent.sub
            for role in node.roles:
                assert node in role.doers

    def test_reproducible(self, diamond_text):
        first = build_graph(parse_declarations(diamond_text))
        second = build_graph(parse_declarations(diamond_text))
        for name in first.get_type_names():
            assert names(first[name].sub) == names(second[name].sub)


class TestBuildGraph:
    def test_graph_is_frozen(self, diamond_graph):
        assert diamond_graph.frozen

    def test_accepts_declaration_iterable(self, diamond_model):
        graph = build_graph(iter(diamond_model.declarations))
        assert len(graph) == 5

    def test_diamond_scenario(self, diamond_graph):
        assert diamond_graph.mro_names("D") == ["D", "B", "C", "A", "Any"]
