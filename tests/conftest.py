"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from typegraph.graph.builder import build_graph
from typegraph.schema.loader import parse_model
from typegraph.schema.parser import parse_declarations


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def diamond_text() -> str:
    """Return a diamond hierarchy in the declaration text format."""
    return """
class A
class B is A
class C is A
class D is B is C
"""


@pytest.fixture
def diamond_model(diamond_text):
    """Return the parsed diamond declarations."""
    return parse_declarations(diamond_text)


@pytest.fixture
def diamond_graph(diamond_model):
    """Return a graph built from the diamond declarations."""
    return build_graph(diamond_model)


@pytest.fixture
def core_model(examples_dir):
    """Return the parsed core type declarations."""
    return parse_model(examples_dir / "core_types.txt")


@pytest.fixture
def core_graph(core_model):
    """Return a graph built from the core type declarations."""
    return build_graph(core_model)
