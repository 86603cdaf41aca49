"""Formatters for command-line output."""

from .formatter import format_graph, format_mro, format_validation_result

__all__ = ["format_graph", "format_mro", "format_validation_result"]
