"""Compiler-style diagnostics for GraphQL schema analysis errors."""

from schemadiag.models.errors import SchemaError, collect_errors
from schemadiag.models.position import Position
from schemadiag.render.renderer import DiagnosticRenderer, InvalidPositionError, render

__version__ = "0.1.0"

__all__ = [
    "DiagnosticRenderer",
    "InvalidPositionError",
    "Position",
    "SchemaError",
    "collect_errors",
    "render",
]
