"""Diagnostic rendering for schema errors."""

from schemadiag.render.renderer import DiagnosticRenderer, InvalidPositionError, render
from schemadiag.render.text import indent, number_of_digits, source_lines

__all__ = [
    "DiagnosticRenderer",
    "InvalidPositionError",
    "indent",
    "number_of_digits",
    "render",
    "source_lines",
]
