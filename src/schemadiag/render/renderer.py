"""Renders schema errors as compiler-style diagnostics.

Example output::

    error: Type extensions are not supported
     --> schema:2:1
      |
    2 |    extend type User {
      |    ^
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from schemadiag.models.errors import SchemaError, collect_errors
from schemadiag.render.style import paint
from schemadiag.render.text import indent, number_of_digits, source_lines
from schemadiag.settings import Settings

logger = logging.getLogger("schemadiag.render")

# Spaces between the gutter bar and the source text.
SOURCE_INDENT = 4


class InvalidPositionError(Exception):
    """Raised when an error's position does not point into its source text."""

    def __init__(self, line: int, line_count: int) -> None:
        self.line = line
        self.line_count = line_count
        super().__init__(
            f"Position line {line} is outside the schema source ({line_count} lines)"
        )


class DiagnosticRenderer:
    """Formats ``SchemaError`` values. Stateless; safe to share across threads."""

    def __init__(self, color: bool = False, source_label: str = "schema") -> None:
        self._color = color
        self._source_label = source_label

    @classmethod
    def from_settings(cls, settings: Settings) -> DiagnosticRenderer:
        return cls(
            color=settings.diagnostic_color,
            source_label=settings.diagnostic_source_label,
        )

    def _paint(self, text: str) -> str:
        return paint(text) if self._color else text

    def render_lines(self, error: SchemaError) -> list[str]:
        """Render ``error`` as a list of lines without line terminators.

        Raises ``InvalidPositionError`` if the line is past the end of the source.
        """
        lines = source_lines(error.raw_schema)
        pos = error.pos
        if pos.line > len(lines):
            raise InvalidPositionError(pos.line, len(lines))

        gutter = number_of_digits(pos.line)
        out = [
            f"{self._paint('error')}: {error.kind.description()}",
            f"{indent('', gutter - 1)} --> {self._source_label}:{pos.line}:{pos.column}",
            f"{indent('', gutter)} |",
            f"{pos.line} |{indent(lines[pos.line - 1], SOURCE_INDENT)}",
            f"{indent('', gutter)} |"
            f"{indent('', pos.column - 1 + SOURCE_INDENT)}{self._paint('^')}",
        ]

        notes = error.kind.notes()
        if notes is not None:
            out.append("")
            out.extend(notes.split("\n"))
        return out

    def render(self, error: SchemaError) -> str:
        """Render ``error`` as newline-terminated diagnostic text."""
        return "".join(f"{line}\n" for line in self.render_lines(error))

    def render_all(self, errors: Iterable[SchemaError], skip_invalid: bool = False) -> str:
        """Render many errors in report order, separated by blank lines.

        Duplicates are dropped. With ``skip_invalid`` an error whose position
        is outside its source is logged and left out instead of raising.
        """
        ordered = collect_errors(errors)
        logger.debug("Rendering %d diagnostics", len(ordered))
        blocks: list[str] = []
        for error in ordered:
            try:
                blocks.append(self.render(error))
            except InvalidPositionError as exc:
                if not skip_invalid:
                    raise
                logger.warning("Skipping diagnostic for %s: %s", error.kind.code, exc)
        return "\n".join(blocks)


def render(error: SchemaError, color: bool = False) -> str:
    """Render a single error with the default source label."""
    return DiagnosticRenderer(color=color).render(error)
