"""Small text helpers used to lay out diagnostics."""

from __future__ import annotations


def indent(text: str, size: int) -> str:
    """Prepend ``size`` spaces to ``text``."""
    if size < 0:
        raise ValueError(f"Indent size must be non-negative, got {size}")
    if size == 0:
        return text
    return " " * size + text


def number_of_digits(n: int) -> int:
    """Count the base-10 digits of a non-negative integer (``0`` has one digit)."""
    if n < 0:
        raise ValueError(f"Expected a non-negative integer, got {n}")
    return len(str(n))


def source_lines(text: str) -> list[str]:
    """Split source text into lines the way line numbers are counted.

    Only ``\\n`` separates lines; a trailing ``\\r`` is dropped from each line
    and a final newline does not start an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
