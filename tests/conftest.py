"""Shared test fixtures for schemadiag."""

from __future__ import annotations

import re

import pytest

from schemadiag.models.errors import SchemaError
from schemadiag.models.kinds import UnionFieldTypeMismatch
from schemadiag.models.position import Position
from schemadiag.render.renderer import DiagnosticRenderer

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

SAMPLE_SCHEMA = """\
schema {
  query: Query
}

type Query {
  search(term: String! = "x"): [SearchResult!]!
}

union SearchResult = Photo | Person

type Photo {
  height: Int!
}

type Person {
  height: String!
}
"""


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


@pytest.fixture
def renderer() -> DiagnosticRenderer:
    return DiagnosticRenderer()


@pytest.fixture
def union_mismatch() -> UnionFieldTypeMismatch:
    return UnionFieldTypeMismatch(
        union_name="SearchResult",
        field_name="height",
        type_a="Photo",
        field_type_a="Int",
        type_b="Person",
        field_type_b="String",
    )


@pytest.fixture
def union_error(union_mismatch: UnionFieldTypeMismatch) -> SchemaError:
    return SchemaError(
        pos=Position(line=9, column=1),
        kind=union_mismatch,
        raw_schema=SAMPLE_SCHEMA,
    )
