"""Source positions within a schema document."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Position(BaseModel):
    """A 1-based line/column location in the raw schema text."""

    line: int = Field(ge=1)
    column: int = Field(ge=1)

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[int, int]:
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
