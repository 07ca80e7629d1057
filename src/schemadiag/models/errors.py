"""Schema errors: a position, an error kind, and the source text they point into."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

from schemadiag.models.kinds import ErrorKind
from schemadiag.models.position import Position


@total_ordering
@dataclass(frozen=True, eq=True)
class SchemaError:
    """A problem found at ``pos`` in ``raw_schema``.

    ``raw_schema`` is the complete text the position was computed against.
    It is shared, not copied; ``str`` is immutable, so the text cannot change
    underneath the error while it is alive.
    """

    pos: Position
    kind: ErrorKind
    raw_schema: str

    def sort_key(self) -> tuple[object, ...]:
        """Ordering key: line, column, kind discriminant, payload, then source text."""
        return (*self.pos.sort_key(), *self.kind.sort_key(), self.raw_schema)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SchemaError):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        from schemadiag.render.renderer import render

        return render(self)


def collect_errors(errors: Iterable[SchemaError]) -> list[SchemaError]:
    """Deduplicate ``errors`` and return them in deterministic report order."""
    return sorted(set(errors))
