from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence

from .record import Record

NUMERIC_KEYS = frozenset({"id", "rating"})


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortDirective:
    key: str
    direction: SortDirection = SortDirection.ASC

    @property
    def indicator(self) -> str:
        return "▲" if self.direction is SortDirection.ASC else "▼"


def normalise_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def record_matches(record: Record, term: str) -> bool:
    """
    Case-insensitive substring match against name, explanation and every
    element of powers and tips. An empty term matches everything.
    """
    needle = normalise_term(term)
    if not needle:
        return True
    if needle in (record.name or "").lower():
        return True
    if needle in (record.explanation or "").lower():
        return True
    if any(needle in p.lower() for p in record.powers):
        return True
    return any(needle in t.lower() for t in record.tips)


def _sort_value(record: Record, key: str) -> Any:
    value = getattr(record, key, None)
    if key in NUMERIC_KEYS:
        return value if value is not None else 0
    return "" if value is None else str(value)


def sort_records(records: Iterable[Record], directive: SortDirective) -> List[Record]:
    # sorted() is stable for reverse=True too: equal keys keep canonical order
    return sorted(
        records,
        key=lambda r: _sort_value(r, directive.key),
        reverse=directive.direction is SortDirection.DESC,
    )


def derive_display(
    canonical: Sequence[Record],
    term: Optional[str] = None,
    directive: Optional[SortDirective] = None,
) -> List[Record]:
    """
    Build the display sequence from scratch: filter by the search term, then
    stable-sort by the directive if one is set.
    """
    needle = normalise_term(term)
    if needle:
        rows = [r for r in canonical if record_matches(r, needle)]
    else:
        rows = list(canonical)

    if directive is not None:
        rows = sort_records(rows, directive)
    return rows
