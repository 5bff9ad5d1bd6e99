"""Split multi-valued fields into one row per value."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping


def split_tokens(raw: str | None, sep: str = ",") -> list[str]:
    """Split a delimited field and return its trimmed, non-empty tokens."""

    if not raw:
        return []
    return [token.strip() for token in raw.split(sep) if token.strip()]


def separate_rows(
    rows: Iterable[Mapping[str, Any]],
    column: str,
    sep: str = ",",
) -> Iterator[Dict[str, Any]]:
    """Yield one copy of each row per token found in ``column``.

    Each copy carries a single trimmed token in ``column``. Rows whose field
    is empty or whitespace-only yield nothing.
    """

    for row in rows:
        for token in split_tokens(row.get(column), sep):
            expanded = dict(row)
            expanded[column] = token
            yield expanded
