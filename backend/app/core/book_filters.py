"""Book Filters — turns client query-string pairs into column equality filters.

Invariants:
    - Only the eight Book columns are ever used as filter keys
    - Unknown keys are dropped, never forwarded to the query builder
    - Integer columns receive int values; an unparseable or out-of-range
      value means "no match"

Design Decisions:
    - Whitelist over pass-through: queries are never built from unvalidated
      field names
    - NoMatch sentinel instead of raising: a bad filter value is a valid query
      with an empty answer, not a client error
"""

from typing import Mapping

BOOK_COLUMNS: dict[str, type] = {
    "isbn": str,
    "amazon_url": str,
    "author": str,
    "language": str,
    "pages": int,
    "publisher": str,
    "title": str,
    "year": int,
}

# Range of the INTEGER columns; anything outside can never be stored
INT_MIN, INT_MAX = -2**31, 2**31 - 1


class NoMatch:
    """Marker: the filters can never match a row."""

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch()


def build_filters(params: Mapping[str, str]) -> dict[str, str | int] | NoMatch:
    """Keep known columns, convert integer columns, drop everything else."""
    filters: dict[str, str | int] = {}
    for key, raw in params.items():
        expected = BOOK_COLUMNS.get(key)
        if expected is None:
            continue
        if expected is int:
            value = _parse_int(raw)
            if value is None:
                return NO_MATCH
            filters[key] = value
        else:
            filters[key] = raw
    return filters


def ignored_keys(params: Mapping[str, str]) -> list[str]:
    return sorted(k for k in params if k not in BOOK_COLUMNS)


def _parse_int(raw: str) -> int | None:
    text = raw.strip()
    digits = text[1:] if text[:1] in ("-", "+") else text
    if not digits.isdigit() or not digits.isascii():
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value
