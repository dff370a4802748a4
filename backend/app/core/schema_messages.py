"""Schema Messages — renders Pydantic validation errors as human-readable violations.

Invariants:
    - One message per violation, in the order Pydantic reported them
    - Pure function of the error list: no IO, no logging
    - Leading "body" location segments are dropped (FastAPI request-body prefix)

Design Decisions:
    - Phrasing follows JSON-schema validator output ("instance.pages is not of
      a type(s) integer") so clients see the same messages for every violation kind
"""

from typing import Any, Iterable

# Pydantic error type → JSON-schema primitive name
_TYPE_NAMES = {
    "int_type": "integer",
    "int_from_float": "integer",
    "string_type": "string",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


def collect_violations(errors: Iterable[dict[str, Any]]) -> list[str]:
    """Render every Pydantic error dict into one message."""
    return [describe_violation(e) for e in errors]


def describe_violation(error: dict[str, Any]) -> str:
    """Render a single Pydantic error dict."""
    loc = _strip_body(error.get("loc", ()))
    kind = error.get("type", "")

    if kind == "missing" and loc:
        parent, field = loc[:-1], loc[-1]
        return f'{_instance_path(parent)} requires property "{field}"'
    if kind == "missing":
        return "instance is required"
    if kind == "extra_forbidden" and loc:
        parent, field = loc[:-1], loc[-1]
        return (
            f"{_instance_path(parent)} is not allowed to have "
            f'the additional property "{field}"'
        )
    if kind == "json_invalid":
        return "instance is not valid JSON"
    if kind in _TYPE_NAMES:
        return f"{_instance_path(loc)} is not of a type(s) {_TYPE_NAMES[kind]}"
    return f"{_instance_path(loc)} {error.get('msg', 'is invalid')}"


def _strip_body(loc: Iterable[Any]) -> tuple:
    loc = tuple(loc)
    if loc and loc[0] == "body":
        loc = loc[1:]
    # json_invalid reports a character offset, not a field name
    return tuple(part for part in loc if isinstance(part, str))


def _instance_path(loc: tuple) -> str:
    return ".".join(("instance", *loc))
