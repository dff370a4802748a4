"""Schema Messages — verifies rendering of Pydantic errors into violation messages.

Tests:
    - Type, missing and additional-property violations use JSON-schema phrasing
    - FastAPI "body" location prefix is dropped
    - Every violation is reported, none short-circuited
"""

import pytest
from pydantic import ValidationError

from app.core.schema_messages import collect_violations, describe_violation
from app.schemas.book import BookPayload

VALID = {
    "isbn": "0691161518",
    "amazon_url": "http://a.co/eobPtX2",
    "author": "Matthew Lane",
    "language": "english",
    "pages": 264,
    "publisher": "Princeton University Press",
    "title": "Power-Up",
    "year": 2017,
}


def _violations(payload) -> list[str]:
    with pytest.raises(ValidationError) as exc_info:
        BookPayload.model_validate(payload)
    return collect_violations(exc_info.value.errors())


def test_numeric_string_is_type_violation():
    assert _violations({**VALID, "pages": "320"}) == [
        "instance.pages is not of a type(s) integer",
    ]


def test_integer_for_string_field():
    assert _violations({**VALID, "title": 7}) == [
        "instance.title is not of a type(s) string",
    ]


def test_bool_is_not_an_integer():
    assert _violations({**VALID, "year": True}) == [
        "instance.year is not of a type(s) integer",
    ]


def test_missing_property():
    payload = dict(VALID)
    del payload["author"]
    assert _violations(payload) == ['instance requires property "author"']


def test_additional_property():
    assert _violations({**VALID, "rating": 5}) == [
        'instance is not allowed to have the additional property "rating"',
    ]


def test_all_violations_collected():
    payload = {**VALID, "pages": "1", "year": "2", "extra": True}
    del payload["isbn"]
    messages = _violations(payload)
    assert len(messages) == 4


def test_non_object_body():
    assert _violations(["not", "an", "object"]) == [
        "instance is not of a type(s) object",
    ]


def test_body_prefix_is_stripped():
    error = {"type": "int_type", "loc": ("body", "pages"), "msg": "x"}
    assert describe_violation(error) == "instance.pages is not of a type(s) integer"


def test_missing_body():
    error = {"type": "missing", "loc": ("body",), "msg": "Field required"}
    assert describe_violation(error) == "instance is required"


def test_invalid_json_ignores_character_offset():
    error = {"type": "json_invalid", "loc": ("body", 9), "msg": "JSON decode error"}
    assert describe_violation(error) == "instance is not valid JSON"


def test_unknown_error_type_falls_back_to_pydantic_message():
    error = {"type": "string_too_long", "loc": ("body", "title"), "msg": "String too long"}
    assert describe_violation(error) == "instance.title String too long"
