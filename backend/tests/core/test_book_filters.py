"""Book Filters — whitelisting and typing of list query parameters."""

from app.core.book_filters import NO_MATCH, build_filters, ignored_keys


def test_known_string_columns_pass_through():
    assert build_filters({"author": "James Clear", "language": "english"}) == {
        "author": "James Clear",
        "language": "english",
    }


def test_integer_columns_are_parsed():
    assert build_filters({"pages": "320", "year": " 2018 "}) == {
        "pages": 320,
        "year": 2018,
    }


def test_unknown_keys_are_dropped():
    assert build_filters({"color": "red", "title": "Dune"}) == {"title": "Dune"}


def test_unparseable_integer_never_matches():
    assert build_filters({"pages": "three hundred"}) is NO_MATCH
    assert build_filters({"year": "20.5"}) is NO_MATCH
    assert build_filters({"year": ""}) is NO_MATCH


def test_signed_integers_parse():
    assert build_filters({"year": "-5"}) == {"year": -5}


def test_empty_params():
    assert build_filters({}) == {}


def test_ignored_keys_sorted():
    assert ignored_keys({"z": "1", "isbn": "2", "a": "3"}) == ["a", "z"]


def test_out_of_range_integer_never_matches():
    assert build_filters({"pages": "9" * 30}) is NO_MATCH
    assert build_filters({"pages": str(2**31)}) is NO_MATCH
    assert build_filters({"year": str(-2**31 - 1)}) is NO_MATCH


def test_integer_range_bounds_are_inclusive():
    assert build_filters({"pages": str(2**31 - 1)}) == {"pages": 2**31 - 1}
    assert build_filters({"year": str(-2**31)}) == {"year": -2**31}
