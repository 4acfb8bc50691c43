"""Tests for the transform attribute parser."""

from svgtransform.parser import parse_transform_list
from svgtransform.primitives import Transform
from tests.conftest import BROKEN_LIST, GARBAGE, MIXED_SEPARATORS, ROTATE_ABOUT_POINT, SIMPLE_LIST


def test_parse_simple_list():
    transforms = parse_transform_list(SIMPLE_LIST)
    assert [t.name for t in transforms] == ["translate", "scale", "rotate"]
    assert transforms[0].data == [10, 50]
    assert transforms[1].data == [2]
    assert transforms[2].data == [-45]


def test_parse_rotate_about_point():
    assert parse_transform_list(ROTATE_ABOUT_POINT) == [Transform("rotate", [30, 10, 20])]


def test_parse_mixed_separators_and_exponents():
    transforms = parse_transform_list(MIXED_SEPARATORS)
    assert transforms == [
        Transform("translate", [10, 20]),
        Transform("scale", [2]),
        Transform("rotate", [-15]),
    ]


def test_parse_compact_numbers():
    (matrix,) = parse_transform_list("matrix(1-2.5.5,+3e2 .25 1.)")
    assert matrix.data == [1, -2.5, 0.5, 300, 0.25, 1]


def test_parse_skews_keep_case():
    transforms = parse_transform_list("skewX(30) skewY(-10)")
    assert [t.name for t in transforms] == ["skewX", "skewY"]
    assert [t.data for t in transforms] == [[30], [-10]]


def test_broken_list_is_empty():
    assert parse_transform_list(BROKEN_LIST) == []


def test_primitive_without_numbers_is_empty():
    assert parse_transform_list("translate(10) scale(abc)") == []


def test_garbage_is_empty():
    assert parse_transform_list(GARBAGE) == []
    assert parse_transform_list("") == []


def test_results_are_independent():
    first = parse_transform_list(SIMPLE_LIST)
    first[0].data.append(99)
    assert parse_transform_list(SIMPLE_LIST)[0].data == [10, 50]


def test_malformed_input_is_logged(caplog):
    with caplog.at_level("DEBUG", logger="svgtransform.parser"):
        parse_transform_list(BROKEN_LIST)
    assert "Malformed transform list" in caplog.text
