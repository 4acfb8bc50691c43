"""Tests for rendering transform lists as attribute text."""

from svgtransform.options import TransformOptions
from svgtransform.primitives import Transform
from svgtransform.serializer import round_transform, stringify_transform, stringify_transforms


def test_stringify_list():
    transforms = [
        Transform("translate", [10, 50]),
        Transform("scale", [2]),
        Transform("rotate", [-45]),
    ]
    assert stringify_transforms(transforms) == "translate(10 50) scale(2) rotate(-45)"


def test_empty_list_is_empty_text():
    assert stringify_transforms([]) == ""


def test_rotation_point_uses_float_precision():
    options = TransformOptions(float_precision=2, deg_precision=1)
    rotate = Transform("rotate", [-45.04, 65.3553390593, 12.9289321881])
    assert stringify_transform(rotate, options) == "rotate(-45 65.36 12.93)"


def test_matrix_linear_part_uses_transform_precision():
    options = TransformOptions(float_precision=1, transform_precision=3)
    matrix = Transform("matrix", [0.70710678, 0.70710678, -0.70710678, 0.70710678, 1.25, 0])
    assert stringify_transform(matrix, options) == "matrix(0.707 0.707 -0.707 0.707 1.2 0)"


def test_leading_zero_can_be_dropped():
    options = TransformOptions(leading_zero=False)
    assert stringify_transform(Transform("scale", [0.5, -0.25]), options) == "scale(.5 -.25)"


def test_round_transform_is_a_copy():
    original = Transform("translate", [1.23456, 0.00001])
    rounded = round_transform(original, TransformOptions(float_precision=2))
    assert rounded.data == [1.23, 0.0]
    assert original.data == [1.23456, 0.00001]
