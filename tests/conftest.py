"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgtransform.options import TransformOptions


# Sample transform attribute values

SIMPLE_LIST = "translate(10,50) scale(2) rotate(-45)"
ROTATE_ABOUT_POINT = "rotate(30 10 20)"
MIXED_SEPARATORS = "translate(10 , 20)scale( 2 ),rotate(-1.5e1)"
BROKEN_LIST = "translate(10,50) scale(,) rotate(-45)"
GARBAGE = "hello world"

# 2×3 matrices as [a, b, c, d, e, f]
QUARTER_TURN = [0.0, 1.0, -1.0, 0.0, 0.0, 0.0]
GENERAL_MATRIX = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
SINGULAR_MATRIX = [1.0, 2.0, 2.0, 4.0, 0.0, 0.0]


def matrix_approx(actual, expected, abs=1e-9):
    """Elementwise approx comparison for 6-value matrices."""
    assert len(actual) == len(expected)
    assert list(actual) == pytest.approx(list(expected), abs=abs)


@pytest.fixture
def options() -> TransformOptions:
    return TransformOptions(float_precision=3, transform_precision=5)


@pytest.fixture
def precise_options() -> TransformOptions:
    return TransformOptions(float_precision=4, transform_precision=5)
