"""Tests for arc parameters under affine maps."""

import pytest
from svgpathtools import Arc

from svgtransform.arc import transform_arc, transform_arc_segment
from svgtransform.primitives import IDENTITY


def test_identity_leaves_arc_unchanged():
    arc = [10.0, 5.0, 30.0, 0, 1, 8.0, 3.0]
    result = transform_arc(list(arc), IDENTITY)
    assert result == pytest.approx(arc, abs=1e-9)


def test_mutates_in_place():
    arc = [10.0, 5.0, 0.0, 0, 1, 4.0, 0.0]
    assert transform_arc(arc, (2, 0, 0, 2, 0, 0)) is arc
    assert arc[:3] == pytest.approx([20, 10, 0])


def test_horizontal_flip_inverts_sweep():
    arc = [10.0, 10.0, 0.0, 0, 1, 20.0, 0.0]
    transform_arc(arc, (-1, 0, 0, 1, 0, 0))
    assert arc[4] == 0
    assert arc[0] == pytest.approx(10)
    assert arc[1] == pytest.approx(10)


def test_double_flip_keeps_sweep():
    arc = [10.0, 5.0, 0.0, 1, 1, 4.0, 0.0]
    transform_arc(arc, (-1, 0, 0, -1, 0, 0))
    assert arc[4] == 1
    assert arc[3] == 1


def test_circle_branch_resets_rotation():
    arc = [5.0, 5.0, 25.0, 0, 0, 3.0, 0.0]
    transform_arc(arc, (3, 0, 0, 3, 7, 7))
    assert arc[0] == pytest.approx(15)
    assert arc[1] == pytest.approx(15)
    assert arc[2] == 0


def test_rotation_turns_ellipse():
    arc = [20.0, 10.0, 0.0, 0, 1, 10.0, 0.0]
    transform_arc(arc, (0, 1, -1, 0, 0, 0))
    assert arc[0] == pytest.approx(20)
    assert arc[1] == pytest.approx(10)
    assert arc[2] == pytest.approx(90)


def test_non_uniform_scale_stretches_radii():
    arc = [10.0, 5.0, 0.0, 0, 1, 4.0, 0.0]
    transform_arc(arc, (1, 0, 0, 4, 0, 0))
    # x radius 10 stays, y radius 5 becomes 20 and is now the major axis
    assert arc[0] == pytest.approx(20)
    assert arc[1] == pytest.approx(10)
    assert abs(arc[2]) == pytest.approx(90)


def test_too_small_radii_are_inflated():
    # chord of 40 cannot be spanned by radius 10; radii grow to 20
    arc = [10.0, 10.0, 0.0, 0, 1, 40.0, 0.0]
    transform_arc(arc, IDENTITY)
    assert arc[0] == pytest.approx(20)
    assert arc[1] == pytest.approx(20)


def test_zero_radius_does_not_divide_by_zero():
    arc = [0.0, 5.0, 0.0, 0, 1, 4.0, 0.0]
    transform_arc(arc, (2, 0, 0, 2, 0, 0))
    assert arc[0] == pytest.approx(10)
    assert arc[1] == pytest.approx(0)


def test_segment_adapter_moves_end_points():
    segment = Arc(start=0j, radius=10 + 10j, rotation=0, large_arc=False, sweep=True, end=10 + 0j)
    moved = transform_arc_segment(segment, (-1, 0, 0, 1, 5, 5))
    assert moved.start == pytest.approx(5 + 5j)
    assert moved.end == pytest.approx(-5 + 5j)
    assert moved.radius.real == pytest.approx(10)
    assert moved.radius.imag == pytest.approx(10)
    assert moved.sweep is False
    assert moved.large_arc is False
