"""Tests for the single-anchor distance constraint."""

from __future__ import annotations

import math

import pytest
from pygame.math import Vector2

from snek.anchor import Anchor, rotate90, unit


class TestUnit:
    def test_normalizes(self) -> None:
        v = unit(Vector2(3.0, 4.0))
        assert v.x == pytest.approx(0.6)
        assert v.y == pytest.approx(0.8)

    def test_zero_falls_back_to_default_direction(self) -> None:
        assert unit(Vector2(0.0, 0.0)) == Vector2(1.0, 0.0)

    def test_default_is_a_fresh_vector(self) -> None:
        v = unit(Vector2())
        v.x = 99.0
        assert unit(Vector2()) == Vector2(1.0, 0.0)


class TestRotate90:
    def test_swaps_and_negates(self) -> None:
        assert rotate90(Vector2(2.0, 5.0)) == Vector2(5.0, -2.0)

    def test_is_perpendicular(self) -> None:
        v = Vector2(-3.0, 7.0)
        assert v.dot(rotate90(v)) == 0.0


class TestAnchorInit:
    def test_copies_point(self) -> None:
        source = Vector2(1.0, 2.0)
        anchor = Anchor(source, 5.0)
        source.x = 100.0
        assert anchor.point == Vector2(1.0, 2.0)

    def test_accepts_tuple_point(self) -> None:
        anchor = Anchor((4.0, 5.0), 5.0)
        assert anchor.point == Vector2(4.0, 5.0)

    def test_orientation_starts_zero(self) -> None:
        anchor = Anchor(Vector2(1.0, 1.0), 5.0)
        assert anchor.from_parent == Vector2()
        assert anchor.rhs == Vector2()

    @pytest.mark.parametrize("distance", [0.0, -3.0])
    def test_non_positive_distance_raises(self, distance: float) -> None:
        with pytest.raises(ValueError):
            Anchor(Vector2(), distance)


class TestResolve:
    def test_pulls_onto_parent_circle(self) -> None:
        parent = Anchor(Vector2(0.0, 0.0), 10.0)
        child = Anchor(Vector2(3.0, 4.0), 5.0)
        child.resolve(parent)
        assert child.point.x == pytest.approx(6.0)
        assert child.point.y == pytest.approx(8.0)
        assert child.from_parent.length() == pytest.approx(10.0)

    def test_pushes_out_when_too_close(self) -> None:
        parent = Anchor(Vector2(100.0, 100.0), 30.0)
        child = Anchor(Vector2(100.0, 105.0), 5.0)
        child.resolve(parent)
        assert child.point.x == pytest.approx(100.0)
        assert child.point.y == pytest.approx(130.0)

    def test_point_is_parent_plus_offset(self) -> None:
        parent = Anchor(Vector2(-7.0, 12.0), 25.0)
        child = Anchor(Vector2(40.0, -3.0), 8.0)
        child.resolve(parent)
        expected = parent.point + child.from_parent
        assert child.point.x == pytest.approx(expected.x)
        assert child.point.y == pytest.approx(expected.y)

    def test_rhs_is_perpendicular_with_own_length(self) -> None:
        parent = Anchor(Vector2(0.0, 0.0), 10.0)
        child = Anchor(Vector2(3.0, 4.0), 5.0)
        child.resolve(parent)
        assert child.rhs.x == pytest.approx(4.0)
        assert child.rhs.y == pytest.approx(-3.0)
        assert child.rhs.dot(child.from_parent) == pytest.approx(0.0, abs=1e-9)
        assert child.rhs.length() == pytest.approx(child.distance)

    def test_keeps_previous_heading(self) -> None:
        # The child stays on the side it came from rather than lining up
        # behind the parent's own heading.
        parent = Anchor(Vector2(0.0, 0.0), 10.0)
        parent.from_parent = Vector2(-10.0, 0.0)
        child = Anchor(Vector2(0.0, -50.0), 5.0)
        child.resolve(parent)
        assert child.point.x == pytest.approx(0.0)
        assert child.point.y == pytest.approx(-10.0)

    def test_fixed_point_on_circle(self) -> None:
        parent = Anchor(Vector2(5.0, 5.0), 10.0)
        angle = math.radians(33.0)
        on_circle = Vector2(5.0 + 10.0 * math.cos(angle), 5.0 + 10.0 * math.sin(angle))
        child = Anchor(on_circle, 4.0)
        child.resolve(parent)
        first = Vector2(child.from_parent)
        child.resolve(parent)
        assert child.from_parent.x == pytest.approx(first.x)
        assert child.from_parent.y == pytest.approx(first.y)
        assert child.point.x == pytest.approx(on_circle.x)
        assert child.point.y == pytest.approx(on_circle.y)

    def test_coincident_uses_default_direction(self) -> None:
        parent = Anchor(Vector2(20.0, 20.0), 30.0)
        child = Anchor(Vector2(20.0, 20.0), 30.0)
        child.resolve(parent)
        assert child.from_parent == Vector2(30.0, 0.0)
        assert child.point == Vector2(50.0, 20.0)
        assert child.rhs == Vector2(0.0, -30.0)

    def test_does_not_move_parent(self) -> None:
        parent = Anchor(Vector2(1.0, 2.0), 10.0)
        child = Anchor(Vector2(30.0, 2.0), 5.0)
        child.resolve(parent)
        assert parent.point == Vector2(1.0, 2.0)


class TestJoint:
    def test_markers(self) -> None:
        parent = Anchor(Vector2(0.0, 0.0), 10.0)
        child = Anchor(Vector2(20.0, 0.0), 5.0)
        child.resolve(parent)
        joint = child.joint()
        assert joint.center == pytest.approx((10.0, 0.0))
        assert joint.radius == 5.0
        assert joint.link_end == pytest.approx((0.0, 0.0))
        assert joint.edges[0] == pytest.approx((10.0, -5.0))
        assert joint.edges[1] == pytest.approx((10.0, 5.0))
