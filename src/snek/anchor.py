"""A single joint of the snake body and the distance constraint that places it."""

from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector2

DEFAULT_DIRECTION = Vector2(1.0, 0.0)


def unit(v: Vector2) -> Vector2:
    """Return ``v`` normalised, or the default direction when it has no length."""

    if v.length_squared() == 0.0:
        return Vector2(DEFAULT_DIRECTION)
    return v.normalize()


def rotate90(v: Vector2) -> Vector2:
    return Vector2(v.y, -v.x)


@dataclass(slots=True)
class Joint:
    """Debug markers for one anchor, ready to draw."""

    center: tuple[float, float]
    radius: float
    link_end: tuple[float, float]
    edges: tuple[tuple[float, float], tuple[float, float]]


@dataclass(slots=True)
class Anchor:
    point: Vector2
    distance: float
    from_parent: Vector2 = field(default_factory=Vector2)
    rhs: Vector2 = field(default_factory=Vector2)

    def __post_init__(self) -> None:
        if self.distance <= 0:
            raise ValueError("anchor distance must be positive")
        self.point = Vector2(self.point)

    @property
    def left_edge(self) -> Vector2:
        return self.point + self.rhs

    @property
    def right_edge(self) -> Vector2:
        return self.point - self.rhs

    def resolve(self, parent: Anchor) -> None:
        """Pull this anchor onto the circle of ``parent.distance`` around the parent.

        The direction comes from where the anchor currently is, not from the
        parent's heading, so the body lags behind the head through turns.
        """

        self.from_parent = unit(self.point - parent.point) * parent.distance
        self.point = parent.point + self.from_parent
        self.orient()

    def orient(self) -> None:
        """Recompute the width vector from the current ``from_parent``."""

        self.rhs = unit(rotate90(self.from_parent)) * self.distance

    def joint(self) -> Joint:
        link_end = self.point - self.from_parent
        return Joint(
            center=(self.point.x, self.point.y),
            radius=self.distance,
            link_end=(link_end.x, link_end.y),
            edges=(
                (self.left_edge.x, self.left_edge.y),
                (self.right_edge.x, self.right_edge.y),
            ),
        )
