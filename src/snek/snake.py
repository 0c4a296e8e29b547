"""The snake body: a chain of anchors solved head to tail every frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from pygame.math import Vector2

from .anchor import Anchor, Joint, unit
from .config import (
    BODY_ORIGIN,
    BODY_SIZES,
    EYE_FORWARD,
    EYE_RADIUS,
    GROWTH_DISTANCE,
    STEP,
    TURN_BIAS,
)

Point = tuple[float, float]


@dataclass(slots=True, frozen=True)
class Circle:
    center: Point
    radius: float


def template_body(
    sizes: Sequence[float] = BODY_SIZES, origin: Point = BODY_ORIGIN
) -> list[Anchor]:
    """Lay the body out in a straight line to the left of ``origin``.

    Anchor ``i`` sits ``sum(sizes[:i])`` behind the origin, which is exactly
    its parent's distance away, so the distance constraints already hold.
    """

    x, y = origin
    body: list[Anchor] = []
    offset = 0.0
    for size in sizes:
        body.append(Anchor(Vector2(x - offset, y), size))
        offset += size
    return body


class Snake:
    """Ordered anchors, index 0 is the head."""

    def __init__(self, body: Iterable[Anchor]) -> None:
        self.body: list[Anchor] = list(body)
        if len(self.body) < 2:
            raise ValueError("a snake needs a head and at least one follower")

    @classmethod
    def from_template(
        cls, sizes: Sequence[float] = BODY_SIZES, origin: Point = BODY_ORIGIN
    ) -> Snake:
        return cls(template_body(sizes, origin))

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Anchor:
        return self.body[0]

    @property
    def tail(self) -> Anchor:
        return self.body[-1]

    # --- Simulation ----------------------------------------------------

    def consume_input(self, turn_left: bool, turn_right: bool) -> None:
        """Move the head one step forward, biased sideways by held turn keys."""

        neck = self.body[1]
        direction = -neck.from_parent
        if turn_left:
            direction -= neck.rhs * TURN_BIAS
        if turn_right:
            direction += neck.rhs * TURN_BIAS
        self.head.point += unit(direction) * STEP

    def solve(self) -> None:
        """Resolve every anchor against the one ahead of it, head to tail.

        Each step reads the predecessor written by the previous step, so the
        loop must run in order.
        """

        for i in range(len(self.body) - 1):
            self.body[i + 1].resolve(self.body[i])

        head = self.head
        head.from_parent = unit(self.body[1].point - head.point) * head.distance
        head.orient()

    def grow(self, at_point: Vector2) -> None:
        self.body.append(Anchor(Vector2(at_point), GROWTH_DISTANCE))

    def clamp_head(self, width: float, height: float) -> None:
        head = self.head
        d = head.distance
        head.point.x = min(max(head.point.x, d), width - d)
        head.point.y = min(max(head.point.y, d), height - d)

    def bites_itself(self, exempt: int) -> bool:
        """Return True when the head overlaps any anchor from ``exempt`` onward."""

        head = self.head
        for anchor in self.body[exempt:]:
            if head.distance + anchor.distance > head.point.distance_to(anchor.point):
                return True
        return False

    # --- Geometry ------------------------------------------------------

    def ribbon(self) -> list[Point]:
        """Edge points of every anchor, interleaved as a triangle strip."""

        points: list[Point] = []
        for anchor in self.body:
            left, right = anchor.left_edge, anchor.right_edge
            points.append((left.x, left.y))
            points.append((right.x, right.y))
        return points

    def caps(self) -> tuple[Circle, Circle]:
        head, tail = self.head, self.tail
        return (
            Circle((head.point.x, head.point.y), head.distance),
            Circle((tail.point.x, tail.point.y), tail.distance),
        )

    def eyes(self) -> tuple[Circle, Circle]:
        head = self.head
        forward = head.from_parent * EYE_FORWARD
        left = head.point + head.rhs + forward
        right = head.point - head.rhs + forward
        return (
            Circle((left.x, left.y), EYE_RADIUS),
            Circle((right.x, right.y), EYE_RADIUS),
        )

    def joints(self) -> list[Joint]:
        return [anchor.joint() for anchor in self.body]
