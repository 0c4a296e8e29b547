"""The apple the snake chases around the field."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from pygame.math import Vector2

from .anchor import Anchor
from .config import APPLE_RADIUS, EAT_MARGIN


class UniformSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def random_point(rng: UniformSource, width: float, height: float) -> Vector2:
    return Vector2(rng.uniform(0.0, width), rng.uniform(0.0, height))


@dataclass(slots=True)
class Apple:
    point: Vector2 = field(default_factory=Vector2)
    radius: float = APPLE_RADIUS

    def respawn(
        self, width: float, height: float, rng: UniformSource = random
    ) -> None:
        """Move the apple to a uniformly random spot inside the field."""
        self.point = random_point(rng, width, height)

    def is_consumed_by(self, head: Anchor) -> bool:
        # Triggers a little before the circles actually touch.
        gap = head.point.distance_to(self.point) - EAT_MARGIN
        return head.distance + self.radius > gap
