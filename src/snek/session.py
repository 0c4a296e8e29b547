"""Round flow for SNEK: intro, play and game over, advanced once per frame."""

from __future__ import annotations

import enum
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable

from .anchor import Joint
from .apple import Apple, UniformSource
from .config import (
    COLLISION_EXEMPT,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    TIME_LIMIT,
)
from .snake import Circle, Point, Snake

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class Screen(enum.Enum):
    INTRO = "intro"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(slots=True, frozen=True)
class InputState:
    """One frame of player intent.

    ``turn_left`` and ``turn_right`` are held keys; ``confirm`` and
    ``toggle_debug`` are presses that only last for the frame they happen in.
    """

    turn_left: bool = False
    turn_right: bool = False
    confirm: bool = False
    toggle_debug: bool = False


@dataclass(slots=True)
class RenderModel:
    screen: Screen
    score: int
    elapsed: float
    remaining: float
    debug: bool
    target: Circle
    ribbon: list[Point] = field(default_factory=list)
    caps: tuple[Circle, ...] = ()
    eyes: tuple[Circle, ...] = ()
    joints: list[Joint] = field(default_factory=list)


class Session:
    """Owns the snake, the apple and the score for as long as the game runs."""

    def __init__(
        self,
        rng: UniformSource | None = None,
        clock: Clock | None = None,
        width: float = FIELD_WIDTH,
        height: float = FIELD_HEIGHT,
    ) -> None:
        self.rng: UniformSource = rng if rng is not None else random.Random()
        self.clock: Clock = clock if clock is not None else time.monotonic
        self.width = width
        self.height = height

        self.screen = Screen.INTRO
        self.score = 0
        self.debug = False
        self.elapsed = 0.0
        self.started_at = self.clock()

        self.snake = Snake.from_template()
        self.apple = Apple()
        self.apple.respawn(self.width, self.height, self.rng)

    @property
    def remaining(self) -> float:
        return max(0.0, TIME_LIMIT - self.elapsed)

    # --- Transitions ---------------------------------------------------

    def _start_round(self, now: float) -> None:
        self.started_at = now
        self.elapsed = 0.0
        self.screen = Screen.PLAYING
        logger.info("round started")

    def _restart(self, now: float) -> None:
        """Throw the old body away and start over from the template."""
        self.score = 0
        self.snake = Snake.from_template()
        self.apple.respawn(self.width, self.height, self.rng)
        self._start_round(now)

    def _game_over(self, cause: str) -> None:
        if self.screen is Screen.GAME_OVER:
            return
        self.screen = Screen.GAME_OVER
        logger.info(
            "game over (%s) score=%d elapsed=%.1fs", cause, self.score, self.elapsed
        )

    # --- Play ----------------------------------------------------------

    def _try_apple(self) -> None:
        if not self.apple.is_consumed_by(self.snake.head):
            return
        self.snake.grow(self.snake.tail.point)
        self.apple.respawn(self.width, self.height, self.rng)
        self.score += 1
        logger.debug("apple eaten, score=%d length=%d", self.score, len(self.snake))

    def _play(self, inputs: InputState, now: float) -> None:
        if inputs.toggle_debug:
            self.debug = not self.debug

        self.snake.consume_input(inputs.turn_left, inputs.turn_right)
        self._try_apple()
        self.snake.solve()
        self.snake.clamp_head(self.width, self.height)

        self.elapsed = now - self.started_at
        if self.snake.bites_itself(COLLISION_EXEMPT):
            self._game_over("collision")
        if self.elapsed >= TIME_LIMIT:
            self._game_over("timeout")

    def tick(self, inputs: InputState, now: float | None = None) -> RenderModel:
        """Advance exactly one frame and describe what to draw.

        A confirm press that changes the screen only performs the
        transition; the snake starts moving on the following frame.
        """

        if now is None:
            now = self.clock()

        if self.screen is Screen.INTRO:
            if inputs.confirm:
                self._start_round(now)
        elif self.screen is Screen.GAME_OVER:
            if inputs.confirm:
                self._restart(now)
        else:
            self._play(inputs, now)

        return self.render_model()

    def render_model(self) -> RenderModel:
        apple = self.apple
        return RenderModel(
            screen=self.screen,
            score=self.score,
            elapsed=self.elapsed,
            remaining=self.remaining,
            debug=self.debug,
            target=Circle((apple.point.x, apple.point.y), apple.radius),
            ribbon=self.snake.ribbon(),
            caps=self.snake.caps(),
            eyes=self.snake.eyes(),
            joints=self.snake.joints() if self.debug else [],
        )


def new_session(rng: UniformSource | None = None, clock: Clock | None = None) -> Session:
    return Session(rng=rng, clock=clock)


def tick(session: Session, inputs: InputState, now: float | None = None) -> RenderModel:
    return session.tick(inputs, now)
