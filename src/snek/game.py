"""SNEK pygame front end: window, keys, and drawing of the session's render model."""

from __future__ import annotations

import logging
from typing import Sequence

import pygame

from .config import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FONT_NAME,
    FONT_SIZE_BODY,
    FONT_SIZE_HUD,
    FONT_SIZE_TITLE,
    FPS,
    KEY_CONFIRM,
    KEY_DEBUG,
    KEY_TURN_LEFT,
    KEY_TURN_RIGHT,
    LOG_LEVEL,
    PALETTE,
    TIME_LIMIT,
    TITLE,
)
from .session import InputState, RenderModel, Screen, Session
from .snake import Point

logger = logging.getLogger(__name__)


def strip_triangles(points: Sequence[Point]) -> list[tuple[Point, Point, Point]]:
    """Split a triangle strip into the individual triangles pygame can fill."""
    return [
        (points[i], points[i + 1], points[i + 2]) for i in range(len(points) - 2)
    ]


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.SysFont(FONT_NAME, size)
    except (pygame.error, OSError):
        logger.warning("font %r unavailable, using pygame default", FONT_NAME)
        return pygame.font.Font(None, size)


class SnekGame:
    """Polls input, ticks the session once per frame, and renders the result."""

    def __init__(self, session: Session | None = None) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
        pygame.display.set_caption(TITLE)

        self.font_title = _load_font(FONT_SIZE_TITLE)
        self.font_body = _load_font(FONT_SIZE_BODY)
        self.font_hud = _load_font(FONT_SIZE_HUD)

        self.session = session if session is not None else Session()
        self._confirm_pressed = False
        self._debug_pressed = False

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> bool:
        """Collect this frame's key presses; return False once the window closes."""
        self._confirm_pressed = False
        self._debug_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key in KEY_CONFIRM:
                    self._confirm_pressed = True
                elif event.key in KEY_DEBUG:
                    self._debug_pressed = True
        return True

    def read_input(self) -> InputState:
        held = pygame.key.get_pressed()
        return InputState(
            turn_left=any(held[key] for key in KEY_TURN_LEFT),
            turn_right=any(held[key] for key in KEY_TURN_RIGHT),
            confirm=self._confirm_pressed,
            toggle_debug=self._debug_pressed,
        )

    # --- Draw ----------------------------------------------------------

    def _text(
        self,
        font: pygame.font.Font,
        text: str,
        pos: tuple[int, int],
        color: pygame.Color,
    ) -> None:
        self.window.blit(font.render(text, True, color), pos)

    def _draw_intro(self) -> None:
        self.window.fill(PALETTE["menu_bg"])
        self._text(self.font_title, "WELCOME", (10, 10), PALETTE["text"])
        self._text(
            self.font_body,
            f"YOU HAVE {TIME_LIMIT:.0f} SECONDS TO EAT AS MANY ORANGES AS YOU CAN.",
            (10, 140),
            PALETTE["text"],
        )
        self._text(self.font_body, "PRESS ENTER TO START", (10, 200), PALETTE["hint"])

    def _draw_game_over(self, model: RenderModel) -> None:
        self.window.fill(PALETTE["menu_bg"])
        self._text(self.font_title, "GAME OVER", (10, 10), PALETTE["danger"])
        self._text(
            self.font_body, f"FINAL SCORE: {model.score}", (10, 140), PALETTE["text"]
        )
        self._text(self.font_body, "PRESS ENTER TO RESTART", (10, 200), PALETTE["hint"])

    def _draw_debug(self, model: RenderModel) -> None:
        for joint in model.joints:
            pygame.draw.circle(self.window, PALETTE["debug"], joint.center, 3)
            pygame.draw.circle(
                self.window, PALETTE["debug"], joint.center, joint.radius, width=1
            )
            pygame.draw.line(
                self.window, PALETTE["debug_link"], joint.center, joint.link_end, 3
            )
            for edge in joint.edges:
                pygame.draw.circle(self.window, PALETTE["debug_edge"], edge, 5)

    def _draw_play(self, model: RenderModel) -> None:
        self.window.fill(PALETTE["play_bg"])
        pygame.draw.circle(
            self.window, PALETTE["apple"], model.target.center, model.target.radius
        )

        for triangle in strip_triangles(model.ribbon):
            pygame.draw.polygon(self.window, PALETTE["snake"], triangle)
        for cap in model.caps:
            pygame.draw.circle(self.window, PALETTE["snake"], cap.center, cap.radius)
        for eye in model.eyes:
            pygame.draw.circle(self.window, PALETTE["eye"], eye.center, eye.radius)

        if model.debug:
            self._draw_debug(model)

        self._text(self.font_hud, f"Score: {model.score}", (10, 10), PALETTE["text"])
        self._text(
            self.font_hud,
            f"Time: {model.elapsed:.1f}s/{TIME_LIMIT:.0f}s",
            (FIELD_WIDTH - 160, 10),
            PALETTE["text"],
        )

    def draw(self, model: RenderModel) -> None:
        """Render one frame for whichever screen the session is on."""
        if model.screen is Screen.INTRO:
            self._draw_intro()
        elif model.screen is Screen.GAME_OVER:
            self._draw_game_over(model)
        else:
            self._draw_play(model)

    # --- Main loop -----------------------------------------------------

    def start(self) -> None:
        """Run the main loop: poll input, tick the session, then render."""
        clock = pygame.time.Clock()
        running = True
        logger.info("starting %s at %dx%d", TITLE, FIELD_WIDTH, FIELD_HEIGHT)

        while running:
            clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            model = self.session.tick(self.read_input())
            self.draw(model)
            pygame.display.update()

        logger.info("shutting down")
        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    game = SnekGame()
    game.start()


if __name__ == "__main__":
    main()
