"""Centralized configuration and palette definitions for SNEK."""

from __future__ import annotations

import os

import pygame

LOG_LEVEL: str = (os.getenv("SNEK_LOG_LEVEL") or "WARNING").upper()

TITLE: str = "SNEK"
FIELD_WIDTH: int = 1200
FIELD_HEIGHT: int = 720
FPS: int = 60  # motion is per frame, so this also fixes the speed

TIME_LIMIT: float = 40.0  # seconds of play per round
STEP: float = 7.5  # head travel per frame
TURN_BIAS: float = 0.33
EAT_MARGIN: float = 5.0
COLLISION_EXEMPT: int = 3  # head and the two anchors behind it never collide
GROWTH_DISTANCE: float = 30.0
APPLE_RADIUS: float = 20.0

BODY_ORIGIN: tuple[float, float] = (50.0, 120.0)
BODY_SIZES: tuple[float, ...] = (
    33.0, 40.0, 42.0, 33.0, 30.0, 30.0, 30.0, 30.0, 30.0, 30.0, 30.0, 30.0, 30.0,
)

EYE_RADIUS: float = 5.0
EYE_FORWARD: float = 0.3

FONT_NAME: str = "consolas"
FONT_SIZE_TITLE: int = 60
FONT_SIZE_BODY: int = 30
FONT_SIZE_HUD: int = 20

KEY_TURN_LEFT = (pygame.K_LEFT, pygame.K_a)
KEY_TURN_RIGHT = (pygame.K_RIGHT, pygame.K_d)
KEY_CONFIRM = (pygame.K_RETURN, pygame.K_KP_ENTER)
KEY_DEBUG = (pygame.K_COMMA,)

PALETTE = {
    "menu_bg": pygame.Color(50, 50, 50),
    "play_bg": pygame.Color(47, 79, 79),
    "snake": pygame.Color(85, 107, 47),
    "eye": pygame.Color(0, 0, 0),
    "apple": pygame.Color(255, 69, 0),
    "text": pygame.Color(255, 255, 255),
    "hint": pygame.Color(130, 130, 130),
    "danger": pygame.Color(230, 41, 55),
    "debug": pygame.Color(255, 255, 255),
    "debug_link": pygame.Color(0, 255, 255),
    "debug_edge": pygame.Color(230, 41, 55),
}
