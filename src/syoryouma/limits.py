"""Numeric defaults and limits - no circular dependencies."""

from __future__ import annotations

DEFAULT_SPEED = 30
MIN_SPEED = 1
MAX_SPEED = 100


ANIMATION_STEP = 2
PAUSE_MULTIPLIER = 3


DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_TERMINAL_HEIGHT = 24


MAX_LOG_LINES = 2000
MAX_LOG_MESSAGE_LENGTH = 4096
