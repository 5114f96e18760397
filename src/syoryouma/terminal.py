"""Terminal control sequences and the output surface the animation draws on."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from syoryouma.limits import DEFAULT_TERMINAL_HEIGHT, DEFAULT_TERMINAL_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

ALT_SCREEN_ON = "\x1b[?1049h"
ALT_SCREEN_OFF = "\x1b[?1049l"
CURSOR_HIDE = "\x1b[?25l"
CURSOR_SHOW = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
CLEAR_EOL = "\x1b[K"


def cursor_to(col: int, row: int) -> str:
    """Return the sequence that moves the cursor to a 1-indexed cell."""
    return f"\x1b[{row};{col}H"


@dataclass(frozen=True, slots=True)
class Viewport:
    width: int
    height: int


DEFAULT_VIEWPORT = Viewport(width=DEFAULT_TERMINAL_WIDTH, height=DEFAULT_TERMINAL_HEIGHT)


class TerminalSurface:
    """Writes raw escape sequences to an output stream.

    The surface remembers whether it switched to the alternate screen or hid
    the cursor, so :meth:`restore` only undoes what is actually active and can
    be called any number of times.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._alternate_active = False
        self._cursor_hidden = False

    @property
    def alternate_active(self) -> bool:
        return self._alternate_active

    @property
    def cursor_hidden(self) -> bool:
        return self._cursor_hidden

    def query_size(self) -> Viewport:
        """Return the live terminal geometry, or 80x24 when it is unknown."""
        try:
            size = os.get_terminal_size(self._stream.fileno())
        except (AttributeError, OSError, ValueError):
            return DEFAULT_VIEWPORT
        return Viewport(
            width=size.columns or DEFAULT_TERMINAL_WIDTH,
            height=size.lines or DEFAULT_TERMINAL_HEIGHT,
        )

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def enter_alternate_view(self) -> None:
        self.write(ALT_SCREEN_ON)
        self._alternate_active = True

    def exit_alternate_view(self) -> None:
        self.write(ALT_SCREEN_OFF)
        self._alternate_active = False

    def hide_cursor(self) -> None:
        self.write(CURSOR_HIDE)
        self._cursor_hidden = True

    def show_cursor(self) -> None:
        self.write(CURSOR_SHOW)
        self._cursor_hidden = False

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def position_cursor(self, col: int, row: int) -> None:
        self.write(cursor_to(col, row))

    def restore(self) -> None:
        """Show the cursor and leave the alternate screen if either is active."""
        if self._cursor_hidden:
            self.show_cursor()
        if self._alternate_active:
            self.exit_alternate_view()
            logger.debug("Left alternate screen")

    @contextmanager
    def animation_screen(self) -> Iterator[TerminalSurface]:
        """Switch to a cleared alternate screen with the cursor hidden.

        The terminal is restored on every exit path, including
        ``KeyboardInterrupt`` and task cancellation.
        """
        try:
            self.enter_alternate_view()
            self.hide_cursor()
            self.clear()
            yield self
        finally:
            self.restore()

    @contextmanager
    def hidden_cursor(self) -> Iterator[TerminalSurface]:
        try:
            self.hide_cursor()
            yield self
        finally:
            if self._cursor_hidden:
                self.show_cursor()
