"""Scroll driver: step offsets across the viewport and draw one frame per tick."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from syoryouma.compositor import compose_frame
from syoryouma.limits import ANIMATION_STEP, PAUSE_MULTIPLIER
from syoryouma.models import Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

    from syoryouma.art import ArtBuffer
    from syoryouma.models import AnimationSpec
    from syoryouma.terminal import TerminalSurface

logger = logging.getLogger(__name__)


def scroll_offsets(art_width: int, viewport_width: int, direction: Direction) -> range:
    """Offsets for one full traversal, both bounds inclusive.

    Leftward runs from ``viewport_width`` down to ``-art_width``; rightward
    runs from ``-art_width`` up to ``viewport_width``.
    """
    if direction is Direction.RIGHTWARD:
        return range(-art_width, viewport_width + 1, ANIMATION_STEP)
    return range(viewport_width, -art_width - 1, -ANIMATION_STEP)


async def _sleep_ms(millis: int) -> None:
    await asyncio.sleep(max(millis, 0) / 1000)


async def scroll(
    surface: TerminalSurface, art: ArtBuffer, speed_ms: int, direction: Direction
) -> int:
    """Scroll ``art`` once across the screen. Returns the number of ticks drawn.

    The traversal bounds come from the viewport at the start of the run; each
    tick re-queries the size so a resized terminal still gets full frames.
    """
    start_viewport = surface.query_size()
    ticks = 0
    for offset in scroll_offsets(art.width, start_viewport.width, direction):
        surface.write(compose_frame(art, offset, surface.query_size()))
        ticks += 1
        await _sleep_ms(speed_ms)

    logger.debug("Scrolled %s %s in %d ticks", art.name, direction, ticks)
    return ticks


async def scroll_sequence(
    surface: TerminalSurface,
    arts: Sequence[ArtBuffer],
    speed_ms: int,
    direction: Direction,
) -> None:
    """Scroll each art in turn with a short blank pause between them."""
    for index, art in enumerate(arts):
        if index:
            surface.clear()
            await _sleep_ms(speed_ms * PAUSE_MULTIPLIER)
        await scroll(surface, art, speed_ms, direction)


async def run_animation(surface: TerminalSurface, spec: AnimationSpec) -> None:
    """Run the animation inside a single alternate-screen scope.

    With ``spec.loop`` the whole sequence repeats until the task is cancelled
    or interrupted; every repetition is an independent traversal.
    """
    with surface.animation_screen():
        repetition = 0
        while True:
            await scroll_sequence(surface, spec.arts, spec.speed_ms, spec.direction)
            repetition += 1
            if not spec.loop:
                break
            logger.debug("Starting repetition %d", repetition + 1)


def render_static(surface: TerminalSurface, arts: Sequence[ArtBuffer]) -> None:
    """Print the art once to the normal screen, two blank lines between figures."""
    blocks = ["\n".join(art.lines) for art in arts]
    with surface.hidden_cursor():
        surface.write("\n\n\n".join(blocks) + "\n")
