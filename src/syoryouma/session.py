"""Session controller: turn command-line options into a run and keep the terminal sane."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import re
import signal
from typing import TYPE_CHECKING, TextIO

from syoryouma.art import ArtStore
from syoryouma.driver import render_static, run_animation
from syoryouma.errors import UnexpectedFailure
from syoryouma.limits import DEFAULT_SPEED
from syoryouma.models import FigureSelection
from syoryouma.terminal import TerminalSurface

if TYPE_CHECKING:
    from collections.abc import Sequence

    from syoryouma.models import AnimationSpec, SessionOptions

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(token: str | None) -> int | None:
    """Parse the leading integer of ``token`` ("12", "12ms" -> 12), else None."""
    if token is None:
        return None
    match = _LEADING_INT.match(token)
    if match is None:
        return None
    return int(match.group(1))


def parse_positionals(args: Sequence[str]) -> tuple[FigureSelection, int]:
    """Interpret ``[character] [speed]`` or ``[speed]``.

    A numeric first token is the speed for both figures. Otherwise the first
    token names the figure and the second is the speed, falling back to the
    default when missing, non-numeric or zero.
    """
    first = args[0] if args else None
    first_speed = parse_int(first)
    if first_speed is not None:
        return FigureSelection.BOTH, first_speed

    selection = FigureSelection.parse(first)
    speed = parse_int(args[1]) if len(args) > 1 else None
    return selection, speed or DEFAULT_SPEED


async def _animate(surface: TerminalSurface, spec: AnimationSpec) -> None:
    loop = asyncio.get_running_loop()
    task = asyncio.current_task()
    if task is not None:
        # SIGTERM takes the same path as Ctrl+C; unsupported on Windows and off the main thread
        with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
            loop.add_signal_handler(signal.SIGTERM, task.cancel)
    await run_animation(surface, spec)


def run_session(
    options: SessionOptions,
    *,
    store: ArtStore | None = None,
    stream: TextIO | None = None,
) -> int:
    """Run one invocation and return the process exit code.

    Raises:
        ResourceUnavailable: If the art cannot be loaded. Nothing has been
            written to the terminal at that point.
        UnexpectedFailure: If the animation fails. The terminal has been
            restored before this is raised.
    """
    if store is None:
        store = ArtStore.load()
    surface = TerminalSurface(stream)

    try:
        if options.stay:
            render_static(surface, options.select_arts(store))
        else:
            spec = options.animation_spec(store)
            logger.info(
                "Animating %s %s at %dms (loop=%s)",
                options.selection,
                spec.direction,
                spec.speed_ms,
                spec.loop,
            )
            asyncio.run(_animate(surface, spec))
    except (KeyboardInterrupt, asyncio.CancelledError):
        surface.restore()
        logger.info("Interrupted, terminal restored")
        return 0
    except Exception as exc:
        surface.restore()
        logger.exception("Animation failed")
        raise UnexpectedFailure(f"{type(exc).__name__}: {exc}") from exc

    return 0
