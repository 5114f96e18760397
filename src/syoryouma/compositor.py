"""Frame compositing: place an art buffer at a column offset inside the viewport.

Every frame has exactly ``viewport.height`` rows of exactly ``viewport.width``
characters, whatever the art size or offset. Offsets below ``-art.width`` are
not clamped; slicing past the end of a row simply yields blanks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from syoryouma.terminal import CLEAR_EOL, cursor_to

if TYPE_CHECKING:
    from syoryouma.art import ArtBuffer
    from syoryouma.terminal import Viewport


def vertical_start(art_height: int, viewport_height: int) -> int:
    """Number of blank rows above vertically centered art (never negative)."""
    return max(0, (viewport_height - art_height) // 2)


def compose_row(line: str, offset: int, width: int) -> str:
    """Render one art row with its left edge at screen column ``offset``."""
    if offset >= width:
        return " " * width

    if offset > 0:
        # Entering from the right
        visible = line[: width - offset]
        return (" " * offset + visible).ljust(width)

    start = -offset
    return line[start : start + width].ljust(width)


def compose_frame(art: ArtBuffer, offset: int, viewport: Viewport) -> str:
    """Build a full-screen frame as one string, ready for a single write.

    Each row starts with an explicit cursor move and ends with
    clear-to-end-of-line so a terminal wider than reported shows no stale
    characters.
    """
    top = vertical_start(art.height, viewport.height)
    blank = " " * viewport.width
    parts: list[str] = []

    for row in range(1, viewport.height + 1):
        parts.append(cursor_to(1, row))
        index = row - top - 1
        if 0 <= index < art.height:
            parts.append(compose_row(art.lines[index], offset, viewport.width))
        else:
            parts.append(blank)
        parts.append(CLEAR_EOL)

    return "".join(parts)
