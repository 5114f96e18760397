"""Bundled ASCII art and its loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from importlib.resources import files

from syoryouma.errors import ResourceUnavailable

logger = logging.getLogger(__name__)

ART_PACKAGE = "syoryouma.art"


class Figure(StrEnum):
    """The two built-in figures."""

    CUCUMBER = "cucumber"
    EGGPLANT = "eggplant"


@dataclass(frozen=True, slots=True)
class ArtBuffer:
    """Immutable block of art rows, loaded once and shared read-only."""

    name: str
    lines: tuple[str, ...]

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)


def parse_art(name: str, text: str) -> ArtBuffer:
    """Split raw art text into rows.

    Trailing blank lines are dropped. Blank lines inside the art are kept,
    they are part of the figure's shape.
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    return ArtBuffer(name=name, lines=tuple(lines))


def load_art(name: str) -> ArtBuffer:
    """Load ``<name>.txt`` from the bundled art resources.

    Raises:
        ResourceUnavailable: If the resource cannot be read or decoded.
    """
    resource = files(ART_PACKAGE) / f"{name}.txt"
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceUnavailable(f"{name}.txt", exc) from exc

    art = parse_art(name, text)
    logger.debug("Loaded art %s (%dx%d)", name, art.width, art.height)
    return art


@dataclass(frozen=True, slots=True)
class ArtStore:
    """The four art variants: each figure facing left and facing right.

    The reverse variants are separately drawn art, not mirrored copies.
    """

    cucumber: ArtBuffer
    cucumber_reverse: ArtBuffer
    eggplant: ArtBuffer
    eggplant_reverse: ArtBuffer

    @classmethod
    def load(cls) -> ArtStore:
        return cls(
            cucumber=load_art("cucumber"),
            cucumber_reverse=load_art("cucumber-reverse"),
            eggplant=load_art("eggplant"),
            eggplant_reverse=load_art("eggplant-reverse"),
        )

    def get(self, figure: Figure, *, reverse: bool = False) -> ArtBuffer:
        """Return the art for ``figure`` facing its direction of travel."""
        if figure is Figure.CUCUMBER:
            return self.cucumber_reverse if reverse else self.cucumber
        return self.eggplant_reverse if reverse else self.eggplant
