"""Run settings for one invocation."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from syoryouma.art import ArtBuffer, ArtStore, Figure
from syoryouma.limits import DEFAULT_SPEED


class Direction(StrEnum):
    """Horizontal direction of travel."""

    LEFTWARD = "leftward"
    RIGHTWARD = "rightward"


class FigureSelection(StrEnum):
    CUCUMBER = "cucumber"
    EGGPLANT = "eggplant"
    BOTH = "both"

    @classmethod
    def parse(cls, value: str | None) -> FigureSelection:
        """Case-insensitive lookup; unknown names select both figures."""
        if value is None:
            return cls.BOTH
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.BOTH

    @property
    def figures(self) -> tuple[Figure, ...]:
        if self is FigureSelection.CUCUMBER:
            return (Figure.CUCUMBER,)
        if self is FigureSelection.EGGPLANT:
            return (Figure.EGGPLANT,)
        return (Figure.CUCUMBER, Figure.EGGPLANT)


class AnimationSpec(BaseModel):
    """What to scroll, how fast, which way, and whether to repeat."""

    model_config = ConfigDict(frozen=True)

    arts: tuple[ArtBuffer, ...] = Field(..., min_length=1, description="Art scrolled in order")
    speed_ms: int = Field(default=DEFAULT_SPEED, description="Delay between ticks (lower is faster)")
    direction: Direction = Field(default=Direction.LEFTWARD)
    loop: bool = Field(default=False, description="Repeat until interrupted")


class SessionOptions(BaseModel):
    """Options collected from the command line."""

    model_config = ConfigDict(frozen=True)

    selection: FigureSelection = Field(default=FigureSelection.BOTH)
    speed: int = Field(default=DEFAULT_SPEED)
    reverse: bool = Field(default=False, description="Scroll left to right using the reverse art")
    stay: bool = Field(default=False, description="Print the art once without animating")
    endless: bool = Field(default=False, description="Loop the animation until interrupted")

    @property
    def direction(self) -> Direction:
        return Direction.RIGHTWARD if self.reverse else Direction.LEFTWARD

    def select_arts(self, store: ArtStore) -> tuple[ArtBuffer, ...]:
        return tuple(store.get(figure, reverse=self.reverse) for figure in self.selection.figures)

    def animation_spec(self, store: ArtStore) -> AnimationSpec:
        return AnimationSpec(
            arts=self.select_arts(store),
            speed_ms=self.speed,
            direction=self.direction,
            loop=self.endless,
        )
