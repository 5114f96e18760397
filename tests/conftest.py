"""Pytest fixtures for syo-ryo-uma tests."""

from __future__ import annotations

import io
import os
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

import pytest
from hypothesis import Phase, Verbosity, settings

from syoryouma.art import ArtStore, parse_art
from syoryouma.debug_log import clear_log_buffer
from syoryouma.terminal import TerminalSurface

if TYPE_CHECKING:
    from collections.abc import Generator

    from pytest_mock import MockerFixture


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory terminal output. Has no file descriptor, so size falls back to 80x24."""
    return io.StringIO()


@pytest.fixture
def surface(stream: io.StringIO) -> TerminalSurface:
    return TerminalSurface(stream)


@pytest.fixture
def small_store() -> ArtStore:
    """Tiny, easily recognisable art for each variant."""
    return ArtStore(
        cucumber=parse_art("cucumber", "<cuc\n cc"),
        cucumber_reverse=parse_art("cucumber-reverse", "cuc>\ncc "),
        eggplant=parse_art("eggplant", "<egg\n ee"),
        eggplant_reverse=parse_art("eggplant-reverse", "egg>\nee "),
    )


@pytest.fixture
def no_sleep(mocker: MockerFixture) -> AsyncMock:
    """Replace the per-tick delay so animations finish instantly."""
    return mocker.patch("syoryouma.driver._sleep_ms", new=AsyncMock())


@pytest.fixture(autouse=True)
def _clean_log_buffer() -> Generator[None, None, None]:
    yield
    clear_log_buffer()
