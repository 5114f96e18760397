"""Tests for the scroll driver and static rendering."""

from __future__ import annotations

import asyncio
import io
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, call

import pytest

from syoryouma.art import ArtStore, parse_art
from syoryouma.driver import render_static, run_animation, scroll, scroll_offsets, scroll_sequence
from syoryouma.models import AnimationSpec, Direction
from syoryouma.terminal import (
    ALT_SCREEN_OFF,
    ALT_SCREEN_ON,
    CLEAR_SCREEN,
    CURSOR_HIDE,
    CURSOR_SHOW,
    TerminalSurface,
    Viewport,
    cursor_to,
)
from tests.helpers.frames import frame_rows

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

pytestmark = pytest.mark.unit


def _frames_written(stream: io.StringIO) -> int:
    return stream.getvalue().count(cursor_to(1, 1))


class TestScrollOffsets:
    def test_leftward_runs_from_right_edge_past_left_edge(self):
        offsets = list(scroll_offsets(10, 20, Direction.LEFTWARD))

        assert offsets[0] == 20
        assert offsets[-1] == -10
        assert all(a - b == 2 for a, b in zip(offsets, offsets[1:], strict=False))

    def test_rightward_runs_from_left_edge_past_right_edge(self):
        offsets = list(scroll_offsets(10, 20, Direction.RIGHTWARD))

        assert offsets[0] == -10
        assert offsets[-1] == 20
        assert all(b - a == 2 for a, b in zip(offsets, offsets[1:], strict=False))

    def test_odd_span_stops_inside_far_bound(self):
        assert list(scroll_offsets(3, 5, Direction.LEFTWARD)) == [5, 3, 1, -1, -3]
        assert list(scroll_offsets(3, 6, Direction.RIGHTWARD)) == [-3, -1, 1, 3, 5]


class TestScroll:
    async def test_one_frame_and_one_delay_per_tick(
        self, surface: TerminalSurface, stream: io.StringIO, no_sleep: AsyncMock
    ):
        art = parse_art("a", "<>")

        ticks = await scroll(surface, art, 25, Direction.LEFTWARD)

        assert ticks == len(scroll_offsets(2, 80, Direction.LEFTWARD))
        assert _frames_written(stream) == ticks
        assert no_sleep.await_args_list == [call(25)] * ticks

    async def test_viewport_is_requeried_every_tick(
        self,
        surface: TerminalSurface,
        stream: io.StringIO,
        no_sleep: AsyncMock,
        mocker: MockerFixture,
    ):
        sizes = iter([Viewport(width=10, height=3)])
        mocker.patch.object(
            surface, "query_size", side_effect=lambda: next(sizes, Viewport(width=12, height=4))
        )
        art = parse_art("a", "ab")

        ticks = await scroll(surface, art, 1, Direction.LEFTWARD)

        rows = frame_rows(stream.getvalue())
        assert ticks == len(range(10, -3, -2))
        assert len(rows) == ticks * 4
        assert all(len(row) == 12 for row in rows)

    async def test_rightward_scroll_moves_art_right(
        self, surface: TerminalSurface, no_sleep: AsyncMock, mocker: MockerFixture
    ):
        import syoryouma.driver as driver_module

        spy = mocker.spy(driver_module, "compose_frame")
        art = parse_art("a", "abc")

        await scroll(surface, art, 1, Direction.RIGHTWARD)

        offsets = [c.args[1] for c in spy.call_args_list]
        assert offsets == list(range(-3, 81, 2))


class TestScrollSequence:
    async def test_pauses_on_a_cleared_screen_between_figures(
        self,
        surface: TerminalSurface,
        stream: io.StringIO,
        small_store: ArtStore,
        no_sleep: AsyncMock,
    ):
        arts = [small_store.cucumber, small_store.eggplant]
        ticks_each = len(scroll_offsets(4, 80, Direction.LEFTWARD))

        await scroll_sequence(surface, arts, 10, Direction.LEFTWARD)

        assert no_sleep.await_args_list == (
            [call(10)] * ticks_each + [call(30)] + [call(10)] * ticks_each
        )
        assert stream.getvalue().count(CLEAR_SCREEN) == 1
        assert _frames_written(stream) == 2 * ticks_each

    async def test_single_art_has_no_pause(
        self, surface: TerminalSurface, small_store: ArtStore, no_sleep: AsyncMock
    ):
        await scroll_sequence(surface, [small_store.cucumber], 10, Direction.LEFTWARD)

        assert call(30) not in no_sleep.await_args_list


class TestRunAnimation:
    async def test_dual_run_uses_one_alternate_screen_scope(
        self,
        surface: TerminalSurface,
        stream: io.StringIO,
        small_store: ArtStore,
        no_sleep: AsyncMock,
    ):
        spec = AnimationSpec(arts=(small_store.cucumber, small_store.eggplant), speed_ms=5)

        await run_animation(surface, spec)

        output = stream.getvalue()
        assert output.startswith(ALT_SCREEN_ON + CURSOR_HIDE + CLEAR_SCREEN)
        assert output.endswith(CURSOR_SHOW + ALT_SCREEN_OFF)
        assert output.count(ALT_SCREEN_ON) == 1
        assert output.count(ALT_SCREEN_OFF) == 1

    async def test_loop_repeats_until_cancelled_and_restores(
        self,
        surface: TerminalSurface,
        stream: io.StringIO,
        small_store: ArtStore,
        no_sleep: AsyncMock,
    ):
        ticks_once = len(scroll_offsets(4, 80, Direction.LEFTWARD))
        no_sleep.side_effect = [None] * (ticks_once * 3) + [asyncio.CancelledError()]
        spec = AnimationSpec(arts=(small_store.cucumber,), speed_ms=5, loop=True)

        with pytest.raises(asyncio.CancelledError):
            await run_animation(surface, spec)

        assert _frames_written(stream) == ticks_once * 3 + 1
        assert stream.getvalue().endswith(CURSOR_SHOW + ALT_SCREEN_OFF)
        assert not surface.alternate_active


class TestRenderStatic:
    def test_single_art_is_written_verbatim(
        self, surface: TerminalSurface, stream: io.StringIO, small_store: ArtStore
    ):
        render_static(surface, [small_store.cucumber])

        assert stream.getvalue() == CURSOR_HIDE + "<cuc\n cc\n" + CURSOR_SHOW

    def test_two_arts_are_separated_by_two_blank_lines(
        self, surface: TerminalSurface, stream: io.StringIO, small_store: ArtStore
    ):
        render_static(surface, [small_store.cucumber, small_store.eggplant])

        assert stream.getvalue() == CURSOR_HIDE + "<cuc\n cc\n\n\n<egg\n ee\n" + CURSOR_SHOW
        assert ALT_SCREEN_ON not in stream.getvalue()
