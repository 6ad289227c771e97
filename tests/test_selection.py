"""Tests for the range selection model."""

import math

import pytest

from ytsections.models import RangeModel

from .conftest import VIDEO_DURATION_SEC, FakePlayer


@pytest.fixture
def model(player: FakePlayer) -> RangeModel:
    m = RangeModel(player)
    m.set_duration(VIDEO_DURATION_SEC)
    return m


def test_set_duration_selects_everything(player: FakePlayer) -> None:
    m = RangeModel(player)
    m.set_duration(42.5)
    assert (m.start, m.end, m.duration) == (0.0, 42.5, 42.5)


def test_set_duration_resets_previous_selection(model: RangeModel) -> None:
    model.set_end(50)
    model.set_start(20)
    model.set_duration(80)
    assert (model.start, model.end) == (0.0, 80.0)


@pytest.mark.parametrize("duration", [-1, math.nan, math.inf])
def test_set_duration_rejects_invalid(duration: float) -> None:
    with pytest.raises(ValueError):
        RangeModel().set_duration(duration)


def test_set_start_seeks_preview(model: RangeModel, player: FakePlayer) -> None:
    assert model.set_start(12.5)
    assert model.start == 12.5
    assert player.seeks == [12.5]


def test_set_start_after_end_is_ignored(model: RangeModel, player: FakePlayer) -> None:
    model.set_end(30)
    player.seeks.clear()
    assert not model.set_start(31)
    assert model.start == 0.0
    assert player.seeks == []


@pytest.mark.parametrize("t", [-0.01, VIDEO_DURATION_SEC + 0.01, math.nan])
def test_set_start_out_of_bounds_is_ignored(model: RangeModel, t: float) -> None:
    assert not model.set_start(t)
    assert model.start == 0.0


def test_set_start_equal_to_end_is_accepted(model: RangeModel) -> None:
    model.set_end(30)
    assert model.set_start(30)
    assert model.start == model.end == 30


def test_set_end_before_start_is_ignored(model: RangeModel) -> None:
    model.set_start(40)
    assert not model.set_end(39.99)
    assert model.end == VIDEO_DURATION_SEC


def test_set_end_beyond_duration_is_ignored(model: RangeModel) -> None:
    model.set_end(50)
    assert not model.set_end(VIDEO_DURATION_SEC + 1)
    assert model.end == 50


def test_set_end_pulls_playback_back(model: RangeModel, player: FakePlayer) -> None:
    player.position = 70
    assert model.set_end(60)
    assert player.seeks == [60]


def test_set_end_leaves_playback_before_end(model: RangeModel, player: FakePlayer) -> None:
    player.position = 10
    assert model.set_end(60)
    assert player.seeks == []


def test_setters_without_player() -> None:
    m = RangeModel()
    m.set_duration(10)
    assert m.set_start(2)
    assert m.set_end(8)
    assert m.on_progress(9, looping=True)


def test_text_edits_share_validation(model: RangeModel) -> None:
    assert model.set_end_text("00:00:30.00")
    assert model.end == 30
    assert not model.set_start_text("00:00:45.00")
    assert model.start == 0
    assert model.set_start_text("00:00:10.25")
    assert model.start == pytest.approx(10.25)


@pytest.mark.parametrize("text", ["bad", "10", "0:00:10.00", ""])
def test_malformed_text_applies_nothing(model: RangeModel, player: FakePlayer, text: str) -> None:
    assert not model.set_start_text(text)
    assert not model.set_end_text(text)
    assert (model.start, model.end) == (0.0, VIDEO_DURATION_SEC)
    assert player.seeks == []


def test_progress_loops_back_to_start(model: RangeModel, player: FakePlayer) -> None:
    model.set_start(10)
    model.set_end(20)
    player.seeks.clear()
    assert not model.on_progress(19.9, looping=True)
    assert model.on_progress(20, looping=True)
    assert model.on_progress(25, looping=True)
    assert player.seeks == [10, 10]


def test_progress_without_looping_does_not_seek(model: RangeModel, player: FakePlayer) -> None:
    model.set_end(20)
    assert not model.on_progress(30, looping=False)
    assert player.seeks == []


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (0, VIDEO_DURATION_SEC, False),
        (50, 50, True),
        (50, 51.99, True),
        (50, 52, False),
        (10, 30, False),
    ],
)
def test_near_overlap(model: RangeModel, start: float, end: float, expected: bool) -> None:
    model.set_end(end)
    model.set_start(start)
    assert model.near_overlap is expected


def test_near_overlap_false_before_duration_known() -> None:
    assert RangeModel().near_overlap is False


def test_display_strings(model: RangeModel) -> None:
    model.set_end(36.62)
    assert model.start_text == "00:00:00.00"
    assert model.end_text == "00:00:36.62"
    assert model.duration_text == "00:01:40.00"


def test_reset(model: RangeModel) -> None:
    model.set_start(5)
    model.reset()
    assert (model.start, model.end, model.duration) == (0.0, 0.0, 0.0)
    assert not model.set_start(1)
