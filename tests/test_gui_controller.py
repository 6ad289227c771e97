from typing import NoReturn

import pytest

from ytsections.gui.controller import ViewState, YtSectionsController

from .conftest import VIDEO_URL, FakePlayer


class DummyGUI:
    def __init__(self) -> None:
        self.states: list[ViewState] = []
        self.status: list[str] = []
        self.loaded: list[str] = []
        self.unloaded = 0
        self.copied_flashes = 0

    def render(self, state: ViewState) -> None:
        self.states.append(state)

    def append_status(self, message: str) -> None:
        self.status.append(message)

    def load_media(self, url: str) -> None:
        self.loaded.append(url)

    def unload_media(self) -> None:
        self.unloaded += 1

    def flash_copied(self) -> None:
        self.copied_flashes += 1

    @property
    def state(self) -> ViewState:
        return self.states[-1]


@pytest.fixture
def gui() -> DummyGUI:
    return DummyGUI()


@pytest.fixture
def controller(gui: DummyGUI, player: FakePlayer) -> YtSectionsController:
    c = YtSectionsController(gui, player)  # type: ignore[arg-type]
    c.clipboard_writer = lambda _text: None
    return c


def test_invalid_url_shows_error_and_hides_selection(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed("https://example.com")
    assert gui.state.show_url_error is True
    assert gui.state.url_valid is False
    assert gui.state.command == ""
    assert gui.unloaded == 1


def test_empty_url_shows_no_error(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed("")
    assert gui.state.show_url_error is False


def test_valid_url_loads_media(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed(VIDEO_URL)
    assert gui.loaded == [VIDEO_URL]
    controller.on_duration_known(90)
    assert gui.state.url_valid is True
    assert gui.state.end_text == "00:01:30.00"
    assert '"*0-90"' in gui.state.command


def test_manual_duration(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed(VIDEO_URL)
    controller.on_duration_text("bad")
    assert gui.state.duration == 0
    controller.on_duration_text("00:02:00.00")
    assert gui.state.duration == 120


def test_rejected_text_edit_rerenders_previous_value(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed(VIDEO_URL)
    controller.on_duration_known(60)
    controller.on_end_moved(30)
    rendered = len(gui.states)
    controller.on_start_text("00:00:45.00")
    assert len(gui.states) == rendered + 1
    assert gui.state.start_text == "00:00:00.00"


def test_slider_overlap_flag(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed(VIDEO_URL)
    controller.on_duration_known(100)
    controller.on_end_moved(50)
    controller.on_start_moved(49.5)
    assert gui.state.overlap is True


def test_copy_updates_history(controller: YtSectionsController, gui: DummyGUI) -> None:
    controller.on_url_changed(VIDEO_URL)
    controller.on_duration_known(10)
    controller.copy_command()
    assert gui.copied_flashes == 1
    assert gui.state.history == (gui.state.command,)
    controller.clear_history()
    assert gui.state.history == ()


def test_copy_failure_goes_to_status(controller: YtSectionsController, gui: DummyGUI) -> None:
    def boom(_text: str) -> NoReturn:
        raise RuntimeError("boom")

    controller.clipboard_writer = boom
    controller.on_url_changed(VIDEO_URL)
    controller.on_duration_known(10)
    controller.copy_command()
    assert gui.copied_flashes == 0
    assert gui.status[-1].endswith("boom")
