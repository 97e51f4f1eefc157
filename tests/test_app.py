import pytest

from studytimer.app import StudyTimerApp
from studytimer.tab_manager import SplitDirection
from studytimer.tabs import Tab


@pytest.fixture
def make_app(tmp_path):
    def build():
        return StudyTimerApp(
            data_path=tmp_path / "data.json",
            settings_path=tmp_path / "settings.json",
            terminal_directory=tmp_path / "files",
            use_mac_cmd=False,
        )

    return build


def test_defaults(make_app):
    app = make_app()
    assert app.current_tab is Tab.TIMER
    kinds = [t.tab_type for t in app.tab_manager.tabs]
    assert kinds == [Tab.TIMER, Tab.SETTINGS]
    assert app.tab_manager.active_tab().tab_type is Tab.TIMER
    assert app.study_data.next_deck_id == 1


def test_corrupt_files_fall_back(tmp_path, make_app):
    (tmp_path / "data.json").write_text("{", encoding="utf-8")
    (tmp_path / "settings.json").write_text("[]", encoding="utf-8")
    app = make_app()
    assert app.study_data.next_deck_id == 0
    assert app.study_data.sessions == []
    assert app.current_tab is Tab.TIMER


def test_new_tab_shortcut_opens_selector(make_app):
    app = make_app()
    app.keyboard_handler.handle_input(["t"], ctrl=True)
    app.handle_keyboard_shortcuts()
    assert app.tab_selector.is_open


def test_close_tab_shortcut(make_app):
    app = make_app()
    app.keyboard_handler.handle_input(["w"], ctrl=True)
    app.handle_keyboard_shortcuts()
    assert [t.tab_type for t in app.tab_manager.tabs] == [Tab.SETTINGS]
    app.handle_keyboard_shortcuts()
    assert app.status.current() == "Cannot close this tab"
    assert len(app.tab_manager.tabs) == 1


def test_split_shortcuts(make_app):
    app = make_app()
    app.keyboard_handler.handle_input(["v"], ctrl=True, shift=True)
    app.handle_keyboard_shortcuts()
    assert app.tab_manager.split_pane.direction is SplitDirection.VERTICAL
    app.keyboard_handler.handle_input(["x"], ctrl=True, shift=True)
    app.handle_keyboard_shortcuts()
    assert not app.tab_manager.is_split_active()


def test_open_dropped_files(make_app):
    app = make_app()
    ids = app.open_dropped_files(["notes.md", "image.png", None])
    assert len(ids) == 1
    tab = app.tab_manager.tab(ids[0])
    assert tab.title == "notes.md"
    assert tab.tab_type is Tab.MARKDOWN
    assert app.tab_manager.active_tab_id == ids[0]
    assert app.status.current() == "Unsupported file type: png"


def test_add_selected_tab_in_split_uses_last_pane(make_app):
    app = make_app()
    app.tab_manager.create_split(SplitDirection.HORIZONTAL)
    app.update_last_used_split_pane(True)
    new_id = app.add_selected_tab(Tab.TODO)
    assert app.tab_manager.split_pane.right_tab_id == new_id
    assert app.tab_manager.active_tab_id == new_id


def test_activate_tab(make_app):
    app = make_app()
    settings_id = app.tab_manager.tabs[1].id
    app.activate_tab(settings_id)
    assert app.tab_manager.active_tab_id == settings_id
    timer_id = app.tab_manager.tabs[0].id
    app.tab_manager.create_split(SplitDirection.VERTICAL)
    app.update_last_used_split_pane(False)
    app.activate_tab(timer_id)
    assert app.tab_manager.split_pane.left_tab_id == timer_id


def test_handle_tab_drop(make_app):
    app = make_app()
    tab_id = app.tab_manager.tabs[0].id
    app.handle_tab_drop(tab_id)
    assert app.status.current() is None
    app.tab_manager.create_split(SplitDirection.VERTICAL)
    app.handle_tab_drop(tab_id)
    assert app.status.current() == "Tab dropped - split functionality needs enhancement"