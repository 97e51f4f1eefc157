"""Application state tying the timer, data, settings and tabs together."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .data import DEFAULT_DATA_PATH, StudyData
from .debug import DebugTools
from .file_drop import FileDropHandler
from .keyboard import KeyboardHandler
from .settings import DEFAULT_SETTINGS_PATH, AppSettings
from .status import StatusMessage
from .tab_manager import SplitDirection, TabManager
from .tabs import Tab, TabSelector
from .terminal import DEFAULT_DIRECTORY, TerminalEmulator
from .timer import Timer


def _load_study_data(path: Path) -> StudyData:
    try:
        return StudyData.load(path)
    except (OSError, ValueError):
        return StudyData(next_deck_id=0, path=path)


def _load_settings(path: Path) -> AppSettings:
    try:
        return AppSettings.load(path)
    except (OSError, ValueError):
        return AppSettings()


class StudyTimerApp:
    """The state behind the window and the actions its controls trigger."""

    def __init__(
        self,
        data_path: str | os.PathLike = DEFAULT_DATA_PATH,
        settings_path: str | os.PathLike = DEFAULT_SETTINGS_PATH,
        terminal_directory: str | os.PathLike = DEFAULT_DIRECTORY,
        use_mac_cmd: bool | None = None,
    ) -> None:
        self.study_data = _load_study_data(Path(data_path))
        self.settings = _load_settings(Path(settings_path))
        self.current_tab: Tab = self.settings.first_enabled_tab()
        self.tab_manager = TabManager(self.settings)
        self.timer = Timer()
        self.status = StatusMessage()
        self.debug_tools = DebugTools()
        self.terminal = TerminalEmulator(terminal_directory)
        self.keyboard_handler = KeyboardHandler(use_mac_cmd)
        self.tab_selector = TabSelector()
        self.file_drop_handler = FileDropHandler()
        self.dragging_tab_id: str | None = None
        self.last_used_split_pane = False

    def handle_keyboard_shortcuts(self) -> None:
        """Carry out the actions the keyboard handler requested this frame."""
        keys = self.keyboard_handler
        if keys.new_tab_requested:
            self.tab_selector.show()
        if keys.close_tab_requested and not self.tab_manager.close_tab(
            self.tab_manager.active_tab_id
        ):
            self.status.show("Cannot close this tab")
        if keys.split_horizontal_requested:
            self.tab_manager.create_split(SplitDirection.HORIZONTAL)
        if keys.split_vertical_requested:
            self.tab_manager.create_split(SplitDirection.VERTICAL)
        if keys.close_split_requested:
            self.tab_manager.close_split()

    def open_dropped_files(self, paths: Iterable[str | os.PathLike | None]) -> list[str]:
        """Open a tab for each supported dropped file; returns the new tab ids."""
        dropped = self.file_drop_handler.handle_dropped_files(paths, self.status)
        return [self.tab_manager.add_file_tab(f.tab_type, str(f.path)) for f in dropped]

    def add_selected_tab(self, tab: Tab) -> str:
        """Open the tab kind chosen in the selector; in a split it goes to the last used pane."""
        new_id = self.tab_manager.add_tab(tab)
        if self.tab_manager.is_split_active():
            self.tab_manager.set_split_active_tab(new_id, self.last_used_split_pane)
        return new_id

    def activate_tab(self, tab_id: str) -> None:
        """Switch to a tab, showing it in the last used pane when split."""
        if self.tab_manager.is_split_active():
            self.tab_manager.set_split_active_tab(tab_id, self.last_used_split_pane)
        else:
            self.tab_manager.set_active_tab(tab_id)

    def handle_tab_drop(self, tab_id: str) -> None:
        """React to a tab being dropped after a drag."""
        if self.tab_manager.is_split_active():
            self.status.show("Tab dropped - split functionality needs enhancement")

    def update_last_used_split_pane(self, is_right_pane: bool) -> None:
        """Remember which pane of the split was used last."""
        self.last_used_split_pane = is_right_pane