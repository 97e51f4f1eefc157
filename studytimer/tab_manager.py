"""Open tabs, the active tab and an optional two-pane split."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .settings import AppSettings
from .tabs import Tab

_DEFAULT_TITLES: dict[Tab, str] = {
    Tab.TIMER: "Timer",
    Tab.STATS: "Statistics",
    Tab.RECORD: "Record",
    Tab.GRAPH: "Graph",
    Tab.TODO: "Todo",
    Tab.CALCULATOR: "Calculator",
    Tab.FLASHCARDS: "Flashcards",
    Tab.MARKDOWN: "New Markdown",
    Tab.REMINDER: "Reminder",
    Tab.TERMINAL: "Terminal",
    Tab.SETTINGS: "Settings",
}

MIN_SPLIT_RATIO = 0.1
MAX_SPLIT_RATIO = 0.9


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class TabInstance:
    """One open tab."""

    id: str
    tab_type: Tab
    title: str
    file_path: str | None = None
    is_modified: bool = False
    can_close: bool = True

    @classmethod
    def create(cls, tab_type: Tab) -> TabInstance:
        """Open a fresh tab of a kind; only Settings cannot be closed."""
        return cls(
            id=_new_id(),
            tab_type=tab_type,
            title=_DEFAULT_TITLES[tab_type],
            can_close=tab_type is not Tab.SETTINGS,
        )

    @classmethod
    def for_file(cls, tab_type: Tab, file_path: str) -> TabInstance:
        """Open a closable tab titled after a file's name."""
        name = Path(file_path).name
        if name in ("", ".."):
            name = "Unknown File"
        return cls(id=_new_id(), tab_type=tab_type, title=name, file_path=file_path)

    def display_title(self) -> str:
        """Return the title, marked when there are unsaved changes."""
        return f"{self.title}●" if self.is_modified else self.title


class SplitDirection(Enum):
    """How the two panes of a split are arranged."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


@dataclass
class SplitPane:
    """The two tabs shown side by side and where the divider sits (0 to 1)."""

    left_tab_id: str
    right_tab_id: str
    direction: SplitDirection
    split_ratio: float = 0.5


@dataclass
class TabManager:
    """The list of open tabs, which one is active, and the split if any."""

    tabs: list[TabInstance] = field(default_factory=list)
    active_tab_id: str = ""
    split_pane: SplitPane | None = None
    tab_data: dict[str, Any] = field(default_factory=dict)

    def __init__(self, settings: AppSettings) -> None:
        """Open the first enabled tab kind and make sure a Settings tab exists."""
        self.tabs = []
        enabled = settings.enabled_tabs()
        if enabled:
            self.tabs.append(TabInstance.create(enabled[0].tab_type))
        if not any(t.tab_type is Tab.SETTINGS for t in self.tabs):
            self.tabs.append(TabInstance.create(Tab.SETTINGS))
        self.active_tab_id = self.tabs[0].id if self.tabs else ""
        self.split_pane = None
        self.tab_data = {}

    def add_tab(self, tab_type: Tab) -> str:
        """Open a tab of a kind, make it active, and return its id."""
        return self._push(TabInstance.create(tab_type))

    def add_file_tab(self, tab_type: Tab, file_path: str) -> str:
        """Open a tab for a file, make it active, and return its id."""
        return self._push(TabInstance.for_file(tab_type, file_path))

    def _push(self, tab: TabInstance) -> str:
        self.tabs.append(tab)
        self.active_tab_id = tab.id
        return tab.id

    def close_tab(self, tab_id: str) -> bool:
        """Close a tab; returns False when it is unknown or cannot be closed.

        Closing a tab shown in the split ends the split. When the last tab
        closes, a Timer tab is opened in its place.
        """
        position = next((i for i, t in enumerate(self.tabs) if t.id == tab_id), None)
        if position is None or not self.tabs[position].can_close:
            return False

        split = self.split_pane
        if split is not None and tab_id in (split.left_tab_id, split.right_tab_id):
            self.split_pane = None

        del self.tabs[position]
        self.tab_data.pop(tab_id, None)

        if self.active_tab_id == tab_id and self.tabs:
            self.active_tab_id = self.tabs[0].id

        if not self.tabs:
            self._push(TabInstance.create(Tab.TIMER))
        return True

    def active_tab(self) -> TabInstance | None:
        """Return the active tab, if it still exists."""
        return self.tab(self.active_tab_id)

    def tab(self, tab_id: str) -> TabInstance | None:
        """Return the tab with the given id, if any."""
        return next((t for t in self.tabs if t.id == tab_id), None)

    def set_active_tab(self, tab_id: str) -> None:
        """Make a tab active; an unknown id does nothing."""
        if self.tab(tab_id) is not None:
            self.active_tab_id = tab_id

    def create_split(self, direction: SplitDirection) -> None:
        """Split the view when at least two tabs are open and no split exists.

        The active tab goes left; the right pane gets the first other tab,
        preferring one that is not Settings.
        """
        if len(self.tabs) < 2 or self.split_pane is not None:
            return
        left_id = self.active_tab_id
        others = [t for t in self.tabs if t.id != left_id]
        preferred = next((t for t in others if t.tab_type is not Tab.SETTINGS), None)
        chosen = preferred or (others[0] if others else None)
        if chosen is not None:
            right_id = chosen.id
        else:
            active = self.active_tab()
            kind = Tab.SETTINGS if active and active.tab_type is Tab.SETTINGS else Tab.MARKDOWN
            right_id = self.add_tab(kind)
        self.split_pane = SplitPane(left_id, right_id, direction)

    def close_split(self) -> None:
        """End the split view."""
        self.split_pane = None

    def is_split_active(self) -> bool:
        """Tell whether the view is split."""
        return self.split_pane is not None

    def update_split_ratio(self, ratio: float) -> None:
        """Move the divider, kept between 0.1 and 0.9."""
        if self.split_pane is not None:
            self.split_pane.split_ratio = min(max(ratio, MIN_SPLIT_RATIO), MAX_SPLIT_RATIO)

    def set_tab_modified(self, tab_id: str, modified: bool) -> None:
        """Mark a tab as having unsaved changes or not."""
        tab = self.tab(tab_id)
        if tab is not None:
            tab.is_modified = modified

    def set_tab_title(self, tab_id: str, title: str) -> None:
        """Rename a tab."""
        tab = self.tab(tab_id)
        if tab is not None:
            tab.title = title

    def handle_file_drop(self, file_path: str) -> str:
        """Open a dropped file in a Markdown tab and return the tab's id."""
        return self.add_file_tab(Tab.MARKDOWN, file_path)

    def available_tab_types(self, settings: AppSettings) -> list[Tab]:
        """Return the tab kinds that settings allow to be opened."""
        return [config.tab_type for config in settings.enabled_tabs()]

    def reorder_tab(self, tab_id: str, new_index: int) -> None:
        """Move a tab towards a new position in the tab list."""
        old_index = next((i for i, t in enumerate(self.tabs) if t.id == tab_id), None)
        if old_index is None or old_index == new_index or not 0 <= new_index < len(self.tabs):
            return
        tab = self.tabs.pop(old_index)
        insert_index = max(new_index - 1, 0) if new_index > old_index else new_index
        self.tabs.insert(min(insert_index, len(self.tabs)), tab)

    def move_tab_to_split(self, tab_id: str, is_right_pane: bool) -> bool:
        """Show a tab in one pane of the split; returns False when there is no split."""
        if self.split_pane is None:
            return False
        self._assign_pane(tab_id, is_right_pane)
        return True

    def swap_split_tabs(self) -> None:
        """Exchange the tabs of the two panes."""
        split = self.split_pane
        if split is not None:
            split.left_tab_id, split.right_tab_id = split.right_tab_id, split.left_tab_id

    def set_split_active_tab(self, tab_id: str, is_right_pane: bool) -> None:
        """Show a tab in one pane and make it the active tab; needs a split."""
        if self.split_pane is not None:
            self._assign_pane(tab_id, is_right_pane)
            self.set_active_tab(tab_id)

    def _assign_pane(self, tab_id: str, is_right_pane: bool) -> None:
        assert self.split_pane is not None
        if is_right_pane:
            self.split_pane.right_tab_id = tab_id
        else:
            self.split_pane.left_tab_id = tab_id