"""Tab kinds offered by the application and the dialog for picking a new one."""

from __future__ import annotations

from enum import Enum


class Tab(Enum):
    """A kind of tab; the value is the name used when stored as JSON."""

    TIMER = "Timer"
    STATS = "Stats"
    RECORD = "Record"
    GRAPH = "Graph"
    TODO = "Todo"
    CALCULATOR = "Calculator"
    MARKDOWN = "Markdown"
    REMINDER = "Reminder"
    TERMINAL = "Terminal"
    SETTINGS = "Settings"
    FLASHCARDS = "Flashcards"


_ICONS: dict[Tab, str] = {
    Tab.TIMER: "⏰",
    Tab.STATS: "📊",
    Tab.RECORD: "📝",
    Tab.GRAPH: "📈",
    Tab.TODO: "✅",
    Tab.CALCULATOR: "🧮",
    Tab.FLASHCARDS: "🃏",
    Tab.MARKDOWN: "📄",
    Tab.REMINDER: "🔔",
    Tab.TERMINAL: "💻",
    Tab.SETTINGS: "⚙️",
}

_DESCRIPTIONS: dict[Tab, str] = {
    Tab.TIMER: "Focus timer with pomodoro technique support",
    Tab.STATS: "View your study statistics and progress",
    Tab.RECORD: "Record and manage study sessions",
    Tab.GRAPH: "Visualize your study data with charts",
    Tab.TODO: "Manage tasks and to-do items",
    Tab.FLASHCARDS: "Anki like flashcards",
    Tab.CALCULATOR: "Built-in calculator for quick calculations",
    Tab.MARKDOWN: "Write and edit markdown documents",
    Tab.REMINDER: "Set reminders and notifications",
    Tab.TERMINAL: "Built-in terminal emulator",
    Tab.SETTINGS: "Configure application settings",
}


def tab_icon(tab: Tab) -> str:
    """Return the icon shown for a tab kind."""
    return _ICONS[tab]


def tab_description(tab: Tab) -> str:
    """Return the one-line description shown for a tab kind."""
    return _DESCRIPTIONS[tab]


class TabSelector:
    """State of the "New Tab" dialog."""

    def __init__(self) -> None:
        self.selected_tab: Tab | None = None
        self.is_open = False

    def show(self) -> None:
        """Open the dialog with nothing selected."""
        self.is_open = True
        self.selected_tab = None

    def hide(self) -> None:
        """Close the dialog and forget any selection."""
        self.is_open = False
        self.selected_tab = None

    def select(self, tab: Tab) -> Tab | None:
        """Pick a tab kind; closes the dialog and returns the choice.

        Returns None when the dialog is not open.
        """
        if not self.is_open:
            return None
        self.hide()
        return tab