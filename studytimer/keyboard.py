"""Keyboard shortcuts for tabs and split panes."""

from __future__ import annotations

import sys
from collections.abc import Iterable


class KeyboardHandler:
    """Turns key presses of one frame into requested actions."""

    def __init__(self, use_mac_cmd: bool | None = None) -> None:
        self.use_mac_cmd = sys.platform == "darwin" if use_mac_cmd is None else use_mac_cmd
        self.new_tab_requested = False
        self.close_tab_requested = False
        self.split_horizontal_requested = False
        self.split_vertical_requested = False
        self.close_split_requested = False

    def handle_input(
        self,
        pressed_keys: Iterable[str],
        ctrl: bool = False,
        shift: bool = False,
        mac_cmd: bool = False,
    ) -> None:
        """Reset all requests, then set those matched by this frame's keys and modifiers.

        Cmd (on macOS) or Ctrl plus T opens a tab, plus W closes it; with Shift
        added, H and V split and X closes the split.
        """
        keys = {key.upper() for key in pressed_keys}
        command = mac_cmd if self.use_mac_cmd else ctrl
        with_shift = command and shift

        self.new_tab_requested = command and "T" in keys
        self.close_tab_requested = command and "W" in keys
        self.split_horizontal_requested = with_shift and "H" in keys
        self.split_vertical_requested = with_shift and "V" in keys
        self.close_split_requested = with_shift and "X" in keys