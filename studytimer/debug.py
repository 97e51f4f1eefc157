"""Debug tools for manipulating the study timer."""

from __future__ import annotations

from datetime import timedelta

from .timer import Timer


class DebugTools:
    """Debug mode switch and helpers that add time to a timer's offset.

    Each action returns the message to show on the status line.
    """

    def __init__(self) -> None:
        self.enabled = False
        self.time_to_add = 5.0

    def enable(self) -> str:
        """Turn debug mode on."""
        self.enabled = True
        return "Debug mode enabled"

    def disable(self) -> str:
        """Turn debug mode off."""
        self.enabled = False
        return "Debug mode disabled"

    def add_configured_time(self, timer: Timer) -> str:
        """Add the configured number of minutes to the timer."""
        timer.add_time(self.time_to_add)
        return f"Added {self.time_to_add:.1f} minutes to timer"

    def add_minutes(self, timer: Timer, minutes: float) -> str:
        """Add a fixed number of minutes to the timer."""
        timer.add_time(minutes)
        if minutes == 60:
            return "Added 1 hour to timer"
        return f"Added {minutes:g} minutes to timer"

    def reset_offset(self, timer: Timer) -> str:
        """Clear the timer's debug offset."""
        timer.time_offset = timedelta(0)
        return "Time offset reset to zero"

    def describe_offset(self, timer: Timer) -> str:
        """Return the timer's offset as HH:MM:SS."""
        total = int(timer.time_offset.total_seconds())
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"Current time offset: {hours:02}:{minutes:02}:{seconds:02}"