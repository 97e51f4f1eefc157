"""A short-lived status line message."""

from __future__ import annotations

import time
from collections.abc import Callable

DISPLAY_SECONDS = 5.0


class StatusMessage:
    """Holds the latest status message for a few seconds after it is shown."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.message = ""
        self.shown_at: float | None = None

    def show(self, message: str) -> None:
        """Set the message and restart its display period."""
        self.message = message
        self.shown_at = self._clock()

    def current(self) -> str | None:
        """Return the message while it is still displayed, else clear it and return None."""
        if self.shown_at is None:
            return None
        if self._clock() - self.shown_at < DISPLAY_SECONDS and self.message:
            return self.message
        self.message = ""
        self.shown_at = None
        return None