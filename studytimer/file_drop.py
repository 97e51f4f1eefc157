"""Opening files dropped onto the window."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .status import StatusMessage
from .tabs import Tab

_TEXT_EXTENSIONS = frozenset(
    {
        "md", "markdown", "txt", "text", "json", "rs", "rust", "py", "python",
        "js", "javascript", "ts", "typescript", "html", "htm", "css", "xml",
        "yaml", "yml", "toml", "ini", "cfg", "conf", "log",
    }
)


@dataclass(frozen=True)
class DroppedFile:
    """A dropped file and the kind of tab that opens it."""

    path: Path
    tab_type: Tab


def determine_tab_type(path: str | os.PathLike) -> Tab | None:
    """Return the tab kind for a file by its extension, or None if unsupported."""
    extension = Path(path).suffix[1:].lower()
    return Tab.MARKDOWN if extension in _TEXT_EXTENSIONS else None


class FileDropHandler:
    """Sorts dropped files into those that can be opened and those that cannot."""

    def handle_dropped_files(
        self,
        paths: Iterable[str | os.PathLike | None],
        status: StatusMessage,
    ) -> list[DroppedFile]:
        """Return the supported files, reporting each one on the status line.

        Entries without a path are skipped.
        """
        processed: list[DroppedFile] = []
        for raw in paths:
            if raw is None:
                continue
            path = Path(raw)
            tab_type = determine_tab_type(path)
            if tab_type is None:
                extension = path.suffix[1:] or "unknown"
                status.show(f"Unsupported file type: {extension}")
            else:
                processed.append(DroppedFile(path, tab_type))
                status.show(f"File opened: {path}")
        return processed