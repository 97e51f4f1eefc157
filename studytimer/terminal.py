"""A small built-in terminal with file commands, history, fuzzy search and a pager."""

from __future__ import annotations

import os
import subprocess
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .fsops import (
    CommandError,
    copy_path,
    fuzzy_search,
    grep,
    list_directory,
    move_path,
    remove_path,
    render_tree,
    resolve_path,
    split_command,
)

DEFAULT_DIRECTORY = "files"
FUZZY_LIMIT = 100
WELCOME = "Terminal initialized. Type 'help' for available commands."

HELP_TEXT = "\n".join(
    (
        "Available commands:",
        "Navigation:",
        "cd <dir>       - Change directory",
        "pwd            - Print working directory",
        "ls [-a] [path] - List directory contents (-a: show hidden files)",
        "",
        "File Operations:",
        "mkdir <dir>    - Create directory",
        "touch <file>   - Create empty file",
        "rm [-r] <path> - Remove file or directory (-r: recursive)",
        "cp [-r] <src> <dst> - Copy file or directory (-r: recursive)",
        "mv <src> <dst> - Move/rename file or directory",
        "",
        "File Viewing:",
        "cat <file>     - Display file content",
        "less/more <file> - View file with paging (j/k to scroll, q to exit)",
        "tree [path]    - Display directory structure as a tree",
        "grep <pattern> <path> - Search for pattern in file(s)",
        "",
        "Utilities:",
        "fuzzy <term>   - Fuzzy search for files",
        "clear          - Clear terminal output",
        "help           - Show this help message",
        "exit           - (Note: In this environment, use the tab system to exit)",
        "",
        "You can also run system commands like 'echo', 'cat', etc.",
    )
)

Result = tuple[str, bool]


class EntryType(Enum):
    """What a line of terminal output is."""

    COMMAND = "Command"
    OUTPUT = "Output"
    ERROR = "Error"


@dataclass
class TerminalEntry:
    """One block of terminal output."""

    content: str
    entry_type: EntryType


def _line_count(text: str) -> int:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return len(parts)


class TerminalEmulator:
    """Runs commands against a working directory and keeps their output."""

    def __init__(self, directory: str | os.PathLike = DEFAULT_DIRECTORY) -> None:
        self.current_directory = Path(directory)
        if not self.current_directory.exists():
            try:
                self.current_directory.mkdir(parents=True)
            except OSError:
                pass
        self.max_history = 100
        self.command_history: deque[str] = deque()
        self.output_history: list[TerminalEntry] = [TerminalEntry(WELCOME, EntryType.OUTPUT)]
        self.current_input = ""
        self.history_index: int | None = None
        self.fuzzy_results: list[Path] = []
        self.fuzzy_index = 0
        self.fuzzy_mode = False
        self.fuzzy_query = ""
        self.pager_content: str | None = None
        self.pager_offset = 0

    # Input and history

    def execute_command(self) -> TerminalEntry | None:
        """Run the current input, record it and its output; returns the output entry.

        Blank input does nothing and returns None.
        """
        if not self.current_input.strip():
            return None
        command = self.current_input
        self.output_history.append(TerminalEntry(f"> {command}", EntryType.COMMAND))

        self.command_history.appendleft(command)
        while len(self.command_history) > self.max_history:
            self.command_history.pop()
        self.history_index = None

        output, is_error = self._process(command)
        entry = TerminalEntry(output, EntryType.ERROR if is_error else EntryType.OUTPUT)
        self.output_history.append(entry)
        self.current_input = ""
        return entry

    def run(self, command: str) -> TerminalEntry | None:
        """Type a command and run it; returns the output entry."""
        self.current_input = command
        return self.execute_command()

    def navigate_history(self, up: bool) -> None:
        """Recall an older (up) or newer command into the input line."""
        if not self.command_history:
            return
        index = self.history_index
        if up:
            if index is None:
                new_index = 0
            elif index < len(self.command_history) - 1:
                new_index = index + 1
            else:
                new_index = index
            self.current_input = self.command_history[new_index]
            self.history_index = new_index
        else:
            new_index = None if index in (None, 0) else index - 1
            self.current_input = "" if new_index is None else self.command_history[new_index]
            self.history_index = new_index

    # Fuzzy search

    def enter_fuzzy_mode(self, query: str) -> None:
        """Start a fuzzy file search for a query."""
        self.fuzzy_mode = True
        self.fuzzy_query = query
        self.fuzzy_index = 0
        self.update_fuzzy_results()

    def exit_fuzzy_mode(self) -> None:
        """Leave fuzzy search and drop its results."""
        self.fuzzy_mode = False
        self.fuzzy_results.clear()

    def update_fuzzy_results(self) -> None:
        """Search below the working directory for names holding the query."""
        self.fuzzy_results = []
        if not self.fuzzy_query:
            return
        self.fuzzy_index = 0
        self.fuzzy_results = fuzzy_search(self.current_directory, self.fuzzy_query, FUZZY_LIMIT)

    def select_next_fuzzy_result(self) -> None:
        """Move the selection down, wrapping around."""
        if self.fuzzy_results:
            self.fuzzy_index = (self.fuzzy_index + 1) % len(self.fuzzy_results)

    def select_prev_fuzzy_result(self) -> None:
        """Move the selection up, wrapping around."""
        if self.fuzzy_results:
            self.fuzzy_index = (self.fuzzy_index - 1) % len(self.fuzzy_results)

    def selected_fuzzy_result(self) -> Path | None:
        """Return the selected search result, if any."""
        if 0 <= self.fuzzy_index < len(self.fuzzy_results):
            return self.fuzzy_results[self.fuzzy_index]
        return None

    # Pager

    def start_pager(self, content: str) -> None:
        """Show content in the pager from its first line."""
        self.pager_content = content
        self.pager_offset = 0

    def exit_pager(self) -> None:
        """Close the pager."""
        self.pager_content = None
        self.pager_offset = 0

    def scroll_pager(self, lines: int, page_height: int) -> None:
        """Scroll by a number of lines, down when positive, staying within the content."""
        if self.pager_content is None:
            return
        if lines > 0:
            last_offset = max(_line_count(self.pager_content) - page_height, 0)
            self.pager_offset = min(self.pager_offset + lines, last_offset)
        else:
            self.pager_offset = max(self.pager_offset + lines, 0)

    # Commands

    def _process(self, command: str) -> Result:
        parts = split_command(command)
        if not parts:
            return "", False
        handlers: dict[str, Callable[[list[str]], Result]] = {
            "cd": self._cmd_cd,
            "pwd": self._cmd_pwd,
            "ls": self._cmd_ls,
            "mkdir": self._cmd_mkdir,
            "touch": self._cmd_touch,
            "rm": self._cmd_rm,
            "cp": self._cmd_cp,
            "mv": self._cmd_mv,
            "cat": self._cmd_cat,
            "less": self._cmd_less,
            "more": self._cmd_less,
            "tree": self._cmd_tree,
            "grep": self._cmd_grep,
            "fuzzy": self._cmd_fuzzy,
            "clear": self._cmd_clear,
            "help": self._cmd_help,
            "exit": self._cmd_exit,
        }
        handler = handlers.get(parts[0], self._system_command)
        try:
            return handler(parts)
        except CommandError as exc:
            return exc.message, True

    def _path(self, argument: str) -> Path:
        return resolve_path(self.current_directory, argument)

    def _cmd_cd(self, parts: list[str]) -> Result:
        if len(parts) < 2:
            return "Usage: cd <directory>", True
        new_dir = self._path(parts[1])
        if not new_dir.is_dir():
            return f"Directory not found: {parts[1]}", True
        self.current_directory = new_dir
        return f"Changed directory to: {new_dir}", False

    def _cmd_pwd(self, parts: list[str]) -> Result:
        return str(self.current_directory), False

    def _cmd_ls(self, parts: list[str]) -> Result:
        show_hidden = False
        path = self.current_directory
        for argument in parts[1:]:
            if argument.startswith("-"):
                show_hidden = show_hidden or "a" in argument
            else:
                path = self._path(argument)
        return list_directory(path, show_hidden), False

    def _cmd_mkdir(self, parts: list[str]) -> Result:
        if len(parts) < 2:
            return "Usage: mkdir <directory>", True
        path = self._path(parts[1])
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return f"Failed to create directory: {exc}", True
        return f"Created directory: {path}", False

    def _cmd_touch(self, parts: list[str]) -> Result:
        if len(parts) < 2:
            return "Usage: touch <file>", True
        path = self._path(parts[1])
        try:
            path.write_bytes(b"")
        except OSError as exc:
            return f"Failed to create file: {exc}", True
        return f"Created file: {path}", False

    def _cmd_rm(self, parts: list[str]) -> Result:
        usage = "Usage: rm [-r] <path>"
        if len(parts) < 2:
            return usage, True
        recursive = parts[1] in ("-r", "-rf")
        if recursive and len(parts) < 3:
            return usage, True
        return remove_path(self._path(parts[2 if recursive else 1]), recursive), False

    def _cmd_cp(self, parts: list[str]) -> Result:
        usage = "Usage: cp [-r] <source> <destination>"
        if len(parts) < 3:
            return usage, True
        recursive = parts[1] == "-r"
        if recursive and len(parts) < 4:
            return usage, True
        src, dst = parts[2:4] if recursive else parts[1:3]
        return copy_path(self._path(src), self._path(dst), recursive), False

    def _cmd_mv(self, parts: list[str]) -> Result:
        if len(parts) < 3:
            return "Usage: mv <source> <destination>", True
        return move_path(self._path(parts[1]), self._path(parts[2])), False

    def _read_file(self, argument: str) -> tuple[Path, str]:
        path = self._path(argument)
        if not path.exists():
            raise CommandError(f"File not found: {path}")
        if path.is_dir():
            raise CommandError(f"{path} is a directory")
        try:
            return path, path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandError(f"Failed to read file: {exc}") from exc

    def _cmd_cat(self, parts: list[str]) -> Result:
        if len(parts) < 2:
            return "Usage: cat <file>", True
        _, content = self._read_file(parts[1])
        return content, False

    def _cmd_less(self, parts: list[str]) -> Result:
        if len(parts) < 2:
            return f"Usage: {parts[0]} <file>", True
        path, content = self._read_file(parts[1])
        self.start_pager(content)
        return f"Viewing file: {path} (Press j/k to scroll, q to exit)", False

    def _cmd_tree(self, parts: list[str]) -> Result:
        path = self._path(parts[1]) if len(parts) > 1 else self.current_directory
        return render_tree(path), False

    def _cmd_grep(self, parts: list[str]) -> Result:
        if len(parts) < 3:
            return "Usage: grep <pattern> <file or path>", True
        return grep(parts[1], self._path(parts[2])), False

    def _cmd_fuzzy(self, parts: list[str]) -> Result:
        if len(parts) < 2:
            return "Usage: fuzzy <search_term>", True
        term = parts[1]
        self.enter_fuzzy_mode(term)
        if not self.fuzzy_results:
            self.exit_fuzzy_mode()
            return f"No matches found for '{term}'", False
        lines = [
            f"Found {len(self.fuzzy_results)} matches for '{term}'\n",
            "Use arrow keys to navigate, Enter to select, Esc to cancel\n\n",
        ]
        lines.extend(
            f"{'>> ' if i == self.fuzzy_index else '   '}{path}\n"
            for i, path in enumerate(self.fuzzy_results)
        )
        return "".join(lines), False

    def _cmd_clear(self, parts: list[str]) -> Result:
        self.output_history.clear()
        return "", False

    def _cmd_help(self, parts: list[str]) -> Result:
        return HELP_TEXT, False

    def _cmd_exit(self, parts: list[str]) -> Result:
        return "Terminal emulator cannot be exited in this environment.", False

    def _system_command(self, parts: list[str]) -> Result:
        argv = ["cmd", "/C", *parts] if os.name == "nt" else parts
        try:
            completed = subprocess.run(
                argv, cwd=self.current_directory, capture_output=True, check=False
            )
        except OSError as exc:
            return f"Failed to execute command: {exc}", True
        success = completed.returncode == 0
        result = completed.stdout.decode("utf-8", errors="replace") + completed.stderr.decode(
            "utf-8", errors="replace"
        )
        if not result:
            result = (
                "Command executed successfully."
                if success
                else f"Command failed with exit code: {completed.returncode}"
            )
        return result, not success