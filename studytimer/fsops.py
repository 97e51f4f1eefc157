"""File-system operations behind the built-in terminal commands."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

StrPath = str | os.PathLike


class CommandError(Exception):
    """A command failed; the message is what the terminal shows."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def split_command(command: str) -> list[str]:
    """Split a command line on spaces; double quotes group words and are dropped."""
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in command.strip():
        if char == '"':
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                parts.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        parts.append("".join(current))
    return parts


def resolve_path(base: StrPath, argument: str) -> Path:
    """Return the argument as a path: absolute if it starts with '/', else under base."""
    if argument.startswith("/"):
        return Path(argument)
    return Path(base) / argument


def list_directory(path: StrPath, show_hidden: bool = False) -> str:
    """List a directory: sub-directories first with a trailing '/', then files."""
    path = Path(path)
    if not path.exists():
        raise CommandError(f"Path not found: {path}")
    try:
        names = os.listdir(path)
    except OSError as exc:
        raise CommandError(f"Error reading directory: {exc}") from exc

    dirs: list[str] = []
    files: list[str] = []
    for name in names:
        if not show_hidden and name.startswith("."):
            continue
        if (path / name).is_dir():
            dirs.append(f"{name}/")
        else:
            files.append(name)

    result = "".join(f"{entry}\n" for entry in sorted(dirs) + sorted(files))
    return result or "Directory is empty."


def _walk_tree(directory: Path, prefix: str, lines: list[str]) -> tuple[int, int]:
    dirs, files = 1, 0
    names = sorted(name for name in os.listdir(directory) if not name.startswith("."))
    for position, name in enumerate(names):
        last = position == len(names) - 1
        lines.append(f"{prefix}{'└── ' if last else '├── '}{name}")
        child = directory / name
        if child.is_dir():
            sub_dirs, sub_files = _walk_tree(child, prefix + ("    " if last else "│   "), lines)
            dirs += sub_dirs
            files += sub_files
        else:
            files += 1
    return dirs, files


def render_tree(path: StrPath) -> str:
    """Draw a directory and its non-hidden contents as a tree, with totals."""
    path = Path(path)
    if not path.exists():
        raise CommandError(f"Path not found: {path}")
    if not path.is_dir():
        raise CommandError(f"{path} is not a directory")
    lines = [str(path)]
    try:
        dirs, files = _walk_tree(path, "", lines)
    except OSError as exc:
        raise CommandError(f"Error reading directory: {exc}") from exc
    body = "".join(f"{line}\n" for line in lines)
    return f"{body}\n{dirs - 1} directories, {files} files"


def _text_lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def search_in_file(path: StrPath, pattern: str) -> list[str]:
    """Return the lines holding the pattern as "<line number>: <line>".

    Raises OSError when the file cannot be read and UnicodeDecodeError when it is not UTF-8.
    """
    text = Path(path).read_text(encoding="utf-8")
    return [
        f"{number}: {line}"
        for number, line in enumerate(_text_lines(text), start=1)
        if pattern in line
    ]


def grep(pattern: str, path: StrPath) -> str:
    """Search a file, or every file directly inside a directory, for a pattern."""
    path = Path(path)
    if not path.exists():
        raise CommandError(f"Path not found: {path}")
    no_matches = f"No matches found for '{pattern}' in {path}"

    if not path.is_dir():
        try:
            matches = search_in_file(path, pattern)
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandError(f"Error searching in file: {exc}") from exc
        if not matches:
            return no_matches
        return "".join(f"{line}\n" for line in matches)

    try:
        names = sorted(os.listdir(path))
    except OSError as exc:
        raise CommandError(f"Error reading directory: {exc}") from exc

    chunks: list[str] = []
    found = False
    for name in names:
        file_path = path / name
        if not file_path.is_file():
            continue
        try:
            matches = search_in_file(file_path, pattern)
        except (OSError, UnicodeDecodeError) as exc:
            chunks.append(f"Error searching in {file_path}: {exc}\n")
            continue
        if matches:
            found = True
            chunks.append(f"File: {file_path}\n")
            chunks.extend(f"{line}\n" for line in matches)
            chunks.append("\n")
    return "".join(chunks) if found else no_matches


def _copy_file(src: Path, dst: Path) -> None:
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def _copy_tree(src: Path, dst: Path) -> None:
    if not dst.exists():
        dst.mkdir(parents=True)
    with os.scandir(src) as entries:
        for entry in entries:
            target = dst / entry.name
            if entry.is_dir(follow_symlinks=False):
                _copy_tree(Path(entry.path), target)
            else:
                _copy_file(Path(entry.path), target)


def _ensure_parent(dst: Path) -> None:
    parent = dst.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True)
        except OSError as exc:
            raise CommandError(f"Failed to create parent directories: {exc}") from exc


def copy_path(src: StrPath, dst: StrPath, recursive: bool = False) -> str:
    """Copy a file, or a directory when recursive; parent directories are created."""
    src, dst = Path(src), Path(dst)
    if not src.exists():
        raise CommandError(f"Source not found: {src}")
    try:
        if src.is_dir():
            if not recursive:
                raise CommandError("Failed to copy: Cannot copy directory without -r flag")
            _copy_tree(src, dst)
        else:
            _ensure_parent(dst)
            _copy_file(src, dst)
    except OSError as exc:
        raise CommandError(f"Failed to copy: {exc}") from exc
    return f"Copied from {src} to {dst}"


def move_path(src: StrPath, dst: StrPath) -> str:
    """Move or rename a file or directory; parent directories are created."""
    src, dst = Path(src), Path(dst)
    if not src.exists():
        raise CommandError(f"Source not found: {src}")
    _ensure_parent(dst)
    try:
        os.rename(src, dst)
    except OSError as exc:
        raise CommandError(f"Failed to move: {exc}") from exc
    return f"Moved from {src} to {dst}"


def remove_path(path: StrPath, recursive: bool = False) -> str:
    """Remove a file, an empty directory, or any directory when recursive."""
    path = Path(path)
    if not path.exists():
        raise CommandError(f"Path not found: {path}")
    try:
        if path.is_dir():
            if recursive:
                shutil.rmtree(path)
            else:
                path.rmdir()
        else:
            path.unlink()
    except OSError as exc:
        raise CommandError(f"Failed to remove: {exc}") from exc
    return f"Removed: {path}"


def _fuzzy_matches(directory: Path, query: str) -> Iterator[Path]:
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return
    for name in names:
        path = directory / name
        if query in name.lower():
            yield path
        if path.is_dir():
            yield from _fuzzy_matches(path, query)


def fuzzy_search(root: StrPath, query: str, limit: int = 100) -> list[Path]:
    """Find paths below root whose name holds the query, ignoring case, up to limit."""
    return list(islice(_fuzzy_matches(Path(root), query.lower()), max(limit, 0)))