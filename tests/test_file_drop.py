from pathlib import Path

import pytest

from studytimer.file_drop import DroppedFile, FileDropHandler, determine_tab_type
from studytimer.status import StatusMessage
from studytimer.tabs import Tab


def _status():
    return StatusMessage(clock=lambda: 0.0)


@pytest.mark.parametrize("name", ["a.md", "B.TXT", "c.yml", "d.log", "e.json", "f.conf"])
def test_supported_extensions_open_markdown(name):
    assert determine_tab_type(name) is Tab.MARKDOWN


@pytest.mark.parametrize("name", ["a.exe", "noext", ".bashrc", "img.png"])
def test_unsupported_extensions(name):
    assert determine_tab_type(name) is None


def test_handle_supported_file():
    status = _status()
    result = FileDropHandler().handle_dropped_files(["notes.md"], status)
    assert result == [DroppedFile(Path("notes.md"), Tab.MARKDOWN)]
    assert status.current() == "File opened: notes.md"


def test_handle_unsupported_file_reports_extension():
    status = _status()
    result = FileDropHandler().handle_dropped_files(["program.exe"], status)
    assert result == []
    assert status.current() == "Unsupported file type: exe"


def test_handle_file_without_extension():
    status = _status()
    FileDropHandler().handle_dropped_files(["README"], status)
    assert status.current() == "Unsupported file type: unknown"


def test_entries_without_path_are_skipped():
    status = _status()
    result = FileDropHandler().handle_dropped_files([None, "a.txt"], status)
    assert [d.path for d in result] == [Path("a.txt")]