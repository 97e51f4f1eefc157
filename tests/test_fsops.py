from pathlib import Path

import pytest

from studytimer.fsops import (
    CommandError,
    copy_path,
    fuzzy_search,
    grep,
    list_directory,
    move_path,
    remove_path,
    render_tree,
    resolve_path,
    search_in_file,
    split_command,
)


def test_split_command_respects_quotes():
    assert split_command('cp "my file.txt" dest') == ["cp", "my file.txt", "dest"]


def test_split_command_collapses_spaces():
    assert split_command("  ls   -a  ") == ["ls", "-a"]


def test_split_command_empty():
    assert split_command("   ") == []


def test_resolve_path_relative_and_absolute():
    assert resolve_path("files", "notes") == Path("files") / "notes"
    assert resolve_path("files", "/tmp/x") == Path("/tmp/x")


def test_list_directory_orders_dirs_first_and_hides_dotfiles(tmp_path):
    (tmp_path / "zdir").mkdir()
    (tmp_path / "b.txt").write_text("x")
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / ".hidden").write_text("x")
    assert list_directory(tmp_path).splitlines() == ["zdir/", "a.txt", "b.txt"]
    assert ".hidden" in list_directory(tmp_path, show_hidden=True).splitlines()


def test_list_directory_empty(tmp_path):
    assert list_directory(tmp_path) == "Directory is empty."


def test_list_directory_missing(tmp_path):
    with pytest.raises(CommandError) as info:
        list_directory(tmp_path / "nope")
    assert info.value.message.startswith("Path not found:")


def test_render_tree(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("x")
    lines = render_tree(tmp_path).split("\n")
    assert lines[0] == str(tmp_path)
    assert lines[1:4] == ["├── a.txt", "└── sub", "    └── b.txt"]
    assert lines[-1] == "1 directories, 2 files"


def test_render_tree_rejects_file(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")
    with pytest.raises(CommandError) as info:
        render_tree(target)
    assert info.value.message == f"{target} is not a directory"


def test_search_in_file_numbers_lines(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("hello\nworld\nhello again\r\n")
    assert search_in_file(target, "hello") == ["1: hello", "3: hello again"]


def test_grep_single_file_no_match(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("abc\n")
    assert grep("zzz", target) == f"No matches found for 'zzz' in {target}"


def test_grep_directory_lists_file_headers(tmp_path):
    (tmp_path / "a.txt").write_text("needle here\n")
    (tmp_path / "b.txt").write_text("nothing\n")
    result = grep("needle", tmp_path)
    assert f"File: {tmp_path / 'a.txt'}" in result
    assert "1: needle here" in result
    assert "b.txt" not in result


def test_copy_file_creates_parents(tmp_path):
    src = tmp_path / "a.txt"
    src.write_text("content")
    dst = tmp_path / "deep" / "dir" / "a.txt"
    assert copy_path(src, dst) == f"Copied from {src} to {dst}"
    assert dst.read_text() == "content"


def test_copy_directory_needs_recursive(tmp_path):
    (tmp_path / "d").mkdir()
    with pytest.raises(CommandError) as info:
        copy_path(tmp_path / "d", tmp_path / "e")
    assert "Cannot copy directory without -r flag" in info.value.message


def test_copy_directory_recursive(tmp_path):
    (tmp_path / "d" / "inner").mkdir(parents=True)
    (tmp_path / "d" / "inner" / "f.txt").write_text("data")
    copy_path(tmp_path / "d", tmp_path / "e", recursive=True)
    assert (tmp_path / "e" / "inner" / "f.txt").read_text() == "data"


def test_copy_missing_source(tmp_path):
    with pytest.raises(CommandError) as info:
        copy_path(tmp_path / "x", tmp_path / "y")
    assert info.value.message.startswith("Source not found:")


def test_move_path(tmp_path):
    src = tmp_path / "a.txt"
    src.write_text("content")
    dst = tmp_path / "sub" / "b.txt"
    assert move_path(src, dst) == f"Moved from {src} to {dst}"
    assert not src.exists()
    assert dst.read_text() == "content"


def test_remove_nonempty_dir_needs_recursive(tmp_path):
    target = tmp_path / "d"
    target.mkdir()
    (target / "f").write_text("x")
    with pytest.raises(CommandError) as info:
        remove_path(target)
    assert info.value.message.startswith("Failed to remove:")
    assert remove_path(target, recursive=True) == f"Removed: {target}"
    assert not target.exists()


def test_remove_file(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    remove_path(target)
    assert not target.exists()


def test_fuzzy_search_is_case_insensitive_and_recursive(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "MyNotes.md").write_text("x")
    (tmp_path / "other.txt").write_text("x")
    assert fuzzy_search(tmp_path, "notes") == [tmp_path / "sub" / "MyNotes.md"]


def test_fuzzy_search_respects_limit(tmp_path):
    for name in ("note1", "note2", "note3"):
        (tmp_path / name).write_text("x")
    assert len(fuzzy_search(tmp_path, "note", limit=2)) == 2