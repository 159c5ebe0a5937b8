"""Detail-mode row layout and ordering tests."""

from __future__ import annotations

import io
import unittest
from pathlib import Path

from dirlist.errors import OutputError
from dirlist.listing_model import DirectorySnapshot, FileDetails, FileEntry, FolderDetails, FolderEntry
from dirlist.render import render, render_detail
from dirlist.ui_theme import DEFAULT_THEME, PLAIN_THEME

CREATED = "2024-01-01 08:00"
MODIFIED = "2024-02-03 09:30"


def _folder(name: str, children: int = 0) -> FolderEntry:
    return FolderEntry(name, FolderDetails("drwxr-xr-x", children, CREATED, MODIFIED))


def _file(name: str, size: int = 0) -> FileEntry:
    return FileEntry(name, FileDetails("-rw-r--r--", size, CREATED, MODIFIED))


def _snapshot(
    *,
    folders: tuple[FolderEntry, ...] = (),
    hidden_folders: tuple[FolderEntry, ...] = (),
    files: tuple[FileEntry, ...] = (),
    hidden_files: tuple[FileEntry, ...] = (),
    show_hidden: bool = False,
    parent_is_self: bool = False,
) -> DirectorySnapshot:
    return DirectorySnapshot(
        path=Path("/listing"),
        folders=folders,
        hidden_folders=hidden_folders,
        files=files,
        hidden_files=hidden_files,
        cur_dir=_folder(".", 3) if show_hidden else None,
        parent_dir=_folder("..", 7) if show_hidden else None,
        largest_name=0,
        show_hidden=show_hidden,
        detailed=True,
        parent_is_self=parent_is_self,
    )


def _render(snapshot: DirectorySnapshot, show_hidden: bool, time_field: str = "modified") -> str:
    out = io.StringIO()
    render_detail(snapshot, out, show_hidden, theme=PLAIN_THEME, time_field=time_field)
    return out.getvalue()


class _BrokenSink(io.StringIO):
    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.writes = 0

    def write(self, text: str) -> int:
        if self.writes >= self.fail_after:
            raise BrokenPipeError(32, "Broken pipe")
        self.writes += 1
        return super().write(text)


class DetailRowTests(unittest.TestCase):
    def test_folder_row_shows_children_and_dash_size(self) -> None:
        output = _render(_snapshot(folders=(_folder("src", 12),)), False)
        self.assertEqual(output, f"drwxr-xr-x    12       -  {MODIFIED}  src\n")

    def test_file_row_shows_constant_count_and_human_size(self) -> None:
        output = _render(_snapshot(files=(_file("data.bin", 2048),)), False)
        self.assertEqual(output, f"-rw-r--r--     1      2k  {MODIFIED}  data.bin\n")

    def test_created_time_column_can_replace_modified(self) -> None:
        output = _render(_snapshot(files=(_file("a", 1),)), False, time_field="created")
        self.assertIn(CREATED, output)
        self.assertNotIn(MODIFIED, output)

    def test_time_column_can_be_omitted(self) -> None:
        output = _render(_snapshot(files=(_file("a", 1),)), False, time_field="none")
        self.assertEqual(output, "-rw-r--r--     1      1b  a\n")

    def test_unknown_time_field_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            _render(_snapshot(files=(_file("a"),)), False, time_field="accessed")

    def test_missing_details_render_placeholders(self) -> None:
        snapshot = _snapshot(folders=(FolderEntry("bare"),), files=(FileEntry("loose"),))
        lines = _render(snapshot, False, time_field="none").splitlines()
        self.assertEqual(lines, ["----------     0       -  bare", "----------     1      0b  loose"])


class DetailOrderingTests(unittest.TestCase):
    def test_full_order_with_hidden_entries(self) -> None:
        snapshot = _snapshot(
            folders=(_folder("lib"), _folder("src")),
            hidden_folders=(_folder(".git"),),
            files=(_file("README.md"), _file("setup.cfg")),
            hidden_files=(_file(".env"),),
            show_hidden=True,
        )
        names = [line.rsplit("  ", 1)[-1] for line in _render(snapshot, True).splitlines()]
        self.assertEqual(names, ["..", ".", ".git", "lib", "src", ".env", "README.md", "setup.cfg"])

    def test_hidden_entries_are_left_out_without_show_hidden(self) -> None:
        snapshot = _snapshot(
            folders=(_folder("src"),),
            hidden_folders=(_folder(".git"),),
            files=(_file("a.txt"),),
            hidden_files=(_file(".env"),),
            show_hidden=True,
        )
        names = [line.rsplit("  ", 1)[-1] for line in _render(snapshot, False).splitlines()]
        self.assertEqual(names, ["src", "a.txt"])

    def test_parent_row_is_skipped_when_it_describes_the_listed_directory(self) -> None:
        snapshot = _snapshot(files=(_file("a.txt"),), show_hidden=True, parent_is_self=True)
        names = [line.rsplit("  ", 1)[-1] for line in _render(snapshot, True).splitlines()]
        self.assertEqual(names, [".", "a.txt"])

    def test_filesystem_root_listing_has_no_parent_row(self) -> None:
        root = Path(Path.cwd().anchor or "/")
        snapshot = DirectorySnapshot.build(root, show_hidden=True, detailed=True)
        names = [line.rsplit("  ", 1)[-1] for line in _render(snapshot, True, time_field="none").splitlines()]
        self.assertNotIn("..", names)
        self.assertEqual(names[0], ".")

    def test_empty_listing_renders_nothing_even_with_pseudo_entries(self) -> None:
        self.assertEqual(_render(_snapshot(show_hidden=True), True), "")

    def test_names_are_styled_by_category(self) -> None:
        snapshot = _snapshot(hidden_files=(_file(".env"),), files=(_file("notes.txt"),), show_hidden=True)
        out = io.StringIO()
        render_detail(snapshot, out, True, theme=DEFAULT_THEME)
        lines = out.getvalue().splitlines()
        self.assertTrue(lines[0].endswith(f"{DEFAULT_THEME.pseudo_dir}..{DEFAULT_THEME.reset}"))
        self.assertTrue(lines[2].endswith(f"{DEFAULT_THEME.hidden_file}.env{DEFAULT_THEME.reset}"))
        self.assertTrue(lines[3].endswith("notes.txt"))


class RenderDispatchTests(unittest.TestCase):
    def test_detailed_flag_selects_detail_rows(self) -> None:
        out = io.StringIO()
        render(_snapshot(files=(_file("a", 3),)), out, 80, False, True, theme=PLAIN_THEME, time_field="none")
        self.assertEqual(out.getvalue(), "-rw-r--r--     1      3b  a\n")

    def test_failed_write_aborts_with_output_error(self) -> None:
        snapshot = _snapshot(files=(_file("a"), _file("b"), _file("c")))
        sink = _BrokenSink(fail_after=1)
        with self.assertRaises(OutputError) as ctx:
            render(snapshot, sink, 80, False, True, theme=PLAIN_THEME, time_field="none")
        self.assertIsInstance(ctx.exception.cause, BrokenPipeError)
        self.assertEqual(sink.getvalue(), "-rw-r--r--     1      0b  a\n")

    def test_closed_sink_raises_output_error(self) -> None:
        sink = io.StringIO()
        sink.close()
        with self.assertRaises(OutputError):
            render(_snapshot(files=(_file("a"),)), sink, 80, False, False, theme=PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
