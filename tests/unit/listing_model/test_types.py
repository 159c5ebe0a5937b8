"""Ordering and defaulting behavior of listing entries."""

from __future__ import annotations

import unittest

from dirlist.listing_model import FileDetails, FileEntry, FolderDetails, FolderEntry, is_hidden


class EntryOrderingTests(unittest.TestCase):
    def test_entries_order_by_name_only(self) -> None:
        big = FileEntry("b.txt", FileDetails("-rw-r--r--", 9999, "-", "-"))
        small = FileEntry("a.txt", FileDetails("-rw-r--r--", 1, "-", "-"))
        self.assertEqual(sorted([big, small]), [small, big])
        self.assertEqual(FileEntry("a.txt"), small)

    def test_ordering_is_codepoint_order(self) -> None:
        names = ["beta", "Zeta", "_x", "alpha", "Alpha"]
        ordered = [entry.name for entry in sorted(FolderEntry(name) for name in names)]
        self.assertEqual(ordered, ["Alpha", "Zeta", "_x", "alpha", "beta"])


class EntryDefaultsTests(unittest.TestCase):
    def test_absent_metadata_defaults(self) -> None:
        self.assertEqual(FileEntry("a").permissions, "")
        self.assertEqual(FileEntry("a").size, 0)
        self.assertEqual(FolderEntry("d").permissions, "----------")
        self.assertEqual(FolderEntry("d").children, 0)

    def test_present_metadata_is_exposed(self) -> None:
        folder = FolderEntry("d", FolderDetails("drwx------", 4, "-", "-"))
        self.assertEqual(folder.permissions, "drwx------")
        self.assertEqual(folder.children, 4)

    def test_hidden_names_start_with_dot(self) -> None:
        self.assertTrue(is_hidden(".env"))
        self.assertFalse(is_hidden("env."))


if __name__ == "__main__":
    unittest.main()
