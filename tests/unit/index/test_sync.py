"""Tests for delete-then-generate cycles and event handling."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from indexkeeper.errors import CreateError, DeleteError, WriteError
from indexkeeper.index import CREATE, DELETE, RENAME, IndexSynchronizer, TreeEvent
from indexkeeper.settings import IndexSettings
from indexkeeper.tree_model import LocalTreeStorage


def _read(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


class IndexSynchronizerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "vault"
        (self.root / "A").mkdir(parents=True)
        (self.root / "B").mkdir()
        (self.root / "A" / "x.md").write_text("", encoding="utf-8")
        self.storage = LocalTreeStorage(self.root)
        self.sync = IndexSynchronizer(self.storage)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_events_containing_the_prefix_never_trigger_a_cycle(self) -> None:
        with mock.patch.object(self.sync, "sync_cycle") as sync_cycle:
            handled = self.sync.on_tree_change(TreeEvent(kind=CREATE, path="A/_Index_of_A.md"))
            handled_rename = self.sync.on_tree_change(
                TreeEvent(kind=RENAME, path="A/_Index_of_Renamed.md", old_path="A/note.md")
            )

        self.assertFalse(handled)
        self.assertFalse(handled_rename)
        sync_cycle.assert_not_called()

    def test_rename_synchronizes_old_scope_then_new_scope(self) -> None:
        with mock.patch.object(self.sync, "sync_cycle") as sync_cycle:
            self.sync.on_tree_change(TreeEvent(kind=RENAME, path="A2", old_path="A"))
            self.sync.on_tree_change(TreeEvent(kind=DELETE, path="B"))

        self.assertEqual([call.args for call in sync_cycle.call_args_list], [("A",), ("A2",), ("B",)])

    def test_cycle_replaces_stale_content(self) -> None:
        index = self.root / "A" / "_Index_of_A.md"
        index.write_text("[[A/removed.md]]\n[[_Index_of_vault.md]]", encoding="utf-8")

        self.sync.sync_cycle("A/x.md")

        self.assertEqual(_read(index), os.linesep.join(["[[A/_Index_of_A.md]]", "[[A/x.md]]", "[[_Index_of_vault.md]]"]))

    def test_create_error_aborts_the_cycle(self) -> None:
        with mock.patch.object(self.storage, "create_empty_file", side_effect=CreateError("A/_Index_of_A.md")):
            with self.assertRaises(CreateError):
                self.sync.sync_cycle("A/x.md")

    def test_delete_error_is_logged_and_generation_still_runs(self) -> None:
        index = self.root / "A" / "_Index_of_A.md"
        index.write_text("stale", encoding="utf-8")

        with mock.patch.object(self.storage, "delete_entry", side_effect=DeleteError("A/_Index_of_A.md", "locked")):
            with self.assertLogs("indexkeeper.index.sync", level="WARNING") as logs:
                self.sync.sync_cycle("A/x.md")

        self.assertIn("locked", "\n".join(logs.output))
        self.assertEqual(_read(index), os.linesep.join(["[[A/_Index_of_A.md]]", "[[A/x.md]]", "[[_Index_of_vault.md]]"]))

    def test_write_error_in_one_directory_does_not_block_siblings(self) -> None:
        real_overwrite = self.storage.overwrite_content

        def failing_overwrite(entry, text):
            if entry.path == "A/_Index_of_A.md":
                raise WriteError(entry.path, "read-only")
            real_overwrite(entry, text)

        with mock.patch.object(self.storage, "overwrite_content", side_effect=failing_overwrite):
            with self.assertLogs("indexkeeper.index.generator", level="WARNING"):
                generated = self.sync.sync_all()

        self.assertIn("B/_Index_of_B.md", generated)
        self.assertEqual(_read(self.root / "A" / "_Index_of_A.md"), "")
        self.assertEqual(_read(self.root / "B" / "_Index_of_B.md"), os.linesep.join(["[[B/_Index_of_B.md]]", "[[_Index_of_vault.md]]"]))
        self.assertEqual(_read(self.root / "_Index_of_vault.md"), os.linesep.join(["[[A]]", "[[B]]", "[[_Index_of_vault.md]]"]))

    def test_custom_prefix_names_and_guards_with_that_prefix(self) -> None:
        sync = IndexSynchronizer(self.storage, IndexSettings(index_prefix="idx-"))

        sync.sync_all()

        self.assertTrue((self.root / "idx-vault.md").is_file())
        self.assertTrue((self.root / "A" / "idx-A.md").is_file())
        self.assertFalse((self.root / "_Index_of_vault.md").exists())
        self.assertTrue(sync.is_ignored("A/idx-A.md"))
        self.assertFalse(sync.is_ignored("A/_Index_of_A.md"))


if __name__ == "__main__":
    unittest.main()
