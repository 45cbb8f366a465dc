"""Tests for reverse-order undo and the persisted last-run journal."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treesmith.materialize import ConflictDecision, materialize, undo_created, uniform_policy
from treesmith.materialize import journal, undo
from treesmith.tree_text import parse_tree_text


class UndoTests(unittest.TestCase):
    def test_undo_reverses_a_full_run_and_keeps_existing_content(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "existing.txt").write_text("mine", encoding="utf-8")
            items = parse_tree_text("project/\n├── src/\n│   └── index.ts\n└── README.md", root)
            result = materialize(items)

            undo_result = undo_created(result.created)

            self.assertTrue(undo_result.ok)
            self.assertEqual(undo_result.removed, list(reversed(result.created)))
            for path in result.created:
                self.assertFalse(path.exists(), path)
            self.assertEqual(sorted(p.name for p in root.iterdir()), ["existing.txt"])
            self.assertEqual((root / "existing.txt").read_text(encoding="utf-8"), "mine")

    def test_undo_removes_directories_recursively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            result = materialize(parse_tree_text("cache/", root))
            (root / "cache" / "added-later.bin").write_bytes(b"\x00")

            undo_result = undo_created(result.created)

            self.assertTrue(undo_result.ok)
            self.assertFalse((root / "cache").exists())

    def test_undo_counts_missing_paths_as_removed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            gone = root / "gone.txt"

            undo_result = undo_created([gone])

            self.assertEqual(undo_result.removed, [gone])
            self.assertEqual(undo_result.failures, [])

    def test_undo_continues_after_a_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            result = materialize(parse_tree_text("a.txt\nb.txt\nc.txt", root))
            real_remove = undo._remove_path
            stuck = root / "b.txt"

            def flaky_remove(path: Path) -> None:
                if path == stuck:
                    raise PermissionError("denied")
                real_remove(path)

            with mock.patch("treesmith.materialize.undo._remove_path", side_effect=flaky_remove):
                with self.assertLogs("treesmith.materialize.undo", level="WARNING"):
                    undo_result = undo_created(result.created)

            self.assertFalse(undo_result.ok)
            self.assertEqual([path for path, _error in undo_result.failures], [stuck])
            self.assertEqual(undo_result.removed, [root / "c.txt", root / "a.txt"])
            self.assertTrue(stuck.exists())

    def test_undo_after_overwrite_removes_overwritten_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("old", encoding="utf-8")
            result = materialize(parse_tree_text("a.txt", root), uniform_policy(ConflictDecision.OVERWRITE))

            undo_created(result.created)

            self.assertFalse((root / "a.txt").exists())


class JournalTests(unittest.TestCase):
    def test_journal_round_trip_and_clear(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            journal_path = Path(tmp) / "state" / "last_run.json"
            root = Path(tmp) / "root"
            created = [root / "a", root / "a" / "b.txt"]
            with mock.patch("treesmith.materialize.journal.JOURNAL_PATH", journal_path):
                journal.save_journal(root, created)
                loaded = journal.load_journal()

                self.assertIsNotNone(loaded)
                self.assertEqual(loaded.root, root)
                self.assertEqual(loaded.created, tuple(created))

                journal.clear_journal()
                self.assertFalse(journal_path.exists())
                self.assertIsNone(journal.load_journal())
                journal.clear_journal()

    def test_malformed_journals_load_as_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            journal_path = Path(tmp) / "last_run.json"
            with mock.patch("treesmith.materialize.journal.JOURNAL_PATH", journal_path):
                for payload in (
                    "not json",
                    json.dumps([1, 2]),
                    json.dumps({"version": 99, "root": "/r", "created": []}),
                    json.dumps({"version": 1, "root": 7, "created": []}),
                    json.dumps({"version": 1, "root": "/r", "created": "nope"}),
                ):
                    journal_path.write_text(payload, encoding="utf-8")
                    self.assertIsNone(journal.load_journal(), payload)

    def test_non_string_entries_are_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            journal_path = Path(tmp) / "last_run.json"
            journal_path.write_text(
                json.dumps({"version": 1, "root": "/r", "created": ["/r/a", 3, "", "/r/b"]}),
                encoding="utf-8",
            )
            with mock.patch("treesmith.materialize.journal.JOURNAL_PATH", journal_path):
                loaded = journal.load_journal()

            self.assertEqual(loaded.created, (Path("/r/a"), Path("/r/b")))


if __name__ == "__main__":
    unittest.main()
