"""Persisted undo journal for the most recent materialization run.

The command line exits right after creating a tree, so the created-items
log of the last run is kept on disk until it is undone or replaced.
Loading is defensive: a missing or malformed journal reads as ``None``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_state_dir

from ..config import APP_NAME

logger = logging.getLogger(__name__)

JOURNAL_VERSION = 1
JOURNAL_FILENAME = "last_run.json"
JOURNAL_PATH = Path(user_state_dir(APP_NAME, appauthor=False)) / JOURNAL_FILENAME


@dataclass(frozen=True)
class UndoJournal:
    """Root of a run plus the paths it created, in creation order."""

    root: Path
    created: tuple[Path, ...]


def save_journal(root: Path, created: list[Path]) -> None:
    """Replace the stored journal with ``created`` for ``root``.

    Write failures are logged and otherwise ignored; they only cost the
    ability to undo later.
    """
    payload = {
        "version": JOURNAL_VERSION,
        "root": str(root),
        "created": [str(path) for path in created],
    }
    try:
        JOURNAL_PATH.parent.mkdir(parents=True, exist_ok=True)
        JOURNAL_PATH.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write undo journal %s: %s", JOURNAL_PATH, exc)


def load_journal() -> UndoJournal | None:
    """Load the stored journal, or ``None`` when absent or unusable."""
    try:
        data = json.loads(JOURNAL_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict) or data.get("version") != JOURNAL_VERSION:
        return None

    root = data.get("root")
    created = data.get("created")
    if not isinstance(root, str) or not root or not isinstance(created, list):
        return None
    paths = tuple(Path(entry) for entry in created if isinstance(entry, str) and entry)
    return UndoJournal(root=Path(root), created=paths)


def clear_journal() -> None:
    try:
        JOURNAL_PATH.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("could not remove undo journal %s: %s", JOURNAL_PATH, exc)


__all__ = [
    "JOURNAL_PATH",
    "UndoJournal",
    "save_journal",
    "load_journal",
    "clear_journal",
]
