"""Best-effort reversal of a materialization run."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from .types import UndoResult

logger = logging.getLogger(__name__)


def _remove_path(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def undo_created(created: Sequence[Path | str]) -> UndoResult:
    """Delete ``created`` paths in reverse creation order.

    Children are always logged after their parents, so walking backwards
    empties each directory before it is removed. Paths that are already gone
    count as removed. A failing path is recorded and logged; the remaining
    paths are still processed.
    """
    result = UndoResult()
    for raw_path in reversed(created):
        path = Path(raw_path)
        try:
            _remove_path(path)
        except FileNotFoundError:
            result.removed.append(path)
            continue
        except OSError as exc:
            logger.warning("could not remove %s: %s", path, exc)
            result.failures.append((path, str(exc)))
            continue
        logger.info("removed %s", path)
        result.removed.append(path)
    return result


__all__ = ["undo_created"]
