"""Persistent JSON config helpers.

Stores the default conflict policy and parser tuning knobs.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .materialize.policies import POLICY_NAMES
from .tree_text.normalize import DEFAULT_COMMENT_MARKERS, DEFAULT_TAB_WIDTH

logger = logging.getLogger(__name__)

APP_NAME = "treesmith"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_CONFLICT_POLICY = "ask"


@dataclass(frozen=True)
class Settings:
    """Effective user settings after validation."""

    conflict_policy: str = DEFAULT_CONFLICT_POLICY
    tab_width: int = DEFAULT_TAB_WIDTH
    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS
    color: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_policy(value: object) -> str:
    if isinstance(value, str) and value.strip().lower() in POLICY_NAMES:
        return value.strip().lower()
    return DEFAULT_CONFLICT_POLICY


def _coerce_tab_width(value: object) -> int:
    """Accept positive integers only; booleans are not widths."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_TAB_WIDTH
    return value


def _coerce_comment_markers(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return DEFAULT_COMMENT_MARKERS
    markers = tuple(marker for marker in value if isinstance(marker, str) and marker.strip())
    return markers or DEFAULT_COMMENT_MARKERS


def load_settings() -> Settings:
    """Load config and normalize every key to a usable value."""
    data = load_config()
    color = data.get("color")
    return Settings(
        conflict_policy=_coerce_policy(data.get("conflict_policy")),
        tab_width=_coerce_tab_width(data.get("tab_width")),
        comment_markers=_coerce_comment_markers(data.get("comment_markers")),
        color=color if isinstance(color, bool) else True,
    )


def save_conflict_policy(policy: str) -> None:
    """Persist the default conflict policy; unknown names are ignored."""
    normalized = policy.strip().lower()
    if normalized not in POLICY_NAMES:
        return
    config = load_config()
    config["conflict_policy"] = normalized
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "Settings",
    "load_config",
    "save_config",
    "load_settings",
    "save_conflict_policy",
]
