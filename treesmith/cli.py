"""Command-line front door for treesmith.

Reads tree text, previews the parsed entries, and after confirmation creates
them under the chosen root. ``--undo`` removes what the last run created.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from pathlib import Path
from typing import TextIO

from .config import Settings, load_settings, save_conflict_policy
from .materialize import (
    POLICY_NAMES,
    ConflictResolver,
    MaterializeResult,
    materialize,
    policy_from_name,
    skip_conflicts,
    undo_created,
)
from .materialize.journal import clear_journal, load_journal, save_journal
from .preview import format_summary, render_tree_preview
from .prompts import TerminalPrompter, open_controlling_tty
from .tree_text import parse_tree_text

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def read_tree_text(path: Path) -> str:
    """Read text as UTF-8 (dropping a leading BOM), falling back to latin-1."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create files and directories from pasted tree text.",
    )
    parser.add_argument(
        "tree_file",
        nargs="?",
        default=None,
        help="File holding the tree text. Reads stdin when omitted or '-'.",
    )
    parser.add_argument("--root", default=None, help="Directory to create the tree in. Defaults to current directory.")
    parser.add_argument("-y", "--yes", action="store_true", help="Create without asking for confirmation.")
    parser.add_argument("--dry-run", action="store_true", help="Print the preview and exit without creating anything.")
    parser.add_argument(
        "--on-conflict",
        choices=POLICY_NAMES,
        default=None,
        help="How to treat entries that already exist (default from config, else 'ask').",
    )
    parser.add_argument("--tab-width", type=_positive_int, default=None, help="Columns per tab when measuring indent.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress (repeat for debug output).")
    parser.add_argument("--undo", action="store_true", help="Remove everything the last run created and exit.")
    parser.add_argument(
        "--set-default-policy",
        choices=POLICY_NAMES,
        default=None,
        metavar="POLICY",
        help="Save the default conflict policy to the user config and exit.",
    )
    return parser


def _resolve_root(raw_root: str | None, default_root: Path | None) -> Path:
    if raw_root is not None:
        root = Path(raw_root)
    elif default_root is not None:
        root = default_root
    else:
        root = Path.cwd()
    if not root.is_dir():
        raise SystemExit(f"Root directory not found: {root}")
    return root.resolve()


def _read_input(tree_file: str | None) -> tuple[str, bool]:
    """Return ``(text, came_from_stdin)``."""
    if tree_file is None or tree_file == "-":
        return sys.stdin.read(), True
    path = Path(tree_file)
    if not path.is_file():
        raise SystemExit(f"Tree file not found: {path}")
    return read_tree_text(path), False


def _report(result: MaterializeResult, out: TextIO) -> None:
    out.write(f"Created {len(result.created)} entries.\n")
    if result.skipped:
        out.write(f"Skipped {len(result.skipped)} existing entries.\n")
    for message in result.warnings:
        out.write(f"warning: {message}\n")
    for path, error in result.errors:
        out.write(f"error: {path}: {error}\n")
    if result.cancelled:
        out.write("Cancelled; entries created before the cancel were kept.\n")
    if result.created:
        out.write("Run 'treesmith --undo' to remove the created entries.\n")


def run_undo(out: TextIO) -> None:
    """Undo the journaled last run; exit non-zero when any removal failed."""
    journal = load_journal()
    if journal is None or not journal.created:
        raise SystemExit("Nothing to undo.")

    result = undo_created(journal.created)
    out.write(f"Removed {len(result.removed)} entries under {journal.root}.\n")
    for path, error in result.failures:
        out.write(f"error: could not remove {path}: {error}\n")
    if not result.ok:
        raise SystemExit(1)
    clear_journal()


def _conflict_resolver(policy: str, prompter: TerminalPrompter | None) -> ConflictResolver:
    resolver = policy_from_name(policy)
    if resolver is not None:
        return resolver
    if prompter is not None:
        return prompter.resolve_conflict
    logger.warning("no terminal available for conflict prompts; existing entries will be skipped")
    return skip_conflicts


def main(default_root: Path | None = None) -> None:
    """Parse CLI arguments and build a tree from text.

    ``default_root`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = _build_parser().parse_args()
    _configure_logging(args.verbose)
    out = sys.stdout

    if args.set_default_policy is not None:
        save_conflict_policy(args.set_default_policy)
        out.write(f"Default conflict policy set to {args.set_default_policy!r}.\n")
        return

    if args.undo:
        run_undo(out)
        return

    settings: Settings = load_settings()
    root = _resolve_root(args.root, default_root)
    text, from_stdin = _read_input(args.tree_file)
    tab_width = args.tab_width if args.tab_width is not None else settings.tab_width
    items = parse_tree_text(text, root, tab_width=tab_width, comment_markers=settings.comment_markers)
    if not items:
        raise SystemExit("No entries found in tree text.")

    no_color = args.no_color or not settings.color or not out.isatty()
    out.write(render_tree_preview(items, root, no_color=no_color) + "\n")
    out.write(format_summary(items, no_color=no_color) + "\n")
    if args.dry_run:
        return

    policy = args.on_conflict or settings.conflict_policy
    with contextlib.ExitStack() as stack:
        prompt_in: TextIO | None = sys.stdin
        if from_stdin:
            prompt_in = stack.enter_context(open_controlling_tty())
        prompter = TerminalPrompter(prompt_in, out) if prompt_in is not None else None

        if not args.yes:
            if prompter is None:
                raise SystemExit("No terminal available to confirm; pass --yes to create without asking.")
            if not prompter.confirm(f"Create {len(items)} entries under {root}?"):
                out.write("Nothing created.\n")
                return

        result = materialize(items, _conflict_resolver(policy, prompter))

    if result.created:
        save_journal(root, result.created)
    else:
        clear_journal()
    _report(result, out)
    if result.errors:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
