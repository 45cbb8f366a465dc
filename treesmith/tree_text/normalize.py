"""Text cleanup for pasted tree renderings.

Whole-text normalization runs before line splitting; the line helpers blank
connector decoration so leading whitespace width can be measured as depth.
Connector glyphs never survive into names and never shift indentation by
anything other than their own column width.
"""

from __future__ import annotations

import re

VERTICAL_BAR = "\u2502"
NBSP_CHARS = ("\u00a0", "\u2007", "\u202f")
DEFAULT_TAB_WIDTH = 4
DEFAULT_COMMENT_MARKERS: tuple[str, ...] = ("#",)

FOLDER_ICONS = ("\U0001f4c1", "\U0001f4c2", "\U0001f5c2")
FILE_ICONS = ("\U0001f4c4", "\U0001f4dd")
NAME_QUOTES = "`'\""

# Whole Unicode "Box Drawing" block: light/heavy/double/rounded pieces.
_BOX_DRAWING_RE = re.compile("[\u2500-\u257f]")
_VERTICAL_RUN_RE = re.compile("([\u2502\u2503\u2551])\\1+")
_DOT_CONNECTOR_RE = re.compile("\\. (?=[\u2500-\u257f])")
_ASCII_CONNECTOR_RE = re.compile(r"^[ |]*[|`+\\]-{2,} ?")
_ASCII_BARS_ONLY_RE = re.compile(r"^[ |]+$")
_LIST_BULLET_RE = re.compile(r"^ *[-*+] (?=\S)")
_INLINE_SPACES_RE = re.compile(r" {2,}")


def normalize_tree_text(text: str) -> str:
    """Apply whole-text cleanup ahead of line splitting.

    Unifies line endings, collapses doubled vertical bars from copy/paste,
    turns no-break spaces into plain spaces and drops stray ``". "`` runs
    sitting right before a connector glyph.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _VERTICAL_RUN_RE.sub(r"\1", text)
    for nbsp in NBSP_CHARS:
        text = text.replace(nbsp, " ")
    return _DOT_CONNECTOR_RE.sub("", text)


def blank_connectors(line: str) -> str:
    """Replace every box-drawing glyph in ``line`` with a plain space."""
    return _BOX_DRAWING_RE.sub(" ", line)


def blank_ascii_decoration(line: str) -> str:
    """Blank ASCII tree connectors or a list bullet at the start of ``line``.

    Handles ``tree --charset ascii`` output (``|--``, ```--``, ``+--``,
    ``\\--``) and Markdown bullets. Only leading decoration is touched, so
    dashes inside names are preserved. Spacer lines made only of ``|`` bars
    are blanked entirely.
    """
    if _ASCII_BARS_ONLY_RE.match(line):
        return " " * len(line)
    for pattern in (_ASCII_CONNECTOR_RE, _LIST_BULLET_RE):
        match = pattern.match(line)
        if match is not None:
            end = match.end()
            return " " * end + line[end:]
    return line


def strip_inline_comment(text: str, comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS) -> str:
    """Cut ``text`` at the earliest comment marker and trim the rest."""
    cut = len(text)
    for marker in comment_markers:
        if not marker:
            continue
        idx = text.find(marker)
        if 0 <= idx < cut:
            cut = idx
    return text[:cut].strip()


def collapse_inline_spaces(text: str) -> str:
    """Collapse runs of plain spaces inside an entry name."""
    return _INLINE_SPACES_RE.sub(" ", text)


def strip_entry_icon(text: str) -> tuple[str, bool]:
    """Drop a leading folder/file icon; return ``(text, folder_icon_seen)``."""
    for icon in FOLDER_ICONS:
        if text.startswith(icon):
            return text[len(icon) :].lstrip("\ufe0f "), True
    for icon in FILE_ICONS:
        if text.startswith(icon):
            return text[len(icon) :].lstrip("\ufe0f "), False
    return text, False


def strip_name_quotes(text: str) -> str:
    """Remove matching backtick or quote pairs around a name."""
    while len(text) >= 2 and text[0] in NAME_QUOTES and text[-1] == text[0]:
        text = text[1:-1].strip()
    return text


__all__ = [
    "DEFAULT_COMMENT_MARKERS",
    "DEFAULT_TAB_WIDTH",
    "VERTICAL_BAR",
    "normalize_tree_text",
    "blank_connectors",
    "blank_ascii_decoration",
    "strip_inline_comment",
    "collapse_inline_spaces",
    "strip_entry_icon",
    "strip_name_quotes",
]
