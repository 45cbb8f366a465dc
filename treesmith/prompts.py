"""Interactive terminal collaborators: run confirmation and conflict prompts.

Reads answers line by line from a text stream so tests can drive it with
``io.StringIO``. End of input is treated as the most conservative answer.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import TextIO

from .materialize.types import Conflict, ConflictDecision, ConflictKind

_CONFLICT_CHOICES = {
    "o": ConflictDecision.OVERWRITE,
    "overwrite": ConflictDecision.OVERWRITE,
    "s": ConflictDecision.SKIP,
    "skip": ConflictDecision.SKIP,
    "c": ConflictDecision.CANCEL,
    "cancel": ConflictDecision.CANCEL,
}
_STICKY_CHOICES = {
    "a": ConflictDecision.OVERWRITE,
    "all": ConflictDecision.OVERWRITE,
    "n": ConflictDecision.SKIP,
    "none": ConflictDecision.SKIP,
}


class TerminalPrompter:
    """Ask yes/no and per-conflict questions on a pair of text streams.

    ``all``/``none`` answers stick: later conflicts are answered without
    asking again.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.sticky_decision: ConflictDecision | None = None

    def _ask(self, question: str) -> str | None:
        self.stdout.write(question)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            self.stdout.write("\n")
            return None
        return line.strip().lower()

    def confirm(self, question: str) -> bool:
        """Return ``True`` only for an explicit yes."""
        answer = self._ask(f"{question} [y/N] ")
        return answer in {"y", "yes"}

    def resolve_conflict(self, conflict: Conflict) -> ConflictDecision:
        if self.sticky_decision is not None:
            return self.sticky_decision

        if conflict.kind is ConflictKind.FILE_BLOCKS_DIRECTORY:
            headline = f"A file exists where directory {conflict.path} should go."
        else:
            headline = f"File already exists: {conflict.path}"
        self.stdout.write(headline + "\n")

        while True:
            answer = self._ask("[o]verwrite, [s]kip, [c]ancel, overwrite [a]ll, skip all [n]one? ")
            if answer is None:
                return ConflictDecision.CANCEL
            if answer in _CONFLICT_CHOICES:
                return _CONFLICT_CHOICES[answer]
            if answer in _STICKY_CHOICES:
                self.sticky_decision = _STICKY_CHOICES[answer]
                return self.sticky_decision
            self.stdout.write(f"Unrecognized answer: {answer!r}\n")


@contextlib.contextmanager
def open_controlling_tty() -> Iterator[TextIO | None]:
    """Yield the controlling terminal for reading, or ``None`` if there is none."""
    try:
        handle = open("/dev/tty", "r", encoding="utf-8")
    except OSError:
        yield None
        return
    with handle:
        yield handle


__all__ = [
    "TerminalPrompter",
    "open_controlling_tty",
]
