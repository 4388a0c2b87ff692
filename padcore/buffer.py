"""A plain-text buffer with cursor marks, signals and the shared key state."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

CONTROL_OFFSET = 0x10000
"""Added to a key value when it was pressed together with Control."""

SIGNALS = frozenset(
    {
        "insert-text",
        "delete-range",
        "begin-user-action",
        "end-user-action",
        "modified-changed",
        "mark-set",
    }
)


class Key(enum.IntEnum):
    """Key values the editor reacts to."""

    SPACE = 0x0020
    ISO_LEFT_TAB = 0xFE20
    BACKSPACE = 0xFF08
    TAB = 0xFF09
    RETURN = 0xFF0D
    UP = 0xFF52
    DOWN = 0xFF54
    PAGE_UP = 0xFF55
    PAGE_DOWN = 0xFF56
    CONTROL_L = 0xFFE3
    CONTROL_R = 0xFFE4
    DELETE = 0xFFFF


@dataclass
class KeyState:
    """The value of the key that caused the current edit, or 0."""

    value: int = 0

    def clear(self) -> None:
        self.value = 0


class TextBuffer:
    """Text with an insert mark, a selection bound and change signals.

    Signal callbacks receive the buffer first:
    ``insert-text`` (buffer, offset, text) after the text is in place,
    ``delete-range`` (buffer, start, end) before the text is removed,
    the others (buffer) alone.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._insert = 0
        self._bound = 0
        self._modified = False
        self._action_depth = 0
        self._handlers: dict[str, list[Callable[..., object]]] = {
            name: [] for name in SIGNALS
        }

    # signals -------------------------------------------------------------

    def connect(self, signal: str, callback: Callable[..., object]) -> None:
        """Call ``callback`` whenever ``signal`` is emitted."""
        if signal not in SIGNALS:
            raise ValueError(f"unknown signal: {signal!r}")
        self._handlers[signal].append(callback)

    def _emit(self, signal: str, *args: object) -> None:
        for callback in list(self._handlers[signal]):
            callback(self, *args)

    @contextmanager
    def user_action(self) -> Iterator[TextBuffer]:
        """Group edits into one user action; nested groups emit nothing."""
        self._action_depth += 1
        if self._action_depth == 1:
            self._emit("begin-user-action")
        try:
            yield self
        finally:
            self._action_depth -= 1
            if self._action_depth == 0:
                self._emit("end-user-action")

    # text ----------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self._text):
            raise ValueError(
                f"offset {offset} outside buffer of length {len(self._text)}"
            )

    def get_text(self, start: int = 0, end: int | None = None) -> str:
        if end is None:
            end = len(self._text)
        self._check_offset(start)
        self._check_offset(end)
        start, end = sorted((start, end))
        return self._text[start:end]

    def insert(self, offset: int, text: str) -> None:
        self._check_offset(offset)
        if not text:
            return
        self._text = self._text[:offset] + text + self._text[offset:]
        size = len(text)
        if self._insert >= offset:
            self._insert += size
        if self._bound >= offset:
            self._bound += size
        self.modified = True
        self._emit("insert-text", offset, text)

    def delete(self, start: int, end: int) -> None:
        self._check_offset(start)
        self._check_offset(end)
        start, end = sorted((start, end))
        if start == end:
            return
        self._emit("delete-range", start, end)
        self._text = self._text[:start] + self._text[end:]
        self._insert = self._shift_after_delete(self._insert, start, end)
        self._bound = self._shift_after_delete(self._bound, start, end)
        self.modified = True

    @staticmethod
    def _shift_after_delete(mark: int, start: int, end: int) -> int:
        if mark >= end:
            return mark - (end - start)
        return min(mark, start)

    # modified flag -------------------------------------------------------

    @property
    def modified(self) -> bool:
        return self._modified

    @modified.setter
    def modified(self, value: bool) -> None:
        value = bool(value)
        if value != self._modified:
            self._modified = value
            self._emit("modified-changed")

    # lines ---------------------------------------------------------------

    def line_count(self) -> int:
        return self._text.count("\n") + 1

    def line_start(self, line: int) -> int:
        """Offset of the first character of ``line``; the end past the last line."""
        if line < 0:
            raise ValueError(f"negative line number: {line}")
        pos = 0
        for _ in range(line):
            newline = self._text.find("\n", pos)
            if newline < 0:
                return len(self._text)
            pos = newline + 1
        return pos

    def line_of(self, offset: int) -> int:
        self._check_offset(offset)
        return self._text.count("\n", 0, offset)

    # cursor and selection ------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._insert

    @property
    def bound(self) -> int:
        return self._bound

    @property
    def has_selection(self) -> bool:
        return self._insert != self._bound

    def place_cursor(self, offset: int) -> None:
        self.select_range(offset, offset)

    def select_range(self, insert: int, bound: int) -> None:
        self._check_offset(insert)
        self._check_offset(bound)
        self._insert = insert
        self._bound = bound
        self._emit("mark-set")

    def selection_bounds(self) -> tuple[int, int]:
        """The selection as (start, end); both equal the cursor when empty."""
        start, end = sorted((self._insert, self._bound))
        return start, end

    def delete_selection(self) -> bool:
        """Delete the selected text as one user action; False if nothing was selected."""
        if not self.has_selection:
            return False
        start, end = self.selection_bounds()
        with self.user_action():
            self.delete(start, end)
        return True