"""Finding and replacing text in a TextBuffer, and jumping to a line."""

from __future__ import annotations

from collections.abc import Callable

from padcore.buffer import TextBuffer
from padcore.undo import UndoManager

Range = tuple[int, int]

SEARCH_AGAIN = 2
"""Direction that searches forward without refreshing the highlighted matches."""


class SearchNotFound(LookupError):
    """Raised when a new search finds no occurrence of the search string."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Search string not found: {pattern!r}")
        self.pattern = pattern


def _fold_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def _fold(text: str, match_case: bool) -> str:
    """Lower-case ``text`` without changing its length, unless case matters."""
    if match_case:
        return text
    return "".join(_fold_char(char) for char in text)


def _check(text: str, pattern: str, start: int) -> None:
    if not pattern:
        raise ValueError("empty search string")
    if not 0 <= start <= len(text):
        raise ValueError(f"offset {start} outside text of length {len(text)}")


def find_forward(
    text: str, pattern: str, start: int = 0, match_case: bool = True
) -> Range | None:
    """First match of ``pattern`` beginning at or after ``start``, as (start, end)."""
    _check(text, pattern, start)
    pos = _fold(text, match_case).find(_fold(pattern, match_case), start)
    if pos < 0:
        return None
    return pos, pos + len(pattern)


def find_backward(
    text: str, pattern: str, start: int | None = None, match_case: bool = True
) -> Range | None:
    """Last match of ``pattern`` ending at or before ``start``, as (start, end)."""
    if start is None:
        start = len(text)
    _check(text, pattern, start)
    pos = _fold(text, match_case).rfind(_fold(pattern, match_case), 0, start)
    if pos < 0:
        return None
    return pos, pos + len(pattern)


class Searcher:
    """Search and replace state for one buffer.

    ``searched`` holds the highlighted matches of the last full search,
    ``replaced`` the ranges of text put in by replacements.
    """

    def __init__(self, buffer: TextBuffer, undo: UndoManager | None = None) -> None:
        self.buffer = buffer
        self.undo = undo
        self.find_text: str | None = None
        self.replace_text = ""
        self.match_case = False
        self.replace_all = False
        self.searched: list[Range] = []
        self.replaced: list[Range] = []
        self._highlight_valid = False
        self._mark: int | None = None
        buffer.connect("insert-text", self._on_insert)
        buffer.connect("delete-range", self._on_delete)

    # keeping offsets in step with edits -----------------------------------

    def _on_insert(self, buffer: TextBuffer, offset: int, text: str) -> None:
        size = len(text)
        self._invalidate_matches()
        self.replaced = [
            (start + size, end + size) if start >= offset else (start, end)
            for start, end in self.replaced
            if end <= offset or start >= offset
        ]
        if self._mark is not None and self._mark >= offset:
            self._mark += size

    def _on_delete(self, buffer: TextBuffer, start: int, end: int) -> None:
        size = end - start
        self._invalidate_matches()
        self.replaced = [
            (s - size, e - size) if s >= end else (s, e)
            for s, e in self.replaced
            if e <= start or s >= end
        ]
        if self._mark is not None:
            if self._mark >= end:
                self._mark -= size
            else:
                self._mark = min(self._mark, start)

    def _invalidate_matches(self) -> None:
        self.searched.clear()
        self._highlight_valid = False

    def _set_sequence(self, seq: bool) -> None:
        if self.undo is not None:
            self.undo.set_sequence(seq)

    # searching -------------------------------------------------------------

    def find_all(self, pattern: str) -> list[Range]:
        """Highlight every match of ``pattern``, clearing earlier highlights."""
        self.searched.clear()
        self.replaced.clear()
        text = self.buffer.text
        position = 0
        if pattern:
            while (match := find_forward(text, pattern, position, self.match_case)):
                self.searched.append(match)
                position = match[1]
        self._highlight_valid = True
        return list(self.searched)

    def search(self, direction: int = 0) -> bool:
        """Select the next match in ``direction``, wrapping round the buffer.

        Direction 0 starts a new search and raises SearchNotFound when
        nothing matches; a negative direction searches backwards.
        """
        pattern = self.find_text
        if not pattern:
            return False
        if direction == 0 or (direction != SEARCH_AGAIN and not self._highlight_valid):
            self.find_all(pattern)

        text = self.buffer.text
        cursor = self.buffer.cursor
        if direction < 0:
            match = find_backward(text, pattern, cursor, self.match_case)
            if match is not None and match[1] == cursor:
                match = find_backward(text, pattern, match[0], self.match_case)
            if match is None:
                match = find_backward(text, pattern, len(text), self.match_case)
        else:
            match = find_forward(text, pattern, cursor, self.match_case)
            if match is None:
                match = find_forward(text, pattern, 0, self.match_case)

        if match is not None:
            self.buffer.select_range(match[1], match[0])
            return True
        if direction == 0:
            raise SearchNotFound(pattern)
        return False

    # replacing -------------------------------------------------------------

    def replace(self, confirm: Callable[[int, int], bool | None] | None = None) -> int:
        """Replace matches of ``find_text`` by ``replace_text``; return the count.

        With ``replace_all`` every match from the start of the buffer is
        replaced and the cursor returns to where it was. Otherwise each
        selected match is offered to ``confirm(start, end)``: True replaces,
        False skips, None stops; searching wraps until it stops. Stopping
        before any replacement returns -1.
        """
        if not self.find_text:
            raise ValueError("empty search string")
        if not self.replace_all and confirm is None:
            raise ValueError("confirm is required unless replace_all is set")

        buffer = self.buffer
        position = 0
        count = 0
        if self.replace_all:
            self._mark = buffer.cursor
            self.searched.clear()
            self.replaced.clear()
        else:
            self.find_all(self.find_text)

        try:
            while True:
                if self.replace_all:
                    match = find_forward(
                        buffer.text, self.find_text, position, self.match_case
                    )
                    if match is None:
                        break
                    buffer.select_range(match[1], match[0])
                else:
                    if not self.search(SEARCH_AGAIN):
                        break
                    answer = confirm(*buffer.selection_bounds())
                    if answer is None:
                        if count == 0:
                            count = -1
                        break
                    if not answer:
                        continue

                buffer.delete_selection()
                if self.replace_text:
                    offset = buffer.cursor
                    self._set_sequence(True)
                    with buffer.user_action():
                        buffer.insert(offset, self.replace_text)
                    position = buffer.cursor
                    self.replaced.append((offset, position))
                else:
                    position = buffer.cursor
                count += 1
                self._set_sequence(self.replace_all)

            if self.replace_all:
                buffer.place_cursor(self._mark)
                self._set_sequence(False)
        finally:
            self._mark = None
        return count

    # jumping -----------------------------------------------------------------

    def jump_to(self, line: int) -> int:
        """Put the cursor at the start of 1-based ``line``, kept within the buffer."""
        line = max(1, min(line, self.buffer.line_count()))
        offset = self.buffer.line_start(line - 1)
        self.buffer.place_cursor(offset)
        return offset