"""Automatic indentation, tab width and block indent/unindent for a TextBuffer."""

from __future__ import annotations

from padcore.buffer import TextBuffer
from padcore.undo import UndoManager

DEFAULT_TAB_WIDTH = 8
ALTERNATE_TAB_WIDTH = 4


def indent_offset_length(indent: str, tab_width: int) -> int:
    """Number of characters one unindent step removes from ``indent``.

    A leading tab or other whitespace counts as one character; a run of
    leading spaces is removed up to ``tab_width`` at a time.
    """
    if not indent:
        raise ValueError("empty indentation")
    if indent[0] != " ":
        return 1
    length = 1
    while length < tab_width and length < len(indent) and indent[length] == " ":
        length += 1
    return length


class Indenter:
    """Indentation operations on a buffer, recorded in an optional undo history."""

    def __init__(self, buffer: TextBuffer, undo: UndoManager | None = None) -> None:
        self.buffer = buffer
        self.undo = undo
        self.enabled = False
        self.default_tab_width = DEFAULT_TAB_WIDTH
        self.tab_width = DEFAULT_TAB_WIDTH

    def set_default_tab_width(self, width: int) -> None:
        """Set the default tab width and make it the current one."""
        if width <= 0:
            raise ValueError(f"tab width must be positive, not {width}")
        self.default_tab_width = width
        self.tab_width = width

    def toggle_tab_width(self) -> int:
        """Switch between the default width and an alternate one; return the new width."""
        if self.tab_width == self.default_tab_width:
            if self.default_tab_width == DEFAULT_TAB_WIDTH:
                self.tab_width = ALTERNATE_TAB_WIDTH
            else:
                self.tab_width = DEFAULT_TAB_WIDTH
        else:
            self.tab_width = self.default_tab_width
        return self.tab_width

    def compute_indentation(self, line: int, offset: int | None = None) -> str | None:
        """Leading whitespace of ``line``, cut at ``offset`` if it falls inside it.

        Returns None when the line has no leading whitespace.
        """
        text = self.buffer.text
        start = self.buffer.line_start(line)
        end = start
        while end < len(text) and text[end] != "\n" and text[end].isspace():
            end += 1
        if end == start:
            return None
        if offset is not None and offset < end:
            return self.buffer.get_text(start, offset)
        return text[start:end]

    def newline_with_indent(self) -> None:
        """Replace the selection by a newline followed by the current line's indentation."""
        buffer = self.buffer
        with buffer.user_action():
            buffer.delete_selection()
            cursor = buffer.cursor
            indent = self.compute_indentation(buffer.line_of(cursor), cursor) or ""
            buffer.insert(cursor, "\n" + indent)

    def _set_sequence(self, seq: bool) -> None:
        if self.undo is not None:
            self.undo.set_sequence(seq)

    def _selected_lines(self) -> tuple[int, int, bool]:
        start, end = self.buffer.selection_bounds()
        cursor_at_start = self.buffer.cursor == start
        return self.buffer.line_of(start), self.buffer.line_of(end), cursor_at_start

    def _restore_selection(self, start_line: int, end_line: int, cursor_at_start: bool) -> None:
        start = self.buffer.line_start(start_line)
        end = self.buffer.line_start(end_line)
        if cursor_at_start:
            self.buffer.select_range(start, end)
        else:
            self.buffer.select_range(end, start)

    def indent_lines(self) -> None:
        """Insert a tab at the start of every selected line but the last."""
        start_line, end_line, cursor_at_start = self._selected_lines()
        for line in range(start_line, end_line):
            offset = self.buffer.line_start(line)
            self.buffer.place_cursor(offset)
            with self.buffer.user_action():
                self.buffer.insert(offset, "\t")
            self._set_sequence(True)
        self._set_sequence(False)
        self._restore_selection(start_line, end_line, cursor_at_start)

    def unindent_lines(self) -> None:
        """Remove one indentation step from the selected lines but the last.

        A selection within a single line unindents that line.
        """
        start_line, end_line, cursor_at_start = self._selected_lines()
        line = start_line
        while True:
            indent = self.compute_indentation(line)
            if indent:
                length = indent_offset_length(indent, self.tab_width)
                start = self.buffer.line_start(line)
                self.buffer.select_range(start + length, start)
                with self.buffer.user_action():
                    self.buffer.delete(start, start + length)
                self._set_sequence(True)
            line += 1
            if line >= end_line:
                break
        self._set_sequence(False)
        self._restore_selection(start_line, end_line, cursor_at_start)