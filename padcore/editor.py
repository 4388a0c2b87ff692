"""The editing window: a buffer wired to undo, indentation, menu and gutter."""

from __future__ import annotations

import os

from padcore.buffer import CONTROL_OFFSET, Key, KeyState, TextBuffer
from padcore.indent import Indenter
from padcore.linenum import LineNumberGutter
from padcore.menu import MenuState
from padcore.search import Searcher
from padcore.undo import UndoManager

UNTITLED = "Untitled"


def _keyval_for(char: str) -> int:
    if char == "\n":
        return Key.RETURN
    if char == "\t":
        return Key.TAB
    code = ord(char)
    if code < 0x100:
        return code
    return 0x01000000 + code


class Editor:
    """One document being edited, with the key handling of the text view."""

    def __init__(self, filename: str | None = None) -> None:
        self.filename = filename
        self.buffer = TextBuffer()
        self.keys = KeyState()
        self.menu = MenuState()
        self.gutter = LineNumberGutter()
        self.undo = UndoManager(self.buffer, self.keys)
        self.indenter = Indenter(self.buffer, self.undo)
        self.searcher = Searcher(self.buffer, self.undo)
        self.buffer.connect("mark-set", self._on_selection_changed)
        self.buffer.connect("end-user-action", self._on_selection_changed)
        self.buffer.connect("modified-changed", self._on_modified_changed)
        self._update_save_sensitivity()

    # signal handlers -----------------------------------------------------

    def _on_selection_changed(self, buffer: TextBuffer) -> None:
        self.menu.set_selection(buffer.has_selection)

    def _on_modified_changed(self, buffer: TextBuffer) -> None:
        if not buffer.modified:
            self.undo.reset_modified_step()
        self._update_save_sensitivity()

    def _update_save_sensitivity(self) -> None:
        exists = bool(self.filename) and os.path.exists(self.filename)
        self.menu.set_modified(self.buffer.modified or not exists)

    # operations ----------------------------------------------------------

    def title(self) -> str:
        """Window title: the file's base name, starred when modified."""
        name = os.path.basename(self.filename) if self.filename else UNTITLED
        return f"*{name}" if self.buffer.modified else name

    def load_text(self, text: str) -> None:
        """Put ``text`` at the start of the buffer as unmodified content."""
        self.buffer.insert(0, text)
        self.buffer.place_cursor(0)
        self.buffer.modified = False

    def type_text(self, text: str) -> None:
        """Type ``text`` one key at a time, as the keyboard would."""
        for char in text:
            if self.handle_key(_keyval_for(char)):
                continue
            with self.buffer.user_action():
                self.buffer.delete_selection()
                self.buffer.insert(self.buffer.cursor, char)

    def backspace(self) -> None:
        """Delete the selection, or the character before the cursor."""
        if self.handle_key(Key.BACKSPACE):
            return
        buffer = self.buffer
        if buffer.has_selection:
            buffer.delete_selection()
        elif buffer.cursor > 0:
            with buffer.user_action():
                buffer.delete(buffer.cursor - 1, buffer.cursor)
        else:
            self.keys.clear()

    def _has_multiline_selection(self) -> bool:
        if not self.buffer.has_selection:
            return False
        return "\n" in self.buffer.get_text(*self.buffer.selection_bounds())

    def handle_key(self, key: int, shift: bool = False, control: bool = False) -> bool:
        """React to a key press; True if the key was consumed.

        Otherwise the key value is remembered for the undo history, offset
        when Control is involved, and the default action should follow.
        """
        self.keys.value = 0
        if key == Key.RETURN and self.indenter.enabled:
            self.indenter.newline_with_indent()
            return True
        if key == Key.TAB and control:
            self.indenter.toggle_tab_width()
            return True
        if key in (Key.TAB, Key.ISO_LEFT_TAB):
            if shift:
                self.indenter.unindent_lines()
                return True
            if self._has_multiline_selection():
                self.indenter.indent_lines()
                return True
        value = int(key)
        if control or key in (Key.CONTROL_L, Key.CONTROL_R):
            value += CONTROL_OFFSET
        self.keys.value = value
        return False