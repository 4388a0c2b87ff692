"""Undo and redo history that records user edits of a TextBuffer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from padcore.buffer import Key, KeyState, TextBuffer

_SPECIAL_KEYS = 0xF000


class UndoCommand(enum.IntEnum):
    INSERT = 0
    BACKSPACE = 1
    DELETE = 2


@dataclass
class UndoStep:
    """One recorded edit; ``seq`` chains it to the step recorded after it."""

    command: UndoCommand
    start: int
    end: int
    text: str
    seq: bool = False


class UndoManager:
    """Records edits made inside user actions and replays them backwards."""

    def __init__(self, buffer: TextBuffer, keys: KeyState) -> None:
        self.buffer = buffer
        self.keys = keys
        self._undo: list[UndoStep] = []
        self._redo: list[UndoStep] = []
        self._pending: UndoStep | None = None
        self._modified_step = 0
        self._prev_keyval = 0
        self._seq_reserve = False
        self._recording = False

        buffer.connect("insert-text", self._on_insert)
        buffer.connect("delete-range", self._on_delete)
        buffer.connect("begin-user-action", self._on_begin)
        buffer.connect("end-user-action", self._on_end)
        self.clear()

    # state ---------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return bool(self._undo) or self._pending is not None

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    # signal handlers -----------------------------------------------------

    def _on_begin(self, buffer: TextBuffer) -> None:
        self._recording = True

    def _on_end(self, buffer: TextBuffer) -> None:
        self._recording = False

    def _on_insert(self, buffer: TextBuffer, offset: int, text: str) -> None:
        if self._recording:
            self._record(UndoCommand.INSERT, offset, offset + len(text))

    def _on_delete(self, buffer: TextBuffer, start: int, end: int) -> None:
        if not self._recording:
            return
        if self.keys.value == Key.BACKSPACE:
            command = UndoCommand.BACKSPACE
        else:
            command = UndoCommand.DELETE
        self._record(command, start, end)

    # recording -----------------------------------------------------------

    def _append(self, command: UndoCommand, start: int, end: int, text: str) -> None:
        self._undo.append(UndoStep(command, start, end, text, self._seq_reserve))
        self._seq_reserve = False

    def _flush(self) -> None:
        if self._pending is not None:
            pending = self._pending
            self._append(pending.command, pending.start, pending.end, pending.text)
            self._pending = None

    def _continues_pending(self, command: UndoCommand, start: int, end: int, keyval: int) -> bool:
        pending = self._pending
        if pending is None or end - start != 1 or command != pending.command:
            return False
        if keyval == Key.BACKSPACE:
            return end == pending.start
        if keyval == Key.DELETE:
            return start == pending.start
        if keyval in (Key.TAB, Key.SPACE):
            return start == pending.end
        return (
            start == pending.end
            and 0 < keyval < _SPECIAL_KEYS
            and self._prev_keyval not in (Key.RETURN, Key.TAB, Key.SPACE)
        )

    def _record(self, command: UndoCommand, start: int, end: int) -> None:
        keyval = self.keys.value
        text = self.buffer.get_text(start, end)

        if self._pending is not None:
            if self._continues_pending(command, start, end, keyval):
                pending = self._pending
                if command == UndoCommand.BACKSPACE:
                    pending.text = text + pending.text
                    pending.start -= 1
                else:
                    pending.text += text
                    pending.end += 1
                self._redo.clear()
                self._prev_keyval = keyval
                return
            self._flush()

        if not keyval and self._prev_keyval:
            self.set_sequence(True)

        typed = (0 < keyval < _SPECIAL_KEYS) or keyval in (
            Key.BACKSPACE,
            Key.DELETE,
            Key.TAB,
        )
        if end - start == 1 and typed:
            self._pending = UndoStep(command, start, end, text)
        else:
            self._append(command, start, end, text)

        self._redo.clear()
        self._prev_keyval = keyval
        self.keys.clear()

    # public operations ---------------------------------------------------

    def set_sequence(self, seq: bool) -> None:
        """Mark whether the last step is undone together with the one before it."""
        if self._undo:
            self._undo[-1].seq = seq

    def reserve_sequence(self) -> None:
        """Chain the next recorded step to the one after it."""
        self._seq_reserve = True

    def reset_modified_step(self) -> None:
        """Remember the current history depth as the unmodified state."""
        self._flush()
        self._modified_step = len(self._undo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
        self._pending = None
        self.reset_modified_step()
        self._prev_keyval = 0

    def _check_modified_step(self) -> None:
        at_saved = self._modified_step == len(self._undo)
        if self.buffer.modified == at_saved:
            self.buffer.modified = not at_saved

    def undo_step(self) -> bool:
        """Undo one step; True if the step before it must be undone as well."""
        self._flush()
        if self._undo:
            step = self._undo.pop()
            if step.command == UndoCommand.INSERT:
                self.buffer.delete(step.start, step.end)
                position = step.start
            else:
                self.buffer.insert(step.start, step.text)
                position = step.start + len(step.text)
                if step.command == UndoCommand.DELETE:
                    position = step.start
            self._redo.append(step)
            if self._undo and self._undo[-1].seq:
                return True
            self.buffer.place_cursor(position)
        self._check_modified_step()
        return False

    def redo_step(self) -> bool:
        """Redo one step; True if the step after it must be redone as well."""
        if self._redo:
            step = self._redo.pop()
            if step.command == UndoCommand.INSERT:
                self.buffer.insert(step.start, step.text)
                position = step.start + len(step.text)
            else:
                self.buffer.delete(step.start, step.end)
                position = step.start
            self._undo.append(step)
            if step.seq:
                self.set_sequence(True)
                return True
            self.buffer.place_cursor(position)
        self._check_modified_step()
        return False

    def undo(self) -> None:
        while self.undo_step():
            pass

    def redo(self) -> None:
        while self.redo_step():
            pass