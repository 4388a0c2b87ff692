import pytest

from padcore.buffer import KeyState, TextBuffer
from padcore.indent import Indenter, indent_offset_length
from padcore.undo import UndoManager


def make(text):
    buffer = TextBuffer(text)
    undo = UndoManager(buffer, KeyState())
    return buffer, undo, Indenter(buffer, undo)


def test_offset_length_of_tab_is_one():
    assert indent_offset_length("\t\t", 8) == 1


def test_offset_length_counts_spaces_up_to_tab_width():
    assert indent_offset_length("  ", 8) == len("  ")
    assert indent_offset_length(" " * 10, 4) == 4


def test_offset_length_stops_at_non_space():
    assert indent_offset_length("  \t", 8) == len("  ")


def test_offset_length_rejects_empty():
    with pytest.raises(ValueError):
        indent_offset_length("", 8)


def test_toggle_tab_width_between_eight_and_four():
    _, _, indenter = make("")
    assert indenter.tab_width == 8
    assert indenter.toggle_tab_width() == 4
    assert indenter.toggle_tab_width() == 8


def test_toggle_with_custom_default():
    _, _, indenter = make("")
    indenter.set_default_tab_width(2)
    assert indenter.tab_width == 2
    assert indenter.toggle_tab_width() == 8
    assert indenter.toggle_tab_width() == 2


def test_set_default_tab_width_rejects_zero():
    _, _, indenter = make("")
    with pytest.raises(ValueError):
        indenter.set_default_tab_width(0)


def test_auto_indent_disabled_by_default():
    _, _, indenter = make("")
    assert indenter.enabled is False


def test_compute_indentation():
    _, _, indenter = make("  \tfoo\nbar")
    assert indenter.compute_indentation(0) == "  \t"
    assert indenter.compute_indentation(1) is None
    assert indenter.compute_indentation(0, 1) == " "


def test_compute_indentation_stops_at_newline():
    _, _, indenter = make("   \nx")
    assert indenter.compute_indentation(0) == "   "


def test_newline_keeps_indentation():
    buffer = TextBuffer("    foo")
    indenter = Indenter(buffer)
    buffer.place_cursor(len(buffer))
    indenter.newline_with_indent()
    assert buffer.text == "    foo\n    "
    assert buffer.cursor == len(buffer)


def test_newline_replaces_selection():
    buffer = TextBuffer("  ab")
    indenter = Indenter(buffer)
    buffer.select_range(4, 2)
    indenter.newline_with_indent()
    assert "ab" not in buffer.text
    assert buffer.text.endswith("\n  ")
    assert not buffer.has_selection


def test_indent_lines_and_undo_as_one_step():
    original = "a\nb\nc"
    buffer, undo, indenter = make(original)
    buffer.select_range(buffer.line_start(2), 0)
    indenter.indent_lines()
    lines = buffer.text.split("\n")
    assert [line.lstrip("\t") for line in lines] == original.split("\n")
    assert all(line.startswith("\t") for line in lines[:2])
    assert not lines[2].startswith("\t")
    assert buffer.selection_bounds() == (0, buffer.line_start(2))
    assert buffer.cursor == buffer.line_start(2)
    undo.undo()
    assert buffer.text == original


def test_indent_lines_keeps_cursor_at_start():
    buffer, _, indenter = make("x\ny\nz")
    buffer.select_range(0, buffer.line_start(2))
    indenter.indent_lines()
    assert buffer.cursor == 0
    assert buffer.bound == buffer.line_start(2)


def test_unindent_lines_and_undo():
    original = "\tfoo\n    bar\nbaz"
    buffer, undo, indenter = make(original)
    indenter.set_default_tab_width(4)
    buffer.select_range(0, len(buffer))
    indenter.unindent_lines()
    assert buffer.text == "foo\nbar\nbaz"
    assert buffer.selection_bounds() == (0, buffer.line_start(2))
    undo.undo()
    assert buffer.text == original


def test_unindent_single_line_respects_tab_width():
    buffer, _, indenter = make("      x")
    indenter.set_default_tab_width(4)
    buffer.place_cursor(3)
    indenter.unindent_lines()
    assert buffer.text == "  x"


def test_unindent_leaves_last_selected_line():
    original = "abc\n  d"
    buffer, _, indenter = make(original)
    buffer.select_range(0, len(buffer))
    indenter.unindent_lines()
    assert buffer.text == original