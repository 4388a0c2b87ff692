import pytest

from padcore.buffer import Key, KeyState, TextBuffer


def test_insert_appends_text():
    buf = TextBuffer("hello")
    buf.insert(5, " world")
    assert buf.text == "hello world"
    assert buf.get_text(0, 5) == "hello"


def test_insert_outside_buffer_raises():
    buf = TextBuffer("abc")
    with pytest.raises(ValueError):
        buf.insert(4, "x")
    with pytest.raises(ValueError):
        buf.insert(-1, "x")


def test_delete_accepts_reversed_range():
    buf = TextBuffer("hello")
    buf.delete(3, 0)
    assert buf.text == "hello"[3:]


def test_insert_moves_marks_at_or_after_offset():
    buf = TextBuffer("abcdef")
    buf.place_cursor(2)
    buf.insert(0, "xy")
    assert buf.cursor == 2 + len("xy")
    buf.insert(buf.cursor, "z")
    assert buf.cursor == 2 + len("xyz")


def test_delete_pulls_marks_back():
    buf = TextBuffer("abcdef")
    buf.select_range(5, 2)
    buf.delete(1, 3)
    assert buf.text == "adef"
    assert buf.cursor == 5 - 2
    assert buf.bound == 1


def test_lines():
    buf = TextBuffer("a\nbc\n")
    assert buf.line_count() == 3
    assert buf.line_start(0) == 0
    assert buf.line_start(1) == len("a\n")
    assert buf.line_start(2) == len(buf.text)
    assert buf.line_start(10) == len(buf.text)
    assert buf.line_of(len("a\nb")) == 1
    with pytest.raises(ValueError):
        buf.line_start(-1)


def test_insert_signal_fires_after_change():
    buf = TextBuffer("ab")
    seen = []
    buf.connect("insert-text", lambda b, offset, text: seen.append((b.text, offset, text)))
    buf.insert(1, "X")
    assert seen == [("aXb", 1, "X")]


def test_delete_signal_fires_before_change():
    buf = TextBuffer("abcd")
    seen = []
    buf.connect("delete-range", lambda b, s, e: seen.append(b.get_text(s, e)))
    buf.delete(1, 3)
    assert seen == ["bc"]
    assert buf.text == "ad"


def test_modified_changed_emitted_once():
    buf = TextBuffer("x")
    count = []
    buf.connect("modified-changed", lambda b: count.append(b.modified))
    buf.insert(0, "a")
    buf.insert(0, "b")
    buf.modified = False
    assert count == [True, False]


def test_user_action_nesting_emits_once():
    buf = TextBuffer()
    events = []
    buf.connect("begin-user-action", lambda b: events.append("begin"))
    buf.connect("end-user-action", lambda b: events.append("end"))
    with buf.user_action():
        with buf.user_action():
            buf.insert(0, "q")
    assert events == ["begin", "end"]


def test_delete_selection():
    buf = TextBuffer("hello")
    assert buf.delete_selection() is False
    events = []
    buf.connect("begin-user-action", lambda b: events.append("begin"))
    buf.select_range(4, 1)
    assert buf.selection_bounds() == (1, 4)
    assert buf.delete_selection() is True
    assert buf.text == "ho"
    assert events == ["begin"]
    assert not buf.has_selection


def test_unknown_signal_rejected():
    with pytest.raises(ValueError):
        TextBuffer().connect("no-such-signal", lambda b: None)


def test_key_state_clear():
    keys = KeyState(Key.BACKSPACE)
    keys.clear()
    assert keys.value == 0
    assert Key.BACKSPACE == 0xFF08