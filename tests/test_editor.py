from padcore.buffer import CONTROL_OFFSET, Key
from padcore.editor import UNTITLED, Editor
from padcore.indent import ALTERNATE_TAB_WIDTH


def test_typing_then_undo_and_redo():
    editor = Editor()
    editor.type_text("hello")
    assert editor.buffer.text == "hello"
    editor.undo.undo()
    assert editor.buffer.text == ""
    editor.undo.redo()
    assert editor.buffer.text == "hello"


def test_title_follows_modified_flag():
    editor = Editor("/tmp/dir/notes.txt")
    assert editor.title() == "notes.txt"
    editor.type_text("x")
    assert editor.title() == "*notes.txt"
    editor.undo.undo()
    assert editor.title() == "notes.txt"


def test_title_without_file():
    editor = Editor()
    assert editor.title() == UNTITLED


def test_load_text_is_unmodified_and_not_undoable():
    editor = Editor()
    editor.load_text("abc")
    assert editor.buffer.text == "abc"
    assert editor.buffer.cursor == 0
    assert editor.buffer.modified is False
    editor.undo.undo()
    assert editor.buffer.text == "abc"


def test_auto_indent_on_return():
    editor = Editor()
    editor.indenter.enabled = True
    editor.load_text("\tfoo")
    editor.buffer.place_cursor(len("\tfoo"))
    assert editor.handle_key(Key.RETURN) is True
    assert editor.buffer.text == "\tfoo\n\t"


def test_return_without_auto_indent_is_not_consumed():
    editor = Editor()
    assert editor.handle_key(Key.RETURN) is False
    assert editor.keys.value == Key.RETURN


def test_control_tab_toggles_width():
    editor = Editor()
    assert editor.handle_key(Key.TAB, control=True) is True
    assert editor.indenter.tab_width == ALTERNATE_TAB_WIDTH


def test_tab_indents_multiline_selection():
    editor = Editor()
    editor.load_text("a\nb\nc")
    editor.buffer.select_range(0, 4)
    assert editor.handle_key(Key.TAB) is True
    assert editor.buffer.text == "\ta\n\tb\nc"


def test_tab_without_selection_inserts_tab():
    editor = Editor()
    assert editor.handle_key(Key.TAB) is False
    editor.type_text("\t")
    assert editor.buffer.text == "\t"


def test_shift_tab_unindents():
    editor = Editor()
    editor.load_text("\ta")
    assert editor.handle_key(Key.TAB, shift=True) is True
    assert editor.buffer.text == "a"


def test_control_offsets_keyval():
    editor = Editor()
    assert editor.handle_key(ord("s"), control=True) is False
    assert editor.keys.value == ord("s") + CONTROL_OFFSET


def test_backspace_and_undo():
    editor = Editor()
    editor.type_text("ab")
    editor.backspace()
    assert editor.buffer.text == "a"
    editor.undo.undo()
    assert editor.buffer.text == "ab"
    editor.undo.undo()
    assert editor.buffer.text == ""


def test_backspace_at_start_does_nothing():
    editor = Editor()
    editor.backspace()
    assert editor.buffer.text == ""
    assert editor.keys.value == 0


def test_typing_replaces_selection():
    editor = Editor()
    editor.load_text("hello")
    editor.buffer.select_range(0, 5)
    editor.type_text("x")
    assert editor.buffer.text == "x"


def test_selection_drives_edit_menu():
    editor = Editor()
    editor.load_text("hello")
    assert editor.menu.item("/Edit/Cut").sensitive is False
    editor.buffer.select_range(0, 3)
    assert editor.menu.item("/Edit/Cut").sensitive is True
    editor.buffer.place_cursor(2)
    assert editor.menu.item("/Edit/Copy").sensitive is False


def test_save_sensitivity_for_existing_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("data")
    editor = Editor(str(path))
    editor.load_text("data")
    assert editor.menu.item("/File/Save").sensitive is False
    editor.type_text("!")
    assert editor.menu.item("/File/Save").sensitive is True


def test_save_sensitive_for_new_document():
    editor = Editor()
    editor.load_text("data")
    assert editor.menu.item("/File/Save").sensitive is True