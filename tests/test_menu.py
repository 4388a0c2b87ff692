import pytest

from padcore.menu import CHECK, SEPARATOR, MenuItem, MenuState, build_menu, shortcut_map


def keys(items):
    return [item.key for item in items]


def test_print_items_only_when_enabled():
    assert "/File/Print..." not in keys(build_menu(False))
    assert "/File/Print..." in keys(build_menu(True))
    assert "/File/Print Preview" in keys(build_menu(True))


def test_print_adds_items():
    assert len(build_menu(True)) > len(build_menu(False))


def test_build_menu_returns_fresh_items():
    first = build_menu()
    first[1].sensitive = False
    assert build_menu()[1].sensitive is True


def test_menu_order_starts_with_file_and_ends_with_about():
    items = build_menu()
    assert items[0].key == "/File"
    assert items[-1].key == "/Help/About"


def test_check_items():
    checks = [item.key for item in build_menu() if item.kind == CHECK]
    assert checks == ["/Options/Word Wrap", "/Options/Line Numbers", "/Options/Auto Indent"]


def test_label_drops_mnemonic():
    item = MenuItem("/File/Save _As...")
    assert item.label == "Save As..."
    assert item.key == "/File/Save As..."


def test_shortcuts_include_shown_and_hidden():
    shortcuts = shortcut_map(build_menu())
    assert shortcuts["<control>S"] == "file_save"
    assert shortcuts["<control>Z"] == "edit_undo"
    assert shortcuts["<control>Y"] == "edit_redo"
    assert shortcuts["F3"] == "search_find_next"
    assert shortcuts["<shift>F3"] == "search_find_previous"
    assert shortcuts["<control>W"] == "file_close"


def test_separators_have_no_shortcut():
    shortcuts = shortcut_map(build_menu())
    assert None not in shortcuts.values()


def test_conflicting_shortcut_rejected():
    items = [MenuItem("/File/_Other", "<control>W", "other_action")]
    with pytest.raises(ValueError):
        shortcut_map(items)


def test_initial_sensitivity():
    state = MenuState()
    assert state.item("/Search/Find Next").sensitive is False
    assert state.item("/Search/Find Previous").sensitive is False
    assert state.item("/Edit/Cut").sensitive is False
    assert state.item("/Edit/Copy").sensitive is False
    assert state.item("/Edit/Delete").sensitive is False
    assert state.item("/File/Save").sensitive is True
    assert state.item("/Edit/Paste").sensitive is True


def test_selection_toggles_cut_copy_delete():
    state = MenuState()
    state.set_selection(True)
    assert all(state.item(p).sensitive for p in ("/Edit/Cut", "/Edit/Copy", "/Edit/Delete"))
    state.set_selection(False)
    assert not any(state.item(p).sensitive for p in ("/Edit/Cut", "/Edit/Copy", "/Edit/Delete"))


def test_modified_and_clipboard():
    state = MenuState()
    state.set_modified(False)
    state.set_clipboard(False)
    assert state.item("/File/Save").sensitive is False
    assert state.item("/Edit/Paste").sensitive is False
    state.set_modified(True)
    assert state.item("/File/Save").sensitive is True


def test_item_lookup_with_mnemonic_and_missing():
    state = MenuState()
    assert state.item("/File/_Save") is state.item("/File/Save")
    with pytest.raises(KeyError):
        state.item("/File/Nothing")