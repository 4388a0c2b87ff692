"""The main menu layout, its shortcuts and the sensitivity of its items."""

from __future__ import annotations

from dataclasses import dataclass

BRANCH = "branch"
ITEM = "item"
STOCK = "stock"
CHECK = "check"
SEPARATOR = "separator"

HIDDEN_SHORTCUTS: dict[str, str] = {
    "<control>W": "file_close",
    "<control>T": "option_always_on_top",
    "<control>Y": "edit_redo",
    "F3": "search_find_next",
    "<shift>F3": "search_find_previous",
    "<control>R": "search_replace",
}
"""Shortcuts that work without being shown in the menu."""


@dataclass
class MenuItem:
    """One menu entry; ``path`` carries the mnemonic underscores."""

    path: str
    accelerator: str | None = None
    action: str | None = None
    kind: str = ITEM
    stock_id: str | None = None
    sensitive: bool = True
    active: bool = False

    @property
    def key(self) -> str:
        """The path without mnemonic markers, used to look the item up."""
        return self.path.replace("_", "")

    @property
    def label(self) -> str:
        return self.key.rsplit("/", 1)[-1]


def build_menu(print_enabled: bool = False) -> list[MenuItem]:
    """Return fresh menu items in display order."""
    items = [
        MenuItem("/_File", kind=BRANCH),
        MenuItem("/File/_New", "<control>N", "file_new", STOCK, "gtk-new"),
        MenuItem("/File/_Open...", "<control>O", "file_open", STOCK, "gtk-open"),
        MenuItem("/File/_Save", "<control>S", "file_save", STOCK, "gtk-save"),
        MenuItem("/File/Save _As...", "<shift><control>S", "file_save_as", STOCK, "gtk-save-as"),
        MenuItem("/File/---", kind=SEPARATOR),
    ]
    if print_enabled:
        items += [
            MenuItem("/File/Print Pre_view", "<shift><control>P", "file_print_preview",
                     STOCK, "gtk-print-preview"),
            MenuItem("/File/_Print...", "<control>P", "file_print", STOCK, "gtk-print"),
            MenuItem("/File/---", kind=SEPARATOR),
        ]
    items += [
        MenuItem("/File/_Quit", "<control>Q", "file_quit", STOCK, "gtk-quit"),
        MenuItem("/_Edit", kind=BRANCH),
        MenuItem("/Edit/_Undo", "<control>Z", "edit_undo", STOCK, "gtk-undo"),
        MenuItem("/Edit/_Redo", "<shift><control>Z", "edit_redo", STOCK, "gtk-redo"),
        MenuItem("/Edit/---", kind=SEPARATOR),
        MenuItem("/Edit/Cu_t", "<control>X", "edit_cut", STOCK, "gtk-cut"),
        MenuItem("/Edit/_Copy", "<control>C", "edit_copy", STOCK, "gtk-copy"),
        MenuItem("/Edit/_Paste", "<control>V", "edit_paste", STOCK, "gtk-paste"),
        MenuItem("/Edit/_Delete", None, "edit_delete", STOCK, "gtk-delete"),
        MenuItem("/Edit/---", kind=SEPARATOR),
        MenuItem("/Edit/Select _All", "<control>A", "edit_select_all"),
        MenuItem("/_Search", kind=BRANCH),
        MenuItem("/Search/_Find...", "<control>F", "search_find", STOCK, "gtk-find"),
        MenuItem("/Search/Find _Next", "<control>G", "search_find_next"),
        MenuItem("/Search/Find _Previous", "<shift><control>G", "search_find_previous"),
        MenuItem("/Search/_Replace...", "<control>H", "search_replace", STOCK,
                 "gtk-find-and-replace"),
        MenuItem("/Search/---", kind=SEPARATOR),
        MenuItem("/Search/_Jump To...", "<control>J", "search_jump_to", STOCK, "gtk-jump-to"),
        MenuItem("/_Options", kind=BRANCH),
        MenuItem("/Options/_Font...", None, "option_font", STOCK, "gtk-select-font"),
        MenuItem("/Options/_Word Wrap", None, "option_word_wrap", CHECK),
        MenuItem("/Options/_Line Numbers", None, "option_line_numbers", CHECK),
        MenuItem("/Options/---", kind=SEPARATOR),
        MenuItem("/Options/_Auto Indent", None, "option_auto_indent", CHECK),
        MenuItem("/_Help", kind=BRANCH),
        MenuItem("/Help/_About", None, "help_about", STOCK, "gtk-about"),
    ]
    return items


def shortcut_map(items: list[MenuItem]) -> dict[str, str]:
    """Map every accelerator, shown or hidden, to the action it triggers."""
    shortcuts: dict[str, str] = {}
    bindings = [(item.accelerator, item.action) for item in items
                if item.accelerator and item.action]
    bindings += list(HIDDEN_SHORTCUTS.items())
    for accelerator, action in bindings:
        existing = shortcuts.get(accelerator)
        if existing is not None and existing != action:
            raise ValueError(
                f"accelerator {accelerator} bound to both {existing} and {action}"
            )
        shortcuts[accelerator] = action
    return shortcuts


class MenuState:
    """The menu items of one window and which of them can be used."""

    def __init__(self, print_enabled: bool = False) -> None:
        self.items = build_menu(print_enabled)
        self._by_key = {item.key: item for item in self.items if item.kind != SEPARATOR}
        self.shortcuts = shortcut_map(self.items)
        self.item("/Search/Find Next").sensitive = False
        self.item("/Search/Find Previous").sensitive = False
        self.set_selection(False)

    def item(self, path: str) -> MenuItem:
        """Look an item up by path, with or without mnemonic underscores."""
        try:
            return self._by_key[path.replace("_", "")]
        except KeyError:
            raise KeyError(f"no menu item {path!r}") from None

    def set_modified(self, modified: bool) -> None:
        self.item("/File/Save").sensitive = modified

    def set_selection(self, has_selection: bool) -> None:
        for path in ("/Edit/Cut", "/Edit/Copy", "/Edit/Delete"):
            self.item(path).sensitive = has_selection

    def set_clipboard(self, has_text: bool) -> None:
        self.item("/Edit/Paste").sensitive = has_text