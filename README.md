# padcore

The editing core of a small plain-text editor. It has no GUI toolkit and
no dependencies beyond the standard library.

## What is in it

- `padcore.buffer`
  - `TextBuffer` holds text with a cursor (`cursor`), a selection bound
    (`bound`) and a `modified` flag.
  - It has line lookup: `line_count()`, `line_start(line)` and
    `line_of(offset)`.
  - It emits signals you subscribe to with `connect(signal, callback)`:
    `insert-text`, `delete-range`, `begin-user-action`, `end-user-action`,
    `modified-changed` and `mark-set`.
  - Edits are grouped with the `user_action()` context manager.
  - `KeyState` remembers the key behind the current edit, and `Key` lists
    the key values the editor reacts to.
- `padcore.undo`
  - `UndoManager` records edits made inside user actions, as `UndoStep`
    entries.
  - Runs of typed characters, backspaces or deletes merge into one step.
  - `set_sequence()` and `reserve_sequence()` chain steps so that
    `undo()` and `redo()` replay them together.
  - `reset_modified_step()` marks the saved state. Undoing back to it
    clears the buffer's `modified` flag.
- `padcore.indent`
  - `Indenter` gives auto-indentation on a new line
    (`newline_with_indent()`).
  - It indents and unindents the selected lines (`indent_lines()`,
    `unindent_lines()`).
  - `toggle_tab_width()` switches between the default tab width and the
    alternate width (8 and 4).
- `padcore.search`
  - `find_forward()` and `find_backward()` search plain text, with
    optional case matching.
  - `Searcher.search(direction)` selects the next or previous match and
    wraps around the buffer. A new search that finds nothing raises
    `SearchNotFound`.
  - `Searcher.replace(confirm)` replaces every match when `replace_all`
    is set. Otherwise it asks `confirm(start, end)` about each match:
    `True` replaces, `False` skips, `None` stops.
  - `Searcher.jump_to(line)` moves the cursor to a 1-based line.
- `padcore.linenum`
  - `LineNumberGutter` works out the width of the line-number gutter and
    the right-aligned labels to draw in it, for a monospaced character
    width.
  - `visible_lines()` picks the lines that cover a vertical span.
- `padcore.menu`
  - `build_menu()` returns the menu layout as `MenuItem`s.
  - `shortcut_map()` maps every accelerator, shown or hidden, to its
    action.
  - `MenuState` tracks which items are enabled. Save follows the modified
    flag, Cut/Copy/Delete follow the selection, and Paste follows the
    clipboard.
- `padcore.selector`
  - `FileInfo` holds a file name, its character coding and its `LineEnd`.
  - `CharsetMenu` models the coding menu of an open or save dialog
    (`DialogMode`). It has Auto-Detect for opening, the locale's coding,
    UTF-8, extra codings, and an entry for a coding typed in by hand.
  - `charset_supported()` checks that a coding name can be decoded.
- `padcore.editor`
  - `Editor` wires a buffer to undo, indentation, search, the menu state
    and the gutter.
  - It handles keys like a text view: Return with auto-indent, Tab and
    Shift+Tab on a selection, and Control+Tab to toggle the tab width.
  - `title()` gives the window title, with a leading `*` when the buffer
    is modified.
- `padcore.utils`
  - `read_stdin()` reads piped standard input. It gives up with `None` if
    nothing arrives within a short timeout.
- `padcore.app`
  - Command-line parsing (`parse_args()`).
  - The configuration file: `Config`, `config_path()`, `load_config()` and
    `save_config()`.
  - The `main()` entry point.

## Example

```python
from padcore.editor import Editor

editor = Editor("notes.txt")
editor.load_text("first line\n")
editor.type_text("hello")
editor.backspace()
print(editor.buffer.text)  # "hellfirst line\n"
print(editor.title())      # "*notes.txt"

editor.undo.undo()
print(editor.buffer.text)  # "first line\n"
```

## Command line

```
padcore [--codeset=CODESET] [--tab-width=WIDTH] [--jump=LINENUM] [--version] [filename]
```

- `--codeset`: the character coding used to decode the file. It is
  ignored if Python cannot decode with it.
- `--tab-width`: the default tab width.
- `--jump`: the line to put the cursor on after loading.
- `--version`: print `padcore 0.8.19` and exit.

When a file name is given and names an existing file, its contents are
loaded. Without a `--codeset`, the contents are decoded as UTF-8, then in
the locale's coding.

When no file name is given, text piped on standard input is loaded
instead. Bad options print a message and exit with status 255.

The word-wrap, line-number and auto-indent settings are read from
`$XDG_CONFIG_HOME/padcore/padcorerc`, or `~/.config/padcore/padcorerc`
when that variable is unset. That file starts with a version line,
followed by one line each for width, height, font name, word wrap, line
numbers, auto indent and maximize. Files from versions older than x.8 are
ignored.

## What it does not do

There is no window, screen or drawing. `padcore` builds an `Editor` for
the given file or standard input and then exits; it offers no interactive
editing session.

The package does not save documents to disk. It does not detect
character codings beyond the fallbacks described above.

`main()` never writes the configuration file. Call `save_config()`
yourself to write it. Width, height, font name and maximize are stored
in the file but are not used.

## Tests

```
pip install .[test]
pytest
```