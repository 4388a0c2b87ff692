"""Editing core of a simple text editor: buffer, undo, indentation, search, menus and file options."""

__version__ = "0.8.19"