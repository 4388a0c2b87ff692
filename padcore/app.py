"""Command line start-up: options, the configuration file and the first document."""

from __future__ import annotations

import argparse
import locale
import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, NoReturn

from padcore.editor import Editor
from padcore.selector import FileInfo, UTF8, charset_supported
from padcore.utils import read_stdin

PACKAGE = "padcore"
VERSION = "0.8.19"
CONFIG_FILE = PACKAGE + "rc"
MIN_CONFIG_MINOR = 8
"""Configuration files written by versions older than x.8 are ignored."""

USAGE_ERROR_STATUS = 255


@dataclass
class Config:
    """Window and option settings kept between sessions."""

    width: int = 600
    height: int = 400
    fontname: str = "Monospace 12"
    wordwrap: bool = False
    linenumbers: bool = True
    autoindent: bool = True
    maximize: bool = False


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _flag(text: str) -> bool:
    return _atoi(text) != 0


_FIELDS = (
    ("width", _atoi),
    ("height", _atoi),
    ("fontname", str),
    ("wordwrap", _flag),
    ("linenumbers", _flag),
    ("autoindent", _flag),
    ("maximize", _flag),
)


def config_path() -> Path:
    """Location of the configuration file in the user's configuration directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    return Path(base) / PACKAGE / CONFIG_FILE


def load_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Read settings from ``path``; defaults when it is missing or too old."""
    config = Config()
    path = Path(path) if path is not None else config_path()
    try:
        with open(path, encoding="utf-8") as stream:
            lines = stream.read().splitlines()
    except OSError:
        return config
    if not lines:
        return config
    version = lines[0].split(".", 2)
    if len(version) < 3 or _atoi(version[1]) < MIN_CONFIG_MINOR or _atoi(version[2]) < 0:
        return config
    for (name, convert), line in zip(_FIELDS, lines[1:]):
        setattr(config, name, convert(line))
    return config


def save_config(config: Config, path: str | os.PathLike[str] | None = None) -> Path:
    """Write ``config`` to ``path``, creating its directory; return the path."""
    path = Path(path) if path is not None else config_path()
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    lines = [VERSION]
    for name, _ in _FIELDS:
        value = getattr(config, name)
        lines.append(str(int(value)) if isinstance(value, bool) else str(value))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class _UsageError(ValueError):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def _default_charset() -> str:
    return locale.getpreferredencoding(False) or UTF8


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options.

    The result holds ``fileinfo`` (file name and coding to open with),
    ``tab_width``, ``jump`` and ``version``. Bad options raise ValueError.
    """
    parser = _Parser(prog=PACKAGE, usage="%(prog)s [OPTION...] [filename]")
    parser.add_argument("--codeset", metavar="CODESET", help="Set codeset to open file")
    parser.add_argument("--tab-width", type=int, default=0, metavar="WIDTH",
                        help="Set tab width")
    parser.add_argument("--jump", type=int, default=0, metavar="LINENUM",
                        help="Jump to specified line")
    parser.add_argument("--version", action="store_true", help="Show version number")
    parser.add_argument("files", nargs="*", metavar="filename")
    parsed = parser.parse_args(sys.argv[1:] if argv is None else argv)

    fileinfo = FileInfo()
    if parsed.codeset and charset_supported(parsed.codeset):
        fileinfo.charset = parsed.codeset
    if fileinfo.charset:
        known = {_default_charset().lower(), UTF8.lower()}
        if fileinfo.charset.lower() not in known:
            fileinfo.charset_flag = True
    if parsed.files:
        fileinfo.filename = parsed.files[0]

    return argparse.Namespace(
        fileinfo=fileinfo,
        tab_width=parsed.tab_width,
        jump=parsed.jump,
        version=parsed.version,
    )


def _decode(data: bytes, charset: str | None) -> str:
    if charset:
        return data.decode(charset)
    for candidate in (UTF8, _default_charset()):
        try:
            return data.decode(candidate)
        except (UnicodeDecodeError, LookupError):
            continue
    return data.decode(UTF8, errors="replace")


def _setup_editor(
    args: argparse.Namespace, config: Config, stdin: IO | None = None
) -> Editor:
    """Build the editor for the parsed options and settings, with its first text."""
    fileinfo: FileInfo = args.fileinfo
    editor = Editor(fileinfo.filename)
    if args.tab_width:
        editor.indenter.set_default_tab_width(args.tab_width)

    editor.menu.item("/Options/Word Wrap").active = config.wordwrap
    editor.menu.item("/Options/Line Numbers").active = config.linenumbers
    editor.gutter.show(config.linenumbers)
    editor.menu.item("/Options/Auto Indent").active = config.autoindent
    editor.indenter.enabled = config.autoindent

    if fileinfo.filename:
        path = Path(fileinfo.filename)
        if path.is_file():
            editor.load_text(_decode(path.read_bytes(), fileinfo.charset))
    else:
        data = read_stdin(stdin if stdin is not None else sys.stdin)
        if data:
            if isinstance(data, bytes):
                data = _decode(data, _default_charset())
            editor.load_text(data)

    if args.jump:
        editor.searcher.jump_to(args.jump)
    return editor


def main(argv: list[str] | None = None) -> int:
    """Start the editor from the command line; return the exit status."""
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(f"{PACKAGE}: {exc}")
        return USAGE_ERROR_STATUS
    if args.version:
        print(f"{PACKAGE} {VERSION}")
        return 0
    try:
        _setup_editor(args, load_config())
    except (OSError, ValueError) as exc:
        print(f"{PACKAGE}: {exc}")
        return USAGE_ERROR_STATUS
    return 0