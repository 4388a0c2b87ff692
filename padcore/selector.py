"""Character coding and line ending choices offered when opening or saving a file."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

AUTO_DETECT = "Auto-Detect"
CURRENT_LOCALE = "Current Locale ({})"
OTHER_CODESET = "Other Codeset"
UTF8 = "UTF-8"


class LineEnd(enum.Enum):
    """Line ending written when a file is saved."""

    LF = "LF"
    CRLF = "CR+LF"
    CR = "CR"

    @property
    def chars(self) -> str:
        return {LineEnd.LF: "\n", LineEnd.CRLF: "\r\n", LineEnd.CR: "\r"}[self]


class DialogMode(enum.IntEnum):
    """Whether a file dialog saves or opens; OPEN adds the Auto-Detect entry."""

    SAVE = 0
    OPEN = 1


@dataclass
class FileInfo:
    """A file name with the character coding and line ending to use for it.

    ``charset_flag`` is set when the coding was typed in by hand rather than
    picked from the known codings.
    """

    filename: str | None = None
    charset: str | None = None
    charset_flag: bool = False
    lineend: LineEnd = LineEnd.LF


_LINEEND_ORDER = (LineEnd.LF, LineEnd.CRLF, LineEnd.CR)


def lineend_index(lineend: LineEnd) -> int:
    """Position of ``lineend`` in the line ending menu."""
    if lineend is LineEnd.CRLF:
        return 1
    if lineend is LineEnd.CR:
        return 2
    return 0


def lineend_from_index(index: int) -> LineEnd:
    """Line ending chosen at ``index`` of the menu; anything unknown means LF."""
    if index == 1:
        return LineEnd.CRLF
    if index == 2:
        return LineEnd.CR
    return LineEnd.LF


def charset_supported(name: str) -> bool:
    """True if text in the coding ``name`` can be converted to Unicode."""
    if not name:
        return False
    try:
        b"TEST".decode(name)
    except (LookupError, UnicodeDecodeError, ValueError, TypeError):
        return False
    return True


def _same_charset(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class CharsetMenu:
    """The character coding menu of a file dialog.

    Entries are, in order: Auto-Detect (open dialogs only), the locale's
    coding, UTF-8, the extra ``encodings``, and a last entry for a coding
    typed in by hand.
    """

    def __init__(
        self,
        mode: DialogMode,
        default_charset: str,
        encodings: Iterable[str | None] = (),
    ) -> None:
        self.mode = DialogMode(mode)
        self.default_charset = default_charset
        self.charsets: list[str] = [default_charset, UTF8]
        self._names: list[str] = [CURRENT_LOCALE.format(default_charset), UTF8]
        for encoding in encodings:
            if encoding:
                self.charsets.append(encoding)
                self._names.append(encoding)
        self.manual_charset: str | None = None
        self.current = 0

    @property
    def manual_index(self) -> int:
        """Index of the entry for a coding typed in by hand."""
        return len(self.charsets) + self.mode

    def manual_label(self) -> str:
        if self.manual_charset:
            return f"{OTHER_CODESET} ({self.manual_charset})"
        return f"{OTHER_CODESET}..."

    def labels(self) -> list[str]:
        """Menu entry texts in display order."""
        head = [AUTO_DETECT] if self.mode is DialogMode.OPEN else []
        return head + self._names + [self.manual_label()]

    def initial_index(self, fileinfo: FileInfo) -> int:
        """Choose the entry shown first for ``fileinfo`` and return its index.

        An open dialog forgets a coding that was not typed in by hand and
        starts at Auto-Detect.
        """
        self.manual_charset = fileinfo.charset if fileinfo.charset_flag else None
        index = 0
        if fileinfo.charset:
            index = next(
                (
                    position
                    for position, charset in enumerate(self.charsets)
                    if _same_charset(fileinfo.charset, charset)
                ),
                len(self.charsets),
            )
            if self.mode is DialogMode.OPEN and not fileinfo.charset_flag:
                fileinfo.charset = None
            elif index == len(self.charsets) and not fileinfo.charset_flag:
                self.manual_charset = fileinfo.charset
            index += self.mode
        if self.mode is DialogMode.SAVE or fileinfo.charset_flag:
            self.current = index
        else:
            self.current = 0
        return self.current

    def select(self, index: int, fileinfo: FileInfo) -> bool:
        """Apply the entry at ``index`` to ``fileinfo``.

        Returns False for the hand-typed entry, which needs ``set_manual``;
        the current entry then stays as it was.
        """
        if not 0 <= index <= self.manual_index:
            raise ValueError(f"no charset menu entry {index}")
        if index == self.manual_index:
            return False
        if index == 0 and self.mode is DialogMode.OPEN:
            fileinfo.charset = None
        else:
            fileinfo.charset = self.charsets[index - self.mode]
        self.current = index
        return True

    def set_manual(self, fileinfo: FileInfo, charset: str) -> int:
        """Use a coding typed in by hand; return the index now selected."""
        if not charset:
            raise ValueError("empty codeset")
        if not charset_supported(charset):
            raise ValueError(f"'{charset}' is not supported")
        fileinfo.charset = charset
        fileinfo.charset_flag = True
        self.manual_charset = charset
        self.current = self.manual_index
        return self.current