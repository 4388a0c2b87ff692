"""Helpers for reading text handed to the editor on standard input."""

from __future__ import annotations

import io
import select
import sys
from typing import IO, AnyStr

STDIN_DELAY = 0.1
"""Seconds to wait for data on standard input before giving up."""


def read_stdin(stream: IO[AnyStr] | None = None, timeout: float = STDIN_DELAY) -> AnyStr | None:
    """Read all of ``stream`` (standard input by default) and close it.

    Returns None when nothing becomes readable within ``timeout`` seconds
    or when reading fails. Streams without a file descriptor are read at once.
    """
    if stream is None:
        stream = sys.stdin
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation, OSError):
        fd = None
    if fd is not None:
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
    try:
        data = stream.read()
    except OSError:
        return None
    stream.close()
    return data