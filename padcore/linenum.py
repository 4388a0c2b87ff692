"""Line numbers drawn in a gutter to the left of the text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MARGIN = 5
"""Space between the numbers and the separator stripe."""

SUBMARGIN = 2
"""Width of the separator stripe; the gutter is this wide when hidden."""

MIN_COLUMNS = 4
"""The gutter is never narrower than this many characters."""

MIN_NUMBER = 99
"""The gutter is always wide enough for at least this number."""

Label = tuple[int, int, str]


def visible_lines(
    line_ranges: Iterable[tuple[int, int]], y1: int, y2: int
) -> list[tuple[int, int]]:
    """Lines that cover the vertical span ``y1``..``y2``.

    ``line_ranges`` holds (y, height) for every line of the document in
    order. The result is (y, line_index) for the line at ``y1`` and each
    following line until one reaches ``y2``. An empty document still
    shows its first line.
    """
    ranges: Sequence[tuple[int, int]] = list(line_ranges)
    if not ranges:
        return [(0, 0)]
    first = next(
        (index for index, (y, height) in enumerate(ranges) if y + height > y1),
        len(ranges) - 1,
    )
    lines: list[tuple[int, int]] = []
    for number in range(first, len(ranges)):
        y, height = ranges[number]
        lines.append((y, number))
        if y + height >= y2:
            break
    return lines


class LineNumberGutter:
    """Width and contents of the line number gutter for a monospaced font."""

    def __init__(self, char_width: int = 8) -> None:
        if char_width <= 0:
            raise ValueError(f"character width must be positive, not {char_width}")
        self.char_width = char_width
        self.min_width = MIN_COLUMNS * char_width
        self.visible = False
        self.width = SUBMARGIN
        self.separator_x = 0

    def show(self, visible: bool) -> int:
        """Show or hide the numbers; return the new gutter width."""
        self.visible = bool(visible)
        if self.visible:
            self.width = self.min_width + MARGIN + SUBMARGIN
        else:
            self.width = SUBMARGIN
        return self.width

    def render(self, line_count: int, numbers: Iterable[tuple[int, int]]) -> list[Label]:
        """Lay out the numbers of the given (y, line_index) pairs.

        Returns (right_edge_x, y, text) for each number, right aligned at
        the same edge, and widens the gutter to fit ``line_count`` digits.
        A hidden gutter draws no numbers.
        """
        if not self.visible:
            self.separator_x = 0
            return []
        layout_width = len(str(max(MIN_NUMBER, line_count))) * self.char_width
        if layout_width > self.min_width:
            self.width = layout_width + MARGIN + SUBMARGIN
            justify = 0
        else:
            self.width = self.min_width + MARGIN + SUBMARGIN
            justify = self.min_width - layout_width
        right = layout_width + justify + MARGIN // 2 + 1
        self.separator_x = layout_width + justify + MARGIN
        return [(right, y, str(index + 1)) for y, index in numbers]