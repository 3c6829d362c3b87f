# fuzzyedit/utils/text.py
from __future__ import annotations

from bisect import bisect_right


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class LineIndex:
    """
    Line table for one document.

    Built once per match call and discarded with it. Lines are split on
    '\\n' only, so a CRLF document keeps its '\\r' at the end of each line;
    `span()` trims it so matched regions never end in the middle of a
    line terminator.
    """

    def __init__(self, text: str):
        self.text = text
        self.lines = text.split("\n")
        starts = [0]
        for line in self.lines[:-1]:
            starts.append(starts[-1] + len(line) + 1)
        self.starts = starts

    def __len__(self) -> int:
        return len(self.lines)

    def line_number(self, offset: int) -> int:
        """1-based line containing `offset`."""
        return bisect_right(self.starts, offset)

    def span(self, first: int, count: int) -> tuple[int, int]:
        """[start, end) offsets covering `count` lines starting at 0-based `first`."""
        last = first + count - 1
        start = self.starts[first]
        end = self.starts[last] + len(self.lines[last])
        if self.lines[last].endswith("\r"):
            end -= 1
        return start, end

    def window(self, first: int, count: int) -> str:
        """Lines [first, first+count) joined with '\\n', carriage returns dropped."""
        return "\n".join(ln.rstrip("\r") for ln in self.lines[first : first + count])
