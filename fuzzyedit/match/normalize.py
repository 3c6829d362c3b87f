# fuzzyedit/match/normalize.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_EOL_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class NormalizedText:
    """
    Text with trailing per-line whitespace removed and line endings unified,
    plus an offset map back to the source.

    For every normalized character i, `starts[i]` is the source offset it
    came from and `ends[i]` the source offset just past it (a '\\n' produced
    from '\\r\\n' spans two source characters).
    """

    text: str
    starts: Tuple[int, ...]
    ends: Tuple[int, ...]

    def to_original(self, start: int, end: int) -> Tuple[int, int]:
        """Map a non-empty normalized range [start, end) to source offsets."""
        return self.starts[start], self.ends[end - 1]


def normalize_whitespace(text: str) -> NormalizedText:
    out: list[str] = []
    starts: list[int] = []
    ends: list[int] = []

    def emit_line(line_start: int, line_end: int) -> None:
        kept = len(text[line_start:line_end].rstrip())
        out.append(text[line_start : line_start + kept])
        starts.extend(range(line_start, line_start + kept))
        ends.extend(range(line_start + 1, line_start + kept + 1))

    pos = 0
    for eol in _EOL_RE.finditer(text):
        emit_line(pos, eol.start())
        out.append("\n")
        starts.append(eol.start())
        ends.append(eol.end())
        pos = eol.end()
    emit_line(pos, len(text))

    return NormalizedText("".join(out), tuple(starts), tuple(ends))
