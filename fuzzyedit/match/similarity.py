# fuzzyedit/match/similarity.py
"""
LCS-based similarity scoring.

similarity(a, b) = |LCS(a, b)| / max(len(a), len(b))

Below CHAR_LEVEL_LIMIT characters (both sides) the LCS is taken over
characters. Above it the LCS is taken over whole lines and converted to an
approximate character count:

    lcs_chars ~= matched_lines * ((len(a) + len(b)) // (lines(a) + lines(b) + 1))

This trades precision for speed on large blocks; the resulting ratio is
clamped to 1.0.
"""
from __future__ import annotations

from typing import Hashable, Sequence

CHAR_LEVEL_LIMIT = 1000


def lcs_length(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """
    Length of the longest common subsequence of two sequences.

    Bit-parallel formulation: one Python int holds a DP row as a bit vector,
    so each element of `a` costs a handful of big-int operations instead of
    a pass over `b`. Gives the same value as the quadratic table.
    """
    if not a or not b:
        return 0
    if len(b) > len(a):
        a, b = b, a

    masks: dict = {}
    for i, item in enumerate(b):
        masks[item] = masks.get(item, 0) | (1 << i)

    full = (1 << len(b)) - 1
    row = full
    for item in a:
        matches = row & masks.get(item, 0)
        row = ((row + matches) | (row - matches)) & full
    # Every cleared bit is one matched element.
    return len(b) - bin(row).count("1")


def _line_lcs_estimate(a: str, b: str) -> int:
    a_lines = a.split("\n")
    b_lines = b.split("\n")
    matched_lines = lcs_length(a_lines, b_lines)
    avg_line_length = (len(a) + len(b)) // (len(a_lines) + len(b_lines) + 1)
    return matched_lines * avg_line_length


def similarity(a: str, b: str) -> float:
    """LCS ratio in [0, 1]; identical strings score 1.0, an empty side scores 0.0."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    if len(a) > CHAR_LEVEL_LIMIT or len(b) > CHAR_LEVEL_LIMIT:
        common = _line_lcs_estimate(a, b)
    else:
        common = lcs_length(a, b)
    return min(1.0, common / max(len(a), len(b)))
