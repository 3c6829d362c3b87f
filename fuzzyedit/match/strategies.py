# fuzzyedit/match/strategies.py
"""
The four matching strategies, strictest first.

Each strategy is a plain function

    (search_text, index, threshold) -> MatchResult

where `index` is the LineIndex of the document being searched. A strategy
answers SUCCESS, FAILURE or AMBIGUOUS; it never raises for a missing match.
`STRATEGIES` fixes the order in which the matcher tries them.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

from ..models.match import MatchLocation, MatchResult, MatchStrategy, SimilarMatch
from ..utils.text import LineIndex, normalize_newlines
from .normalize import normalize_whitespace
from .similarity import similarity

# Confidence reported for the normalized strategies; only EXACT reports 1.0.
WHITESPACE_SIMILARITY = 0.95
INDENTATION_SIMILARITY = 0.9

# A runner-up this close to the best similarity makes the match ambiguous.
AMBIGUITY_MARGIN = 0.1
MAX_CANDIDATES = 5
# Absorbs float error when a score sits exactly on the margin.
_EPSILON = 1e-9

StrategyFn = Callable[[str, LineIndex, float], MatchResult]


# ---------- helpers ----------


def location_for_span(index: LineIndex, start: int, end: int) -> MatchLocation:
    matched = index.text[start:end]
    start_line = index.line_number(start)
    return MatchLocation(start, end, start_line, start_line + matched.count("\n"), matched)


def candidate_for_span(index: LineIndex, start: int, end: int, score: float) -> SimilarMatch:
    loc = location_for_span(index, start, end)
    return SimilarMatch(loc.matched_text, loc.start_line, loc.end_line, score)


def _find_all(haystack: str, needle: str) -> Iterator[int]:
    """Start offsets of every (possibly overlapping) occurrence of needle."""
    pos = haystack.find(needle)
    while pos >= 0:
        yield pos
        pos = haystack.find(needle, pos + 1)


def scan_windows(search_text: str, index: LineIndex, threshold: float) -> List[Tuple[int, float]]:
    """
    Score every window of the document that has as many lines as `search_text`.

    Returns (first_line_index, similarity) pairs at or above `threshold`,
    best first; equal scores keep document order.
    """
    needle = normalize_newlines(search_text)
    size = max(1, needle.count("\n") + 1)
    scored: List[Tuple[int, float]] = []
    for first in range(len(index) - size + 1):
        score = similarity(needle, index.window(first, size))
        if score >= threshold:
            scored.append((first, score))
    scored.sort(key=lambda item: (-item[1], item[0]))
    return scored


# ---------- strategies ----------


def match_exact(search_text: str, index: LineIndex, threshold: float) -> MatchResult:
    """Literal substring search; a repeated string is reported, never auto-resolved."""
    hits = list(_find_all(index.text, search_text))
    if not hits:
        return MatchResult.failure("Exact match not found")
    if len(hits) > 1:
        return MatchResult.ambiguous(
            candidate_for_span(index, h, h + len(search_text), 1.0) for h in hits
        )
    start = hits[0]
    return MatchResult.success(
        location_for_span(index, start, start + len(search_text)), MatchStrategy.EXACT, 1.0
    )


def match_normalized_whitespace(search_text: str, index: LineIndex, threshold: float) -> MatchResult:
    """Substring search after stripping trailing whitespace and unifying line endings."""
    needle = normalize_whitespace(search_text).text
    if not needle.strip():
        return MatchResult.failure("Search text is blank after whitespace normalization")

    doc = normalize_whitespace(index.text)
    spans = [doc.to_original(h, h + len(needle)) for h in _find_all(doc.text, needle)]
    if not spans:
        return MatchResult.failure("No match after whitespace normalization")
    if len(spans) > 1:
        return MatchResult.ambiguous(
            candidate_for_span(index, s, e, WHITESPACE_SIMILARITY) for s, e in spans
        )
    start, end = spans[0]
    return MatchResult.success(
        location_for_span(index, start, end), MatchStrategy.NORMALIZE_WHITESPACE, WHITESPACE_SIMILARITY
    )


def _strip_indent(line: str) -> str:
    return line.rstrip("\r").lstrip()


def match_normalized_indentation(search_text: str, index: LineIndex, threshold: float) -> MatchResult:
    """
    Line-by-line comparison with leading whitespace ignored on both sides.

    Several matching windows give a plain failure asking for more context,
    not an AMBIGUOUS result.
    """
    wanted = [_strip_indent(ln) for ln in normalize_newlines(search_text).split("\n")]
    if not any(wanted):
        return MatchResult.failure("Search text is blank after indentation normalization")

    size = len(wanted)
    stripped = [_strip_indent(ln) for ln in index.lines]
    found = -1
    for first in range(len(stripped) - size + 1):
        if stripped[first : first + size] == wanted:
            if found >= 0:
                return MatchResult.failure(
                    "Multiple matches after indentation normalization. Add more context."
                )
            found = first

    if found < 0:
        return MatchResult.failure("No match after indentation normalization")
    start, end = index.span(found, size)
    return MatchResult.success(
        location_for_span(index, start, end), MatchStrategy.NORMALIZE_INDENTATION, INDENTATION_SIMILARITY
    )


def match_similarity(search_text: str, index: LineIndex, threshold: float) -> MatchResult:
    """
    Best same-size window by LCS similarity.

    Every window at or above the threshold competes, overlapping ones
    included: a runner-up within AMBIGUITY_MARGIN of the best makes the
    result AMBIGUOUS, listing the closest windows best first.
    """
    scored = scan_windows(search_text, index, threshold)
    if not scored:
        return MatchResult.failure(f"No similar text found (similarity threshold: {threshold:.0%})")

    size = max(1, normalize_newlines(search_text).count("\n") + 1)
    best_first, best_score = scored[0]
    close = [(first, score) for first, score in scored if best_score - score <= AMBIGUITY_MARGIN + _EPSILON]
    if len(close) > 1:
        return MatchResult.ambiguous(
            candidate_for_span(index, *index.span(first, size), score)
            for first, score in close[:MAX_CANDIDATES]
        )

    start, end = index.span(best_first, size)
    return MatchResult.success(location_for_span(index, start, end), MatchStrategy.SIMILARITY, best_score)


STRATEGIES: Tuple[Tuple[MatchStrategy, StrategyFn], ...] = (
    (MatchStrategy.EXACT, match_exact),
    (MatchStrategy.NORMALIZE_WHITESPACE, match_normalized_whitespace),
    (MatchStrategy.NORMALIZE_INDENTATION, match_normalized_indentation),
    (MatchStrategy.SIMILARITY, match_similarity),
)
