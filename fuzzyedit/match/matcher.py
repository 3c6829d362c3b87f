# fuzzyedit/match/matcher.py
from __future__ import annotations

import logging

from .._logging import resolve_logger
from ..errors.contract import ContractError, require_str
from ..models.match import MatchResult
from ..utils.text import LineIndex, normalize_newlines
from .strategies import MAX_CANDIDATES, STRATEGIES, candidate_for_span, scan_windows

__all__ = ["FuzzyMatcher", "find_match", "DEFAULT_SIMILARITY_THRESHOLD"]

DEFAULT_SIMILARITY_THRESHOLD = 0.75


class FuzzyMatcher:
    """
    Locate a SEARCH text inside a document, trying each strategy in turn:

      1) exact substring
      2) trailing-whitespace / line-ending normalization
      3) indentation normalization
      4) LCS similarity over same-size line windows

    The first SUCCESS or AMBIGUOUS answer wins. When every strategy fails, a
    looser similarity scan (half the threshold) collects candidates so the
    caller can tell the model what the text probably looked like.

    Instances hold only the threshold and logger; share them freely.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
        *,
        logger: logging.Logger | None = None,
        log: bool = False,
    ):
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ContractError(f"threshold must be a number, got {type(threshold).__name__}")
        if not 0.0 < threshold <= 1.0:
            raise ContractError(f"threshold must be in (0, 1], got {threshold}")
        self.threshold = float(threshold)
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__)

    def find_match(self, search_text: str, document: str) -> MatchResult:
        require_str(search_text, "search_text")
        require_str(document, "document")

        if not search_text:
            return MatchResult.failure("Search text must not be empty")
        if not document:
            return MatchResult.failure("Document is empty")

        index = LineIndex(document)
        for strategy, fn in STRATEGIES:
            result = fn(search_text, index, self.threshold)
            self._log.debug(f"{strategy.display_name}: {result.outcome.value}")
            if result.is_success or result.is_ambiguous:
                return result

        return self._fallback(search_text, index)

    def _fallback(self, search_text: str, index: LineIndex) -> MatchResult:
        scored = scan_windows(search_text, index, self.threshold * 0.5)
        if not scored:
            self._log.debug("No candidates above the fallback threshold")
            return MatchResult.failure(
                "Text not found in the document. "
                "Make sure the SEARCH block matches the current file content."
            )

        size = max(1, normalize_newlines(search_text).count("\n") + 1)
        candidates = [
            candidate_for_span(index, *index.span(first, size), score)
            for first, score in scored[:MAX_CANDIDATES]
        ]
        self._log.debug(f"Returning {len(candidates)} fallback candidates")
        return MatchResult.failure("No exact match found, but similar fragments exist.", candidates)


def find_match(
    search_text: str,
    document: str,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    *,
    logger=None,
    log: bool = False,
) -> MatchResult:
    return FuzzyMatcher(threshold, logger=logger, log=log).find_match(search_text, document)
