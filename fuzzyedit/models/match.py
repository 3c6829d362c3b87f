"""
Value types produced by the fuzzy matcher.

A MatchResult is a small tagged union: SUCCESS carries a location, the
winning strategy and a similarity score; FAILURE carries a message and
optional ranked candidates; AMBIGUOUS carries every equally good location.
`generate_feedback()` renders the non-success cases as retry instructions
for the model that proposed the edit.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# How much of the candidate list ends up in feedback text.
FEEDBACK_CANDIDATES = 3
FEEDBACK_PREVIEW_LINES = 5


class MatchStrategy(Enum):
    """Matching strategies, declared from most strict to most lenient."""

    EXACT = "Exact match"
    NORMALIZE_WHITESPACE = "Whitespace normalization"
    NORMALIZE_INDENTATION = "Indentation normalization"
    SIMILARITY = "Similarity match"

    @property
    def display_name(self) -> str:
        return self.value


class MatchOutcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class MatchLocation:
    """Where a match sits in the document: [start_offset, end_offset), 1-based lines."""

    start_offset: int
    end_offset: int
    start_line: int
    end_line: int
    matched_text: str

    @property
    def length(self) -> int:
        return self.end_offset - self.start_offset

    def __str__(self) -> str:
        return (
            f"MatchLocation[offset={self.start_offset}-{self.end_offset}, "
            f"lines={self.start_line}-{self.end_line}, len={self.length}]"
        )


@dataclass(frozen=True)
class SimilarMatch:
    """A candidate region offered back to the model when matching did not succeed."""

    text: str
    start_line: int
    end_line: int
    similarity: float


@dataclass(frozen=True)
class MatchResult:
    outcome: MatchOutcome
    location: Optional[MatchLocation] = None
    strategy: Optional[MatchStrategy] = None
    similarity: float = 0.0
    message: Optional[str] = None
    candidates: Tuple[SimilarMatch, ...] = ()

    # ---------- constructors ----------

    @classmethod
    def success(
        cls, location: MatchLocation, strategy: MatchStrategy, similarity: float = 1.0
    ) -> "MatchResult":
        return cls(MatchOutcome.SUCCESS, location=location, strategy=strategy, similarity=similarity)

    @classmethod
    def failure(cls, message: str, candidates=()) -> "MatchResult":
        return cls(MatchOutcome.FAILURE, message=message, candidates=tuple(candidates))

    @classmethod
    def ambiguous(cls, candidates) -> "MatchResult":
        candidates = tuple(candidates)
        message = (
            f"Found {len(candidates)} similar matches. "
            "Add more surrounding context to identify a unique location."
        )
        return cls(MatchOutcome.AMBIGUOUS, message=message, candidates=candidates)

    # ---------- queries ----------

    @property
    def is_success(self) -> bool:
        return self.outcome is MatchOutcome.SUCCESS

    @property
    def is_ambiguous(self) -> bool:
        return self.outcome is MatchOutcome.AMBIGUOUS

    def generate_feedback(self) -> str:
        """Render actionable feedback the proposing model can use to retry."""
        if self.is_success:
            return "Match found."

        parts = [f"ERROR: {self.message}\n\n"]
        if self.candidates:
            parts.append("Similar fragments found:\n")
            for i, cand in enumerate(self.candidates[:FEEDBACK_CANDIDATES], 1):
                parts.append(
                    f"\n--- Candidate {i} (lines {cand.start_line}-{cand.end_line}, "
                    f"similarity: {cand.similarity * 100:.0f}%) ---\n"
                )
                lines = cand.text.split("\n", FEEDBACK_PREVIEW_LINES)
                for line in lines[:FEEDBACK_PREVIEW_LINES]:
                    parts.append(line + "\n")
                if len(lines) > FEEDBACK_PREVIEW_LINES:
                    parts.append("...\n")
            parts.append("\nHINT: Use the EXACT text of one of the candidates in the SEARCH block.")
        else:
            parts.append(
                "HINT: Verify that the search text exists in the file. "
                "The file may have changed, or the text may differ in whitespace/indentation."
            )
        return "".join(parts)

    def __str__(self) -> str:
        if self.is_success:
            return f"MatchResult[success, {self.strategy.name}, similarity={self.similarity:.2f}]"
        return f"MatchResult[{self.outcome.value}: {self.message}, candidates={len(self.candidates)}]"
