from .blocks import EditBlock
from .hunks import ApplyResult, Hunk, HunkStatus
from .match import (
    MatchLocation,
    MatchOutcome,
    MatchResult,
    MatchStrategy,
    SimilarMatch,
)

__all__ = [
    "EditBlock",
    "ApplyResult",
    "Hunk",
    "HunkStatus",
    "MatchLocation",
    "MatchOutcome",
    "MatchResult",
    "MatchStrategy",
    "SimilarMatch",
]
