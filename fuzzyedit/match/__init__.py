from .matcher import DEFAULT_SIMILARITY_THRESHOLD, FuzzyMatcher, find_match
from .normalize import NormalizedText, normalize_whitespace
from .similarity import lcs_length, similarity
from .strategies import STRATEGIES

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "FuzzyMatcher",
    "find_match",
    "NormalizedText",
    "normalize_whitespace",
    "lcs_length",
    "similarity",
    "STRATEGIES",
]
