# fuzzyedit/utils/__init__.py
from .text import LineIndex, normalize_newlines

__all__ = [
    "LineIndex",
    "normalize_newlines",
]
