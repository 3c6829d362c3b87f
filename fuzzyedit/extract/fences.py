# fuzzyedit/extract/fences.py
from __future__ import annotations

import re

# A run of 3+ backticks or tildes, an optional info string (language tag,
# possibly with '+', '#', '.' or '-'), then the body up to the matching run.
_FENCE_RE = re.compile(
    r"(?P<fence>`{3,}|~{3,})[\w+#.\-]*[ \t]*\n?"
    r"(?P<body>.*?)"
    r"\n?(?P=fence)",
    re.DOTALL,
)


def unwrap_code_fences(text: str) -> str:
    """
    Replace every fenced region with its body, keeping the text around the
    fences in place so blocks keep their relative order.

    Unterminated fences are left untouched.
    """
    if "```" not in text and "~~~" not in text:
        return text
    unwrapped = _FENCE_RE.sub(lambda m: m.group("body"), text)
    return unwrapped or text
