# fuzzyedit/diff.py
from __future__ import annotations

import difflib

__all__ = ["unified_diff"]

_NO_EOL_MARKER = "\\ No newline at end of file\n"


def unified_diff(before: str, after: str, path: str = "document", context_lines: int = 3) -> str:
    """
    Render a git-style unified diff (`--- a/path`, `+++ b/path`) of two texts.

    Returns '' when the texts are equal. A last line without a newline gets
    the standard '\\ No newline at end of file' marker so the output stays
    valid input for patch tools.
    """
    if before == after:
        return ""

    diff = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
        n=context_lines,
    )
    out = []
    for line in diff:
        if line.endswith("\n"):
            out.append(line)
        else:
            out.append(line + "\n")
            out.append(_NO_EOL_MARKER)
    return "".join(out)
