from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EditBlock:
    """One SEARCH/REPLACE instruction, indexed by its position in the response."""

    search_text: str
    replace_text: str
    # Position is metadata; two blocks with the same texts compare equal.
    block_index: int = field(default=0, compare=False)

    @property
    def is_deletion(self) -> bool:
        return not self.replace_text and bool(self.search_text)

    @property
    def is_insertion(self) -> bool:
        return not self.search_text and bool(self.replace_text)

    @property
    def summary(self) -> str:
        search_lines = self.search_text.count("\n") + 1
        replace_lines = self.replace_text.count("\n") + 1
        if self.is_deletion:
            return f"Delete {search_lines} lines"
        if self.is_insertion:
            return f"Insert {replace_lines} lines"
        delta = replace_lines - search_lines
        if delta > 0:
            return f"Replace {search_lines} lines (+{delta})"
        if delta < 0:
            return f"Replace {search_lines} lines ({delta})"
        return f"Replace {search_lines} lines"

    def __str__(self) -> str:
        return (
            f"EditBlock[search={len(self.search_text)} chars, "
            f"replace={len(self.replace_text)} chars, idx={self.block_index}]"
        )
