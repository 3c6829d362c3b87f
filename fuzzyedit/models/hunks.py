from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple


class HunkStatus(Enum):
    APPLIED = "applied"
    PREVIEW = "preview"
    FAILED = "failed"
    # Set by reviewers downstream; the engine itself never produces these.
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Hunk:
    """
    Reported outcome for one edit block.

    `start_line`/`end_line` are 1-based lines of the original document, or
    None when the block could not be located.
    """

    block_index: int
    start_line: Optional[int]
    end_line: Optional[int]
    before_text: str
    after_text: str
    status: HunkStatus
    message: str

    @property
    def is_matched(self) -> bool:
        return self.start_line is not None

    @property
    def line_delta(self) -> int:
        return self.after_text.count("\n") - self.before_text.count("\n")

    @property
    def summary(self) -> str:
        if not self.is_matched:
            return f"Block {self.block_index + 1}: not found"
        delta = self.line_delta
        if delta > 0:
            return f"Lines {self.start_line}-{self.end_line} (+{delta})"
        if delta < 0:
            return f"Lines {self.start_line}-{self.end_line} ({delta})"
        return f"Lines {self.start_line}-{self.end_line}"

    def with_status(self, status: HunkStatus) -> "Hunk":
        return replace(self, status=status)


@dataclass(frozen=True)
class ApplyResult:
    """Terminal value of one apply call. The caller decides whether to persist it."""

    before_content: str
    after_content: str
    hunks: Tuple[Hunk, ...]
    all_successful: bool

    @classmethod
    def no_changes(cls, content: str) -> "ApplyResult":
        return cls(content, content, (), True)

    @classmethod
    def error(cls, content: str, message: str) -> "ApplyResult":
        hunk = Hunk(0, None, None, "", "", HunkStatus.FAILED, message)
        return cls(content, content, (hunk,), False)

    @property
    def applied_hunks(self) -> list[Hunk]:
        return [h for h in self.hunks if h.status in (HunkStatus.APPLIED, HunkStatus.PREVIEW)]

    @property
    def failed_hunks(self) -> list[Hunk]:
        return [h for h in self.hunks if h.status is HunkStatus.FAILED]

    @property
    def has_changes(self) -> bool:
        return self.before_content != self.after_content

    @property
    def summary(self) -> str:
        applied = len(self.applied_hunks)
        failed = len(self.failed_hunks)
        total = len(self.hunks)
        if total == 0:
            return "No changes"
        if self.all_successful:
            return f"Applied changes: {applied}"
        return f"Applied: {applied}/{total}, failed: {failed}"

    def failure_feedback(self) -> str:
        """Feedback for every failed hunk, ready to send back to the model; '' if none failed."""
        failed = self.failed_hunks
        if not failed:
            return ""
        parts = ["The following changes could not be applied:\n\n"]
        for hunk in failed:
            parts.append(f"=== Block {hunk.block_index + 1} ===\n")
            parts.append(f"{hunk.message}\n\n")
        return "".join(parts)

    def unified_diff(self, path: str = "document", context_lines: int = 3) -> str:
        from ..diff import unified_diff

        return unified_diff(self.before_content, self.after_content, path=path, context_lines=context_lines)

    def raise_for_failure(self) -> "ApplyResult":
        """Raise PatchFailedError if any hunk failed; otherwise return self for chaining."""
        if self.all_successful:
            return self
        from ..errors.patch import PatchFailedError

        raise PatchFailedError(self.summary, result=self)
