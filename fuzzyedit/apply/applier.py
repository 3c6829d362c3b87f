# fuzzyedit/apply/applier.py
"""
Apply a batch of SEARCH/REPLACE blocks to one document buffer.

Every block is located independently against the *original* document, then
the successful matches are checked for overlap and spliced in from the
bottom up so earlier offsets stay valid. Failed blocks are reported as
FAILED hunks carrying retry feedback; they do not stop the other blocks.
An overlap between two matches fails the whole batch.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .._logging import resolve_logger
from ..errors.contract import ContractError, require_str
from ..extract.search_replace import SearchReplaceFormat
from ..match.matcher import FuzzyMatcher
from ..models.blocks import EditBlock
from ..models.hunks import ApplyResult, Hunk, HunkStatus
from ..models.match import MatchLocation, MatchResult, MatchStrategy

__all__ = [
    "FileEditApplier",
    "MatchedEdit",
    "apply_edits",
    "apply_edits_from_response",
    "preview_edits",
]


@dataclass(frozen=True)
class MatchedEdit:
    """A block whose SEARCH text was located, ready to be spliced in."""

    block: EditBlock
    location: MatchLocation
    result: MatchResult

    @property
    def start(self) -> int:
        return self.location.start_offset

    @property
    def end(self) -> int:
        return self.location.end_offset

    def message(self) -> str:
        strategy = self.result.strategy
        msg = f"Applied using strategy: {strategy.display_name}"
        if strategy is MatchStrategy.SIMILARITY:
            msg += f" ({self.result.similarity * 100:.0f}% similarity)"
        return msg

    def to_hunk(self, status: HunkStatus = HunkStatus.APPLIED) -> Hunk:
        return Hunk(
            block_index=self.block.block_index,
            start_line=self.location.start_line,
            end_line=self.location.end_line,
            before_text=self.location.matched_text,
            after_text=self.block.replace_text,
            status=status,
            message=self.message(),
        )


def _check_blocks(blocks: Optional[Iterable[EditBlock]]) -> List[EditBlock]:
    if blocks is None:
        raise ContractError("blocks must not be None")
    blocks = list(blocks)
    for b in blocks:
        if not isinstance(b, EditBlock):
            raise ContractError(f"blocks must contain EditBlock items, got {type(b).__name__}")
    return blocks


def _find_overlap(edits: List[MatchedEdit]) -> Optional[str]:
    """Expects edits sorted by start offset; describes the first overlapping pair."""
    for prev, curr in zip(edits, edits[1:]):
        if prev.end > curr.start:
            return (
                f"Blocks {prev.block.block_index + 1} and {curr.block.block_index + 1} overlap "
                f"at offsets {prev.start}-{prev.end} and {curr.start}-{curr.end}"
            )
    return None


class FileEditApplier:
    """
    Parse, match and apply SEARCH/REPLACE edits against in-memory text.

    No file I/O: callers decide whether to persist `after_content`.
    """

    def __init__(
        self,
        matcher: FuzzyMatcher | None = None,
        parser: SearchReplaceFormat | None = None,
        *,
        logger: logging.Logger | None = None,
        log: bool = False,
    ):
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__)
        self.matcher = matcher or FuzzyMatcher(logger=logger, log=log)
        self.parser = parser or SearchReplaceFormat(logger=logger, log=log)

    # ---------- public API ----------

    def apply(self, document: str, blocks: Iterable[EditBlock]) -> ApplyResult:
        require_str(document, "document")
        blocks = _check_blocks(blocks)
        if not blocks:
            return ApplyResult.no_changes(document)

        matched: List[MatchedEdit] = []
        failed: List[Hunk] = []
        for block in blocks:
            result = self.matcher.find_match(block.search_text, document)
            if result.is_success:
                self._log.debug(
                    f"Block {block.block_index + 1}: {result.strategy.display_name} "
                    f"at lines {result.location.start_line}-{result.location.end_line}"
                )
                matched.append(MatchedEdit(block, result.location, result))
            else:
                self._log.warning(f"Block {block.block_index + 1}: {result.message}")
                failed.append(
                    Hunk(
                        block_index=block.block_index,
                        start_line=None,
                        end_line=None,
                        before_text=block.search_text,
                        after_text=block.replace_text,
                        status=HunkStatus.FAILED,
                        message=result.generate_feedback(),
                    )
                )

        matched.sort(key=lambda e: e.start)
        overlap = _find_overlap(matched)
        if overlap is not None:
            self._log.warning(overlap)
            return ApplyResult.error(document, overlap)

        content = document
        for edit in reversed(matched):
            content = content[: edit.start] + edit.block.replace_text + content[edit.end :]

        hunks = [e.to_hunk() for e in matched] + failed
        hunks.sort(key=lambda h: h.block_index)
        self._log.info(f"Applied {len(matched)}/{len(blocks)} blocks")
        return ApplyResult(document, content, tuple(hunks), not failed)

    def apply_from_response(self, document: str, raw_text: str | None) -> ApplyResult:
        """Parse `raw_text`, validate the blocks and apply them to `document`."""
        require_str(document, "document")
        blocks = self.parser.parse(raw_text)
        if not blocks:
            return ApplyResult.no_changes(document)

        errors = self.parser.validate(blocks)
        if errors:
            message = "; ".join(errors)
            self._log.warning(f"Validation failed: {message}")
            return ApplyResult.error(document, message)
        return self.apply(document, blocks)

    def preview(self, document: str, blocks: Iterable[EditBlock]) -> ApplyResult:
        """Same as apply(), with applied hunks marked PREVIEW."""
        result = self.apply(document, blocks)
        hunks = tuple(
            h.with_status(HunkStatus.PREVIEW) if h.status is HunkStatus.APPLIED else h
            for h in result.hunks
        )
        return ApplyResult(result.before_content, result.after_content, hunks, result.all_successful)


# ---------- functional API ----------


def apply_edits(document: str, blocks: Iterable[EditBlock], *, logger=None, log: bool = False) -> ApplyResult:
    return FileEditApplier(logger=logger, log=log).apply(document, blocks)


def apply_edits_from_response(
    document: str, raw_text: str | None, *, logger=None, log: bool = False
) -> ApplyResult:
    return FileEditApplier(logger=logger, log=log).apply_from_response(document, raw_text)


def preview_edits(document: str, blocks: Iterable[EditBlock], *, logger=None, log: bool = False) -> ApplyResult:
    return FileEditApplier(logger=logger, log=log).preview(document, blocks)
