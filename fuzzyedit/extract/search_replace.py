# fuzzyedit/extract/search_replace.py
"""
Parser for the SEARCH/REPLACE edit format:

    <<<<<<< SEARCH
    original code
    =======
    replacement code
    >>>>>>> REPLACE

Several blocks may appear in one response, optionally wrapped in markdown
code fences. The marker grammar is the wire format shared with the model
prompts, so the patterns below must stay byte-compatible:

  - start marker: 6 '<' plus one optional extra, optional whitespace, SEARCH
  - separator:    =======
  - end marker:   6 '>' plus up to two optional extra, optional whitespace, REPLACE

Matching is case-insensitive and bodies may span newlines.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .._logging import resolve_logger
from ..errors.contract import ContractError
from ..models.blocks import EditBlock
from ..utils.text import normalize_newlines
from .fences import unwrap_code_fences

__all__ = [
    "SearchReplaceFormat",
    "parse_edit_blocks",
    "has_edit_blocks",
    "validate_edit_blocks",
    "extract_file_path",
    "format_edit_blocks",
]

_BLOCK_RE = re.compile(
    r"<{6}<?\s*SEARCH\s*\n"  # start marker
    r"(.*?)"  # group 1: search text
    r"\n?={7}\n?"  # separator
    r"(.*?)"  # group 2: replace text
    r"\n?>{6}>?>?\s*REPLACE",  # end marker
    re.DOTALL | re.IGNORECASE,
)

# Leading '# path', 'File: path', 'path: path' or a bare path on its own line.
_FILE_PATH_RE = re.compile(
    r"(?:^|\n)(?:#\s*|File:\s*|path:\s*)?([\w/.\-]+\.[a-zA-Z]+)\s*(?:\n|$)",
    re.MULTILINE | re.IGNORECASE,
)

_START_MARKER = "<<<<<<< SEARCH"
_SEPARATOR = "======="
_END_MARKER = ">>>>>>> REPLACE"

# Shorter SEARCH texts tend to match in several places.
_SHORT_SEARCH_CHARS = 10


def _strip_one_newline(body: str | None) -> str:
    """Drop a single leading and a single trailing newline; keep any others."""
    if not body:
        return ""
    if body.startswith("\n"):
        body = body[1:]
    if body.endswith("\n"):
        body = body[:-1]
    return body


def _prepare(raw_text: object) -> str:
    if raw_text is None:
        return ""
    if not isinstance(raw_text, str):
        raise ContractError(f"response text must be a str, got {type(raw_text).__name__}")
    if not raw_text:
        return ""
    return unwrap_code_fences(normalize_newlines(raw_text))


def _render_block(search_text: str, replace_text: str) -> str:
    parts = [_START_MARKER, "\n", search_text]
    if not search_text.endswith("\n"):
        parts.append("\n")
    parts += [_SEPARATOR, "\n", replace_text]
    if not replace_text.endswith("\n"):
        parts.append("\n")
    parts.append(_END_MARKER)
    return "".join(parts)


class SearchReplaceFormat:
    """Stateless parser/renderer for SEARCH/REPLACE blocks; safe to share between threads."""

    def __init__(self, *, logger: logging.Logger | None = None, log: bool = False):
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__)

    def parse(self, raw_text: str | None) -> List[EditBlock]:
        """
        Parse every SEARCH/REPLACE block in `raw_text`, in source order.

        Returns an empty list for empty input or when no block is present.
        """
        content = _prepare(raw_text)
        if not content:
            return []

        blocks: List[EditBlock] = []
        for index, m in enumerate(_BLOCK_RE.finditer(content)):
            search_text = _strip_one_newline(m.group(1))
            replace_text = _strip_one_newline(m.group(2))
            blocks.append(EditBlock(search_text, replace_text, index))
            self._log.debug(
                f"Parsed block {index}: search={len(search_text)} chars, replace={len(replace_text)} chars"
            )

        self._log.info(f"Parsed {len(blocks)} SEARCH/REPLACE blocks from response")
        return blocks

    def has_blocks(self, raw_text: str | None) -> bool:
        content = _prepare(raw_text)
        return bool(content) and _BLOCK_RE.search(content) is not None

    def validate(self, blocks: Iterable[EditBlock]) -> List[str]:
        """Return structural problems found in `blocks`; an empty list means valid."""
        blocks = list(blocks)
        errors: List[str] = []
        if not blocks:
            errors.append("No SEARCH/REPLACE blocks found")
            return errors

        for i, block in enumerate(blocks, 1):
            search = block.search_text
            if not search.strip() and not block.is_insertion:
                errors.append(f"Block {i}: empty SEARCH text")
            if 0 < len(search) < _SHORT_SEARCH_CHARS:
                self._log.warning(
                    f"Block {i}: short SEARCH text ({len(search)} chars) may match in several places"
                )
            # Markers inside the SEARCH body mean the response was mis-parsed.
            if "<<<<<<" in search or ">>>>>>>" in search:
                errors.append(f"Block {i}: SEARCH text contains block markers")
        return errors

    def extract_file_path(self, raw_text: str | None) -> Optional[str]:
        """
        Best-effort file path from a header line such as '# src/app.py' or 'File: app.py'.

        The whole response is searched, not only its head: the first
        path-like line wins even when it comes after the blocks.
        """
        if not raw_text:
            return None
        m = _FILE_PATH_RE.search(raw_text)
        return m.group(1) if m else None

    def format(self, blocks: Iterable[EditBlock]) -> str:
        """Render blocks back to marker text, separated by a blank line."""
        return "\n\n".join(_render_block(b.search_text, b.replace_text) for b in blocks)

    @staticmethod
    def create_block(old_text: str, new_text: str) -> str:
        return _render_block(old_text, new_text)


# ---------- functional API ----------


def parse_edit_blocks(raw_text: str | None, *, logger=None, log: bool = False) -> List[EditBlock]:
    return SearchReplaceFormat(logger=logger, log=log).parse(raw_text)


def has_edit_blocks(raw_text: str | None) -> bool:
    return SearchReplaceFormat().has_blocks(raw_text)


def validate_edit_blocks(blocks: Iterable[EditBlock], *, logger=None, log: bool = False) -> List[str]:
    return SearchReplaceFormat(logger=logger, log=log).validate(blocks)


def extract_file_path(raw_text: str | None) -> Optional[str]:
    return SearchReplaceFormat().extract_file_path(raw_text)


def format_edit_blocks(blocks: Iterable[EditBlock]) -> str:
    return SearchReplaceFormat().format(blocks)
