from .apply import (
    FileEditApplier,
    MatchedEdit,
    apply_edits,
    apply_edits_from_response,
    preview_edits,
)
from .diff import unified_diff
from .errors import ContractError, FuzzyEditError, PatchFailedError
from .extract import (
    SearchReplaceFormat,
    extract_file_path,
    format_edit_blocks,
    has_edit_blocks,
    parse_edit_blocks,
    validate_edit_blocks,
)
from .match import DEFAULT_SIMILARITY_THRESHOLD, FuzzyMatcher, find_match
from .models import (
    ApplyResult,
    EditBlock,
    Hunk,
    HunkStatus,
    MatchLocation,
    MatchOutcome,
    MatchResult,
    MatchStrategy,
    SimilarMatch,
)

__all__ = [
    "FileEditApplier",
    "MatchedEdit",
    "apply_edits",
    "apply_edits_from_response",
    "preview_edits",
    "unified_diff",
    "SearchReplaceFormat",
    "parse_edit_blocks",
    "has_edit_blocks",
    "validate_edit_blocks",
    "extract_file_path",
    "format_edit_blocks",
    "FuzzyMatcher",
    "find_match",
    "DEFAULT_SIMILARITY_THRESHOLD",
    "EditBlock",
    "ApplyResult",
    "Hunk",
    "HunkStatus",
    "MatchLocation",
    "MatchOutcome",
    "MatchResult",
    "MatchStrategy",
    "SimilarMatch",
    "FuzzyEditError",
    "ContractError",
    "PatchFailedError",
]
