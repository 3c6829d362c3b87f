from .fences import unwrap_code_fences
from .search_replace import (
    SearchReplaceFormat,
    extract_file_path,
    format_edit_blocks,
    has_edit_blocks,
    parse_edit_blocks,
    validate_edit_blocks,
)

__all__ = [
    "SearchReplaceFormat",
    "extract_file_path",
    "format_edit_blocks",
    "has_edit_blocks",
    "parse_edit_blocks",
    "validate_edit_blocks",
    "unwrap_code_fences",
]
