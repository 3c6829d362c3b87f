from .applier import (
    FileEditApplier,
    MatchedEdit,
    apply_edits,
    apply_edits_from_response,
    preview_edits,
)

__all__ = [
    "FileEditApplier",
    "MatchedEdit",
    "apply_edits",
    "apply_edits_from_response",
    "preview_edits",
]
