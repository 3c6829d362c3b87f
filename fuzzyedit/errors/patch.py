from __future__ import annotations

from typing import TYPE_CHECKING

from .base import FuzzyEditError

if TYPE_CHECKING:
    from ..models.hunks import ApplyResult


class PatchFailedError(FuzzyEditError):
    """
    Raised by ApplyResult.raise_for_failure() when at least one hunk failed.

    The full result stays available on ``.result`` so callers can still
    inspect hunks or relay ``.feedback`` to the model.
    """

    def __init__(self, message: str, result: "ApplyResult | None" = None):
        super().__init__(message)
        self.result = result

    @property
    def feedback(self) -> str:
        if self.result is None:
            return str(self)
        return self.result.failure_feedback()
