from .base import FuzzyEditError
from .contract import ContractError
from .patch import PatchFailedError

__all__ = ["FuzzyEditError", "ContractError", "PatchFailedError"]
