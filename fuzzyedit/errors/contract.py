from .base import FuzzyEditError


class ContractError(FuzzyEditError, TypeError):
    """
    Raised when a caller breaks the calling contract (wrong argument type,
    missing block list, out-of-range threshold).

    Expected editing outcomes such as "text not found" are never raised;
    they are reported through MatchResult / ApplyResult values instead.
    """


def require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise ContractError(f"{name} must be a str, got {type(value).__name__}")
    return value
