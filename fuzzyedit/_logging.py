"""
Opt-in logging for the engine.

Usage in library code:
    from fuzzyedit._logging import resolve_logger

    class Thing:
        def __init__(self, *, logger=None, log: bool = False):
            self._log = resolve_logger(logger=logger, enabled=log, name=__name__)

        def run(self):
            self._log.debug("starting run")  # no-op unless enabled or logger passed

Rules:
- No stdout/stderr prints in library code.
- Silent by default; callers opt in by passing a logger or ``log=True``.
- Never configures global logging, so instances stay safe to share.
- An opted-in logger defaults to DEBUG: per-strategy match attempts are the
  main thing callers turn logging on to see, and they are emitted at debug.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_default_handler(lg: logging.Logger) -> None:
    # Let records bubble to the root so pytest's caplog can capture them.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    # Duck-typed: anything with .debug(...) etc. is accepted.
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "fuzzyedit")
        lg.setLevel(level)
        _ensure_default_handler(lg)
        return lg
    return NoopLogger()
