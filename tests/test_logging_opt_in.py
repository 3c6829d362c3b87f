import logging

from fuzzyedit import FileEditApplier, FuzzyMatcher, SearchReplaceFormat
from fuzzyedit._logging import NoopLogger, resolve_logger


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello")
    lg.warning("world")


def test_resolve_logger_enabled_creates_logger(caplog):
    with caplog.at_level(logging.INFO):
        lg = resolve_logger(enabled=True, name="fuzzyedit.test")
        lg.info("test message")
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("fuzzyedit.custom")
    assert resolve_logger(logger=custom) is custom


def test_library_is_silent_by_default(caplog):
    with caplog.at_level(logging.DEBUG):
        FuzzyMatcher().find_match("beta", "alpha\nbeta\n")
        SearchReplaceFormat().parse("<<<<<<< SEARCH\na\n=======\nb\n>>>>>>> REPLACE")
    assert not [r for r in caplog.records if r.name.startswith("fuzzyedit")]


def test_matcher_traces_strategies_when_enabled(caplog):
    with caplog.at_level(logging.DEBUG):
        FuzzyMatcher(log=True).find_match("beta", "alpha\nbeta\n")
    assert any("Exact match: success" in rec.message for rec in caplog.records)


def test_applier_warns_about_failed_blocks(caplog):
    from fuzzyedit import EditBlock

    with caplog.at_level(logging.DEBUG):
        FileEditApplier(log=True).apply("alpha\n", [EditBlock("zzzzzzzzzzzz", "y")])
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("Block 1" in r.message for r in warnings)


def test_opted_in_logger_defaults_to_debug():
    lg = resolve_logger(enabled=True, name="fuzzyedit.level")
    assert lg.level == logging.DEBUG
    assert lg.isEnabledFor(logging.DEBUG)
