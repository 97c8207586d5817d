import pytest

from typed_env.logger.factory import LoggerFactory
from typed_env.logger.memory_logger import MemoryLogger
from typed_env.logger.pretty_logger import PrettyLogger


def test_creates_default_impl():
    assert isinstance(LoggerFactory().create(), PrettyLogger)


def test_creates_named_impl():
    assert isinstance(LoggerFactory().create("memory"), MemoryLogger)


def test_instances_are_cached():
    factory = LoggerFactory(default_impl="memory")
    assert factory.create() is factory.create("memory")


def test_level_is_passed_through():
    logger = LoggerFactory(level="ERROR").create()
    assert isinstance(logger, PrettyLogger)
    assert logger.level == "ERROR"


def test_unknown_default_impl_raises():
    with pytest.raises(ValueError, match="Unknown logger implementation: 'loki'"):
        LoggerFactory(default_impl="loki")


def test_unknown_impl_on_create_raises():
    with pytest.raises(ValueError, match="available: pretty, memory"):
        LoggerFactory().create("loki")


def test_memory_logger_records_entries():
    logger = MemoryLogger()
    logger.info("a", key=1)
    logger.warn("b")
    assert logger.messages == ["a", "b"]
    assert [e.level for e in logger.entries] == ["INFO", "WARN"]
    assert logger.entries[0].ctx == {"key": 1}
