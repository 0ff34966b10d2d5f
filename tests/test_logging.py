import logging

from flashgen.core.logging import DEFAULT_FORMAT, ContextFilter


def _record(**extra):
    record = logging.LogRecord("flashgen.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_format_shows_epoch_from_extra():
    record = _record(epoch=7)
    assert ContextFilter().filter(record)
    line = logging.Formatter(DEFAULT_FORMAT).format(record)
    assert "| epoch=7 | hello" in line


def test_missing_epoch_defaults_to_dash():
    record = _record()
    ContextFilter().filter(record)
    assert logging.Formatter(DEFAULT_FORMAT).format(record).endswith("| epoch=- | hello")
