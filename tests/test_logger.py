import io
import logging

from gaymwtf.logger import TRACE, GameLogger


def _record(name, level, msg, args=()):
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_default_levels_allow_info_and_block_debug():
    handler = GameLogger()
    assert handler.should_log("world", logging.INFO)
    assert handler.should_log("chunk", logging.ERROR)
    assert not handler.should_log("render", logging.DEBUG)
    assert not handler.should_log("entity", TRACE)


def test_unknown_target_uses_info():
    handler = GameLogger()
    assert handler.should_log("other", logging.WARNING)
    assert not handler.should_log("other", logging.DEBUG)


def test_custom_levels():
    handler = GameLogger(levels={"render": TRACE})
    assert handler.should_log("render", TRACE)
    assert not handler.should_log("world", TRACE)


def test_format_matches_layout():
    handler = GameLogger()
    text = handler.format(_record("world", logging.INFO, "hello %s", ("x",)))
    assert text == "\x1b[32m[INFO ][world] hello x\x1b[0m"


def test_format_trace_and_warn_names():
    handler = GameLogger()
    trace = handler.format(_record("chunk", TRACE, "t"))
    warn = handler.format(_record("chunk", logging.WARNING, "w"))
    assert trace.startswith("\x1b[90m[TRACE][chunk]")
    assert warn.startswith("\x1b[33m[WARN ][chunk]")


def test_handle_writes_only_enabled_records():
    stream = io.StringIO()
    handler = GameLogger(stream=stream)
    handler.handle(_record("world", logging.INFO, "shown"))
    handler.handle(_record("world", logging.DEBUG, "hidden"))
    output = stream.getvalue()
    assert "shown" in output
    assert "hidden" not in output
    assert output.count("\n") == 1


def test_filter_rejects_below_level():
    handler = GameLogger()
    assert not handler.filter(_record("entity", logging.DEBUG, "x"))
    assert handler.filter(_record("entity", logging.ERROR, "x"))


def test_init_installs_once():
    first = GameLogger.init()
    second = GameLogger.init()
    assert first is second
    handlers = [h for h in logging.getLogger().handlers if isinstance(h, GameLogger)]
    assert handlers == [first]