"""
test_debug_logger.py
--------------------
Tests for category and level filtering in DebugLogger.
"""

import pytest

from balloon_pop.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture
def logger_config(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", True)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", {"scene": True, "input": False})
    return LoggerConfig


class Speaker:
    def talk(self):
        DebugLogger.state("hello", category="scene")


def test_enabled_category_prints_with_caller(logger_config, capsys):
    Speaker().talk()
    out = capsys.readouterr().out
    assert "[Speaker][STATE] hello" in out


def test_disabled_category_is_silent(logger_config, capsys):
    DebugLogger.system("hidden", category="input")
    DebugLogger.system("unknown", category="not-a-category")
    assert capsys.readouterr().out == ""


def test_trace_needs_verbose_level(logger_config, capsys):
    DebugLogger.trace("frame", category="scene")
    assert capsys.readouterr().out == ""

    logger_config.LOG_LEVEL = "VERBOSE"
    DebugLogger.trace("frame", category="scene")
    assert "[TRACE] frame" in capsys.readouterr().out


def test_warn_survives_warn_level(logger_config, capsys):
    logger_config.LOG_LEVEL = "WARN"
    DebugLogger.state("quiet", category="scene")
    DebugLogger.warn("loud", category="scene")
    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "[WARN] loud" in out


def test_disabled_logging_silences_report(logger_config, capsys):
    logger_config.ENABLE_LOGGING = False
    DebugLogger.section("Startup")
    DebugLogger.init_entry("EventManager")
    DebugLogger.init_sub("detail")
    DebugLogger.warn("nothing", category="scene")
    assert capsys.readouterr().out == ""


def test_render_entry_aligns_status():
    line = DebugLogger.render_entry("StateManager")
    assert line.count("[OK]") == 1
    assert "> StateManager" in line
    assert "...." in line
