"""
debug_logger.py
---------------
Console logger filtered by category and verbosity level.

Lines look like:
    [12:00:01] [BalloonScene][STATE] Balloon round started
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and the most verbose level that does."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Runtime
        "loading": False,
        "system": True,
        "scene": True,
        "input": False,
        "timing": False,

        # Bus
        "event": True,
        "event_manager": False,

        # Balloons
        "entity_spawn": False,
        "entity_cleanup": False,
        "collision": False,
    }


class Colors:
    """ANSI escape codes."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; every call site passes its category."""

    LINE_LENGTH = 59
    ENTRY_COLUMN = 30

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4,
    }

    @staticmethod
    def _get_caller() -> str:
        """Class name of the code that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        if 'self' in frame.f_locals:
            return type(frame.f_locals['self']).__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module.split("_"))

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        limit = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES[level] <= limit

    @staticmethod
    def _log(tag: str, message: str, color: str, category: str, level: str):
        if not DebugLogger._should_log(category, level):
            return
        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{color}[{timestamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str, category: str = "system"):
        DebugLogger._log("INIT", msg, Colors.WHITE, category, "INFO")

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, Colors.MAGENTA, category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._log("STATE", msg, Colors.CYAN, category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, Colors.GREEN, category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-frame detail, printed only at VERBOSE."""
        DebugLogger._log("TRACE", msg, Colors.BLUE, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, Colors.YELLOW, category, "WARN")

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Boxed header separating startup phases."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str):
        """Dotted '> Module ....... [OK]' line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger.render_entry(module))

    @staticmethod
    def init_sub(detail: str):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"    • {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def render_entry(module: str) -> str:
        prefix = f"> {module}"
        status = "[OK]"
        pad = max(DebugLogger.ENTRY_COLUMN - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - pad - 1 - len(status), 1)
        return (
            f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} "
            f"{Colors.GREEN}{status}{Colors.RESET}"
        )
