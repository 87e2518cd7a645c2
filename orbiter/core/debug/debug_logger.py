"""
debug_logger.py
---------------
Console logger for the orbit game.

Messages are filtered by category (orbit, trail, input, ...) and by level,
so per-frame orbit traces stay silent unless --verbose turns them on.
"""

import sys
from datetime import datetime
from enum import IntEnum


class LogLevel(IntEnum):
    NONE = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    VERBOSE = 4


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # Name of a LogLevel member

    CATEGORIES = {
        # Runtime
        "loading": False,
        "system": True,
        "display": True,
        "scene": True,
        "input": False,

        # Orbit gameplay (per-frame, noisy)
        "orbit": False,
        "trail": False,

        "render": True,
    }

    # Categories switched on by --verbose
    VERBOSE_CATEGORIES = ("orbit", "input", "trail", "loading")

    SHOW_TIMESTAMP = True
    SHOW_CATEGORY = True
    SHOW_LEVEL = True

    @classmethod
    def enable_verbose(cls):
        """Raise the level to VERBOSE and open the gameplay categories."""
        cls.LOG_LEVEL = LogLevel.VERBOSE.name
        for category in cls.VERBOSE_CATEGORIES:
            cls.CATEGORIES[category] = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
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
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59
    ENTRY_STATUS_COLUMN = 40

    # tag -> (color, level)
    TAG_STYLES = {
        "INIT": (Colors.WHITE, LogLevel.INFO),
        "SYSTEM": (Colors.MAGENTA, LogLevel.INFO),
        "STATE": (Colors.CYAN, LogLevel.INFO),
        "ACTION": (Colors.GREEN, LogLevel.INFO),
        "TRACE": (Colors.BLUE, LogLevel.VERBOSE),
        "WARN": (Colors.YELLOW, LogLevel.WARN),
    }

    @staticmethod
    def _get_caller() -> str:
        """Name of the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(4)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__

        module_name = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
        return "".join(p.capitalize() for p in module_name.split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _should_log(category: str, level: LogLevel) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = LogLevel.__members__.get(LoggerConfig.LOG_LEVEL, LogLevel.INFO)
        return level <= threshold

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAG_STYLES[tag]
        if not DebugLogger._should_log(category, level):
            return

        prefix = DebugLogger._build_prefix(tag)
        print(f"{color}{prefix}{message}{Colors.RESET}")

    @staticmethod
    def _build_prefix(tag: str) -> str:
        """Build log line prefix from the enabled meta fields."""
        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}] ")
        if LoggerConfig.SHOW_CATEGORY:
            parts.append(f"[{DebugLogger._get_caller()}]")
        if LoggerConfig.SHOW_LEVEL:
            parts.append(f"[{tag}]")
        prefix = "".join(parts)
        return f"{prefix} " if prefix else ""

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """State change (direction flip, jump start/end, scene enter)."""
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "orbit"):
        """Per-frame detail, only shown at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a section header."""
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}\n{Colors.RESET}")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted startup line, e.g. '> InputManager ....... [OK]'."""
        print(DebugLogger._render_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def _render_entry(module: str, status: str) -> str:
        color = Colors.GREEN if status.upper() == "OK" else Colors.CYAN
        label = f"> {module} ".ljust(DebugLogger.ENTRY_STATUS_COLUMN, ".")
        return f"{Colors.WHITE}{label} {color}[{status}]{Colors.RESET}"
