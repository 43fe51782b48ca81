# chemistry/utils/logger.py
import datetime
from typing import Optional, TextIO

class LogLevel:
    TRACE = -1 # Per-transfer chatter, off unless explicitly enabled
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

LEVEL_NAMES = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

class Logger:
    """
    Process-wide default diagnostics sink.

    Engine classes take a `logger` argument and fall back to this class, so any
    object exposing the same (source, message) methods can be injected instead.
    """
    _level = LogLevel.DEBUG  # Default level
    _stream: Optional[TextIO] = None # None means whatever sys.stdout is at the time

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream: Optional[TextIO]):
        """Redirects output, e.g. to sys.stderr or a file handle. None restores stdout."""
        cls._stream = stream

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if level < cls._level:
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = LEVEL_NAMES.get(level, "LOG")

        # Format: [TIME] [LEVEL] [Source] Message
        print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}", file=cls._stream)

    @classmethod
    def trace(cls, source: str, message: str):
        cls._log(LogLevel.TRACE, source, message)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
