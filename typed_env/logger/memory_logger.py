from dataclasses import dataclass
from typing import Any

from typed_env.logger.interface import LoggingInterface


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any]


class MemoryLogger(LoggingInterface):
    """In-memory logger that stores entries for test assertions.

    Accepts a ``level`` so it can be built by LoggerFactory, but records
    every entry regardless.
    """

    def __init__(self, level: str = "DEBUG") -> None:
        self.level = level
        self.entries: list[LogEntry] = []

    def info(self, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry("INFO", msg, ctx))

    def warn(self, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry("WARN", msg, ctx))

    def error(self, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry("ERROR", msg, ctx))

    def debug(self, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry("DEBUG", msg, ctx))

    @property
    def messages(self) -> list[str]:
        """Convenience: return just the message strings."""
        return [e.msg for e in self.entries]
