from abc import ABC, abstractmethod
from typing import Any

# Ordered from most to least verbose
LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARN", "ERROR")


def normalize_level(level: str) -> str:
    """Map a level name onto LEVELS, accepting ``WARNING`` as ``WARN``."""
    name = level.strip().upper()
    if name == "WARNING":
        name = "WARN"
    if name not in LEVELS:
        raise ValueError(f"Unknown log level: '{level}' (available: {', '.join(LEVELS)})")
    return name


class LoggingInterface(ABC):
    """Structured logging with keyword context."""

    @abstractmethod
    def info(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def warn(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def error(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def debug(self, msg: str, **ctx: Any) -> None: ...
