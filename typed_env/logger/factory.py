from __future__ import annotations

from typed_env.logger.interface import LoggingInterface
from typed_env.logger.memory_logger import MemoryLogger
from typed_env.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Factory that creates and caches logger instances by implementation name."""

    _registry: dict[str, type[LoggingInterface]] = {
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
    }

    def __init__(self, default_impl: str = "pretty", level: str = "INFO") -> None:
        self._check_impl(default_impl)
        self._default_impl = default_impl
        self._level = level
        self._instances: dict[str, LoggingInterface] = {}

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return a logger instance, creating one if not yet cached."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            self._check_impl(name)
            self._instances[name] = self._registry[name](level=self._level)  # type: ignore[call-arg]
        return self._instances[name]

    def _check_impl(self, name: str) -> None:
        if name not in self._registry:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(self._registry)})"
            )
