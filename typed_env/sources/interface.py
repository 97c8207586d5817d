from abc import ABC, abstractmethod


class SourceInterface(ABC):
    """Read-only key-value source of raw environment strings."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get a raw value by key. Returns None if not set."""
        ...

    def get_or_default(self, key: str, default: str) -> str:
        """Get a raw value, returning default if not set."""
        value = self.get(key)
        return default if value is None else value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
