from __future__ import annotations

from collections.abc import Mapping

from typed_env.sources.interface import SourceInterface


class MemorySource(SourceInterface):
    """Dict-backed source; the given mapping is copied on construction."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MemorySource(keys={sorted(self._values)})"
