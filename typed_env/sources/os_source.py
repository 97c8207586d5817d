from __future__ import annotations

import os
from pathlib import Path

from typed_env.config.env_loader import load_env_file
from typed_env.sources.interface import SourceInterface


class OsEnvSource(SourceInterface):
    """Snapshot of the process environment, layered over an optional .env file.

    Precedence (lowest to highest): env file values, ``os.environ``, overrides.
    Variables already set in the process are never replaced by the file.
    """

    def __init__(
        self,
        overrides: dict[str, str] | None = None,
        env_file: str | Path | None = None,
    ) -> None:
        self._env = load_env_file(env_file) if env_file is not None else {}
        self._env.update(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, key: str) -> str | None:
        return self._env.get(key)
