from __future__ import annotations

import os

DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_IMPL = "pretty"
DEFAULT_LOG_LEVEL = "WARN"


class BootstrapConfig:
    """Settings for building the default accessor, read from the environment with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key) or default

    @property
    def env_file(self) -> str:
        return self.get("TYPED_ENV_FILE", DEFAULT_ENV_FILE)

    @property
    def log_impl(self) -> str:
        return self.get("TYPED_ENV_LOG", DEFAULT_LOG_IMPL)

    @property
    def log_level(self) -> str:
        return self.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)

    def __repr__(self) -> str:
        return (
            f"BootstrapConfig(env_file={self.env_file!r}, "
            f"log_impl={self.log_impl!r}, log_level={self.log_level!r})"
        )
