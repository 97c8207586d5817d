"""Process-wide accessor over ``os.environ`` and the project's ``.env`` file.

Built on first use so that importing the package never touches the
filesystem. Call ``reset_env()`` after changing the environment to pick up
the new values.
"""

from __future__ import annotations

from typed_env.accessor import Env
from typed_env.config.context import BootstrapConfig
from typed_env.logger.factory import LoggerFactory
from typed_env.sources.os_source import OsEnvSource

_ENV: Env | None = None


def get_env() -> Env:
    global _ENV
    if _ENV is None:
        _ENV = build_env(BootstrapConfig())
    return _ENV


def build_env(config: BootstrapConfig) -> Env:
    logger = LoggerFactory(default_impl=config.log_impl, level=config.log_level).create()
    env = Env(OsEnvSource(env_file=config.env_file), logger=logger)
    logger.debug("default env built", env_file=config.env_file)
    return env


def reset_env() -> None:
    global _ENV
    _ENV = None
