"""Typed accessors over a key-value environment source.

Every operation follows the same contract: look the variable up, fall back
to the default when it is absent or empty, otherwise parse the raw string.
A present value that fails to parse always raises, default or not.

    env = Env({"PORT": "8080"})
    env.int("PORT")                  # 8080
    env.string("HOST", "localhost")  # "localhost"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar
from urllib.parse import SplitResult

from typed_env import parsers
from typed_env.errors import invalid_type, not_found
from typed_env.logger.interface import LoggingInterface
from typed_env.logger.pretty_logger import PrettyLogger
from typed_env.sources.interface import SourceInterface
from typed_env.sources.memory_source import MemorySource
from typed_env.sources.os_source import OsEnvSource
from typed_env.types import ParsedPath

T = TypeVar("T")


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


# Distinguishes "no default" from an explicit None default
UNSET: Any = _Unset()


class Env:
    """Reads typed values from a source of raw environment strings."""

    def __init__(
        self,
        source: SourceInterface | Mapping[str, str] | None = None,
        logger: LoggingInterface | None = None,
    ) -> None:
        if source is None:
            source = OsEnvSource()
        elif not isinstance(source, SourceInterface):
            source = MemorySource(source)
        self.source: SourceInterface = source
        self.log: LoggingInterface = logger or PrettyLogger(level="WARN")

    def _process(
        self,
        env: str,
        default: Any,
        label: str,
        parser: Callable[[str], T],
        parse_default: bool = False,
    ) -> T:
        value = self.source.get(env)
        if not value:
            if default is UNSET:
                not_found(env)
            self.log.debug("env default used", env=env, type=label)
            if not parse_default:
                return default
            value = default
        try:
            return parser(value)
        except ValueError as exc:
            invalid_type(env, label, cause=exc)

    def string(self, env: str, default: str = UNSET) -> str:
        return self._process(env, default, "string", parsers.parse_string)

    def number(self, env: str, default: float = UNSET) -> float:
        return self._process(env, default, "number", parsers.parse_number)

    def int(self, env: str, default: int = UNSET) -> int:
        return self._process(env, default, "int", parsers.parse_int)

    def boolean(self, env: str, default: bool = UNSET) -> bool:
        return self._process(env, default, "boolean", parsers.parse_boolean)

    def url(self, env: str, default: SplitResult | str = UNSET) -> SplitResult:
        """Absolute URL, split into its components.

        A string default is validated and split exactly like a live value.
        """
        return self._process(
            env, default, "url", parsers.parse_url, parse_default=isinstance(default, str)
        )

    def path(self, env: str, default: ParsedPath | str = UNSET) -> ParsedPath:
        """Filesystem path decomposed into root, dir, base, ext and name.

        A string default is decomposed exactly like a live value.
        """
        return self._process(
            env, default, "path", parsers.parse_path, parse_default=isinstance(default, str)
        )

    def json(self, env: str, default: Any = UNSET) -> Any:
        return self._process(env, default, "json", parsers.parse_json)

    def __repr__(self) -> str:
        return f"Env(source={self.source!r})"
