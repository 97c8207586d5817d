"""Failure signals raised by the typed accessors.

Two kinds exist: a variable that is missing (with no default to fall back on)
and a variable that is present but cannot be parsed as the requested type.
Both carry the variable name and a fixed-format message.
"""

from __future__ import annotations

from typing import NoReturn


class EnvError(Exception):
    """Base error for environment variable lookups."""

    def __init__(self, env: str, message: str) -> None:
        super().__init__(message)
        self.env = env
        self.message = message


class EnvNotFoundError(EnvError, LookupError):
    """Variable is absent or empty and no default was supplied."""


class EnvInvalidTypeError(EnvError, ValueError):
    """Variable is present but does not parse as the requested type."""

    def __init__(self, env: str, type_label: str, message: str) -> None:
        super().__init__(env, message)
        self.type_label = type_label


def not_found(env: str) -> NoReturn:
    raise EnvNotFoundError(env, f"Env '{env}' was not found.")


def invalid_type(env: str, type_label: str, cause: BaseException | None = None) -> NoReturn:
    raise EnvInvalidTypeError(
        env, type_label, f"Env '{env}' has to be of type {type_label}."
    ) from cause
