from typed_env.accessor import UNSET, Env
from typed_env.default import get_env, reset_env
from typed_env.errors import EnvError, EnvInvalidTypeError, EnvNotFoundError
from typed_env.types import ParsedPath

__all__ = [
    "UNSET",
    "Env",
    "EnvError",
    "EnvInvalidTypeError",
    "EnvNotFoundError",
    "ParsedPath",
    "get_env",
    "reset_env",
]
