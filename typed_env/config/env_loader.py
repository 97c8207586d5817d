"""Loads .env files with KEY=VALUE format.

Supports:
- Comments (lines starting with #)
- Blank lines
- An optional ``export`` prefix before the key
- Quoted values (single or double quotes are stripped)
- Inline comments after unquoted values (" # ...") are stripped; inside
  quotes "#" is kept
"""

from __future__ import annotations

import re
from pathlib import Path

# A "#" preceded by whitespace starts a comment in an unquoted value
_INLINE_COMMENT = re.compile(r"\s+#")


def load_env_file(path: str | Path = ".env") -> dict[str, str]:
    """Load the env file at *path* and return it as a dict. Returns empty dict if the file is missing."""
    env_file = Path(path)
    if not env_file.is_file():
        return {}
    return _parse_env_file(env_file)


def _parse_env_file(path: Path) -> dict[str, str]:
    result: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        if not key:
            continue
        value = value.strip()
        end = value.find(value[0], 1) if value[:1] in ('"', "'") else -1
        if end != -1:
            # Quoted: keep everything between the quotes, drop anything after
            value = value[1:end]
        else:
            value = _INLINE_COMMENT.split(value, 1)[0]
        result[key] = value
    return result
