"""Parse rules for raw environment strings.

Every parser takes the raw (non-empty) string and either returns the typed
value or raises ``ValueError``. Mapping that failure onto the env error
taxonomy is the accessor's job.
"""

from __future__ import annotations

import json
import os
import re
from typing import Any
from urllib.parse import SplitResult, urlsplit

from typed_env.types import ParsedPath

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_INT_PREFIX = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")

_URL_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*\Z")
# Schemes that are meaningless without a host
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_PATH_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def parse_string(raw: str) -> str:
    return raw


def parse_number(raw: str) -> float:
    """Parse the leading floating-point prefix; trailing characters are ignored."""
    match = _FLOAT_PREFIX.match(raw.lstrip())
    if match is None:
        raise ValueError(f"not a number: {raw!r}")
    return float(match.group(0).replace("Infinity", "inf"))


def parse_int(raw: str) -> int:
    """Parse the leading integer prefix.

    ``"3.7"`` yields ``3`` and ``"0x1F"`` yields ``31``; no digits at all is
    an error.
    """
    match = _INT_PREFIX.match(raw.lstrip())
    if match is None:
        raise ValueError(f"not an integer: {raw!r}")
    sign, hex_digits, dec_digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            raise ValueError(f"not an integer: {raw!r}")
        value = int(hex_digits, 16)
    else:
        value = int(dec_digits)
    return -value if sign == "-" else value


def parse_boolean(raw: str) -> bool:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def parse_url(raw: str) -> SplitResult:
    """Validate that *raw* is an absolute URL and return its split form."""
    if any(ch.isspace() or ord(ch) < 0x20 for ch in raw):
        raise ValueError(f"URL contains whitespace or control characters: {raw!r}")
    parts = urlsplit(raw)
    if not parts.scheme or not _URL_SCHEME.match(parts.scheme):
        raise ValueError(f"URL has no scheme: {raw!r}")
    if parts.scheme in _HOST_SCHEMES and not parts.netloc:
        # "http:host/path" and "https:///host" name the host as well
        rest = raw.split(":", 1)[1].lstrip("/")
        parts = urlsplit(f"{parts.scheme}://{rest}")
    if parts.scheme in _HOST_SCHEMES and not parts.hostname:
        raise ValueError(f"URL has no host: {raw!r}")
    # Raises ValueError for non-numeric or out-of-range ports
    parts.port
    return parts


def parse_path(raw: str) -> ParsedPath:
    """Decompose a path string; any string is accepted."""
    drive, rest = os.path.splitdrive(raw)
    root = drive + rest[:1] if rest.startswith(_PATH_SEPARATORS) else drive

    trimmed = raw
    while len(trimmed) > len(root) and trimmed.endswith(_PATH_SEPARATORS):
        trimmed = trimmed[:-1]
    if trimmed == root:
        return ParsedPath(root=root, dir=root, base="", ext="", name="")

    base = os.path.basename(trimmed)
    name, ext = os.path.splitext(base)
    return ParsedPath(root=root, dir=os.path.dirname(trimmed), base=base, ext=ext, name=name)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {token}")


def parse_json(raw: str) -> Any:
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("JSON document is nested too deeply") from exc
