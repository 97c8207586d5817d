from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ParsedPath:
    """Structural parts of a filesystem path string.

    ``dir`` joined with ``base`` gives back the original path (minus any
    trailing separators). ``name`` is ``base`` without its ``ext``.
    """

    root: str
    dir: str
    base: str
    ext: str
    name: str

    def to_path(self) -> Path:
        if not self.base:
            return Path(self.dir or ".")
        if not self.dir:
            return Path(self.base)
        return Path(self.dir) / self.base
