"""Content directory lookup and the base resource record."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def content_path(cwd: str | Path | None = None) -> Path:
    """Content directory: ``bin/content`` beside the working directory."""
    base = Path.cwd() if cwd is None else Path(cwd)
    return base.parent / "bin" / "content"


@dataclass
class Resource:
    """A loaded asset identified by a key and its path relative to the content root."""

    key: str = ""
    relative_path: str = ""