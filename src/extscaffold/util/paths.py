"""
Path string helpers.
"""

from __future__ import annotations

import os
import posixpath
from pathlib import Path


def to_posix(value: Path | str) -> str:
    """Normalise a path string to forward slashes."""
    return str(value).replace(os.sep, "/").replace("\\", "/")


def posix_relative(target: Path | str, start: Path | str) -> str:
    """Relative path from ``start`` to ``target`` in forward-slash form."""
    return to_posix(os.path.relpath(Path(target), Path(start)))


def posix_join(*parts: str) -> str:
    """Join path fragments with forward slashes, dropping empty fragments."""
    cleaned = [to_posix(part) for part in parts if part and part != "."]
    if not cleaned:
        return ""
    return posixpath.join(*cleaned)
