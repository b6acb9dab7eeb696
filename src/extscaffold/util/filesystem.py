"""
Filesystem helpers shared across scaffolding modules.

Everything here is blocking; async callers go through ``asyncio.to_thread``.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def _ensure_parent(target: Path) -> None:
    """Ensure the parent directory for target exists."""
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)


def first_existing(candidates) -> Path | None:
    """Return the first candidate path that exists on disk, in list order."""
    for candidate in candidates:
        if Path(candidate).exists():
            return Path(candidate)
    return None


def read_text_file(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a whole text file."""
    return Path(path).read_text(encoding=encoding)


@contextmanager
def file_lock(path: Path | str):
    """Hold an exclusive lock file at ``path`` for the duration of the block."""
    lock_path = Path(path).expanduser().resolve()
    _ensure_parent(lock_path)
    with FileLock(str(lock_path)):
        yield


def _atomic_write_text(target: Path, content: str, encoding: str) -> None:
    """Write text atomically by staging a temp file and renaming."""
    _ensure_parent(target)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text to a file, replacing any previous content.
    """
    target = Path(path).expanduser().resolve()
    _atomic_write_text(target, content, encoding=encoding)
    logger.debug("Wrote %s (%d chars)", target, len(content))
    return target


def copy_tree(source: Path | str, destination: Path | str) -> Path:
    """
    Recursively copy ``source`` into ``destination``, merging with existing files.
    """
    target = Path(destination).expanduser().resolve()
    shutil.copytree(Path(source), target, dirs_exist_ok=True)
    logger.debug("Copied %s -> %s", source, target)
    return target
