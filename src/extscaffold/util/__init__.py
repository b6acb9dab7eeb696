"""
Shared utility helpers for filesystem and path handling.
"""

from .filesystem import copy_tree, ensure_directory, file_lock, first_existing, read_text_file, write_text_file
from .paths import posix_join, posix_relative, to_posix

__all__ = [
    "copy_tree",
    "ensure_directory",
    "file_lock",
    "first_existing",
    "read_text_file",
    "write_text_file",
    "posix_join",
    "posix_relative",
    "to_posix",
]
