"""
Page kinds and module descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from ..util import posix_join, to_posix

UiExtensionPredicate = Callable[[str], bool]


class PageKind(str, Enum):
    """The four canonical extension UI surfaces."""

    POPUP = "popup"
    OPTIONS = "options"
    DEVTOOLS = "devtools"
    NEWTAB = "newtab"

    def __str__(self) -> str:
        return self.value


# Order of the inclusion flags returned by Scaffolder.init().
PAGE_ORDER = (PageKind.POPUP, PageKind.OPTIONS, PageKind.NEWTAB, PageKind.DEVTOOLS)


@dataclass(frozen=True)
class ModuleDescriptor:
    """
    A discovered source file, relative to the source directory.

    Attributes:
        directory: Relative directory in forward-slash form ("" for top level).
        name: Base name without extension.
        ext: Extension including the leading dot.
    """
    directory: str
    name: str
    ext: str

    @classmethod
    def from_path(cls, path: Path | str, base: Path | str) -> "ModuleDescriptor":
        relative = Path(path).resolve().relative_to(Path(base).resolve())
        parent = to_posix(relative.parent)
        return cls(directory="" if parent == "." else parent, name=relative.stem, ext=relative.suffix)

    @property
    def alias(self) -> str:
        """Synthetic import alias, e.g. ``~tabs/settings``."""
        return f"~{posix_join(self.directory, self.name)}"

    def __str__(self) -> str:
        return f"{posix_join(self.directory, self.name)}{self.ext}"


def make_ui_ext_predicate(extensions: Iterable[str]) -> UiExtensionPredicate:
    """Build a case-insensitive membership test for UI-framework extensions."""
    known = frozenset(ext.lower() for ext in extensions)

    def is_ui_ext(ext: str) -> bool:
        return ext.lower() in known

    return is_ui_ext
