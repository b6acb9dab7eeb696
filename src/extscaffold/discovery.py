"""
Find extra page modules and content scripts under the source directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from .layout import ModuleDescriptor, ProjectLayout

logger = logging.getLogger(__name__)

TABS_DIRECTORY = "tabs"
CONTENTS_DIRECTORY = "contents"
CONTENT_SCRIPT_NAME = "content"
SCRIPT_EXTENSIONS = (".ts", ".js", ".mjs")


@dataclass
class DiscoveredModules:
    """
    Modules found by convention.

    Attributes:
        pages: Files under ``tabs/``; each gets a page mount.
        content_scripts: Files under ``contents/`` plus a top-level ``content.*``.
    """
    pages: List[ModuleDescriptor] = field(default_factory=list)
    content_scripts: List[ModuleDescriptor] = field(default_factory=list)

    def ui_content_scripts(self, layout: ProjectLayout) -> List[ModuleDescriptor]:
        """Content scripts that render UI and therefore need a mount wrapper."""
        return [module for module in self.content_scripts if layout.is_ui_ext(module.ext)]


def _is_candidate(path: Path, base: Path, extensions: Iterable[str]) -> bool:
    if not path.is_file():
        return False
    relative = path.relative_to(base)
    if any(part.startswith(".") for part in relative.parts):
        return False
    if path.name.endswith(".d.ts"):
        return False
    return path.suffix.lower() in extensions


def _scan(directory: Path, base: Path, extensions: List[str]) -> List[ModuleDescriptor]:
    if not directory.is_dir():
        return []
    found = [
        ModuleDescriptor.from_path(path, base)
        for path in sorted(directory.rglob("*"))
        if _is_candidate(path, base, extensions)
    ]
    logger.debug("Found %d module(s) under %s", len(found), directory)
    return found


def discover_modules(layout: ProjectLayout) -> DiscoveredModules:
    """
    Scan the source directory for ``tabs/`` pages and content scripts.

    Results are sorted by path so repeated runs produce the same output.
    """
    base = layout.source_directory
    extensions = list(dict.fromkeys([*SCRIPT_EXTENSIONS, *layout.ui_extensions]))

    pages = _scan(base / TABS_DIRECTORY, base, extensions)

    content_scripts: List[ModuleDescriptor] = []
    for ext in extensions:
        candidate = base / f"{CONTENT_SCRIPT_NAME}{ext}"
        if _is_candidate(candidate, base, extensions):
            content_scripts.append(ModuleDescriptor.from_path(candidate, base))
            break
    content_scripts.extend(_scan(base / CONTENTS_DIRECTORY, base, extensions))

    return DiscoveredModules(pages=pages, content_scripts=content_scripts)
