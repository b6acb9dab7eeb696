"""
Built-in template cache and literal token substitution.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import Callable, Dict, Mapping

from ..util import read_text_file

logger = logging.getLogger(__name__)

TITLE_TOKEN = "__extscaffold_static_index_title__"
SCRIPT_TOKEN = "__extscaffold_static_script__"
IMPORT_MODULE_TOKEN = "__extscaffold_import_module__"
CONTENT_SCRIPT_TOKEN = "__extscaffold_mount_content_script__"
BODY_CLOSE_MARKER = "</body>"

HTML_TEMPLATE = "index.html"

Replacements = Mapping[str, str]
Substitution = Callable[[str, Replacements], str]


class ScaffoldError(RuntimeError):
    """Base class for scaffolding failures that are not plain I/O errors."""


class TemplateStructureError(ScaffoldError):
    """Raised when a user HTML file lacks the marker used to inject the mount point."""


def apply_replacements(text: str, replacements: Replacements) -> str:
    """
    Replace every occurrence of each token, one token at a time, in mapping order.

    Each step runs over the output of the previous one, so a value that
    contains a later token gets substituted again:

    >>> apply_replacements("XY", {"X": "Y", "Y": "Z"})
    'ZZ'
    """
    for token, value in replacements.items():
        text = text.replace(token, value)
    return text


def apply_replacements_single_pass(text: str, replacements: Replacements) -> str:
    """
    Replace all tokens in one scan of the original text.

    Replacement values are never rescanned. Where tokens overlap, the longest
    token wins at a given position.

    >>> apply_replacements_single_pass("XY", {"X": "Y", "Y": "Z"})
    'YZ'
    """
    if not replacements:
        return text
    tokens = sorted((token for token in replacements if token), key=len, reverse=True)
    if not tokens:
        return text
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: replacements[match.group(0)], text)


SUBSTITUTIONS: Dict[str, Substitution] = {
    "sequential": apply_replacements,
    "single-pass": apply_replacements_single_pass,
}


class TemplateCache:
    """
    Process-lifetime cache of built-in template text, keyed by file name.

    Entries are added once and never refreshed. Two coroutines asking for the
    same uncached name at once may both read the file; both store identical
    text, so the second write is harmless.
    """

    def __init__(self, directory: Path | str, *, reader: Callable[[Path], str] = read_text_file) -> None:
        self.directory = Path(directory)
        self._reader = reader
        self._entries: Dict[str, str] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def load(self, name: str) -> str:
        """Return the template text for ``name``, reading it on first use."""
        cached = self._entries.get(name)
        if cached is not None:
            return cached
        path = self.directory / name
        logger.debug("Loading scaffold template %s", path)
        text = await asyncio.to_thread(self._reader, path)
        self._entries[name] = text
        return text


def page_mount_template(mount_ext: str) -> str:
    """File name of the built-in page mount script for a mount extension."""
    return f"index{mount_ext}"


def content_script_mount_template(mount_ext: str) -> str:
    """File name of the built-in content-script UI mount for a mount extension."""
    return f"content-script-ui-mount{mount_ext}"
