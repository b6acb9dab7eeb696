"""
Write substituted templates and HTML shells to disk.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Dict, Iterable, List, Optional, Set, TypeVar

from ..layout import ProjectLayout
from ..util import read_text_file, write_text_file
from .templates import (
    BODY_CLOSE_MARKER,
    HTML_TEMPLATE,
    SCRIPT_TOKEN,
    SUBSTITUTIONS,
    TITLE_TOKEN,
    Replacements,
    TemplateCache,
    TemplateStructureError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def mount_point_markup(script_mount_path: str) -> str:
    """Root element plus module script tag, followed by the closing body tag."""
    return f'<div id="root"></div><script type="module" src="{script_mount_path}"></script>{BODY_CLOSE_MARKER}'


class TemplateGenerator:
    """
    Turns template text plus a replacement map into files.

    Args:
        layout: Project layout (title and template directory).
        cache: Template cache; a new one over the layout's scaffold templates by default.
        substitution: Name of the substitution strategy ("sequential" or "single-pass").
        strict_html: Raise TemplateStructureError when a user HTML file has no ``</body>``.

    Concurrent steps go through ``spawn``/``gather`` so that every task is
    tracked; ``settle`` waits for the ones a failed ``gather`` left running.
    """

    def __init__(
        self,
        layout: ProjectLayout,
        *,
        cache: Optional[TemplateCache] = None,
        substitution: str = "sequential",
        strict_html: bool = False,
    ) -> None:
        if substitution not in SUBSTITUTIONS:
            raise ValueError(f"Unknown substitution strategy: {substitution}")
        self.layout = layout
        self.cache = cache or TemplateCache(layout.scaffold_template_directory)
        self.substitute = SUBSTITUTIONS[substitution]
        self.strict_html = strict_html
        self._pending: Set[asyncio.Future] = set()

    def spawn(self, awaitable: Awaitable[T]) -> "asyncio.Future[T]":
        task = asyncio.ensure_future(awaitable)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def gather(self, *awaitables: Awaitable) -> List:
        """Join tracked tasks, raising the first failure without cancelling the rest."""
        return list(await asyncio.gather(*(self.spawn(item) for item in awaitables)))

    async def settle(self) -> None:
        """Wait for every tracked task, including ones orphaned by an earlier failure."""
        while self._pending:
            results = await asyncio.gather(*list(self._pending), return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException):
                    logger.warning("Step failed after its batch had already failed: %r", result)

    async def generate_to_file(self, text: str, output_path: Path, replacements: Replacements) -> Path:
        content = self.substitute(text, replacements)
        return await asyncio.to_thread(write_text_file, output_path, content)

    async def generate_from_cached_template(
        self, template_name: str, output_path: Path, replacements: Replacements
    ) -> Path:
        text = await self.cache.load(template_name)
        return await self.generate_to_file(text, output_path, replacements)

    async def generate_from_external_file(
        self,
        source_path: Path,
        output_path: Path,
        replacements: Replacements,
        *,
        anchors: Iterable[str] = (),
    ) -> Path:
        """
        Substitute a user-authored file. Never cached, since it may change between runs.

        ``anchors`` are literal markers the source must contain for the
        replacement map to have its intended effect.
        """
        text = await asyncio.to_thread(read_text_file, source_path)
        for anchor in anchors:
            if anchor in text:
                continue
            if self.strict_html:
                raise TemplateStructureError(f"{source_path} has no {anchor!r} to inject the mount point before")
            logger.warning("%s has no %r; mount point not injected", source_path, anchor)
        return await self.generate_to_file(text, output_path, replacements)

    async def generate_html(
        self,
        output_path: Path,
        script_mount_path: str,
        html_file: Optional[Path] = None,
    ) -> Path:
        """
        Write an HTML document that loads ``script_mount_path``.

        A user ``html_file`` is copied with the root element and script tag
        injected before its closing body tag; otherwise the built-in template
        is used as-is.
        """
        replacements: Dict[str, str] = {
            TITLE_TOKEN: self.layout.name,
            SCRIPT_TOKEN: script_mount_path,
        }
        if html_file:
            replacements[BODY_CLOSE_MARKER] = mount_point_markup(script_mount_path)
            return await self.generate_from_external_file(
                Path(html_file), output_path, replacements, anchors=(BODY_CLOSE_MARKER,)
            )
        return await self.generate_from_cached_template(HTML_TEMPLATE, output_path, replacements)
