"""
Entry points that run the scaffolding steps concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, TypeVar

from ..config import ScaffoldConfig
from ..discovery import DiscoveredModules, discover_modules
from ..layout import PAGE_ORDER, ModuleDescriptor, PageKind, ProjectLayout
from ..util import copy_tree, file_lock
from .generator import TemplateGenerator
from .mounts import create_content_script_mount, create_page_mount
from .resolver import init_ui_page

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ScaffoldReport:
    """
    What a full scaffolding run produced.

    Attributes:
        root: Generated-output directory.
        pages: Whether each canonical page had a user index module.
        page_mounts: HTML documents generated for extra page modules.
        content_script_mounts: Mount scripts generated for UI content scripts.
    """
    root: Path
    pages: Dict[PageKind, bool] = field(default_factory=dict)
    page_mounts: List[Path] = field(default_factory=list)
    content_script_mounts: List[Path] = field(default_factory=list)

    @property
    def included_pages(self) -> List[PageKind]:
        return [kind for kind, found in self.pages.items() if found]

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Output", str(self.root))
        for kind, found in self.pages.items():
            yield (f"Page: {kind.value}", "user module" if found else "default")
        yield ("Page mounts", str(len(self.page_mounts)))
        yield ("Content script mounts", str(len(self.content_script_mounts)))


class Scaffolder:
    """
    Generates the HTML shells and mount scripts for one project.

    Concurrent steps are joined fail-fast: the first error is raised to the
    caller, while sibling steps keep running. ``settle()`` waits for them.
    """

    def __init__(
        self,
        layout: ProjectLayout,
        *,
        generator: Optional[TemplateGenerator] = None,
        substitution: str = "sequential",
        strict_html: bool = False,
    ) -> None:
        self.layout = layout
        self.generator = generator or TemplateGenerator(
            layout, substitution=substitution, strict_html=strict_html
        )

    @classmethod
    def from_config(cls, config: ScaffoldConfig) -> "Scaffolder":
        layout = ProjectLayout.from_config(config)
        return cls(layout, substitution=config.substitution, strict_html=config.strict_html)

    async def settle(self) -> None:
        """Wait for every step spawned so far, including ones orphaned by an earlier failure."""
        await self.generator.settle()

    async def copy_static_common(self) -> Path:
        source = self.layout.common_template_directory
        destination = self.layout.static_directory / "common"
        return await asyncio.to_thread(copy_tree, source, destination)

    async def init(self) -> List[bool]:
        """
        Copy static assets and generate the four canonical pages.

        Returns:
            One flag per page kind in ``PAGE_ORDER``: True if the user wrote an index module.
        """
        _, *pages = await self.generator.gather(
            self.copy_static_common(),
            *(init_ui_page(self.generator, kind) for kind in PAGE_ORDER),
        )
        return pages

    async def create_page_mount(self, module: ModuleDescriptor) -> Path:
        return await create_page_mount(self.generator, module)

    async def create_content_script_mount(self, module: ModuleDescriptor) -> Path:
        return await create_content_script_mount(self.generator, module)

    async def build(self, modules: Optional[DiscoveredModules] = None) -> ScaffoldReport:
        """
        Run ``init()`` and then mount every discovered page and UI content script.
        """
        discovered = modules if modules is not None else discover_modules(self.layout)
        flags = await self.init()

        content_scripts = discovered.ui_content_scripts(self.layout)
        results = await self.generator.gather(
            *(self.create_page_mount(module) for module in discovered.pages),
            *(self.create_content_script_mount(module) for module in content_scripts),
        )
        split = len(discovered.pages)
        report = ScaffoldReport(
            root=self.layout.generated_directory,
            pages=dict(zip(PAGE_ORDER, flags)),
            page_mounts=results[:split],
            content_script_mounts=results[split:],
        )
        logger.info(
            "Scaffolded %d page(s), %d page mount(s), %d content script mount(s) in %s",
            len(report.pages),
            len(report.page_mounts),
            len(report.content_script_mounts),
            report.root,
        )
        return report


async def _run_and_settle(scaffolder: Scaffolder, operation: Callable[[Scaffolder], Awaitable[T]]) -> T:
    try:
        return await operation(scaffolder)
    finally:
        await scaffolder.settle()


def run_scaffold(scaffolder: Scaffolder, operation: Callable[[Scaffolder], Awaitable[T]]) -> T:
    """
    Run ``operation`` on a fresh event loop while holding the project lock.

    Steps still in flight when the operation fails are allowed to finish
    before the lock is released.
    """
    with file_lock(scaffolder.layout.lock_path):
        return asyncio.run(_run_and_settle(scaffolder, operation))
