"""
Resolve the user's entry module and HTML shell for each canonical page.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..layout import PageKind, ProjectLayout
from ..util import ensure_directory, first_existing, posix_relative
from .generator import TemplateGenerator
from .templates import IMPORT_MODULE_TOKEN, page_mount_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageResolution:
    """
    Outcome of searching a page kind's candidate paths.

    Attributes:
        kind: The page kind.
        index_file: First existing index module, if any.
        html_file: First existing user HTML file, if any.
        import_token: What the mount script imports: a path relative to the
            static directory, or the synthetic ``~{kind}`` alias.
    """
    kind: PageKind
    index_file: Optional[Path]
    html_file: Optional[Path]
    import_token: str

    @property
    def has_index(self) -> bool:
        return self.index_file is not None


def synthetic_page_alias(kind: PageKind) -> str:
    return f"~{kind.value}"


def resolve_page(layout: ProjectLayout, kind: PageKind) -> PageResolution:
    index_file = first_existing(layout.index_candidates(kind))
    html_file = first_existing(layout.html_candidates(kind))
    if index_file is not None:
        import_token = posix_relative(index_file, layout.static_directory)
    else:
        import_token = synthetic_page_alias(kind)
    return PageResolution(kind=kind, index_file=index_file, html_file=html_file, import_token=import_token)


def page_html_path(layout: ProjectLayout, kind: PageKind) -> Path:
    return layout.generated_directory / f"{kind.value}.html"


def page_script_path(layout: ProjectLayout, kind: PageKind) -> Path:
    return layout.static_directory / f"{kind.value}{layout.mount_ext}"


async def create_page_html(
    generator: TemplateGenerator,
    kind: PageKind,
    html_file: Optional[Path] = None,
) -> Path:
    """Write ``{generated}/{kind}.html`` pointing at the page's static mount script."""
    layout = generator.layout
    script_mount_path = f"./static/{kind.value}{layout.mount_ext}"
    return await generator.generate_html(page_html_path(layout, kind), script_mount_path, html_file)


async def init_ui_page(generator: TemplateGenerator, kind: PageKind) -> bool:
    """
    Generate the mount script and HTML document for one canonical page.

    Returns:
        True when the user supplied an index module for this page.
    """
    logger.debug("Creating static templates for %s", kind.value)
    layout = generator.layout
    resolution = resolve_page(layout, kind)

    await asyncio.to_thread(ensure_directory, layout.static_directory)

    await generator.gather(
        generator.generate_from_cached_template(
            page_mount_template(layout.mount_ext),
            page_script_path(layout, kind),
            {IMPORT_MODULE_TOKEN: resolution.import_token},
        ),
        create_page_html(generator, kind, resolution.html_file),
    )
    return resolution.has_index
