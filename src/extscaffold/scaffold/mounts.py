"""
Mount files for discovered modules: extra pages and content scripts.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..layout import ModuleDescriptor
from ..util import ensure_directory
from .generator import TemplateGenerator
from .templates import (
    CONTENT_SCRIPT_TOKEN,
    IMPORT_MODULE_TOKEN,
    content_script_mount_template,
    page_mount_template,
)

logger = logging.getLogger(__name__)


async def create_page_mount(generator: TemplateGenerator, module: ModuleDescriptor) -> Path:
    """
    Generate the HTML page (and, for UI modules, a mount script) for ``module``.

    Output mirrors the module's directory under the generated-output
    directory. UI-framework modules get a wrapper script next to the HTML;
    anything else is referenced straight from the HTML by its alias.

    Returns:
        Path of the generated HTML document.
    """
    logger.debug("Creating page mount template for %s", module)
    layout = generator.layout
    output_directory = layout.generated_directory / module.directory
    html_path = output_directory / f"{module.name}.html"
    await asyncio.to_thread(ensure_directory, output_directory)

    if layout.is_ui_ext(module.ext):
        script_path = output_directory / f"{module.name}{layout.mount_ext}"
        await generator.gather(
            generator.generate_from_cached_template(
                page_mount_template(layout.mount_ext),
                script_path,
                {IMPORT_MODULE_TOKEN: module.alias},
            ),
            generator.generate_html(html_path, f"./{module.name}{layout.mount_ext}"),
        )
    else:
        await generator.generate_html(html_path, f"{module.alias}{module.ext}")

    return html_path


async def create_content_script_mount(generator: TemplateGenerator, module: ModuleDescriptor) -> Path:
    """
    Generate the UI mount wrapper for a content script under the static directory.

    Returns:
        Path of the generated mount script.
    """
    logger.debug("Creating content script mount for %s", module)
    layout = generator.layout
    output_directory = layout.static_directory / module.directory
    await asyncio.to_thread(ensure_directory, output_directory)

    mount_path = output_directory / f"{module.name}{layout.mount_ext}"
    await generator.generate_from_cached_template(
        content_script_mount_template(layout.mount_ext),
        mount_path,
        {CONTENT_SCRIPT_TOKEN: module.alias},
    )
    return mount_path
