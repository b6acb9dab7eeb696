"""
Template cache, generators and mount dispatch for extension scaffolding.
"""

from .generator import TemplateGenerator
from .mounts import create_content_script_mount, create_page_mount
from .resolver import PageResolution, init_ui_page, resolve_page
from .scaffolder import ScaffoldReport, Scaffolder, run_scaffold
from .templates import (
    ScaffoldError,
    TemplateCache,
    TemplateStructureError,
    apply_replacements,
    apply_replacements_single_pass,
)

__all__ = [
    "TemplateGenerator",
    "create_content_script_mount",
    "create_page_mount",
    "PageResolution",
    "init_ui_page",
    "resolve_page",
    "ScaffoldReport",
    "Scaffolder",
    "run_scaffold",
    "ScaffoldError",
    "TemplateCache",
    "TemplateStructureError",
    "apply_replacements",
    "apply_replacements_single_pass",
]
