"""
Project layout: page kinds, module descriptors and path conventions.
"""

from .kinds import PAGE_ORDER, ModuleDescriptor, PageKind, UiExtensionPredicate, make_ui_ext_predicate
from .project import DEFAULT_TEMPLATE_ROOT, ProjectLayout

__all__ = [
    "PAGE_ORDER",
    "ModuleDescriptor",
    "PageKind",
    "UiExtensionPredicate",
    "make_ui_ext_predicate",
    "DEFAULT_TEMPLATE_ROOT",
    "ProjectLayout",
]
