"""
Build-time scaffolding of HTML entry documents and mount scripts for browser extensions.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("extscaffold")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
