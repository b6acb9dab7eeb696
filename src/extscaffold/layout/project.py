"""
Path conventions for a scaffolded project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import ScaffoldConfig, get_settings
from .kinds import PageKind, UiExtensionPredicate, make_ui_ext_predicate

DEFAULT_TEMPLATE_ROOT = Path(__file__).resolve().parent.parent / "templates"
LOCK_FILENAME = ".extscaffold.lock"
HTML_EXTENSION = ".html"


@dataclass(frozen=True)
class ProjectLayout:
    """
    Read-only view of where sources live and where generated files go.

    Candidate lists are ordered most specific first.
    """
    name: str
    root: Path
    source_directory: Path
    generated_directory: Path
    mount_ext: str
    template_root: Path
    ui_extensions: Tuple[str, ...]
    is_ui_ext: UiExtensionPredicate = field(compare=False, repr=False)

    @classmethod
    def from_config(
        cls,
        config: ScaffoldConfig,
        *,
        is_ui_ext: Optional[UiExtensionPredicate] = None,
    ) -> "ProjectLayout":
        root = Path(config.root or Path.cwd()).expanduser().resolve()
        source = root / config.source_dir
        if not source.is_dir():
            source = root
        template_root = config.template_root or get_settings().template_root or DEFAULT_TEMPLATE_ROOT
        return cls(
            name=config.name,
            root=root,
            source_directory=source,
            generated_directory=root / config.generated_dir,
            mount_ext=config.mount_ext,
            template_root=Path(template_root).expanduser().resolve(),
            ui_extensions=tuple(config.ui_extensions),
            is_ui_ext=is_ui_ext or make_ui_ext_predicate(config.ui_extensions),
        )

    @property
    def static_directory(self) -> Path:
        return self.generated_directory / "static"

    @property
    def scaffold_template_directory(self) -> Path:
        return self.template_root / "static"

    @property
    def common_template_directory(self) -> Path:
        return self.scaffold_template_directory / "common"

    @property
    def lock_path(self) -> Path:
        return self.root / LOCK_FILENAME

    @property
    def module_extensions(self) -> List[str]:
        extensions = [".ts"]
        for ext in self.ui_extensions:
            if ext not in extensions:
                extensions.append(ext)
        return extensions

    def index_candidates(self, kind: PageKind) -> List[Path]:
        """Candidate index modules for a page kind: ``kind/index.ext`` before ``kind.ext``."""
        candidates: List[Path] = []
        for ext in self.module_extensions:
            candidates.append(self.source_directory / kind.value / f"index{ext}")
            candidates.append(self.source_directory / f"{kind.value}{ext}")
        return candidates

    def html_candidates(self, kind: PageKind) -> List[Path]:
        """Candidate user HTML shells for a page kind."""
        return [
            self.source_directory / kind.value / f"index{HTML_EXTENSION}",
            self.source_directory / f"{kind.value}{HTML_EXTENSION}",
        ]
