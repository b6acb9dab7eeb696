"""
Pydantic models for validating scaffold configuration files.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_CONFIG_FILENAME = "extscaffold.toml"
DEFAULT_UI_EXTENSIONS = [".tsx", ".jsx", ".vue", ".svelte"]


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class ScaffoldConfig(BaseModel):
    """
    Top-level configuration for a scaffolding run.

    Attributes:
        name: Project display name, used as the HTML document title.
        root: Project root directory. Relative roots are resolved against the config file.
        source_dir: Source directory below the root (falls back to the root if missing).
        generated_dir: Generated-output directory below the root.
        mount_ext: Extension given to generated mount scripts.
        ui_extensions: Extensions recognised as UI-framework modules.
        template_root: Built-in template root (defaults to the packaged templates).
        substitution: "sequential" (cumulative find-replace) or "single-pass".
        strict_html: Raise when a user HTML file has no closing body tag (default: warn and copy).
    """
    name: str = "Extension"
    root: Optional[Path] = None
    source_dir: str = "src"
    generated_dir: str = ".scaffold"
    mount_ext: str = ".tsx"
    ui_extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_UI_EXTENSIONS))
    template_root: Optional[Path] = None
    substitution: Literal["sequential", "single-pass"] = "sequential"
    strict_html: bool = False

    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
    }

    @field_validator("mount_ext")
    @classmethod
    def _check_mount_ext(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"mount_ext must look like '.tsx', got {value!r}")
        return value

    @field_validator("ui_extensions")
    @classmethod
    def _normalize_ui_extensions(cls, values: List[str]) -> List[str]:
        normalized = []
        for value in values:
            ext = value.strip().lower()
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        return normalized


def load_config(path: Path | str) -> ScaffoldConfig:
    """
    Load and validate a TOML config file into a ScaffoldConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated ScaffoldConfig whose root is an absolute path.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    raw_data = _normalize_toml_schema(raw_data)

    try:
        config = ScaffoldConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

    base = config_path.parent
    root = (base / config.root) if config.root else base
    updates: Dict[str, Any] = {"root": root.resolve()}
    if config.template_root is not None and not config.template_root.is_absolute():
        updates["template_root"] = (base / config.template_root).resolve()
    return config.model_copy(update=updates)


def _normalize_toml_schema(data: Any) -> Dict[str, Any]:
    """
    Accept either a flat document or one nested under a ``[scaffold]`` table.
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a table.")
    nested = data.get("scaffold")
    if isinstance(nested, dict):
        return dict(nested)
    return dict(data)
