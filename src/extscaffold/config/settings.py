"""
Environment-driven settings.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Values read from environment variables (or a project ``.env``).

    Attributes:
        log_level: Default logging level for the CLI.
        template_root: Template root used when the config file does not set one.
    """
    log_level: Optional[str] = Field(default=None, alias="EXTSCAFFOLD_LOG_LEVEL")
    template_root: Optional[Path] = Field(default=None, alias="EXTSCAFFOLD_TEMPLATE_ROOT")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {field.alias: os.getenv(field.alias) for field in Settings.model_fields.values()}
    return Settings(**values)
