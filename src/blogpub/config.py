"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str = "blogpub"
    db_url:           str = "sqlite:///blogpub.db"
    output_dir:       str = Field(default="content/posts", description="Directory receiving Hugo page bundles")
    parser_config:    str = Field(default="commonmark",    description="MarkdownIt parser preset name")
    publish_statuses: list[str] = Field(default=["online"], description="Post statuses that get written")
    default_language: str = Field(default="de", pattern="^[a-z]{2}$", description="Language code for untagged posts")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$", description="Root logging level")

    @field_validator("publish_statuses", mode="before")
    @classmethod
    def _split_statuses(cls, v: Any) -> Any:
        """Accept 'online,published' from env vars as well as a YAML list."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def is_published(self, status: str) -> bool:
        """True if a post with this status should be written."""
        return status.strip().lower() in {s.lower() for s in self.publish_statuses}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BLOGPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"BLOGPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
