"""Application configuration: settings schema and mdfront.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


CONFIG_FILE = "mdfront.yaml"
ENV_PREFIX = "MDFRONT_"


class Settings(BaseModel):
    app_name:      str = "mdfront"
    sentinel:      str = Field(default="---", min_length=1, description="Line that opens and closes the metadata block")
    encoding:      str = Field(default="utf-8", description="Encoding used to read source documents")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt preset used to list code blocks and headings")
    output_dir:    str = Field(default="dist", description="Directory for exported sidecar JSON files")
    required_keys: list[str] = Field(default=["title", "date"], description="Keys reported missing by 'check'")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("required_keys", mode="before")
    @classmethod
    def _split_keys(cls, v):
        # env vars arrive as "title,date"
        if isinstance(v, str):
            return [k.strip() for k in v.split(",") if k.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdfront.yaml, then MDFRONT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
