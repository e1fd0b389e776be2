"""Application configuration: settings schema and config.yaml loader"""

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str = "docblock"
    markdown_preset:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    markdown_options: dict[str, Any] = Field(default_factory=lambda: {"linkify": False},
                                             description="MarkdownIt options_update, forwarded verbatim")
    reserved_tags:    list[str] = Field(default_factory=list, description="@tag names kept as literal text")
    output_dir:       str = Field(default="dist", description="Directory for compiled JSON files")
    log_level:        str = Field(default="WARNING", description="Standard logging level name")
    log_format:       str = Field(default="console", pattern="^(console|json)$", description="console or json")

    @field_validator("reserved_tags", mode="before")
    @classmethod
    def _split_reserved(cls, v: Any) -> Any:
        """Accept 'Decorator,Override' from env vars; strip any leading '@'."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            return [s.strip().lstrip("@") for s in v if isinstance(s, str) and s.strip()]
        return v

    @field_validator("markdown_options", mode="before")
    @classmethod
    def _parse_options(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"markdown_options must be a JSON object: {e}") from e
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCBLOCK_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCBLOCK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
