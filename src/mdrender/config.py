"""Application configuration: render options, settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDRENDER_"


class RenderOptions(BaseModel):
    """Parser options. Carried for compatibility; no stage branches on them yet."""
    code_highlight:   bool = True
    rtl_support:      bool = True
    smart_typography: bool = True


class Settings(BaseModel):
    app_name:         str  = "mdrender"
    output_dir:       str  = Field(default="dist", description="Directory for rendered HTML files")
    output_ext:       str  = Field(default="html", pattern="^(html|htm)$", description="html or htm")
    log_level:        str  = Field(
        default="WARNING",
        pattern="^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR|CRITICAL)$",
        description="loguru level name for the stderr sink",
    )
    code_highlight:   bool = Field(default=True, description="Tag fenced code with its language")
    rtl_support:      bool = Field(default=True, description="Emit direction attributes")
    smart_typography: bool = Field(default=True, description="Typographic replacements")

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            code_highlight=self.code_highlight,
            rtl_support=self.rtl_support,
            smart_typography=self.smart_typography,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDRENDER_<FIELD> env vars, then non-None CLI overrides."""
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
    except ValueError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
