"""Configuration loading and validation."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from gup import __version__
from gup.errors import ConfigError

# 100 MiB
MAX_FILE_SIZE = 100 * 1024 * 1024
DEFAULT_TIMEOUT = 30.0
GITHUB_API_BASE = "https://api.github.com"


class GupConfig(BaseModel):
    """Uploader settings. Every field has a working default."""

    max_file_size: int = MAX_FILE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    api_base: str = GITHUB_API_BASE
    user_agent: str = f"gup/{__version__}"

    @field_validator("max_file_size", "timeout")
    @classmethod
    def must_be_positive(cls, v):
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def load_config(config_path: Path | None = None) -> GupConfig:
    """Load uploader config from a YAML file, or defaults when no path is given."""
    if config_path is None:
        return GupConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return GupConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        return GupConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e
