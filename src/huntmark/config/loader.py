"""Configuration loader with YAML and environment variable support.

This module reads ~/.config/huntmark/config.yaml (if present) and allows
environment variable overrides using the HUNTMARK_* prefix.

Environment variables:
- HUNTMARK_TYPEWRITER_DELAY: Override typewriter delay (seconds per character)
- HUNTMARK_TYPEWRITER_CURSOR: Override typewriter cursor glyph
- HUNTMARK_TYPEWRITER_SKIP: Override skip_animation (1/true/yes or 0/false/no)
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from huntmark.models.config import Config
from huntmark.utils.logging import get_logger

logger = get_logger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def default_config_path() -> Path:
    """Return ~/.config/huntmark/config.yaml."""
    return Path.home() / ".config" / "huntmark" / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/huntmark/config.yaml
            and falls back to defaults when that file does not exist.

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config file is invalid
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = default_config_path()

    if config_path.exists():
        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        logger.info("config_file_read", path=str(config_path))
    elif explicit:
        raise FileNotFoundError(f"Configuration file not found at {config_path}")
    else:
        # No config file: defaults plus any environment overrides
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

    data = _apply_env_overrides(data)

    return Config.from_dict(data)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Environment variables use the format: HUNTMARK_SECTION_KEY
    For example: HUNTMARK_TYPEWRITER_DELAY sets data['typewriter']['delay']

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    typewriter = dict(data.get("typewriter") or {})

    if env_delay := os.getenv("HUNTMARK_TYPEWRITER_DELAY"):
        try:
            typewriter["delay"] = float(env_delay)
        except ValueError:
            logger.warning("invalid_env_override", name="HUNTMARK_TYPEWRITER_DELAY", value=env_delay)

    if (env_cursor := os.getenv("HUNTMARK_TYPEWRITER_CURSOR")) is not None:
        typewriter["cursor"] = env_cursor

    if env_skip := os.getenv("HUNTMARK_TYPEWRITER_SKIP"):
        value = env_skip.strip().lower()
        if value in TRUE_VALUES:
            typewriter["skip_animation"] = True
        elif value in FALSE_VALUES:
            typewriter["skip_animation"] = False
        else:
            logger.warning("invalid_env_override", name="HUNTMARK_TYPEWRITER_SKIP", value=env_skip)

    if typewriter:
        data = {**data, "typewriter": typewriter}
        logger.debug("config_env_overrides_applied", typewriter=typewriter)

    return data
