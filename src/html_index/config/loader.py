"""Configuration loader for page descriptions.

Loads a JSON file and returns a validated PageConfig instance.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from html_index.config.models import PageConfig
from html_index.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, PageConfig] = {}


def load_config(path: Optional[Path] = None) -> PageConfig:
    """Load and validate a page config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a JSON page description.
        If ``None``, an empty ``PageConfig`` (all defaults) is returned.

    Returns
    -------
    PageConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, cannot be read as UTF-8 text, is not
        valid JSON, or does not match the expected schema.
    """
    if path is None:
        return PageConfig()

    config_path = Path(path)
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = PageConfig.model_validate(raw)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid page config {config_path}:\n{exc}") from exc

    logger.debug("Loaded page config from %s", config_path)
    _config_cache[cache_key] = config
    return config


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
