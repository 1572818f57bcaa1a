"""Configuration loader for GenBank Explorer.

Loads the JSON configuration file and returns a validated ExplorerConfig
instance. Uses module-level caching so the config is only parsed once per
process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from genbank_explorer.config.models import ExplorerConfig
from genbank_explorer.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, ExplorerConfig] = {}

# Default config path, next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "genbank_default.json"


def load_config(path: Optional[Path] = None) -> ExplorerConfig:
    """Load and validate the explorer config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``genbank_default.json`` is used.

    Returns
    -------
    ExplorerConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not valid JSON, or does not match
        the expected schema.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = ExplorerConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}:\n{exc}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> ExplorerConfig:
    """Get the default configuration (cached).

    This is the main entry point used by the rest of the application.
    """
    return load_config()


def clear_cache() -> None:
    """Clear the config cache (used by tests)."""
    _config_cache.clear()
