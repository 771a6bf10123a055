"""Loading search configurations from JSON files."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .base import SearchConfig

logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> SearchConfig:
    """Load and validate a search configuration from a JSON file.
    
    Args:
        config_path: Path to a JSON object with ``SearchConfig`` fields
        
    Returns:
        Validated configuration
        
    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is not a JSON object or a setting is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
    
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")
    
    config = SearchConfig.from_dict(data)
    validate_config(config)
    logger.debug(f"Loaded config from {config_path}: {config.to_dict()}")
    return config


def merge_overrides(config: SearchConfig, overrides: Dict[str, Optional[Any]]) -> SearchConfig:
    """Return a copy of ``config`` with every non-None override applied."""
    data = config.to_dict()
    data.update({key: value for key, value in overrides.items() if value is not None})
    merged = SearchConfig.from_dict(data)
    validate_config(merged)
    return merged


def validate_config(config: SearchConfig) -> None:
    """Raise ``ValueError`` listing every problem with ``config``."""
    errors = config.validate()
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))
