"""Search configuration."""

# Import submodules explicitly when needed:
#   from proxroute.configs.base import SearchConfig
#   from proxroute.configs.config_loader import load_config

__all__ = [
    "base",
    "config_loader",
]
