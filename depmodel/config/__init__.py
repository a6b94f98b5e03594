"""Configuration schema and loading for depmodel."""

from .schema import CollectorConfig, default_role_keywords
from .loader import load_collector_config

__all__ = [
    "CollectorConfig",
    "default_role_keywords",
    "load_collector_config",
]
