"""Helpers for loading collector configuration from JSON/JSON5 sources.

This module provides a single entry point `load_collector_config`
that accepts various configuration sources:

* None -> default CollectorConfig
* dict -> CollectorConfig.from_dict
* Path / path-like string -> load .json/.json5 from filesystem
* Inline JSON5 strings
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

import json5

from depmodel.config.schema import CollectorConfig

logger = logging.getLogger("depmodel.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def load_collector_config(source: ConfigSource) -> CollectorConfig:
    """Load CollectorConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns CollectorConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .json/.json5 file,
              or an inline JSON5 string

    Returns:
        CollectorConfig instance.

    Raises:
        ValueError: If the text is not valid JSON5 or not a mapping.
        ValidationError: If the mapping does not satisfy the schema.
    """
    if source is None:
        logger.debug("No config source provided; using default CollectorConfig")
        return CollectorConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading CollectorConfig from provided dict")
        return CollectorConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        if isinstance(source, Path) or (
            not str(source).lstrip().startswith("{") and path.exists()
        ):
            logger.info("Loading configuration from file: %s", path)
            text = path.read_text(encoding="utf-8")
        else:
            logger.info("Loading configuration from inline string")
            text = str(source)

        data = json5.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return CollectorConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_collector_config", "ConfigSource"]
