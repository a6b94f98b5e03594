"""Library-facing helpers for building configuration models.

The core never reads files: callers supply an already-built declarative
tree, or the raw bytes of a build script / tree document they read
themselves, together with an explicit CollectorConfig.
"""

from __future__ import annotations

from typing import Any, Optional

from depmodel.collector import DeclarationCollector
from depmodel.config.schema import CollectorConfig
from depmodel.model.configuration import ConfigurationModel
from depmodel.model.tree import from_python
from depmodel.parsers.document import read_tree_document as _read_document
from depmodel.parsers.kotlin_dsl import read_kotlin_dsl


def build_model(tree: Any, config: Optional[CollectorConfig] = None) -> ConfigurationModel:
    """Build a ConfigurationModel from a declarative tree.

    Args:
        tree: Root Node, or plain dict/list data converted with
            ``from_python``.
        config: Optional CollectorConfig. When omitted,
            ``CollectorConfig.default()`` is used.

    Returns:
        Immutable ConfigurationModel.

    Raises:
        ConfigurationModelError: First structural error; no partial model.
    """
    return DeclarationCollector(config).collect(from_python(tree))


def read_build_script(
    data: bytes, config: Optional[CollectorConfig] = None
) -> ConfigurationModel:
    """Build a ConfigurationModel from Gradle Kotlin DSL script bytes."""
    return build_model(read_kotlin_dsl(data), config)


def read_tree_document(
    data: bytes, config: Optional[CollectorConfig] = None
) -> ConfigurationModel:
    """Build a ConfigurationModel from JSON/JSON5 tree document bytes."""
    return build_model(_read_document(data), config)


__all__ = ["build_model", "read_build_script", "read_tree_document"]
