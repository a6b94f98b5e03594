"""Declarative build-configuration parser and dependency-coordinate resolver."""

from depmodel.api import build_model, read_build_script, read_tree_document
from depmodel.collector import DeclarationCollector
from depmodel.config import CollectorConfig
from depmodel.errors import (
    ConfigurationModelError,
    EmptySegment,
    MalformedCoordinate,
    MissingVersion,
    ScriptSyntaxError,
    UnknownDeclarationShape,
)
from depmodel.model import ConfigurationModel, DependencyRole

__version__ = "0.1.0"

__all__ = [
    "build_model",
    "read_build_script",
    "read_tree_document",
    "DeclarationCollector",
    "CollectorConfig",
    "ConfigurationModel",
    "DependencyRole",
    "ConfigurationModelError",
    "EmptySegment",
    "MalformedCoordinate",
    "MissingVersion",
    "ScriptSyntaxError",
    "UnknownDeclarationShape",
]
