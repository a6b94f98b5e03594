"""Typed declaration records produced by the collector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from depmodel.model.coordinate import Coordinate
from depmodel.model.tree import Node
from depmodel.model.version import VersionSpec, parse_version


class DependencyRole(str, Enum):
    """How a dependency participates in the build."""

    COMPILE = "compile"
    RUNTIME = "runtime"
    # Supplied by the mod loader toolchain (game jar, mappings, ...).
    TOOL_PROVIDED = "toolProvided"


@dataclass(frozen=True)
class PluginDeclaration:
    """Build plugin applied (or only declared) by the configuration."""

    id: str
    version: Optional[VersionSpec] = None
    apply: bool = True


@dataclass(frozen=True)
class DependencyDeclaration:
    """Dependency entry classified into a role."""

    role: DependencyRole
    coordinate: Coordinate
    keyword: str = ""


@dataclass(frozen=True)
class PublishingMetadata:
    """Coordinates under which the project publishes itself."""

    group_id: Optional[str] = None
    version: Optional[str] = None
    publications: Tuple[str, ...] = ()

    @property
    def version_spec(self) -> Optional[VersionSpec]:
        if self.version is None:
            return None
        return parse_version(self.version)


@dataclass(frozen=True)
class PassThroughBlock:
    """Unrecognized top-level entry kept verbatim for tool-specific consumers."""

    name: str
    node: Node


__all__ = [
    "DependencyRole",
    "PluginDeclaration",
    "DependencyDeclaration",
    "PublishingMetadata",
    "PassThroughBlock",
]
