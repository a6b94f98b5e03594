"""Configuration model records, tree nodes, coordinates and versions."""

from .configuration import ConfigurationModel
from .coordinate import Coordinate, coordinate_from_fields, parse_coordinate
from .declarations import (
    DependencyDeclaration,
    DependencyRole,
    PassThroughBlock,
    PluginDeclaration,
    PublishingMetadata,
)
from .tree import ListNode, MapNode, Node, OpaqueNode, Scalar, from_python, to_python
from .version import (
    OpaqueVersion,
    SemanticVersion,
    VersionOrdering,
    VersionSpec,
    compare_versions,
    parse_version,
)

__all__ = [
    "ConfigurationModel",
    "Coordinate",
    "coordinate_from_fields",
    "parse_coordinate",
    "DependencyDeclaration",
    "DependencyRole",
    "PassThroughBlock",
    "PluginDeclaration",
    "PublishingMetadata",
    "ListNode",
    "MapNode",
    "Node",
    "OpaqueNode",
    "Scalar",
    "from_python",
    "to_python",
    "OpaqueVersion",
    "SemanticVersion",
    "VersionOrdering",
    "VersionSpec",
    "compare_versions",
    "parse_version",
]
