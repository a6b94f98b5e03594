"""Declaration collector turning a declarative tree into a ConfigurationModel.

The collector walks the top-level blocks of a tree once. ``plugins``,
``dependencies`` and ``publishing`` (case-sensitive) are interpreted; every
other top-level entry is kept verbatim as a pass-through block so consumers
can still read tool-specific extensions.

Construction is fail-fast: declarations accumulate in locals and the model
is only built after the whole tree has been walked, so the first error
propagates and no partial model ever reaches the caller.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from depmodel.config.schema import CollectorConfig
from depmodel.errors import UnknownDeclarationShape
from depmodel.model.configuration import ConfigurationModel
from depmodel.model.coordinate import Coordinate, coordinate_from_fields, parse_coordinate
from depmodel.model.declarations import (
    DependencyDeclaration,
    PassThroughBlock,
    PluginDeclaration,
    PublishingMetadata,
)
from depmodel.model.tree import ListNode, MapNode, Node, Scalar
from depmodel.model.version import parse_version

logger = logging.getLogger("depmodel.collector")

PLUGINS_BLOCK = "plugins"
DEPENDENCIES_BLOCK = "dependencies"
PUBLISHING_BLOCK = "publishing"

# Call names that declare a named publication in the script form.
_PUBLICATION_FACTORIES = ("create", "register")


class DeclarationCollector:
    """Collect typed declarations from a declarative configuration tree."""

    def __init__(self, config: Optional[CollectorConfig] = None) -> None:
        self.config = config or CollectorConfig.default()

    def collect(self, tree: Node) -> ConfigurationModel:
        """Build a ConfigurationModel from ``tree``.

        Args:
            tree: Root node; must be a MapNode of top-level blocks.

        Returns:
            Immutable ConfigurationModel.

        Raises:
            ConfigurationModelError: On the first structural error found.
        """
        if not isinstance(tree, MapNode):
            raise UnknownDeclarationShape(
                f"configuration root must be a map of blocks, got {type(tree).__name__}"
            )

        plugins: List[PluginDeclaration] = []
        dependencies: List[DependencyDeclaration] = []
        publishing_blocks: List[Node] = []
        pass_through: List[PassThroughBlock] = []

        for name, node in tree:
            if name == PLUGINS_BLOCK:
                plugins.extend(self._collect_plugins(node))
            elif name == DEPENDENCIES_BLOCK:
                dependencies.extend(self._collect_dependencies(node))
            elif name == PUBLISHING_BLOCK:
                publishing_blocks.append(node)
            else:
                pass_through.append(PassThroughBlock(name=name, node=node))

        publishing = self._collect_publishing(publishing_blocks, tree)

        logger.debug(
            "Collected %d plugin(s), %d dependency(ies), %d pass-through block(s)",
            len(plugins),
            len(dependencies),
            len(pass_through),
        )
        return ConfigurationModel(
            plugins=plugins,
            dependencies=dependencies,
            publishing=publishing,
            pass_through=pass_through,
        )

    # ------------------------------------------------------------------
    # dependencies
    # ------------------------------------------------------------------

    def _collect_dependencies(self, node: Node) -> List[DependencyDeclaration]:
        if isinstance(node, ListNode):
            result: List[DependencyDeclaration] = []
            for item in node:
                if not isinstance(item, MapNode):
                    raise UnknownDeclarationShape(
                        "dependency list items must be keyword maps",
                        block=DEPENDENCIES_BLOCK,
                    )
                result.extend(self._collect_dependencies(item))
            return result

        if not isinstance(node, MapNode):
            raise UnknownDeclarationShape(
                f"dependencies block must be a map or list, got {type(node).__name__}",
                block=DEPENDENCIES_BLOCK,
            )

        result = []
        for keyword, value in node:
            entries: Sequence[Node] = value.items if isinstance(value, ListNode) else (value,)
            role = self.config.role_for(keyword)
            if keyword not in self.config.role_keywords:
                logger.debug(
                    "Unknown dependency keyword %r classified as %s",
                    keyword,
                    role.value,
                )
            for entry in entries:
                coordinate = self._coordinate_for(keyword, entry)
                result.append(
                    DependencyDeclaration(role=role, coordinate=coordinate, keyword=keyword)
                )
        return result

    def _coordinate_for(self, keyword: str, entry: Node) -> Coordinate:
        require_version = self.config.require_version
        if isinstance(entry, Scalar) and isinstance(entry.value, str):
            return parse_coordinate(
                entry.value, require_version=require_version, block=DEPENDENCIES_BLOCK
            )

        if isinstance(entry, MapNode):
            group = entry.get_text("group")
            name = entry.get_text("name", "artifact")
            if group is not None and name is not None:
                return coordinate_from_fields(
                    group,
                    name,
                    entry.get_text("version"),
                    entry.get_text("classifier"),
                    require_version=require_version,
                    block=DEPENDENCIES_BLOCK,
                )
            notation = entry.get("value")
            if isinstance(notation, Scalar) and isinstance(notation.value, str):
                return parse_coordinate(
                    notation.value, require_version=require_version, block=DEPENDENCIES_BLOCK
                )

        raise UnknownDeclarationShape(
            f"{keyword!r} entry supplies neither a coordinate string "
            "nor group and name fields",
            block=DEPENDENCIES_BLOCK,
        )

    # ------------------------------------------------------------------
    # plugins
    # ------------------------------------------------------------------

    def _collect_plugins(self, node: Node) -> List[PluginDeclaration]:
        result: List[PluginDeclaration] = []
        if isinstance(node, ListNode):
            for item in node:
                result.append(self._plugin_entry("id", item))
            return result

        if not isinstance(node, MapNode):
            raise UnknownDeclarationShape(
                f"plugins block must be a map or list, got {type(node).__name__}",
                block=PLUGINS_BLOCK,
            )

        for key, value in node:
            if isinstance(value, ListNode):
                result.extend(self._plugin_entry(key, item) for item in value)
            else:
                result.append(self._plugin_entry(key, value))
        return result

    def _plugin_entry(self, key: str, value: Node) -> PluginDeclaration:
        namespaces = self.config.plugin_namespaces
        if key == "id" or key in namespaces:
            prefix = namespaces.get(key, "")
            if isinstance(value, Scalar) and isinstance(value.value, str) and value.value:
                return PluginDeclaration(id=prefix + value.value)
            if isinstance(value, MapNode):
                plugin_id = value.get_text("value", "id")
                if plugin_id:
                    version, apply = _plugin_options(value)
                    return PluginDeclaration(id=prefix + plugin_id, version=version, apply=apply)
        else:
            if isinstance(value, Scalar) and value.value is None:
                return PluginDeclaration(id=key)
            if isinstance(value, Scalar) and isinstance(value.value, str):
                return PluginDeclaration(id=key, version=parse_version(value.value))
            if isinstance(value, MapNode):
                version, apply = _plugin_options(value)
                return PluginDeclaration(id=key, version=version, apply=apply)

        raise UnknownDeclarationShape(
            f"unsupported plugin declaration under {key!r}", block=PLUGINS_BLOCK
        )

    # ------------------------------------------------------------------
    # publishing
    # ------------------------------------------------------------------

    def _collect_publishing(self, blocks: Sequence[Node], root: MapNode) -> PublishingMetadata:
        group_id: Optional[str] = None
        version: Optional[str] = None
        publications: List[str] = []

        for block in blocks:
            if not isinstance(block, MapNode):
                raise UnknownDeclarationShape(
                    f"publishing block must be a map, got {type(block).__name__}",
                    block=PUBLISHING_BLOCK,
                )
            group_id, version = _declared_coordinates(block, group_id, version)
            for name, body in _publications(block):
                publications.append(name)
                if isinstance(body, MapNode):
                    group_id, version = _declared_coordinates(body, group_id, version)

        if self.config.inherit_project_coordinates:
            if group_id is None:
                group_id = _top_level_text(root, "group")
            if version is None:
                version = _top_level_text(root, "version")

        return PublishingMetadata(
            group_id=group_id,
            version=version,
            publications=tuple(publications),
        )


def _plugin_options(node: MapNode):
    raw_version = node.get_text("version")
    version = parse_version(raw_version) if raw_version is not None else None
    apply = node.get_text("apply") != "false"
    return version, apply


def _declared_coordinates(
    node: MapNode, group_id: Optional[str], version: Optional[str]
) -> Tuple[Optional[str], Optional[str]]:
    # First declaration wins; an explicit blank value counts as declared.
    if group_id is None:
        group_id = node.get_text("groupId", "group")
    if version is None:
        version = node.get_text("version")
    return group_id, version


def _publications(block: MapNode) -> List[Tuple[str, Node]]:
    found: List[Tuple[str, Node]] = []
    for container in block.get_all("publications"):
        if not isinstance(container, MapNode):
            raise UnknownDeclarationShape(
                f"publications must be a map, got {type(container).__name__}",
                block=PUBLISHING_BLOCK,
            )
        for key, node in container:
            if key in _PUBLICATION_FACTORIES and isinstance(node, MapNode):
                name = node.get_text("value") or key
                found.append((name, node.get("body")))
            else:
                found.append((key, node))
    return found


def _top_level_text(root: MapNode, key: str) -> Optional[str]:
    node = root.get(key)
    if isinstance(node, Scalar) and node.value is not None:
        return node.text
    return None


__all__ = [
    "DeclarationCollector",
    "PLUGINS_BLOCK",
    "DEPENDENCIES_BLOCK",
    "PUBLISHING_BLOCK",
]
