"""Immutable configuration model handed to the consuming build tool."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from depmodel.model.declarations import (
    DependencyDeclaration,
    DependencyRole,
    PassThroughBlock,
    PluginDeclaration,
    PublishingMetadata,
)


class ConfigurationModel:
    """Resolved snapshot of plugins, dependencies and publishing metadata.

    Instances are built once by the collector and expose read accessors
    only. All collections are stored as tuples and attribute assignment is
    rejected after construction, so a model can be shared read-only across
    threads.
    """

    __slots__ = ("_plugins", "_dependencies", "_publishing", "_pass_through")

    def __init__(
        self,
        plugins: Iterable[PluginDeclaration] = (),
        dependencies: Iterable[DependencyDeclaration] = (),
        publishing: Optional[PublishingMetadata] = None,
        pass_through: Iterable[PassThroughBlock] = (),
    ) -> None:
        object.__setattr__(self, "_plugins", tuple(plugins))
        object.__setattr__(self, "_dependencies", tuple(dependencies))
        object.__setattr__(self, "_publishing", publishing or PublishingMetadata())
        object.__setattr__(self, "_pass_through", tuple(pass_through))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def plugins(self) -> Tuple[PluginDeclaration, ...]:
        return self._plugins

    def dependencies(self) -> Tuple[DependencyDeclaration, ...]:
        return self._dependencies

    def dependencies_by_role(self, role: DependencyRole) -> Tuple[DependencyDeclaration, ...]:
        return tuple(dep for dep in self._dependencies if dep.role == role)

    def publishing(self) -> PublishingMetadata:
        return self._publishing

    def publishing_group_id(self) -> Optional[str]:
        return self._publishing.group_id

    def publishing_version(self) -> Optional[str]:
        return self._publishing.version

    def pass_through(self) -> Tuple[PassThroughBlock, ...]:
        """Unrecognized top-level blocks in source order."""
        return self._pass_through

    def pass_through_block(self, name: str) -> Optional[PassThroughBlock]:
        """Return the first pass-through block called ``name``."""
        for block in self._pass_through:
            if block.name == name:
                return block
        return None

    def __repr__(self) -> str:
        return (
            f"ConfigurationModel(plugins={len(self._plugins)}, "
            f"dependencies={len(self._dependencies)}, "
            f"publishing={self._publishing!r}, "
            f"pass_through={len(self._pass_through)})"
        )


__all__ = ["ConfigurationModel"]
