"""Configuration schema definitions using Pydantic for validation.

The collector receives an explicit ``CollectorConfig`` from its caller
instead of reading any process-wide build state. Using Pydantic ensures
configuration errors are caught early with clear error messages.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from depmodel.model.declarations import DependencyRole

_TOOL = DependencyRole.TOOL_PROVIDED
_COMPILE = DependencyRole.COMPILE
_RUNTIME = DependencyRole.RUNTIME


def default_role_keywords() -> Dict[str, DependencyRole]:
    """Declaration keyword table for loom-style modding builds."""
    return {
        "minecraft": _TOOL,
        "mappings": _TOOL,
        "forge": _TOOL,
        "neoForge": _TOOL,
        "implementation": _COMPILE,
        "api": _COMPILE,
        "compileOnly": _COMPILE,
        "compileOnlyApi": _COMPILE,
        "modImplementation": _COMPILE,
        "modApi": _COMPILE,
        "modCompileOnly": _COMPILE,
        "modCompileOnlyApi": _COMPILE,
        "include": _COMPILE,
        "annotationProcessor": _COMPILE,
        "runtimeOnly": _RUNTIME,
        "modRuntimeOnly": _RUNTIME,
        "modLocalRuntime": _RUNTIME,
        "localRuntime": _RUNTIME,
    }


class CollectorConfig(BaseModel):
    """Configuration for the declaration collector.

    Attributes:
        role_keywords: Dependency declaration keyword -> role.
        default_role: Role for keywords missing from ``role_keywords``.
        require_version: Whether every dependency coordinate needs a version.
        plugin_namespaces: Plugin helper name -> id prefix, e.g.
            ``kotlin("jvm")`` -> ``org.jetbrains.kotlin.jvm``.
        inherit_project_coordinates: Fall back to top-level ``group`` and
            ``version`` when the publishing block does not set them.
    """

    role_keywords: Dict[str, DependencyRole] = Field(default_factory=default_role_keywords)
    default_role: DependencyRole = DependencyRole.COMPILE
    require_version: bool = False
    plugin_namespaces: Dict[str, str] = Field(
        default_factory=lambda: {"kotlin": "org.jetbrains.kotlin."}
    )
    inherit_project_coordinates: bool = True

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("role_keywords", "plugin_namespaces")
    @classmethod
    def validate_keys(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        """Validate that mapping keys are non-blank names."""
        for key in v:
            if not key or not key.strip():
                raise ValueError("keyword names must be non-empty")
        return v

    def role_for(self, keyword: str) -> DependencyRole:
        """Classify a dependency declaration keyword."""
        return self.role_keywords.get(keyword, self.default_role)

    @classmethod
    def default(cls) -> "CollectorConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CollectorConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            CollectorConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json")
