"""JSON export for configuration models."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from depmodel.model.configuration import ConfigurationModel
from depmodel.model.coordinate import Coordinate
from depmodel.model.tree import to_python
from depmodel.model.version import SemanticVersion, VersionSpec

logger = logging.getLogger("depmodel.export.json")


def version_to_dict(version: Optional[VersionSpec]) -> Optional[Dict[str, Any]]:
    if version is None:
        return None
    if isinstance(version, SemanticVersion):
        return {
            "raw": version.raw,
            "kind": "semantic",
            "major": version.major,
            "minor": version.minor,
            "patch": version.patch,
            "prerelease": version.prerelease,
            "build": version.build,
        }
    return {"raw": version.raw, "kind": "opaque"}


def coordinate_to_dict(coordinate: Coordinate) -> Dict[str, Any]:
    return {
        "notation": coordinate.notation,
        "group": coordinate.group,
        "artifact": coordinate.artifact,
        "version": version_to_dict(coordinate.version),
        "classifier": coordinate.classifier,
    }


def model_to_dict(model: ConfigurationModel) -> Dict[str, Any]:
    """Convert a model into JSON-compatible data.

    Args:
        model: Model to convert.

    Returns:
        Mapping with ``plugins``, ``dependencies``, ``publishing`` and
        ``pass_through`` keys.
    """
    publishing = model.publishing()
    return {
        "plugins": [
            {
                "id": plugin.id,
                "version": version_to_dict(plugin.version),
                "apply": plugin.apply,
            }
            for plugin in model.plugins()
        ],
        "dependencies": [
            {
                "role": dep.role.value,
                "keyword": dep.keyword,
                "coordinate": coordinate_to_dict(dep.coordinate),
            }
            for dep in model.dependencies()
        ],
        "publishing": {
            "group_id": publishing.group_id,
            "version": publishing.version,
            "publications": list(publishing.publications),
        },
        "pass_through": [
            {"name": block.name, "value": to_python(block.node)}
            for block in model.pass_through()
        ],
    }


def export_json(model: ConfigurationModel, output_path: Path) -> None:
    """Export a model to a JSON file.

    Args:
        model: Model to export.
        output_path: Output file path.
    """
    logger.info("Exporting configuration model to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(model_to_dict(model), f, indent=2, ensure_ascii=False)

    logger.info(
        "JSON export completed: %d plugins, %d dependencies",
        len(model.plugins()),
        len(model.dependencies()),
    )
