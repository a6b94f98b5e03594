"""CLI command that reads a build configuration file and reports its model.

This command is the file-reading collaborator around the core: it loads the
bytes from disk, picks a reader by file type, builds the ConfigurationModel
and prints either a summary table or the JSON export.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from depmodel.api import read_build_script, read_tree_document
from depmodel.config.loader import load_collector_config
from depmodel.errors import ConfigurationModelError
from depmodel.export.json import export_json, model_to_dict
from depmodel.model.configuration import ConfigurationModel

logger = logging.getLogger("depmodel.cli.inspect")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_MODEL_ERROR = 2

_SCRIPT_SUFFIXES = (".kts",)
_DOCUMENT_SUFFIXES = (".json", ".json5")


def detect_format(path: Path, requested: Optional[str] = None) -> str:
    """Pick the reader for ``path``: ``kts`` or ``json``."""
    if requested:
        return requested
    suffix = path.suffix.lower()
    if suffix in _SCRIPT_SUFFIXES:
        return "kts"
    if suffix in _DOCUMENT_SUFFIXES:
        return "json"
    logger.debug("Unknown suffix %r for %s; assuming Kotlin DSL", suffix, path)
    return "kts"


def inspect_command(args, console: Optional[Console] = None) -> int:
    """Execute the inspect command.

    Args:
        args: Parsed command-line arguments.
        console: Rich console for table output (optional).

    Returns:
        int: Exit code (0 success, 1 usage or I/O error, 2 model error).
    """
    path = Path(args.file).expanduser()
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return EXIT_USAGE

    try:
        config = load_collector_config(getattr(args, "config", None))
    except (ValidationError, ValueError, OSError) as exc:
        logger.error("Invalid collector configuration: %s", exc)
        return EXIT_USAGE

    fmt = detect_format(path, getattr(args, "format", None))
    logger.info("Reading %s as %s", path, fmt)
    try:
        if fmt == "json":
            model = read_tree_document(data, config)
        else:
            model = read_build_script(data, config)
    except ConfigurationModelError as exc:
        logger.error("Failed to build configuration model for %s: %s", path, exc)
        return EXIT_MODEL_ERROR

    output = getattr(args, "output", None)
    if output:
        export_json(model, Path(output))
    elif getattr(args, "json", False):
        print(json.dumps(model_to_dict(model), indent=2, ensure_ascii=False))
    else:
        render_model(model, console or Console())
    return EXIT_OK


def render_model(model: ConfigurationModel, console: Console) -> None:
    """Print plugins, dependencies and publishing metadata as tables."""
    plugins = Table(title="Plugins")
    plugins.add_column("id")
    plugins.add_column("version")
    plugins.add_column("apply")
    for plugin in model.plugins():
        plugins.add_row(
            plugin.id,
            plugin.version.raw if plugin.version is not None else "-",
            "yes" if plugin.apply else "no",
        )

    dependencies = Table(title="Dependencies")
    dependencies.add_column("role")
    dependencies.add_column("keyword")
    dependencies.add_column("coordinate")
    for dep in model.dependencies():
        dependencies.add_row(dep.role.value, dep.keyword, dep.coordinate.notation)

    console.print(plugins)
    console.print(dependencies)
    console.print(
        f"publishing: group={model.publishing_group_id() or '-'} "
        f"version={model.publishing_version() or '-'}",
        markup=False,
    )
    if model.pass_through():
        names = ", ".join(block.name for block in model.pass_through())
        console.print(f"pass-through blocks: {names}", markup=False)
