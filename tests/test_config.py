"""Collector configuration schema and loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from depmodel.config import CollectorConfig, default_role_keywords, load_collector_config
from depmodel.model import DependencyRole


def test_defaults() -> None:
    config = CollectorConfig.default()

    assert config.role_for("minecraft") is DependencyRole.TOOL_PROVIDED
    assert config.role_for("modImplementation") is DependencyRole.COMPILE
    assert config.role_for("modRuntimeOnly") is DependencyRole.RUNTIME
    assert config.role_for("somethingElse") is DependencyRole.COMPILE
    assert config.require_version is False
    assert config.plugin_namespaces == {"kotlin": "org.jetbrains.kotlin."}


def test_from_dict_accepts_role_values() -> None:
    config = CollectorConfig.from_dict(
        {"role_keywords": {"bundle": "toolProvided"}, "default_role": "runtime"}
    )
    assert config.role_keywords == {"bundle": DependencyRole.TOOL_PROVIDED}
    assert config.default_role is DependencyRole.RUNTIME
    assert config.to_dict()["default_role"] == "runtime"


def test_invalid_role_is_rejected() -> None:
    with pytest.raises(ValidationError):
        CollectorConfig.from_dict({"role_keywords": {"bundle": "shaded"}})


def test_blank_keyword_is_rejected() -> None:
    with pytest.raises(ValidationError):
        CollectorConfig(role_keywords={" ": DependencyRole.COMPILE})


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ValidationError):
        CollectorConfig.from_dict({"max_depth": 3})


def test_loader_sources(tmp_path: Path) -> None:
    assert load_collector_config(None) == CollectorConfig.default()
    assert load_collector_config({"require_version": True}).require_version is True

    cfg_file = tmp_path / "collector.json5"
    cfg_file.write_text("{\n  // strict mode\n  require_version: true,\n}\n", encoding="utf-8")
    assert load_collector_config(cfg_file).require_version is True
    assert load_collector_config(str(cfg_file)).require_version is True

    inline = load_collector_config("{default_role: 'runtime'}")
    assert inline.default_role is DependencyRole.RUNTIME


def test_loader_rejects_non_mapping() -> None:
    with pytest.raises(ValueError):
        load_collector_config("[1, 2]")


def test_default_table_is_fresh_per_call() -> None:
    table = default_role_keywords()
    table["minecraft"] = DependencyRole.COMPILE
    assert default_role_keywords()["minecraft"] is DependencyRole.TOOL_PROVIDED
