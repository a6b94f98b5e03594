"""JSON export and tree document reader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depmodel.api import read_tree_document
from depmodel.errors import ScriptSyntaxError, UnknownDeclarationShape
from depmodel.export.json import export_json, model_to_dict

DOCUMENT = b"""
{
  // loom fixture as a tree document
  plugins: {id: "dev.architectury.loom"},
  group: "com.example",
  version: "0.0.1",
  dependencies: {
    minecraft: {group: "com.mojang", name: "minecraft", version: "1.16.5"},
    modImplementation: ["net.fabricmc:fabric-loader:0.12.12"],
  },
  loom: {silentMojangMappingsLicense: true},
}
"""


def test_document_builds_model() -> None:
    model = read_tree_document(DOCUMENT)

    assert [d.coordinate.notation for d in model.dependencies()] == [
        "com.mojang:minecraft:1.16.5",
        "net.fabricmc:fabric-loader:0.12.12",
    ]
    assert model.publishing_group_id() == "com.example"


def test_document_errors() -> None:
    with pytest.raises(ScriptSyntaxError):
        read_tree_document(b"{plugins: ")
    with pytest.raises(UnknownDeclarationShape):
        read_tree_document(b"[1, 2]")


def test_model_to_dict_shape() -> None:
    data = model_to_dict(read_tree_document(DOCUMENT))

    assert data["plugins"] == [{"id": "dev.architectury.loom", "version": None, "apply": True}]
    minecraft = data["dependencies"][0]
    assert minecraft["role"] == "toolProvided"
    assert minecraft["keyword"] == "minecraft"
    assert minecraft["coordinate"]["version"] == {
        "raw": "1.16.5",
        "kind": "semantic",
        "major": 1,
        "minor": 16,
        "patch": 5,
        "prerelease": None,
        "build": None,
    }
    assert data["publishing"] == {"group_id": "com.example", "version": "0.0.1", "publications": []}
    assert {"name": "loom", "value": {"silentMojangMappingsLicense": True}} in data["pass_through"]


def test_export_json_writes_file(tmp_path: Path) -> None:
    output = tmp_path / "out" / "model.json"
    export_json(read_tree_document(DOCUMENT), output)

    written = json.loads(output.read_text(encoding="utf-8"))
    assert len(written["dependencies"]) == 2
