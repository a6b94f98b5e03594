"""Tests for depmodel CLI entrypoints."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

import depmodel.main as main

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "build.gradle.kts"


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["depmodel", *argv])
    return main.main()


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure missing subcommands make the CLI print help and fail."""
    exit_code = _run(monkeypatch)

    assert exit_code == 1
    assert "Depmodel" in capsys.readouterr().out


def test_inspect_prints_json(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = _run(monkeypatch, "inspect", str(FIXTURE), "--json")

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["role"] for d in data["dependencies"]] == [
        "toolProvided",
        "toolProvided",
        "compile",
        "compile",
    ]
    assert data["publishing"]["group_id"] == "com.example"


def test_inspect_renders_tables(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = _run(monkeypatch, "inspect", str(FIXTURE))

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Dependencies" in out
    assert "publishing: group=com.example version=0.0.1" in out


def test_inspect_writes_output_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    output = tmp_path / "model.json"
    exit_code = _run(monkeypatch, "inspect", str(FIXTURE), "-o", str(output))

    assert exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["plugins"]


def test_inspect_document_with_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    document = tmp_path / "tree.json"
    document.write_text(json.dumps({"dependencies": {"implementation": "org.example:lib"}}), encoding="utf-8")

    assert _run(monkeypatch, "inspect", str(document), "--json") == 0
    assert (
        _run(monkeypatch, "inspect", str(document), "-c", "{require_version: true}")
        == 2
    )


def test_inspect_missing_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert _run(monkeypatch, "inspect", str(tmp_path / "absent.gradle.kts")) == 1


def test_inspect_bad_config(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "inspect", str(FIXTURE), "-c", "{unknown_option: 1}") == 1
