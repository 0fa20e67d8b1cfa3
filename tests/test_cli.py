# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ``cmdpalette`` command line interface."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cmdpalette.cli.app import app
from cmdpalette.runtime.console.manager import get_console_manager

ManifestWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def _fresh_consoles() -> Iterator[None]:
    get_console_manager().clear()
    yield
    get_console_manager().clear()


def _write_tools(write_manifest: ManifestWriter, commands: object) -> Path:
    return write_manifest("tools", {"publisher": "acme", "name": "tools", "contributes": {"commands": commands}})


def test_catalog_json_output(write_manifest: ManifestWriter, extensions_dir: Path) -> None:
    _write_tools(write_manifest, [{"command": "tools.run", "title": "Run", "category": "Acme"}])
    runner = CliRunner()

    result = runner.invoke(app, ["catalog", str(extensions_dir), "--json", "--no-entry-points"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"command": "tools.run", "title": "Run", "category": "Acme"}]


def test_catalog_reports_rejections(write_manifest: ManifestWriter, extensions_dir: Path) -> None:
    _write_tools(write_manifest, [{"command": "tools.run", "title": "Run"}, {"command": "tools.bad"}])
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["catalog", str(extensions_dir), "--no-entry-points", "--no-color", "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "Rejected contributions" in result.stdout
    assert "acme.tools: Invalid `contributes.commands`" in result.stdout
    assert "1 rejected" in result.stdout


def test_catalog_table_output(write_manifest: ManifestWriter, extensions_dir: Path) -> None:
    _write_tools(write_manifest, {"command": "tools.run", "title": "Run"})
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["catalog", str(extensions_dir), "--no-entry-points", "--no-color", "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "tools.run" in result.stdout
    assert "1 command(s) from 1 package(s)" in result.stdout


def test_catalog_invalid_config_exits_with_usage_error(tmp_path: Path) -> None:
    config = tmp_path / "cmdpalette.toml"
    config.write_text("[discovery]\nunknown = 1\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["catalog", "--config", str(config), "--no-emoji", "--no-color"])

    assert result.exit_code == 2


def test_schema_command_prints_schema() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["schema"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["title"] == "Command contribution"


def test_lint_accepts_clean_manifest(write_manifest: ManifestWriter) -> None:
    manifest = _write_tools(write_manifest, [{"command": "tools.run", "title": "Run"}])
    runner = CliRunner()

    result = runner.invoke(app, ["lint", str(manifest), "--no-emoji"])

    assert result.exit_code == 0
    assert "1 declaration(s) accepted" in result.stdout


def test_lint_reports_rejections_and_schema_hints(write_manifest: ManifestWriter) -> None:
    manifest = _write_tools(write_manifest, [{"command": "tools.run", "title": "Run", "icon": {"dark": "d.svg"}}])
    runner = CliRunner()

    result = runner.invoke(app, ["lint", str(manifest), "--no-emoji"])

    assert result.exit_code == 1
    assert "schema:" in result.stdout
    assert "commands[0]: Invalid `contributes.commands`" in result.stdout


def test_lint_without_commands_is_not_an_error(write_manifest: ManifestWriter) -> None:
    manifest = write_manifest("plain", {"name": "plain"})
    runner = CliRunner()

    result = runner.invoke(app, ["lint", str(manifest), "--no-emoji"])

    assert result.exit_code == 0
    assert "no `contributes.commands` declared" in result.stdout


def test_lint_unreadable_manifest(write_manifest: ManifestWriter) -> None:
    manifest = write_manifest("broken", None, raw="{")
    runner = CliRunner()

    result = runner.invoke(app, ["lint", str(manifest), "--no-emoji"])

    assert result.exit_code == 2
