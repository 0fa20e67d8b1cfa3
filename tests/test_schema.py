# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the authoring-time contribution schema."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from contrib_spec.commands import PLACEMENT_SITES, ContributionDocumentError
from contrib_spec.commands.schema import (
    DEFAULT_SCHEMA_PATH,
    SchemaRepository,
    command_contribution_schema,
    default_schema_repository,
)


def test_bundled_schema_is_loadable() -> None:
    repository = default_schema_repository()
    assert repository.schema_path == DEFAULT_SCHEMA_PATH
    assert repository.schema["$schema"].endswith("2020-12/schema")


def test_schema_lists_every_placement_site() -> None:
    schema = command_contribution_schema()
    where = schema["$defs"]["context"]["properties"]["where"]
    assert tuple(where["enum"]) == PLACEMENT_SITES


def test_well_formed_contribution_has_no_hints() -> None:
    value = [
        {"command": "acme.run", "title": "Run", "icon": {"dark": "d.svg", "light": "l.svg"}},
        {"command": "acme.open", "title": "Open", "context": {"where": "explorer/context", "when": "python"}},
    ]
    assert default_schema_repository().authoring_hints(value) == ()


def test_incomplete_theme_icon_produces_a_hint() -> None:
    hints = default_schema_repository().authoring_hints({"command": "acme.run", "title": "Run", "icon": {"dark": "d"}})
    assert hints
    assert all(":" in hint for hint in hints)


def test_root_level_hint_uses_placeholder_location() -> None:
    hints = default_schema_repository().authoring_hints("acme.run")
    assert hints[0].startswith("<root>: ")


def test_load_rejects_non_object_schema(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(["not", "a", "schema"]), encoding="utf-8")
    with pytest.raises(ContributionDocumentError):
        SchemaRepository.load(schema_path=path)


def test_command_contribution_schema_returns_a_copy() -> None:
    schema = command_contribution_schema()
    schema["title"] = "changed"
    assert command_contribution_schema()["title"] == "Command contribution"
