# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cmdpalette.catalog import CommandCatalog
from cmdpalette.collector import MessageBook, PackageMessageCollector
from cmdpalette.loader import CommandContributionHandler

ManifestWriter = Callable[..., Path]


@pytest.fixture
def catalog() -> CommandCatalog:
    """Return a fresh catalog in the loading phase."""
    return CommandCatalog()


@pytest.fixture
def handler(catalog: CommandCatalog) -> CommandContributionHandler:
    return CommandContributionHandler(catalog)


@pytest.fixture
def book() -> MessageBook:
    return MessageBook()


@pytest.fixture
def collector(book: MessageBook) -> PackageMessageCollector:
    """Return the collector of a package named ``acme.tools``."""
    return book.collector_for("acme.tools")


@pytest.fixture
def write_manifest(tmp_path: Path) -> ManifestWriter:
    """Return a helper writing ``<tmp>/extensions/<folder>/package.json``."""

    def _write(folder: str, manifest: Any, *, raw: str | None = None) -> Path:
        root = tmp_path / "extensions" / folder
        root.mkdir(parents=True, exist_ok=True)
        path = root / "package.json"
        path.write_text(raw if raw is not None else json.dumps(manifest), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def extensions_dir(tmp_path: Path) -> Path:
    path = tmp_path / "extensions"
    path.mkdir(exist_ok=True)
    return path
