# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for normalising raw contributions into the catalog."""

from __future__ import annotations

import logging
import os

import pytest

from cmdpalette.catalog import CatalogSealedError, CommandCatalog
from cmdpalette.collector import MessageBook, MessageSeverity, PackageMessageCollector
from cmdpalette.extensions import ExtensionDescription, PackageContribution
from cmdpalette.loader import REJECTION_PREFIX, CommandContributionHandler, format_rejection, process
from contrib_spec.commands import ThemableIcon
from contrib_spec.commands.validation import NON_EMPTY_MESSAGE, REQUIRE_STRING_MESSAGE


class _RecordingCollector:
    def __init__(self) -> None:
        self.errors: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warn(self, message: str) -> None:  # pragma: no cover - unused by the loader
        raise AssertionError(message)

    def info(self, message: str) -> None:  # pragma: no cover - unused by the loader
        raise AssertionError(message)


def test_single_declaration_is_normalised_and_appended(
    handler: CommandContributionHandler,
    catalog: CommandCatalog,
) -> None:
    sink = _RecordingCollector()
    accepted = handler.process({"command": "acme.run", "title": "Run", "icon": "icons/run.svg"}, sink, "/ext/foo")
    assert accepted == 1
    assert sink.errors == []
    assert catalog.entries[0].icon == os.path.join("/ext/foo", "icons/run.svg")


def test_array_with_invalid_middle_entry(handler: CommandContributionHandler, catalog: CommandCatalog) -> None:
    sink = _RecordingCollector()
    raw = [
        {"command": "acme.first", "title": "First"},
        {"command": "acme.broken"},
        {"command": "acme.third", "title": "Third"},
    ]
    assert handler.process(raw, sink, "/ext/foo") == 2
    assert [entry.command for entry in catalog] == ["acme.first", "acme.third"]
    assert sink.errors == [REJECTION_PREFIX + REQUIRE_STRING_MESSAGE.format("title")]


def test_rejection_message_is_combined_and_prefixed() -> None:
    assert format_rejection(["one", "two"]) == "Invalid `contributes.commands`: one\ntwo"


def test_rejected_declarations_never_reach_the_catalog(
    handler: CommandContributionHandler,
    catalog: CommandCatalog,
) -> None:
    sink = _RecordingCollector()
    handler.process([None, {"title": "No command"}, {"command": "x", "title": "X", "icon": {"dark": "d"}}], sink, "/")
    assert len(catalog) == 0
    assert len(sink.errors) == 3
    assert sink.errors[0] == REJECTION_PREFIX + NON_EMPTY_MESSAGE


def test_themable_icon_is_resolved_on_success(handler: CommandContributionHandler, catalog: CommandCatalog) -> None:
    handler.process(
        {"command": "acme.run", "title": "Run", "icon": {"dark": "d.svg", "light": "l.svg"}},
        _RecordingCollector(),
        "/ext/foo",
    )
    assert catalog.entries[0].icon == ThemableIcon(
        dark=os.path.join("/ext/foo", "d.svg"),
        light=os.path.join("/ext/foo", "l.svg"),
    )


def test_process_after_seal_leaves_catalog_unchanged(
    handler: CommandContributionHandler,
    catalog: CommandCatalog,
) -> None:
    sink = _RecordingCollector()
    handler.process({"command": "acme.run", "title": "Run"}, sink, "/ext/foo")
    catalog.seal()
    before = catalog.entries
    with pytest.raises(CatalogSealedError):
        handler.process({"command": "acme.late", "title": "Late"}, sink, "/ext/foo")
    with pytest.raises(CatalogSealedError):
        handler.process({"title": "bad"}, sink, "/ext/foo")
    assert catalog.entries == before
    assert sink.errors == []


def test_module_level_process_uses_given_catalog(catalog: CommandCatalog) -> None:
    assert process([{"command": "a", "title": "A"}], _RecordingCollector(), "/ext", catalog=catalog) == 1
    assert catalog.find("a") is not None


def test_handle_contributions_tags_diagnostics_and_seals(
    handler: CommandContributionHandler,
    catalog: CommandCatalog,
    book: MessageBook,
    caplog: pytest.LogCaptureFixture,
) -> None:
    contributions = [
        PackageContribution(
            description=ExtensionDescription(identifier="acme.one", root="/ext/one"),
            value={"command": "one.run", "title": "One", "icon": "one.svg"},
        ),
        PackageContribution(
            description=ExtensionDescription(identifier="acme.two", root="/ext/two"),
            value=[{"command": "two.run", "title": "Two"}, {"command": 2}],
        ),
    ]
    with caplog.at_level(logging.WARNING, logger="cmdpalette.collector"):
        sealed = handler.handle_contributions(contributions, book)

    assert sealed is catalog
    assert catalog.is_sealed
    assert [entry.command for entry in catalog] == ["one.run", "two.run"]
    assert catalog.entries[0].icon == os.path.join("/ext/one", "one.svg")
    errors = book.errors()
    assert len(errors) == 1
    assert errors[0].package == "acme.two"
    assert errors[0].severity is MessageSeverity.ERROR
    assert errors[0].message == REJECTION_PREFIX + REQUIRE_STRING_MESSAGE.format("command")
    assert "acme.two" in caplog.text


def test_package_collector_records_all_severities(collector: PackageMessageCollector, book: MessageBook) -> None:
    collector.error("broken")
    collector.warn("odd")
    collector.info("fyi")
    assert [item.severity for item in book.for_package("acme.tools")] == [
        MessageSeverity.ERROR,
        MessageSeverity.WARNING,
        MessageSeverity.INFO,
    ]
    assert [item.message for item in book.errors()] == ["broken"]
