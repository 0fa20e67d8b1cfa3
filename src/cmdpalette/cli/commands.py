# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command implementations for the ``cmdpalette`` CLI."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import typer

from contrib_spec.commands import (
    CONTRIBUTION_POINT,
    ContributionDocumentError,
    ContributionError,
    RejectedDeclaration,
    decode_declaration,
)
from contrib_spec.commands.io import expect_object, load_document
from contrib_spec.commands.schema import command_contribution_schema, default_schema_repository
from contrib_spec.commands.utils import is_json_array

from ..bootstrap import load_catalog
from ..config import ConfigError, PaletteConfig, load_config
from ..loader import format_rejection
from ..logging import configure_logging, fail, info, ok, section, warn
from ..manifests import CONTRIBUTES_KEY
from ..runtime.console.manager import get_console_manager
from .rendering import build_catalog_table

EXIT_REJECTED = 1
EXIT_USAGE = 2


def _resolve_config(
    config_path: Path | None,
    *,
    extensions_dir: Path | None,
    entry_points: bool | None,
    color: bool | None,
    emoji: bool | None,
    verbose: bool,
) -> PaletteConfig:
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=EXIT_USAGE) from exc
    if extensions_dir is not None:
        config.discovery.extensions_dir = extensions_dir
    if entry_points is not None:
        config.discovery.include_entry_points = entry_points
    if color is not None:
        config.output.color = color
    if emoji is not None:
        config.output.emoji = emoji
    if verbose:
        config.output.verbose = True
    return config


def catalog_command(
    extensions_dir: Path | None = typer.Argument(None, help="Directory holding one folder per extension."),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="TOML configuration file."),
    entry_points: bool | None = typer.Option(
        None,
        "--entry-points/--no-entry-points",
        help="Include contributions advertised by installed entry points.",
    ),
    output_json: bool = typer.Option(False, "--json", help="Print the sealed catalog as JSON."),
    color: bool | None = typer.Option(None, "--color/--no-color", help="Toggle ANSI colour output."),
    emoji: bool | None = typer.Option(None, "--emoji/--no-emoji", help="Toggle emoji output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every accepted declaration."),
) -> None:
    """Load every contribution, seal the catalog and print it."""

    config = _resolve_config(
        config_path,
        extensions_dir=extensions_dir,
        entry_points=entry_points,
        color=color,
        emoji=emoji,
        verbose=verbose,
    )
    output = config.output
    configure_logging(verbose=output.verbose)
    try:
        result = load_catalog(config.discovery)
    except ContributionError as exc:
        fail(str(exc), use_emoji=output.emoji, use_color=output.color)
        raise typer.Exit(code=EXIT_USAGE) from exc

    if output_json:
        typer.echo(json.dumps([entry.to_dict() for entry in result.catalog], indent=2))
    else:
        console = get_console_manager().get(color=output.color, emoji=output.emoji)
        console.print(build_catalog_table(result.catalog))

    errors = result.book.errors()
    if errors and output.show_rejected and not output_json:
        section("Rejected contributions", use_color=output.color)
        for message in errors:
            fail(f"{message.package}: {message.message}", use_emoji=output.emoji, use_color=output.color)
    if not output_json:
        summary = f"{len(result.catalog)} command(s) from {len(result.contributions)} package(s)"
        if errors:
            warn(f"{summary}; {len(errors)} rejected", use_emoji=output.emoji, use_color=output.color)
        else:
            ok(summary, use_emoji=output.emoji, use_color=output.color)
    raise typer.Exit(code=EXIT_REJECTED if errors else 0)


def schema_command() -> None:
    """Print the authoring-time JSON schema for command contributions."""

    typer.echo(json.dumps(command_contribution_schema(), indent=2))


def lint_command(
    manifest: Path = typer.Argument(..., help="Extension manifest to check."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji output."),
) -> None:
    """Report schema hints and runtime rejections for one manifest."""

    try:
        document = expect_object(load_document(manifest), context=str(manifest))
    except (ContributionDocumentError, FileNotFoundError) as exc:
        fail(f"{manifest}: {exc}", use_emoji=emoji)
        raise typer.Exit(code=EXIT_USAGE) from exc
    contributes = document.get(CONTRIBUTES_KEY)
    if not isinstance(contributes, Mapping) or CONTRIBUTION_POINT not in contributes:
        warn(f"{manifest}: no `contributes.{CONTRIBUTION_POINT}` declared", use_emoji=emoji)
        raise typer.Exit(code=0)
    value = contributes[CONTRIBUTION_POINT]
    info(f"checking `contributes.{CONTRIBUTION_POINT}` in {manifest}", use_emoji=emoji)

    for hint in default_schema_repository().authoring_hints(value):
        warn(f"schema: {hint}", use_emoji=emoji)

    candidates = value if is_json_array(value) else (value,)
    rejected = 0
    for index, candidate in enumerate(candidates):
        decoded = decode_declaration(candidate, context=f"commands[{index}]")
        if isinstance(decoded, RejectedDeclaration):
            rejected += 1
            fail(f"commands[{index}]: {format_rejection(decoded.reasons)}", use_emoji=emoji)
    if rejected:
        raise typer.Exit(code=EXIT_REJECTED)
    ok(f"{len(candidates)} declaration(s) accepted", use_emoji=emoji)


def register_commands(app: typer.Typer) -> None:
    """Register every CLI command on ``app``.

    Args:
        app: Typer application receiving the commands.
    """

    app.command(name="catalog")(catalog_command)
    app.command(name="schema")(schema_command)
    app.command(name="lint")(lint_command)


__all__ = ["catalog_command", "lint_command", "register_commands", "schema_command"]
