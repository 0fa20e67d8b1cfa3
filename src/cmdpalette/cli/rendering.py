# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for catalog CLI output."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.table import Table

from contrib_spec.commands import CommandDeclaration, ThemableIcon


def describe_icon(declaration: CommandDeclaration) -> str:
    """Return a one-line description of the declaration icon."""

    icon = declaration.icon
    if icon is None:
        return "-"
    if isinstance(icon, ThemableIcon):
        return f"dark: {icon.dark}\nlight: {icon.light}"
    return icon


def describe_placements(declaration: CommandDeclaration) -> str:
    return ", ".join(context.where.value for context in declaration.contexts) or "palette"


def build_catalog_table(entries: Iterable[CommandDeclaration]) -> Table:
    """Return a rich table listing accepted declarations.

    Args:
        entries: Declarations read from the sealed catalog.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title="Command catalog", box=box.SIMPLE, expand=True)
    table.add_column("Command", style="bold")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Icon", overflow="fold")
    table.add_column("Placements")
    for entry in entries:
        table.add_row(
            entry.command,
            entry.title,
            entry.category or "-",
            describe_icon(entry),
            describe_placements(entry),
        )
    return table


__all__ = ["build_catalog_table", "describe_icon", "describe_placements"]
