# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve package-relative icon references against a package root."""

from __future__ import annotations

import os

from .model_command import CommandDeclaration, Icon, ThemableIcon


_SEPARATORS = os.sep + (os.altsep or "")


def join_icon_path(root: str, reference: str) -> str:
    """Return ``reference`` appended to ``root``.

    Drive letters and leading separators are dropped from ``reference`` so the
    result always stays under ``root``.
    """

    _, tail = os.path.splitdrive(reference)
    return os.path.join(root, tail.lstrip(_SEPARATORS))


def resolve_icon(icon: Icon | None, base_dir: str | os.PathLike[str]) -> Icon | None:
    """Join ``icon`` with ``base_dir`` using the platform path separator.

    No normalisation happens beyond the join and the files are not required
    to exist. Absolute icon references are re-rooted at ``base_dir``.

    Args:
        icon: Validated icon reference, or ``None`` when absent.
        base_dir: Root directory of the contributing package.

    Returns:
        Icon | None: Icon whose path(s) are anchored at ``base_dir``.

    Raises:
        TypeError: If ``icon`` is neither a string nor a :class:`ThemableIcon`.
    """

    if icon is None:
        return None
    root = os.fspath(base_dir)
    if isinstance(icon, str):
        return join_icon_path(root, icon)
    if isinstance(icon, ThemableIcon):
        return ThemableIcon(dark=join_icon_path(root, icon.dark), light=join_icon_path(root, icon.light))
    raise TypeError(f"unsupported icon reference {icon!r}")


def resolve_declaration_icons(declaration: CommandDeclaration, base_dir: str | os.PathLike[str]) -> CommandDeclaration:
    """Return ``declaration`` with its icon resolved against ``base_dir``."""

    if declaration.icon is None:
        return declaration
    return declaration.with_icon(resolve_icon(declaration.icon, base_dir))


__all__ = ["join_icon_path", "resolve_declaration_icons", "resolve_icon"]
