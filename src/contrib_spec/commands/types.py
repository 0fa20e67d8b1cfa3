# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for command contributions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

CONTRIBUTION_POINT: Final[str] = "commands"


class PlacementSite(str, Enum):
    """Enumerate the menus and tool bars a command may be placed in."""

    EDITOR_PRIMARY = "editor/primary"
    EDITOR_SECONDARY = "editor/secondary"
    EXPLORER_CONTEXT = "explorer/context"

    @classmethod
    def from_raw(cls, raw: object) -> PlacementSite | None:
        """Return the placement site matching ``raw`` or ``None``.

        Args:
            raw: Untrusted ``where`` value taken from a declaration.

        Returns:
            PlacementSite | None: Matching member when ``raw`` is one of the
            known placement tokens; otherwise ``None``.
        """

        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


PLACEMENT_SITES: Final[tuple[str, ...]] = tuple(site.value for site in PlacementSite)

__all__ = [
    "CONTRIBUTION_POINT",
    "PLACEMENT_SITES",
    "JSONPrimitive",
    "JSONValue",
    "PlacementSite",
]
