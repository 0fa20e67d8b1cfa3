# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the command contribution specification."""

from __future__ import annotations

from typing import Final

from .decoding import DecodedDeclaration, RejectedDeclaration, ValidDeclaration, decode_declaration
from .errors import ContributionDocumentError, ContributionError
from .icons import resolve_declaration_icons, resolve_icon
from .model_command import CommandDeclaration, Context, ResourceFilter, ThemableIcon
from .types import CONTRIBUTION_POINT, PLACEMENT_SITES, PlacementSite
from .validation import validate_declaration

__all__: Final[tuple[str, ...]] = (
    "CONTRIBUTION_POINT",
    "PLACEMENT_SITES",
    "CommandDeclaration",
    "Context",
    "ContributionDocumentError",
    "ContributionError",
    "DecodedDeclaration",
    "PlacementSite",
    "RejectedDeclaration",
    "ResourceFilter",
    "ThemableIcon",
    "ValidDeclaration",
    "decode_declaration",
    "resolve_declaration_icons",
    "resolve_icon",
    "validate_declaration",
)
