# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Standalone re-exports for the command contribution specification package."""

from __future__ import annotations

from .commands import (
    CommandDeclaration,
    ContributionError,
    RejectedDeclaration,
    ValidDeclaration,
    decode_declaration,
    validate_declaration,
)

__all__ = [
    "CommandDeclaration",
    "ContributionError",
    "RejectedDeclaration",
    "ValidDeclaration",
    "decode_declaration",
    "validate_declaration",
]
