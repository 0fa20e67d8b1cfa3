# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Decode untrusted declaration payloads into accepted or rejected results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias, cast

from .errors import ContributionError
from .model_command import CommandDeclaration
from .types import JSONValue
from .validation import validate_declaration


@dataclass(frozen=True, slots=True)
class ValidDeclaration:
    """Declaration that passed every shape rule."""

    declaration: CommandDeclaration


@dataclass(frozen=True, slots=True)
class RejectedDeclaration:
    """Declaration dropped by shape validation, with its reasons in detection order."""

    reasons: tuple[str, ...]

    def describe(self) -> str:
        """Return the reasons joined into a single multi-line message."""

        return "\n".join(self.reasons)


DecodedDeclaration: TypeAlias = ValidDeclaration | RejectedDeclaration


def decode_declaration(candidate: object, *, context: str = "<declaration>") -> DecodedDeclaration:
    """Decode ``candidate`` into a :class:`ValidDeclaration` or :class:`RejectedDeclaration`.

    Static types are never trusted across this boundary: the model is only
    built from payloads that passed :func:`validate_declaration`.

    Args:
        candidate: Untrusted declaration value.
        context: Human-readable location used in conversion messages.

    Returns:
        DecodedDeclaration: Tagged result describing the outcome.
    """

    ok, rejects = validate_declaration(candidate)
    if not ok:
        return RejectedDeclaration(reasons=rejects)
    try:
        declaration = CommandDeclaration.from_mapping(
            cast(Mapping[str, JSONValue], candidate),
            context=context,
        )
    except ContributionError as exc:
        return RejectedDeclaration(reasons=(str(exc),))
    return ValidDeclaration(declaration=declaration)


__all__ = [
    "DecodedDeclaration",
    "RejectedDeclaration",
    "ValidDeclaration",
    "decode_declaration",
]
