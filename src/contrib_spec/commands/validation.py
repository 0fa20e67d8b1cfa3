# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Field-specific shape rules for untrusted command declarations.

Every predicate appends human-readable rejection messages to ``rejects`` and
returns ``False`` on the first rule that fails. Optional members are treated
as absent when missing or ``null``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from .types import PLACEMENT_SITES, PlacementSite
from .utils import is_json_array

NON_EMPTY_MESSAGE: Final[str] = "expected non-empty value."
REQUIRE_STRING_MESSAGE: Final[str] = "property `{0}` is mandatory and must be of type `string`"
OPTIONAL_STRING_MESSAGE: Final[str] = "property `{0}` can be omitted or must be of type `string`"
OPTIONAL_ICON_MESSAGE: Final[str] = (
    "property `icon` can be omitted or must be either a string or a literal like `{dark, light}`"
)
REQUIRE_FILTER_MESSAGE: Final[str] = "property `when` is mandatory and must be like `{language, scheme, pattern}`"


def _placement_message() -> str:
    quoted = [f"`{site}`" for site in PLACEMENT_SITES]
    return f"property `where` is mandatory and must be one of {', '.join(quoted[:-1])}, or {quoted[-1]}"


REQUIRE_PLACEMENT_MESSAGE: Final[str] = _placement_message()


def is_themable_icon(value: object) -> bool:
    """Return ``True`` when ``value`` exposes string ``dark`` and ``light`` members.

    Args:
        value: Untrusted ``icon`` value.

    Returns:
        bool: ``True`` for ``{dark, light}`` literals with string members.
    """

    return (
        isinstance(value, Mapping)
        and isinstance(value.get("dark"), str)
        and isinstance(value.get("light"), str)
    )


def is_valid_icon(icon: object, rejects: list[str]) -> bool:
    """Validate an optional ``icon`` member.

    Args:
        icon: Untrusted ``icon`` value, ``None`` when absent.
        rejects: Accumulator receiving rejection messages.

    Returns:
        bool: ``True`` when the icon is absent, a string, or a themable icon.
    """

    if icon is None or isinstance(icon, str) or is_themable_icon(icon):
        return True
    rejects.append(OPTIONAL_ICON_MESSAGE)
    return False


def is_valid_context(context: object, rejects: list[str]) -> bool:
    """Validate a single placement context.

    ``where`` is checked before ``when``; a context that is not a mapping
    has no ``where`` and fails that rule.

    Args:
        context: Untrusted context value.
        rejects: Accumulator receiving rejection messages.

    Returns:
        bool: ``True`` when both ``where`` and ``when`` are acceptable.
    """

    where = context.get("where") if isinstance(context, Mapping) else None
    if PlacementSite.from_raw(where) is None:
        rejects.append(REQUIRE_PLACEMENT_MESSAGE)
        return False
    when = context.get("when") if isinstance(context, Mapping) else None
    if not (isinstance(when, (Mapping, str)) or is_json_array(when)):
        rejects.append(REQUIRE_FILTER_MESSAGE)
        return False
    return True


def is_valid_command(candidate: object, rejects: list[str]) -> bool:
    """Validate a candidate command declaration.

    Args:
        candidate: Untrusted declaration value.
        rejects: Accumulator receiving rejection messages in detection order.

    Returns:
        bool: ``True`` when every rule passes.
    """

    if not isinstance(candidate, Mapping):
        rejects.append(NON_EMPTY_MESSAGE)
        return False
    if not isinstance(candidate.get("command"), str):
        rejects.append(REQUIRE_STRING_MESSAGE.format("command"))
        return False
    if not isinstance(candidate.get("title"), str):
        rejects.append(REQUIRE_STRING_MESSAGE.format("title"))
        return False
    category = candidate.get("category")
    if category is not None and not isinstance(category, str):
        rejects.append(OPTIONAL_STRING_MESSAGE.format("category"))
        return False
    if not is_valid_icon(candidate.get("icon"), rejects):
        return False
    context = candidate.get("context")
    if context is None:
        return True
    if is_json_array(context):
        return all(is_valid_context(item, rejects) for item in context)
    return is_valid_context(context, rejects)


def validate_declaration(candidate: object) -> tuple[bool, tuple[str, ...]]:
    """Check ``candidate`` against the declaration shape rules.

    Args:
        candidate: Untrusted declaration value.

    Returns:
        tuple[bool, tuple[str, ...]]: Success flag plus the ordered, possibly
        empty, rejection messages.
    """

    rejects: list[str] = []
    ok = is_valid_command(candidate, rejects)
    return ok, tuple(rejects)


__all__ = [
    "NON_EMPTY_MESSAGE",
    "OPTIONAL_ICON_MESSAGE",
    "OPTIONAL_STRING_MESSAGE",
    "REQUIRE_FILTER_MESSAGE",
    "REQUIRE_PLACEMENT_MESSAGE",
    "REQUIRE_STRING_MESSAGE",
    "is_themable_icon",
    "is_valid_command",
    "is_valid_context",
    "is_valid_icon",
    "validate_declaration",
]
