# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for inspecting and freezing untrusted JSON structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .errors import ContributionError
from .types import JSONValue


def is_json_array(value: object) -> bool:
    """Return ``True`` when ``value`` is a JSON array.

    Strings and byte strings are sequences in Python but never arrays in
    JSON, so they are excluded.

    Args:
        value: Untrusted value extracted from a declaration.

    Returns:
        bool: ``True`` when ``value`` is a non-string sequence.
    """

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def string_or_none(value: object) -> str | None:
    """Return ``value`` when it is a string, otherwise ``None``."""

    return value if isinstance(value, str) else None


def freeze_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Return a recursively frozen view of ``value``.

    Args:
        value: JSON value to normalise.
        context: Human-friendly prefix describing the value location.

    Returns:
        JSONValue: Frozen JSON value (mappings become mapping proxies, sequences tuples).

    Raises:
        ContributionError: If ``value`` is not JSON compatible.
    """

    if isinstance(value, Mapping):
        frozen: dict[str, JSONValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ContributionError(f"{context}: expected keys to be strings")
            frozen[key] = freeze_json_value(item, context=f"{context}.{key}")
        return MappingProxyType(frozen)
    if is_json_array(value):
        return tuple(freeze_json_value(item, context=f"{context}[]") for item in value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    raise ContributionError(f"{context}: unsupported JSON value type {type(value).__name__}")


def thaw_json_value(value: JSONValue) -> JSONValue:
    """Return a plain JSON-compatible representation of ``value``.

    Args:
        value: Frozen JSON value that may contain mapping proxies or tuples.

    Returns:
        JSONValue: JSON-compatible value composed of built-in ``dict`` and
        ``list`` containers.
    """

    if isinstance(value, Mapping):
        return {str(key): thaw_json_value(item) for key, item in value.items()}
    if isinstance(value, (tuple, list)):
        return [thaw_json_value(item) for item in value]
    return value


__all__ = [
    "freeze_json_value",
    "is_json_array",
    "string_or_none",
    "thaw_json_value",
]
