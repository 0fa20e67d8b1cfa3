# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading contribution manifests and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import ContributionDocumentError
from .types import JSONValue


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        ContributionDocumentError: If the document cannot be decoded or parsed.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ContributionDocumentError(f"{path}: failed to parse JSON document") from exc


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        ContributionDocumentError: If the schema cannot be parsed or is not a JSON object.
    """
    payload = load_document(path)
    if not isinstance(payload, Mapping):
        raise ContributionDocumentError(f"{path}: expected a JSON object")
    return payload


def expect_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a JSON object or raise a document error."""

    if not isinstance(value, Mapping):
        raise ContributionDocumentError(f"{context}: expected a JSON object")
    return value


__all__ = ["expect_object", "load_document", "load_schema"]
