# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by command contribution operations."""

from __future__ import annotations


class ContributionError(RuntimeError):
    """Base class for failures raised while handling command contributions."""


class ContributionDocumentError(ContributionError):
    """Raised when a manifest or schema document cannot be read or parsed."""

    def __init__(self, message: str | None = None) -> None:
        """Create the document error with an optional ``message``."""

        super().__init__(message or "contribution document could not be loaded")


__all__ = ("ContributionDocumentError", "ContributionError")
