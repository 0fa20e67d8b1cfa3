# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-package diagnostic sinks for contribution problems."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)


class MessageSeverity(str, Enum):
    """Enumerate severities a collector can record."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_LOG_LEVELS = {
    MessageSeverity.ERROR: logging.WARNING,
    MessageSeverity.WARNING: logging.WARNING,
    MessageSeverity.INFO: logging.INFO,
}


@runtime_checkable
class MessageCollector(Protocol):
    """Sink receiving formatted diagnostics for a single contributing package."""

    def error(self, message: str) -> None:
        """Record an error ``message``."""

    def warn(self, message: str) -> None:
        """Record a warning ``message``."""

    def info(self, message: str) -> None:
        """Record an informational ``message``."""


@dataclass(frozen=True, slots=True)
class ExtensionMessage:
    """Diagnostic tagged with the package that caused it."""

    severity: MessageSeverity
    package: str
    message: str


@dataclass(slots=True)
class MessageBook:
    """Ordered store of diagnostics shared by every package collector."""

    messages: list[ExtensionMessage] = field(default_factory=list)

    def collector_for(self, package: str) -> PackageMessageCollector:
        """Return a collector that tags diagnostics with ``package``."""

        return PackageMessageCollector(package=package, book=self)

    def errors(self) -> tuple[ExtensionMessage, ...]:
        return tuple(item for item in self.messages if item.severity is MessageSeverity.ERROR)

    def for_package(self, package: str) -> tuple[ExtensionMessage, ...]:
        return tuple(item for item in self.messages if item.package == package)


@dataclass(slots=True)
class PackageMessageCollector(MessageCollector):
    """Collector bound to one contributing package."""

    package: str
    book: MessageBook

    def error(self, message: str) -> None:
        self._record(MessageSeverity.ERROR, message)

    def warn(self, message: str) -> None:
        self._record(MessageSeverity.WARNING, message)

    def info(self, message: str) -> None:
        self._record(MessageSeverity.INFO, message)

    def _record(self, severity: MessageSeverity, message: str) -> None:
        self.book.messages.append(ExtensionMessage(severity=severity, package=self.package, message=message))
        LOGGER.log(_LOG_LEVELS[severity], "[%s] %s", self.package, message)


__all__ = [
    "ExtensionMessage",
    "MessageBook",
    "MessageCollector",
    "MessageSeverity",
    "PackageMessageCollector",
]
