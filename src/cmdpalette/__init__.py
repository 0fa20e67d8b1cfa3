# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the command palette contribution runtime."""

from __future__ import annotations

from .actions import (
    ActivationService,
    CommandAction,
    CommandDispatcher,
    CommandInvocation,
    InvocationState,
    create_command_action,
)
from .bootstrap import LoadResult, load_catalog
from .catalog import CatalogPhase, CatalogSealedError, CommandCatalog
from .collector import ExtensionMessage, MessageBook, MessageCollector, PackageMessageCollector
from .extensions import ExtensionDescription, PackageContribution
from .loader import CommandContributionHandler, process

__all__ = [
    "ActivationService",
    "CatalogPhase",
    "CatalogSealedError",
    "CommandAction",
    "CommandCatalog",
    "CommandContributionHandler",
    "CommandDispatcher",
    "CommandInvocation",
    "ExtensionDescription",
    "ExtensionMessage",
    "InvocationState",
    "LoadResult",
    "MessageBook",
    "MessageCollector",
    "PackageContribution",
    "PackageMessageCollector",
    "create_command_action",
    "load_catalog",
    "process",
]
