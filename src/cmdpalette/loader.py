# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Normalise raw command contributions into the shared catalog."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from contrib_spec.commands import (
    CONTRIBUTION_POINT,
    RejectedDeclaration,
    decode_declaration,
    resolve_declaration_icons,
)
from contrib_spec.commands.types import JSONValue
from contrib_spec.commands.utils import is_json_array

from .catalog import CommandCatalog
from .collector import MessageBook, MessageCollector
from .extensions import PackageContribution

LOGGER = logging.getLogger(__name__)

REJECTION_PREFIX: Final[str] = f"Invalid `contributes.{CONTRIBUTION_POINT}`: "


def format_rejection(reasons: Iterable[str]) -> str:
    """Return the combined diagnostic reported for one rejected declaration."""

    return REJECTION_PREFIX + "\n".join(reasons)


@dataclass(slots=True)
class CommandContributionHandler:
    """Validate, normalise and register contributions owned by ``catalog``."""

    catalog: CommandCatalog

    def process(
        self,
        raw_value: JSONValue,
        collector: MessageCollector,
        base_dir: str | os.PathLike[str],
    ) -> int:
        """Process the raw value contributed by one package.

        A list is handled element by element in order; any other value is
        treated as a single declaration. Rejected declarations are reported
        through ``collector`` and dropped.

        Args:
            raw_value: One declaration or an ordered list of declarations.
            collector: Diagnostic sink of the contributing package.
            base_dir: Resource root of the contributing package.

        Returns:
            int: Number of declarations appended to the catalog.

        Raises:
            CatalogSealedError: If the catalog was already sealed.
        """

        self.catalog.ensure_loading()
        candidates = raw_value if is_json_array(raw_value) else (raw_value,)
        accepted = 0
        for index, candidate in enumerate(candidates):
            if self._handle_declaration(candidate, collector, base_dir, context=f"commands[{index}]"):
                accepted += 1
        return accepted

    def handle_contributions(
        self,
        contributions: Iterable[PackageContribution],
        book: MessageBook,
    ) -> CommandCatalog:
        """Process every package contribution and seal the catalog.

        Args:
            contributions: Contributions from all packages, in load order.
            book: Message store providing one collector per package.

        Returns:
            CommandCatalog: The sealed catalog.
        """

        for contribution in contributions:
            collector = book.collector_for(contribution.identifier)
            accepted = self.process(contribution.value, collector, contribution.description.root)
            LOGGER.debug("%s contributed %d command(s)", contribution.identifier, accepted)
        self.catalog.seal()
        return self.catalog

    def _handle_declaration(
        self,
        candidate: JSONValue,
        collector: MessageCollector,
        base_dir: str | os.PathLike[str],
        *,
        context: str,
    ) -> bool:
        decoded = decode_declaration(candidate, context=context)
        if isinstance(decoded, RejectedDeclaration):
            if decoded.reasons:
                collector.error(format_rejection(decoded.reasons))
            return False
        self.catalog.append(resolve_declaration_icons(decoded.declaration, base_dir))
        return True


def process(
    raw_value: JSONValue,
    collector: MessageCollector,
    base_dir: str | os.PathLike[str],
    *,
    catalog: CommandCatalog,
) -> int:
    """Process ``raw_value`` into ``catalog``; see :meth:`CommandContributionHandler.process`."""

    return CommandContributionHandler(catalog).process(raw_value, collector, base_dir)


__all__ = [
    "REJECTION_PREFIX",
    "CommandContributionHandler",
    "format_rejection",
    "process",
]
