# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run the load phase end to end and hand back the sealed catalog."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .catalog import CommandCatalog
from .collector import MessageBook
from .config import DiscoveryConfig
from .extensions import PackageContribution
from .loader import CommandContributionHandler
from .manifests import ManifestScanner
from .plugins import ContributionPluginFactory, collect_plugin_contributions


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Sealed catalog together with the diagnostics gathered while loading."""

    catalog: CommandCatalog
    book: MessageBook
    contributions: tuple[PackageContribution, ...]

    @property
    def rejected(self) -> bool:
        """Return ``True`` when any package reported an error."""

        return bool(self.book.errors())


def gather_contributions(
    discovery: DiscoveryConfig,
    book: MessageBook,
    *,
    plugin_factories: Sequence[ContributionPluginFactory] | None = None,
) -> tuple[PackageContribution, ...]:
    """Collect contributions from manifests and, when enabled, entry points.

    Args:
        discovery: Discovery settings.
        book: Message store receiving manifest read and plugin failures.
        plugin_factories: Optional override for entry-point factories.

    Returns:
        tuple[PackageContribution, ...]: Manifest contributions followed by plugin contributions.
    """

    scanner = ManifestScanner(
        extensions_dir=discovery.extensions_dir,
        manifest_name=discovery.manifest_name,
        contribution_key=discovery.contribution_key,
    )
    contributions = list(scanner.contributions(book))
    if discovery.include_entry_points or plugin_factories is not None:
        contributions.extend(collect_plugin_contributions(plugin_factories, book=book))
    return tuple(contributions)


def load_catalog(
    discovery: DiscoveryConfig,
    *,
    plugin_factories: Sequence[ContributionPluginFactory] | None = None,
) -> LoadResult:
    """Process every discovered contribution into a new, sealed catalog.

    Args:
        discovery: Discovery settings.
        plugin_factories: Optional override for entry-point factories.

    Returns:
        LoadResult: Sealed catalog, diagnostics and the processed contributions.
    """

    book = MessageBook()
    contributions = gather_contributions(discovery, book, plugin_factories=plugin_factories)
    catalog = CommandContributionHandler(CommandCatalog()).handle_contributions(contributions, book)
    return LoadResult(catalog=catalog, book=book, contributions=contributions)


__all__ = ["LoadResult", "gather_contributions", "load_catalog"]
