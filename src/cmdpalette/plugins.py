# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry-point plugin loading for installed command contributors.

Installed distributions advertise a zero-argument factory under the
``cmdpalette.contributions`` group. Each factory returns a
:class:`~cmdpalette.extensions.PackageContribution`, a sequence of them, or
``None`` when it has nothing to contribute.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import Final, TypeAlias, cast

from contrib_spec.commands import ContributionError

from .collector import MessageBook
from .extensions import PackageContribution

CONTRIBUTION_PLUGIN_GROUP: Final[str] = "cmdpalette.contributions"

PluginResult: TypeAlias = PackageContribution | Sequence[PackageContribution] | None
ContributionPluginFactory: TypeAlias = Callable[[], PluginResult]

_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``.

    Args:
        entries: Raw entry-point container returned by :func:`metadata.entry_points`.
        group: Name of the entry-point group to extract.

    Returns:
        Iterable[EntryPoint]: Entry points belonging to ``group``, or an empty
        iterable when the container lacks the group.
    """

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    if hasattr(entries, "select"):
        return entries.select(group=group)
    return ()


def load_contribution_plugins() -> tuple[ContributionPluginFactory, ...]:
    """Return contribution factories discovered via entry points.

    Entries that fail to import are skipped.

    Returns:
        tuple[ContributionPluginFactory, ...]: Loaded factories in discovery order.
    """

    entries = cast(_EntryPointSource, metadata.entry_points())
    factories: list[ContributionPluginFactory] = []
    for entry in _select_entry_points(entries, CONTRIBUTION_PLUGIN_GROUP):
        try:
            factories.append(cast(ContributionPluginFactory, entry.load()))
        except (AttributeError, ImportError, ValueError, RuntimeError):
            continue
    return tuple(factories)


def plugin_identifier(factory: ContributionPluginFactory) -> str:
    """Return the dotted name used to report problems with ``factory``."""

    module = getattr(factory, "__module__", None)
    name = getattr(factory, "__qualname__", None) or repr(factory)
    return f"{module}.{name}" if module else name


def _invoke_factory(factory: ContributionPluginFactory) -> tuple[PackageContribution, ...]:
    try:
        result = factory()
    except (AttributeError, ImportError, LookupError, TypeError, ValueError, RuntimeError) as exc:
        raise ContributionError(f"contribution plugin {plugin_identifier(factory)} failed: {exc}") from exc
    if result is None:
        return ()
    if isinstance(result, PackageContribution):
        return (result,)
    if isinstance(result, Sequence) and all(isinstance(item, PackageContribution) for item in result):
        return tuple(result)
    raise ContributionError(
        f"contribution plugin {plugin_identifier(factory)} did not return a PackageContribution",
    )


def collect_plugin_contributions(
    factories: Sequence[ContributionPluginFactory] | None = None,
    *,
    book: MessageBook | None = None,
) -> tuple[PackageContribution, ...]:
    """Invoke contribution factories and flatten their results.

    Args:
        factories: Optional factory overrides; entry points are used when omitted.
        book: Optional message store; a failing factory is reported there under
            its dotted name and the remaining factories still run.

    Returns:
        tuple[PackageContribution, ...]: Contributions in factory order.

    Raises:
        ContributionError: If a factory fails or returns an unexpected payload
            type and no ``book`` was given.
    """

    selected = factories if factories is not None else load_contribution_plugins()
    contributions: list[PackageContribution] = []
    for factory in selected:
        try:
            contributions.extend(_invoke_factory(factory))
        except ContributionError as exc:
            if book is None:
                raise
            book.collector_for(plugin_identifier(factory)).error(str(exc))
    return tuple(contributions)


__all__ = [
    "CONTRIBUTION_PLUGIN_GROUP",
    "ContributionPluginFactory",
    "collect_plugin_contributions",
    "load_contribution_plugins",
    "plugin_identifier",
]
