# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Process-scoped catalog of accepted command declarations."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from contrib_spec.commands import CommandDeclaration, ContributionError

LOGGER = logging.getLogger(__name__)


class CatalogSealedError(ContributionError):
    """Raised when the catalog is mutated or sealed after the load phase ended."""


class CatalogPhase(str, Enum):
    """Lifecycle phases of a :class:`CommandCatalog`."""

    LOADING = "loading"
    SEALED = "sealed"


class CommandCatalog:
    """Ordered, append-then-seal collection of accepted declarations.

    The catalog is writable only while :attr:`phase` is ``LOADING``. After
    :meth:`seal` it is read-only for the rest of the process lifetime.
    """

    __slots__ = ("_entries", "_phase")

    def __init__(self) -> None:
        self._entries: list[CommandDeclaration] = []
        self._phase = CatalogPhase.LOADING

    @property
    def phase(self) -> CatalogPhase:
        return self._phase

    @property
    def is_sealed(self) -> bool:
        """Return ``True`` once :meth:`seal` has been called."""

        return self._phase is CatalogPhase.SEALED

    @property
    def entries(self) -> tuple[CommandDeclaration, ...]:
        """Return an immutable snapshot of the accepted declarations in arrival order."""

        return tuple(self._entries)

    def ensure_loading(self) -> None:
        """Raise :class:`CatalogSealedError` unless the catalog still accepts entries."""

        if self.is_sealed:
            raise CatalogSealedError("command catalog is sealed; no further contributions are accepted")

    def append(self, declaration: CommandDeclaration) -> None:
        """Append ``declaration`` during the load phase.

        Args:
            declaration: Normalised declaration to store.

        Raises:
            CatalogSealedError: If the catalog has already been sealed.
        """

        self.ensure_loading()
        self._entries.append(declaration)
        LOGGER.debug("accepted command %s (%d in catalog)", declaration.command, len(self._entries))

    def seal(self) -> None:
        """Freeze the catalog.

        Raises:
            CatalogSealedError: If the catalog was already sealed.
        """

        if self.is_sealed:
            raise CatalogSealedError("command catalog was already sealed")
        self._phase = CatalogPhase.SEALED
        LOGGER.info("command catalog sealed with %d entries", len(self._entries))

    def find(self, command: str) -> CommandDeclaration | None:
        """Return the first declaration registered for ``command``, if any."""

        return next((entry for entry in self._entries if entry.command == command), None)

    def __iter__(self) -> Iterator[CommandDeclaration]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> CommandDeclaration:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"CommandCatalog(phase={self._phase.value!r}, entries={len(self._entries)})"


__all__ = ["CatalogPhase", "CatalogSealedError", "CommandCatalog"]
