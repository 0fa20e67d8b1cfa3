# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning for extension manifests declaring commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from contrib_spec.commands import CONTRIBUTION_POINT, ContributionDocumentError
from contrib_spec.commands.io import expect_object, load_document

from .collector import MessageBook
from .extensions import ExtensionDescription, PackageContribution

DEFAULT_MANIFEST_NAME: Final[str] = "package.json"
CONTRIBUTES_KEY: Final[str] = "contributes"


def manifest_identifier(manifest: Mapping[str, object], *, fallback: str) -> str:
    """Return ``publisher.name`` for ``manifest`` or the best available fallback.

    Args:
        manifest: Parsed manifest object.
        fallback: Identifier used when the manifest carries no ``name``.

    Returns:
        str: Identifier of the contributing package.
    """

    name = manifest.get("name")
    publisher = manifest.get("publisher")
    if isinstance(name, str) and name:
        return f"{publisher}.{name}" if isinstance(publisher, str) and publisher else name
    return fallback


@dataclass(slots=True)
class ManifestScanner:
    """Discover ``<extensions_dir>/<package>/<manifest_name>`` documents."""

    extensions_dir: Path
    manifest_name: str = DEFAULT_MANIFEST_NAME
    contribution_key: str = CONTRIBUTION_POINT

    def manifest_paths(self) -> tuple[Path, ...]:
        """Return sorted manifest paths found directly below ``extensions_dir``.

        Returns:
            tuple[Path, ...]: Manifest file paths sorted lexicographically.
        """

        if not self.extensions_dir.is_dir():
            return ()
        paths = (entry / self.manifest_name for entry in self.extensions_dir.iterdir() if entry.is_dir())
        return tuple(sorted(path for path in paths if path.is_file()))

    def load(self, path: Path) -> PackageContribution | None:
        """Read one manifest and extract its command contribution.

        Args:
            path: Manifest file to read.

        Returns:
            PackageContribution | None: Contribution, or ``None`` when the
            manifest does not contribute commands.

        Raises:
            ContributionDocumentError: If the manifest is not a readable JSON object.
        """

        manifest = expect_object(load_document(path), context=str(path))
        contributes = manifest.get(CONTRIBUTES_KEY)
        if not isinstance(contributes, Mapping) or self.contribution_key not in contributes:
            return None
        description = ExtensionDescription.from_path(
            manifest_identifier(manifest, fallback=path.parent.name),
            path.parent,
        )
        return PackageContribution(description=description, value=contributes[self.contribution_key])

    def contributions(self, book: MessageBook | None = None) -> tuple[PackageContribution, ...]:
        """Load every manifest below ``extensions_dir``.

        Args:
            book: Optional message store; unreadable manifests are reported
                there under the folder name instead of raising.

        Returns:
            tuple[PackageContribution, ...]: Contributions in manifest path order.

        Raises:
            ContributionDocumentError: If a manifest is unreadable and no ``book`` was given.
        """

        contributions: list[PackageContribution] = []
        for path in self.manifest_paths():
            try:
                contribution = self.load(path)
            except ContributionDocumentError as exc:
                if book is None:
                    raise
                book.collector_for(path.parent.name).error(str(exc))
                continue
            if contribution is not None:
                contributions.append(contribution)
        return tuple(contributions)


__all__ = [
    "CONTRIBUTES_KEY",
    "DEFAULT_MANIFEST_NAME",
    "ManifestScanner",
    "manifest_identifier",
]
