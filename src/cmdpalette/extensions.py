# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Descriptors for contributing packages and their raw command values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from contrib_spec.commands.types import JSONValue


@dataclass(frozen=True, slots=True)
class ExtensionDescription:
    """Identity and resource root of a contributing package."""

    identifier: str
    root: str

    @classmethod
    def from_path(cls, identifier: str, root: str | os.PathLike[str]) -> ExtensionDescription:
        """Describe the package at ``root``, anchoring relative roots at the working directory."""

        return cls(identifier=identifier, root=os.path.abspath(os.fspath(root)))


@dataclass(frozen=True, slots=True)
class PackageContribution:
    """Raw ``contributes.commands`` value supplied by one package."""

    description: ExtensionDescription
    value: JSONValue

    @property
    def identifier(self) -> str:
        return self.description.identifier


__all__ = ["ExtensionDescription", "PackageContribution"]
