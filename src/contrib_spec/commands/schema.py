# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Authoring-time JSON schema for command contributions.

The schema feeds editor suggestions and the ``lint`` command only. Runtime
acceptance is decided by :mod:`contrib_spec.commands.validation`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from jsonschema import Draft202012Validator

from .io import load_schema
from .types import JSONValue

SCHEMA_FILENAME: Final[str] = "command_contribution.schema.json"
DEFAULT_SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "schemas" / SCHEMA_FILENAME


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def iter_errors(self, instance: JSONValue) -> Iterable[object]:
        """Iterate over validation errors for ``instance``."""


@dataclass(frozen=True, slots=True)
class SchemaRepository:
    """Hold the contribution schema together with its compiled validator."""

    schema_path: Path
    schema: dict[str, JSONValue]
    validator: SchemaValidator

    @classmethod
    def load(cls, *, schema_path: Path | None = None) -> SchemaRepository:
        """Load the contribution schema from disk.

        Args:
            schema_path: Optional override for the bundled schema document.

        Returns:
            SchemaRepository: Repository configured with a Draft 2020-12 validator.
        """

        resolved = schema_path or DEFAULT_SCHEMA_PATH
        schema = dict(load_schema(resolved))
        Draft202012Validator.check_schema(schema)
        return cls(schema_path=resolved, schema=schema, validator=Draft202012Validator(schema))

    def authoring_hints(self, value: JSONValue) -> tuple[str, ...]:
        """Return human-readable schema hints for ``value``.

        Args:
            value: Raw ``contributes.commands`` value as written by an author.

        Returns:
            tuple[str, ...]: ``<json-path>: <message>`` hints ordered by location.
        """

        errors = sorted(
            self.validator.iter_errors(value),
            key=lambda error: [str(part) for part in error.absolute_path],
        )
        hints: list[str] = []
        for error in errors:
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            hints.append(f"{location}: {error.message}")
        return tuple(hints)


@lru_cache(maxsize=1)
def default_schema_repository() -> SchemaRepository:
    """Return the cached repository for the bundled schema."""

    return SchemaRepository.load()


def command_contribution_schema() -> dict[str, JSONValue]:
    """Return a copy of the bundled contribution schema."""

    return dict(default_schema_repository().schema)


__all__ = [
    "DEFAULT_SCHEMA_PATH",
    "SchemaRepository",
    "SchemaValidator",
    "command_contribution_schema",
    "default_schema_repository",
]
