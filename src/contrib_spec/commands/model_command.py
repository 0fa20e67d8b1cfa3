# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable models describing accepted command declarations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TypeAlias

from .types import JSONValue, PlacementSite
from .utils import freeze_json_value, is_json_array, string_or_none, thaw_json_value


@dataclass(frozen=True, slots=True)
class ResourceFilter:
    """Descriptive resource matcher used by ``when`` clauses."""

    language: str | None = None
    scheme: str | None = None
    pattern: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue]) -> ResourceFilter:
        """Create a ``ResourceFilter`` from a ``{language, scheme, pattern}`` literal.

        Non-string members are ignored; glob and scheme syntax are not checked.

        Args:
            data: Mapping taken from a ``when`` clause.

        Returns:
            ResourceFilter: Filter holding the string members of ``data``.
        """

        return ResourceFilter(
            language=string_or_none(data.get("language")),
            scheme=string_or_none(data.get("scheme")),
            pattern=string_or_none(data.get("pattern")),
        )

    def to_dict(self) -> dict[str, str]:
        """Return the populated members as a JSON object."""

        payload = {"language": self.language, "scheme": self.scheme, "pattern": self.pattern}
        return {key: value for key, value in payload.items() if value is not None}


WhenCondition: TypeAlias = str | ResourceFilter


@dataclass(frozen=True, slots=True)
class Context:
    """Placement of a command in a menu or tool bar."""

    where: PlacementSite
    when: JSONValue

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Context:
        """Create a ``Context`` from a validated mapping.

        Args:
            data: Context mapping that already passed shape validation.
            context: Human-readable location used if ``when`` cannot be frozen.

        Returns:
            Context: Frozen context whose ``when`` clause is stored verbatim.
        """

        return Context(
            where=PlacementSite(data["where"]),
            when=freeze_json_value(data["when"], context=f"{context}.when"),
        )

    @property
    def conditions(self) -> tuple[WhenCondition, ...]:
        """Return the ``when`` clause as an ordered tuple of conditions."""

        items = self.when if is_json_array(self.when) else (self.when,)
        conditions: list[WhenCondition] = []
        for item in items:
            if isinstance(item, str):
                conditions.append(item)
            elif isinstance(item, Mapping):
                conditions.append(ResourceFilter.from_mapping(item))
        return tuple(conditions)

    def to_dict(self) -> dict[str, JSONValue]:
        return {"where": self.where.value, "when": thaw_json_value(self.when)}


@dataclass(frozen=True, slots=True)
class ThemableIcon:
    """Icon with distinct images for dark and light themes."""

    dark: str
    light: str

    def to_dict(self) -> dict[str, str]:
        return {"dark": self.dark, "light": self.light}


Icon: TypeAlias = str | ThemableIcon


@dataclass(frozen=True, slots=True)
class CommandDeclaration:
    """Immutable representation of one accepted command contribution."""

    command: str
    title: str
    category: str | None = None
    icon: Icon | None = None
    context: Context | tuple[Context, ...] | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str = "<declaration>") -> CommandDeclaration:
        """Create a ``CommandDeclaration`` from a validated mapping.

        The caller must run shape validation first; this constructor only
        converts the accepted shapes into their frozen model counterparts.

        Args:
            data: Declaration mapping that already passed shape validation.
            context: Human-readable location used in error messages.

        Returns:
            CommandDeclaration: Frozen declaration.
        """

        icon_value = data.get("icon")
        icon: Icon | None
        if isinstance(icon_value, Mapping):
            icon = ThemableIcon(dark=icon_value["dark"], light=icon_value["light"])
        else:
            icon = icon_value

        context_value = data.get("context")
        parsed_context: Context | tuple[Context, ...] | None = None
        if is_json_array(context_value):
            parsed_context = tuple(
                Context.from_mapping(item, context=f"{context}.context[{index}]")
                for index, item in enumerate(context_value)
            )
        elif context_value is not None:
            parsed_context = Context.from_mapping(context_value, context=f"{context}.context")

        return CommandDeclaration(
            command=data["command"],
            title=data["title"],
            category=string_or_none(data.get("category")),
            icon=icon,
            context=parsed_context,
        )

    @property
    def contexts(self) -> tuple[Context, ...]:
        """Return the declared placements as a tuple regardless of arity."""

        if self.context is None:
            return ()
        if isinstance(self.context, Context):
            return (self.context,)
        return self.context

    def with_icon(self, icon: Icon | None) -> CommandDeclaration:
        """Return a copy of the declaration carrying ``icon``."""

        return replace(self, icon=icon)

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible representation of the declaration.

        Returns:
            dict[str, JSONValue]: Mapping in the contribution document shape,
            omitting optional members that are unset.
        """

        payload: dict[str, JSONValue] = {"command": self.command, "title": self.title}
        if self.category is not None:
            payload["category"] = self.category
        if isinstance(self.icon, ThemableIcon):
            payload["icon"] = self.icon.to_dict()
        elif self.icon is not None:
            payload["icon"] = self.icon
        if isinstance(self.context, Context):
            payload["context"] = self.context.to_dict()
        elif self.context is not None:
            payload["context"] = [item.to_dict() for item in self.context]
        return payload


__all__ = [
    "CommandDeclaration",
    "Context",
    "Icon",
    "ResourceFilter",
    "ThemableIcon",
    "WhenCondition",
]
