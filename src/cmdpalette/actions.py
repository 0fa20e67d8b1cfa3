# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Invocable actions bound to catalog entries.

Running an action is a two-stage pipeline: the owning package is activated
for ``onCommand:<id>`` and, only once activation has completed, the command
is dispatched with the invocation arguments. A failed activation ends the
invocation without dispatching.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol, runtime_checkable

from contrib_spec.commands import CommandDeclaration

LOGGER = logging.getLogger(__name__)

ACTIVATION_EVENT_PREFIX: Final[str] = "onCommand:"


def activation_event(command: str) -> str:
    """Return the activation event that loads the owner of ``command``."""

    return f"{ACTIVATION_EVENT_PREFIX}{command}"


@runtime_checkable
class ActivationService(Protocol):
    """Service that loads and activates packages interested in an event."""

    def activate_by_event(self, event: str) -> Awaitable[object]:
        """Activate every package registered for ``event``."""


@runtime_checkable
class CommandDispatcher(Protocol):
    """Service that executes registered commands."""

    def execute_command(self, command: str, *args: object) -> Awaitable[object]:
        """Execute ``command`` with ``args`` and return its result."""


class InvocationState(str, Enum):
    """Enumerate the stages an invocation moves through."""

    PENDING = "pending"
    ACTIVATING = "activating"
    DISPATCHING = "dispatching"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class CommandInvocation:
    """Single run of a command; owns no state shared with other invocations."""

    command: str
    args: tuple[object, ...]
    activation: ActivationService
    dispatcher: CommandDispatcher
    state: InvocationState = InvocationState.PENDING
    result: object = None
    error: Exception | None = None

    async def run(self) -> object:
        """Activate the owning package, then dispatch the command.

        Returns:
            object: Value produced by the dispatcher.

        Raises:
            RuntimeError: If the invocation was already started.
            Exception: Any activation or dispatch failure, unchanged.
        """

        if self.state is not InvocationState.PENDING:
            raise RuntimeError(f"invocation of {self.command!r} already {self.state.value}")
        try:
            self.state = InvocationState.ACTIVATING
            await self.activation.activate_by_event(activation_event(self.command))
            self.state = InvocationState.DISPATCHING
            self.result = await self.dispatcher.execute_command(self.command, *self.args)
        except Exception as exc:
            LOGGER.debug("command %s failed while %s", self.command, self.state.value)
            self.state = InvocationState.FAILED
            self.error = exc
            raise
        self.state = InvocationState.DONE
        return self.result


@dataclass(frozen=True, slots=True)
class CommandAction:
    """Catalog entry bound to the services needed to execute it."""

    declaration: CommandDeclaration
    activation: ActivationService
    dispatcher: CommandDispatcher

    @property
    def id(self) -> str:
        """Return the command identifier used as the action id."""

        return self.declaration.command

    @property
    def label(self) -> str:
        """Return the title displayed for the action."""

        return self.declaration.title

    @property
    def category(self) -> str | None:
        return self.declaration.category

    def invocation(self, *args: object) -> CommandInvocation:
        """Return a fresh, not yet started invocation carrying ``args``."""

        return CommandInvocation(
            command=self.id,
            args=args,
            activation=self.activation,
            dispatcher=self.dispatcher,
        )

    async def run(self, *args: object) -> object:
        """Run the action with ``args`` and return the dispatch result."""

        return await self.invocation(*args).run()


def create_command_action(
    declaration: CommandDeclaration,
    activation: ActivationService,
    dispatcher: CommandDispatcher,
) -> CommandAction:
    """Build the invocable action for a catalog entry.

    Args:
        declaration: Accepted declaration read from the catalog.
        activation: Service activating packages by event.
        dispatcher: Service executing commands.

    Returns:
        CommandAction: Action with stable ``id`` and ``label``.
    """

    return CommandAction(declaration=declaration, activation=activation, dispatcher=dispatcher)


__all__ = [
    "ACTIVATION_EVENT_PREFIX",
    "ActivationService",
    "CommandAction",
    "CommandDispatcher",
    "CommandInvocation",
    "InvocationState",
    "activation_event",
    "create_command_action",
]
