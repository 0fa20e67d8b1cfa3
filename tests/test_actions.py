# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the activate-then-dispatch action pipeline."""

from __future__ import annotations

import asyncio

import pytest

from cmdpalette.actions import (
    ActivationService,
    CommandDispatcher,
    InvocationState,
    activation_event,
    create_command_action,
)
from contrib_spec.commands import CommandDeclaration


class _Recorder:
    """Fake activation service and dispatcher sharing one event log."""

    def __init__(self, *, activation_delay: float = 0.0, fail_activation: bool = False, fail_dispatch: bool = False):
        self.events: list[tuple[str, object]] = []
        self.activation_delay = activation_delay
        self.fail_activation = fail_activation
        self.fail_dispatch = fail_dispatch

    async def activate_by_event(self, event: str) -> None:
        self.events.append(("activate-start", event))
        await asyncio.sleep(self.activation_delay)
        if self.fail_activation:
            raise LookupError(f"no package for {event}")
        self.events.append(("activate-done", event))

    async def execute_command(self, command: str, *args: object) -> object:
        self.events.append(("dispatch", (command, args)))
        if self.fail_dispatch:
            raise ValueError("handler exploded")
        return f"{command}:{len(args)}"


def _declaration() -> CommandDeclaration:
    return CommandDeclaration(command="acme.run", title="Run Things", category="Acme")


def test_action_exposes_id_and_label() -> None:
    recorder = _Recorder()
    action = create_command_action(_declaration(), recorder, recorder)
    assert action.id == "acme.run"
    assert action.label == "Run Things"
    assert action.category == "Acme"


def test_recorder_satisfies_service_protocols() -> None:
    recorder = _Recorder()
    assert isinstance(recorder, ActivationService)
    assert isinstance(recorder, CommandDispatcher)


def test_activation_event_format() -> None:
    assert activation_event("acme.run") == "onCommand:acme.run"


@pytest.mark.asyncio
async def test_dispatch_waits_for_activation_to_complete() -> None:
    recorder = _Recorder(activation_delay=0.01)
    action = create_command_action(_declaration(), recorder, recorder)

    result = await action.run("a", 2)

    assert result == "acme.run:2"
    assert recorder.events == [
        ("activate-start", "onCommand:acme.run"),
        ("activate-done", "onCommand:acme.run"),
        ("dispatch", ("acme.run", ("a", 2))),
    ]


@pytest.mark.asyncio
async def test_activation_failure_skips_dispatch() -> None:
    recorder = _Recorder(fail_activation=True)
    action = create_command_action(_declaration(), recorder, recorder)
    invocation = action.invocation()

    with pytest.raises(LookupError):
        await invocation.run()

    assert invocation.state is InvocationState.FAILED
    assert isinstance(invocation.error, LookupError)
    assert all(kind != "dispatch" for kind, _ in recorder.events)


@pytest.mark.asyncio
async def test_dispatch_failure_is_propagated() -> None:
    recorder = _Recorder(fail_dispatch=True)
    invocation = create_command_action(_declaration(), recorder, recorder).invocation("x")

    with pytest.raises(ValueError, match="handler exploded"):
        await invocation.run()

    assert invocation.state is InvocationState.FAILED
    assert recorder.events[-1] == ("dispatch", ("acme.run", ("x",)))


@pytest.mark.asyncio
async def test_invocation_cannot_be_restarted() -> None:
    recorder = _Recorder()
    invocation = create_command_action(_declaration(), recorder, recorder).invocation()

    assert await invocation.run() == "acme.run:0"
    assert invocation.state is InvocationState.DONE
    with pytest.raises(RuntimeError, match="already done"):
        await invocation.run()


@pytest.mark.asyncio
async def test_concurrent_invocations_are_independent() -> None:
    recorder = _Recorder(activation_delay=0.01)
    action = create_command_action(_declaration(), recorder, recorder)

    results = await asyncio.gather(action.run(1), action.run(1, 2), action.run())

    assert results == ["acme.run:1", "acme.run:2", "acme.run:0"]
    dispatches = [payload for kind, payload in recorder.events if kind == "dispatch"]
    assert sorted(len(args) for _, args in dispatches) == [0, 1, 2]
    activations = [index for index, (kind, _) in enumerate(recorder.events) if kind == "activate-done"]
    first_dispatch = next(index for index, (kind, _) in enumerate(recorder.events) if kind == "dispatch")
    assert activations[0] < first_dispatch
