# gatestate/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Protocol, runtime_checkable


@runtime_checkable
class TransitionRule(Protocol):
    """
    Protocol for transition validation rules.

    Methods:
        evaluate(): Returns True if the transition is currently allowed.

    Runtime Invariants:
    - Evaluated only when the owning state is the current state.
    - Evaluated outside the transition lock.

    Error Handling:
    - Exceptions are not caught; they propagate to the caller of trigger().
    """

    def evaluate(self) -> bool: ...


@runtime_checkable
class Action(Protocol):
    """
    Protocol for state entry/exit actions.

    Methods:
        run(): Performs the side effect. The return value is ignored.

    Runtime Invariants:
    - Exit actions run while the machine is paused, under the transition lock.
    - Enter actions run after the lock is released.

    Error Handling:
    - Exceptions are not caught; they propagate to the caller of trigger()
      or start(). An exit action failure still completes the state change.
    """

    def run(self) -> None: ...


@runtime_checkable
class TraceListener(Protocol):
    """
    Protocol for diagnostic trace sinks.

    Any exception raised by trace() is swallowed by the machine.
    """

    def trace(self, description: str) -> None: ...
