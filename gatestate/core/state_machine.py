# gatestate/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
The state machine engine.

Architecture:
- Owns the current-state register, the transition lock and two single-slot
  trace listeners
- States and transitions are built by the host and bound to one machine
- Transitions call back into the machine to run the hand-off protocol

Threading/Concurrency Guarantees:
1. trigger() and start() may be called from any thread
2. At most one hand-off (exit action + state assignment) runs at a time
3. Enter actions run after the lock is released, so a later transition may
   begin before an earlier enter action has finished
4. Triggers and start() calls made from inside a hand-off (exit actions,
   state change listeners) are ignored or rejected, never deadlocked

Error Handling:
- Rule and action failures propagate to the caller unwrapped
- Once a hand-off starts it always completes in the destination state
- Trace listener failures are swallowed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from gatestate.core.errors import FalseStartError, InvalidArgumentError
from gatestate.core.states import State
from gatestate.core.types import PAUSED_STATE_NAME, MachineStatus, TraceFunc, TriggerOutcome
from gatestate.interfaces.protocols import TraceListener
from gatestate.runtime.concurrency import HandOffLock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Register:
    """Current-state register. Replaced as a whole, never mutated."""

    status: MachineStatus
    state: Optional[State] = None


_UNSTARTED = _Register(MachineStatus.UNSTARTED)
_PAUSED = _Register(MachineStatus.PAUSED)


def _as_listener(listener: Any) -> Optional[TraceFunc]:
    if listener is None:
        return None
    if callable(listener):
        return listener
    if isinstance(listener, TraceListener):
        return listener.trace
    raise InvalidArgumentError(f"Trace listener must be callable or define trace(), got {type(listener).__name__}")


class StateMachine:
    """
    A flexible, general purpose finite state machine.

    The machine is in exactly one state at a time. It moves to another state
    when a transition owned by the current state is triggered and the
    transition's validation rule allows it. Each state's exit action runs on
    the way out and the destination's enter action runs on the way in.

    Each instance must be started exactly once with start(); until then every
    transition is disarmed. There is no stop(): to restart, discard the
    machine and build a new one.
    """

    def __init__(
        self,
        name: str = "StateMachine",
        on_state_changed: Optional[Any] = None,
        on_trigger: Optional[Any] = None,
    ) -> None:
        """
        :param name: Label used in repr() and log messages.
        :param on_state_changed: Optional listener for state change traces.
        :param on_trigger: Optional listener for trigger outcome traces.
        """
        self._name = name
        self._register = _UNSTARTED
        self._transition_lock = HandOffLock()
        self._on_state_changed = _as_listener(on_state_changed)
        self._on_trigger = _as_listener(on_trigger)

    def __repr__(self) -> str:
        register = self._register
        if register.status is MachineStatus.ACTIVE:
            return f"StateMachine({self._name!r}, state={register.state.name!r})"
        return f"StateMachine({self._name!r}, {register.status.name})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> MachineStatus:
        """Tag of the current-state register."""
        return self._register.status

    @property
    def is_started(self) -> bool:
        return self._register.status is not MachineStatus.UNSTARTED

    @property
    def current_state(self) -> Optional[State]:
        """The current state, or None before start() and during a hand-off."""
        return self._register.state

    def create_state(self, name: str, on_enter: Optional[Any] = None, on_exit: Optional[Any] = None) -> State:
        """
        Create a new state on this machine.

        :param name: Descriptive name of the state (required, non-empty).
        :param on_enter: Action performed on entering the state, or None.
        :param on_exit: Action performed on leaving the state, or None.
        """
        return State(self, name, on_enter, on_exit)

    def start(self, initial_state: State) -> None:
        """
        Set the initial state and start the state machine, running the
        initial state's enter action.

        Any subsequent call raises FalseStartError and leaves the machine
        unaffected.

        :param initial_state: The initial state; must belong to this machine.
        :raises InvalidArgumentError: If the state belongs to another machine.
        :raises FalseStartError: If the machine has already been started.
        """
        if self._register.status is not MachineStatus.UNSTARTED:
            self._reject_start(initial_state)
        if not isinstance(initial_state, State) or initial_state.machine is not self:
            raise InvalidArgumentError("Initial state must be a state of this machine")
        if not self._transition_to_new_state(None, initial_state):
            self._reject_start(initial_state)

    def _reject_start(self, initial_state: Any) -> None:
        logger.debug("%r rejected start(%r)", self, initial_state)
        raise FalseStartError(f"State machine {self._name!r} has already been started")

    def set_on_state_changed_listener(self, listener: Optional[Any]) -> None:
        """
        Set the listener for state change traces. There can be only one;
        None removes it.
        """
        self._on_state_changed = _as_listener(listener)

    def set_on_trigger_listener(self, listener: Optional[Any]) -> None:
        """
        Set the listener for trigger outcome traces. There can be only one;
        None removes it.
        """
        self._on_trigger = _as_listener(listener)

    def _is_current(self, state: Optional[State]) -> bool:
        register = self._register
        if state is None:
            return register.status is MachineStatus.UNSTARTED
        return register.status is MachineStatus.ACTIVE and register.state is state

    def _transition_to_new_state(self, from_state: Optional[State], to_state: State) -> bool:
        """
        Move the machine from ``from_state`` (None means unstarted) to
        ``to_state``, running the exit action of the old state and the enter
        action of the new one.

        Exceptions from either action are not caught, but once the hand-off
        starts the machine always ends up in ``to_state``.

        :return: False if the machine was no longer in ``from_state`` when the
                 lock was acquired, or if the calling thread is already inside
                 a hand-off; True once the transition has completed.
        """
        # Re-entered from an exit action or state change listener.
        if self._transition_lock.held_by_current_thread():
            return False

        with self._transition_lock:
            # The current state may have changed since the trigger checked it.
            if not self._is_current(from_state):
                return False

            # Paused: every transition is disarmed until the hand-off is done.
            self._register = _PAUSED
            from_name = from_state.name if from_state is not None else PAUSED_STATE_NAME
            try:
                if from_state is not None:
                    from_state.exit()
            finally:
                self._register = _Register(MachineStatus.ACTIVE, to_state)
                logger.debug("%r changed state [%s]->[%s]", self, from_name, to_state.name)
                self._raise_on_state_changed(from_name, to_state.name)

        to_state.enter()
        return True

    def _raise_trace_event(self, listener: Optional[TraceFunc], description: str) -> None:
        if listener is None:
            return
        try:
            listener(description)
        except Exception:
            pass  # Trace must never break a transition

    def _raise_on_state_changed(self, from_name: str, to_name: str) -> None:
        self._raise_trace_event(self._on_state_changed, f"State transition [{from_name}]->[{to_name}]")

    def _raise_on_trigger(self, from_name: str, to_name: str, outcome: TriggerOutcome) -> None:
        self._raise_trace_event(
            self._on_trigger,
            f"Triggered transition from [{from_name}] to [{to_name}] outcome: {outcome.description}",
        )
