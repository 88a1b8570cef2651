# gatestate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from gatestate.core.actions import as_action
from gatestate.core.errors import InvalidArgumentError
from gatestate.core.types import ActionFunc

if TYPE_CHECKING:
    from gatestate.core.state_machine import StateMachine
    from gatestate.core.transitions import Transition


class State:
    """
    Represents a state that a state machine can be in.

    A state belongs to exactly one StateMachine, has a descriptive name and an
    enter and exit action (no-ops unless supplied). States are held by the
    host; the machine refers to at most one of them at a time through its
    current-state register. Equality is identity, so two states may share a
    name.
    """

    def __init__(
        self,
        machine: "StateMachine",
        name: str,
        on_enter: Optional[Any] = None,
        on_exit: Optional[Any] = None,
    ) -> None:
        """
        Create a state on the given machine.

        :param machine: The machine this state belongs to.
        :param name: Descriptive name of the state (required, non-empty).
        :param on_enter: Action performed on entering this state, or None.
        :param on_exit: Action performed on leaving this state, or None.
        :raises InvalidArgumentError: If the name is empty or the machine is
                                      not a StateMachine.
        """
        from gatestate.core.state_machine import StateMachine

        if not isinstance(machine, StateMachine):
            raise InvalidArgumentError("State must belong to a StateMachine")
        if not name or not isinstance(name, str):
            raise InvalidArgumentError("State name must not be empty or None")

        self._machine = machine
        self._name = name
        self._on_enter = as_action(on_enter)
        self._on_exit = as_action(on_exit)
        self._transitions: List["Transition"] = []

    def __repr__(self) -> str:
        return f"State({self._name!r})"

    @property
    def name(self) -> str:
        """The descriptive name of the state."""
        return self._name

    @property
    def machine(self) -> "StateMachine":
        """The machine this state belongs to."""
        return self._machine

    @property
    def on_enter(self) -> ActionFunc:
        return self._on_enter

    @property
    def on_exit(self) -> ActionFunc:
        return self._on_exit

    @property
    def transitions(self) -> Tuple["Transition", ...]:
        """Outgoing transitions built from this state, in creation order."""
        return tuple(self._transitions)

    def enter(self) -> None:
        """Run the enter action."""
        self._on_enter()

    def exit(self) -> None:
        """Run the exit action."""
        self._on_exit()

    def transition_to(self, destination: "State", rule: Optional[Any] = None) -> "Transition":
        """
        Create a transition from this state to ``destination``.

        :param destination: The state the machine moves to when the
                            transition fires.
        :param rule: Validation rule gating the transition; always allowed
                     if None.
        :return: The new transition, also listed in ``transitions``.
        """
        from gatestate.core.transitions import Transition

        return Transition(self, destination, rule)

    def _add_transition(self, transition: "Transition") -> None:
        self._transitions.append(transition)
