# gatestate/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Optional

from gatestate.core.errors import InvalidArgumentError
from gatestate.core.rules import as_rule
from gatestate.core.states import State
from gatestate.core.types import RuleFunc, TriggerOutcome

logger = logging.getLogger(__name__)


class Transition:
    """
    A transition from an owning state to a destination state, plus a rule
    that decides whether the transition is currently allowed.

    For the transition to occur it must be triggered, the machine must be in
    the owning state, and the rule must return True; otherwise the trigger is
    ignored.
    """

    def __init__(self, source: State, destination: State, rule: Optional[Any] = None) -> None:
        """
        :param source: The state that owns this transition.
        :param destination: The state the machine moves to.
        :param rule: Validation rule; if None the transition is always allowed.
        :raises InvalidArgumentError: If either state is missing, or the two
                                      states belong to different machines.
        """
        if not isinstance(source, State):
            raise InvalidArgumentError("Owning state is required")
        if not isinstance(destination, State):
            raise InvalidArgumentError("Destination state is required")
        if source.machine is not destination.machine:
            raise InvalidArgumentError(
                f"States {source.name!r} and {destination.name!r} belong to different state machines"
            )

        self._source = source
        self._destination = destination
        self._rule = as_rule(rule)
        source._add_transition(self)

    def __repr__(self) -> str:
        return f"Transition({self._source.name!r} -> {self._destination.name!r})"

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """
        Trigger the transition, ignoring any arguments. Lets a transition be
        passed straight to callback APIs (timers, UI event bindings).
        """
        self.trigger()

    @property
    def source(self) -> State:
        """The owning state."""
        return self._source

    @property
    def destination(self) -> State:
        return self._destination

    @property
    def rule(self) -> RuleFunc:
        """The validation rule, normalised to a zero-argument predicate."""
        return self._rule

    def is_allowed(self) -> bool:
        """Evaluate the validation rule."""
        return bool(self._rule())

    def trigger(self) -> None:
        """
        Trigger the transition, provided that the owning state is the current
        state and the validation rule succeeds; otherwise the trigger is
        silently ignored.
        """
        machine = self._source.machine

        # Unlocked read; the protocol re-checks under the lock.
        if machine.current_state is not self._source:
            self._report(TriggerOutcome.DISARMED)
            return

        if not self.is_allowed():
            self._report(TriggerOutcome.REJECTED)
            return

        self._report(TriggerOutcome.EXECUTING)
        machine._transition_to_new_state(self._source, self._destination)

    def _report(self, outcome: TriggerOutcome) -> None:
        logger.debug("%r triggered: %s", self, outcome.description)
        self._source.machine._raise_on_trigger(self._source.name, self._destination.name, outcome)
