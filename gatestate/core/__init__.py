# gatestate/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Core package providing the state machine engine, states and transitions.
"""

# Import order matters to avoid circular dependencies
from .errors import FalseStartError, InvalidArgumentError, StateMachineError
from .types import MachineStatus, TriggerOutcome
from .rules import always_allowed
from .actions import no_op
from .states import State
from .transitions import Transition
from .state_machine import StateMachine

__all__ = [
    # Engine
    "StateMachine",
    "State",
    "Transition",
    "MachineStatus",
    "TriggerOutcome",
    # Defaults
    "always_allowed",
    "no_op",
    # Errors
    "StateMachineError",
    "InvalidArgumentError",
    "FalseStartError",
]
