# gatestate/core/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Type definitions and enums for the state machine.

Shared enums and callable aliases live here so that states.py,
transitions.py and state_machine.py can use them without importing
each other.
"""

from enum import Enum, auto
from typing import Callable

PAUSED_STATE_NAME = "State Machine Paused"


class MachineStatus(Enum):
    """Tag of the machine's current-state register."""

    UNSTARTED = auto()  # start() has not run yet
    PAUSED = auto()  # hand-off in progress, every transition disarmed
    ACTIVE = auto()  # resting in exactly one state


class TriggerOutcome(Enum):
    """Result of a trigger() call, as reported to the trigger listener."""

    DISARMED = "disarmed"
    REJECTED = "armed, rejected"
    EXECUTING = "armed, executing"

    @property
    def description(self) -> str:
        return self.value


# Callback Types
RuleFunc = Callable[[], bool]
ActionFunc = Callable[[], None]
TraceFunc = Callable[[str], None]
