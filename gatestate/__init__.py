"""gatestate: an embeddable, thread-safe finite state machine

A machine is in exactly one named state at a time. Host code builds states
with optional enter/exit actions, connects them with transitions gated by
validation rules, starts the machine once, and triggers transitions in
response to external events.

Responsibilities:
    - Current-state tracking
    - Guarded transitions between states
    - Enter/exit action execution
    - One-time start guard

Cross-cutting Concerns:
    Thread Safety:
        - trigger() and start() are safe to call from any thread
        - Hand-offs are serialised by a single transition lock
        - Enter actions run outside the lock

    Error Handling:
        - Malformed construction raises InvalidArgumentError
        - A second start() raises FalseStartError
        - Rule and action errors propagate to the caller unchanged

    Logging:
        - Standard library logging under the "gatestate" logger
        - Optional single-slot trace listeners for human-readable traces
"""

from gatestate.core import (
    FalseStartError,
    InvalidArgumentError,
    MachineStatus,
    State,
    StateMachine,
    StateMachineError,
    Transition,
    TriggerOutcome,
    always_allowed,
    no_op,
)

__version__ = "0.1.0"

__all__ = [
    "StateMachine",
    "State",
    "Transition",
    "MachineStatus",
    "TriggerOutcome",
    "always_allowed",
    "no_op",
    "StateMachineError",
    "InvalidArgumentError",
    "FalseStartError",
]
