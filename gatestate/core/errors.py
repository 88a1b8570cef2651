# gatestate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class StateMachineError(Exception):
    """
    Base exception class for errors raised by the state machine library.
    """


class InvalidArgumentError(StateMachineError, ValueError):
    """
    Raised when a state, transition or machine is constructed with malformed
    arguments (empty state name, missing destination, foreign state, etc.).
    """


class FalseStartError(StateMachineError):
    """
    Raised when start() is called on a machine that has already been started.
    The machine is left in whatever state it was in and remains usable.
    """
