# gatestate/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any

from gatestate.core.errors import InvalidArgumentError
from gatestate.core.types import ActionFunc
from gatestate.interfaces.protocols import Action


def no_op() -> None:
    """Default enter/exit action."""


def as_action(action: Any) -> ActionFunc:
    """
    Normalise a host-supplied action into a zero-argument callable.

    :param action: None (use the no-op default), a zero-argument callable,
                   or an object implementing Action.run().
    :raises InvalidArgumentError: If the action is none of the above.
    """
    if action is None:
        return no_op
    if callable(action):
        return action
    if isinstance(action, Action):
        return action.run
    raise InvalidArgumentError(f"Action must be callable or define run(), got {type(action).__name__}")
