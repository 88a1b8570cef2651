# tests/unit/test_actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import Mock

import pytest

from gatestate.core.actions import as_action, no_op
from gatestate.core.errors import InvalidArgumentError
from gatestate.interfaces.protocols import Action


class CountingAction:
    def __init__(self) -> None:
        self.calls = 0

    def run(self) -> None:
        self.calls += 1


def test_no_op_returns_none():
    assert no_op() is None


def test_none_selects_no_op():
    assert as_action(None) is no_op


def test_callable_is_used_as_is():
    action = Mock()
    wrapped = as_action(action)
    wrapped()
    action.assert_called_once_with()


def test_protocol_object_is_adapted():
    action = CountingAction()
    assert isinstance(action, Action)
    wrapped = as_action(action)
    wrapped()
    wrapped()
    assert action.calls == 2


def test_invalid_action():
    with pytest.raises(InvalidArgumentError, match="Action must be callable"):
        as_action("not an action")
