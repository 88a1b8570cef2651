# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from gatestate import FalseStartError, InvalidArgumentError, StateMachineError


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, StateMachineError)
    assert issubclass(FalseStartError, StateMachineError)
    assert issubclass(StateMachineError, Exception)


def test_invalid_argument_is_value_error():
    """Hosts catching the built-in ValueError still see malformed arguments."""
    with pytest.raises(ValueError, match="bad"):
        raise InvalidArgumentError("bad")


def test_false_start_is_not_value_error():
    assert not issubclass(FalseStartError, ValueError)
    error = FalseStartError("already started")
    assert str(error) == "already started"
