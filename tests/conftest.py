# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List

import pytest

from gatestate import State, StateMachine


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "stress: mark test as a stress test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def machine() -> StateMachine:
    """An unstarted machine with no listeners."""
    return StateMachine(name="test")


@pytest.fixture
def trace_log() -> List[str]:
    return []


@pytest.fixture
def traced_machine(trace_log: List[str]) -> StateMachine:
    """A machine whose trace listeners both append to trace_log."""
    return StateMachine(name="traced", on_state_changed=trace_log.append, on_trigger=trace_log.append)


@pytest.fixture
def start_state(machine: StateMachine) -> State:
    return machine.create_state("Start")


@pytest.fixture
def middle_state(machine: StateMachine) -> State:
    return machine.create_state("Middle")


@pytest.fixture
def finish_state(machine: StateMachine) -> State:
    return machine.create_state("Finish")
