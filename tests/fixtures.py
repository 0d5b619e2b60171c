import pytest

from aqasm.runtime.machine import MachineState

shared_machine = MachineState()


@pytest.fixture
def machine():
    # One instance for all unit tests, reset in between
    shared_machine.reset()
    yield shared_machine
