import errno

import pytest

from schedsim.common import (
    MemoryAllocationPolicy,
    ProcessState,
    SchedulingPolicy,
    SimError,
    SwappingPolicy,
)


def test_sim_error_keeps_code_and_function():
    err = SimError(errno.EINVAL, "jdtFetchNext")
    assert err.errno_code == errno.EINVAL
    assert err.func == "jdtFetchNext"
    assert "jdtFetchNext" in str(err)


def test_sim_error_can_be_raised_and_caught():
    with pytest.raises(SimError) as info:
        raise SimError(errno.ENOMEM, "rdyInsert")
    assert info.value.errno_code == errno.ENOMEM


@pytest.mark.parametrize(
    "label", ["NEW", "RUNNING", "READY", "SWAPPED", "TERMINATED"]
)
def test_process_state_label_round_trip(label):
    state = ProcessState(ProcessState[label].value)
    assert state is ProcessState[label]
    assert str(state) == label


def test_process_state_order():
    names = [ProcessState(member.value).name for member in ProcessState]
    assert names == ["NEW", "RUNNING", "READY", "SWAPPED", "TERMINATED"]


def test_policy_lookup_by_label():
    assert SwappingPolicy("FirstFit") is SwappingPolicy.FIRST_FIT
    assert MemoryAllocationPolicy("WorstFit") is MemoryAllocationPolicy.WORST_FIT
    assert SchedulingPolicy("SPN") is SchedulingPolicy.SPN


def test_unknown_policy_label_rejected():
    with pytest.raises(ValueError):
        SchedulingPolicy("RoundRobin")