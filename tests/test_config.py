import errno
import io
import os

import pytest

from schedsim.common import (
    MemoryAllocationPolicy,
    SchedulingPolicy,
    SimError,
    SwappingPolicy,
)
from schedsim.config import MAX_JOBS, SimParameters, load_parameters, parse_config


def parse(text, params=None):
    return parse_config(io.StringIO(text), params or SimParameters())


def test_defaults_match_source():
    params = SimParameters()
    assert params.job_max_size == 0x10000
    assert params.pid_start == 1001
    assert params.memory_size == 0x100000
    assert params.memory_kernel_size == 0x10000
    assert params.memory_alloc_policy is MemoryAllocationPolicy.WORST_FIT
    assert params.scheduling_policy is SchedulingPolicy.FCFS
    assert params.swapping_policy is SwappingPolicy.FIFO


def test_numeric_keys_are_read():
    text = (
        "MemorySize = 0x200000\n"
        "MemoryKernelSize=0x20000\n"
        "JobMaxSize   =  0x8000   # comment\n"
        "JobRandomSeed = 42\n"
        "PIDStart = 500\n"
        "PIDRandomSeed = 7\n"
        "JobCount = 10\n"
    )
    params = parse(text)
    assert params.memory_size == 0x200000
    assert params.memory_kernel_size == 0x20000
    assert params.job_max_size == 0x8000
    assert params.job_random_seed == 42
    assert params.pid_start == 500
    assert params.pid_random_seed == 7
    assert params.job_count == 10
    assert params.job_load_stream is None


def test_policies_are_case_insensitive():
    text = (
        "MemoryAllocationPolicy = bestfit\n"
        "SchedulingPolicy = spn\n"
        "SwappingPolicy = FIRSTFIT\n"
    )
    params = parse(text)
    assert params.memory_alloc_policy is MemoryAllocationPolicy.BEST_FIT
    assert params.scheduling_policy is SchedulingPolicy.SPN
    assert params.swapping_policy is SwappingPolicy.FIRST_FIT


def test_job_section_and_comments_are_ignored():
    text = (
        "# a comment\n"
        "\n"
        "begin jobs\n"
        "0.0 ; 10.0 ; 0x100\n"
        "garbage line\n"
        "END JOBS\n"
        "PIDStart = 2000\n"
    )
    params = parse(text)
    assert params.pid_start == 2000


def test_stream_kept_for_job_load_without_count_or_seed():
    stream = io.StringIO("PIDStart = 10\n")
    params = parse_config(stream, SimParameters())
    assert params.job_load_stream is stream


def test_seed_alone_disables_job_load_stream():
    params = parse("JobRandomSeed = 3\n")
    assert params.job_load_stream is None


def test_original_params_not_modified():
    original = SimParameters()
    updated = parse("PIDStart = 77\n", original)
    assert original.pid_start == 1001
    assert updated.pid_start == 77


def test_unparsable_line_raises_einval(capsys):
    with pytest.raises(SimError) as info:
        parse("NotAKey = 1\n")
    assert info.value.errno_code == errno.EINVAL
    assert "Error parsing line: NotAKey = 1" in capsys.readouterr().err


def test_invalid_policy_reported(capsys):
    with pytest.raises(SimError):
        parse("SchedulingPolicy = RoundRobin\n")
    assert "Invalid SchedulingPolicy: RoundRobin" in capsys.readouterr().err


def test_memory_size_must_exceed_kernel_size(capsys):
    with pytest.raises(SimError) as info:
        parse("MemorySize = 0x1000\nMemoryKernelSize = 0x1000\n")
    assert info.value.errno_code == errno.EINVAL
    assert "MemorySize must be greater than MemoryKernelSize" in capsys.readouterr().err


@pytest.mark.parametrize("count", [0, MAX_JOBS + 1])
def test_job_count_out_of_range(count):
    with pytest.raises(SimError):
        parse(f"JobCount = {count}\n")


def test_job_count_limits_accepted():
    assert parse("JobCount = 1\n").job_count == 1
    assert parse(f"JobCount = {MAX_JOBS}\n").job_count == MAX_JOBS


def test_load_parameters_without_stream_fills_seeds():
    params = load_parameters(None)
    assert params.job_random_seed == os.getpid()
    assert params.pid_random_seed > 0
    assert params.job_load_stream is None


def test_load_parameters_keeps_configured_seeds():
    params = load_parameters(io.StringIO("JobRandomSeed = 11\nPIDRandomSeed = 12\n"))
    assert params.job_random_seed == 11
    assert params.pid_random_seed == 12


def test_load_parameters_propagates_errors():
    with pytest.raises(SimError):
        load_parameters(io.StringIO("bogus\n"))