"""Simulation parameters and the parser of the configuration file."""

from __future__ import annotations

import dataclasses
import errno
import os
import re
import sys
import time
from dataclasses import dataclass
from typing import IO, Callable

from .common import (
    MemoryAllocationPolicy,
    SchedulingPolicy,
    SimError,
    SwappingPolicy,
)

MAX_JOBS = 64
"""Largest number of jobs a simulation may hold."""


@dataclass
class SimParameters:
    """Parameters that drive a simulation run."""

    job_load_stream: IO[str] | None = None
    job_max_size: int = 0x10000
    job_random_seed: int | None = None
    job_count: int = 0
    pid_start: int = 1001
    pid_random_seed: int | None = None
    memory_size: int = 0x100000
    memory_kernel_size: int = 0x10000
    memory_alloc_policy: MemoryAllocationPolicy = MemoryAllocationPolicy.WORST_FIT
    scheduling_policy: SchedulingPolicy = SchedulingPolicy.FCFS
    swapping_policy: SwappingPolicy = SwappingPolicy.FIFO


_HEX = r"([+-]?(?:0[xX])?[0-9a-fA-F]+)"
_DEC = r"([+-]?[0-9]+)"


def _hex32(text: str) -> int:
    return int(text, 16) % (1 << 32)


def _uint16(text: str) -> int:
    return int(text) % (1 << 16)


_NUMERIC_KEYS: list[tuple[str, str, str, Callable[[str], int]]] = [
    ("MemorySize", "memory_size", _HEX, _hex32),
    ("MemoryKernelSize", "memory_kernel_size", _HEX, _hex32),
    ("JobMaxSize", "job_max_size", _HEX, _hex32),
    ("JobRandomSeed", "job_random_seed", _DEC, int),
    ("PIDStart", "pid_start", _DEC, _uint16),
    ("PIDRandomSeed", "pid_random_seed", _DEC, int),
    ("JobCount", "job_count", _DEC, _uint16),
]

_NUMERIC_PATTERNS = [
    (re.compile(re.escape(key) + r"\s*=\s*" + value), attr, convert)
    for key, attr, value, convert in _NUMERIC_KEYS
]

_POLICY_KEYS = [
    ("MemoryAllocationPolicy", "memory_alloc_policy", MemoryAllocationPolicy),
    ("SchedulingPolicy", "scheduling_policy", SchedulingPolicy),
    ("SwappingPolicy", "swapping_policy", SwappingPolicy),
]

_POLICY_PATTERNS = [
    (key, re.compile(re.escape(key) + r"\s*=\s*(\S+)"), attr, enum_type)
    for key, attr, enum_type in _POLICY_KEYS
]


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def parse_config(stream: IO[str], params: SimParameters) -> SimParameters:
    """Read parameters from ``stream`` and return ``params`` updated with them.

    The job section (between ``Begin Jobs`` and ``End Jobs``) is skipped.
    Every problem is reported on standard error; if any occurred a
    :class:`SimError` with ``EINVAL`` is raised once the whole file is read.
    """
    if stream is None:
        raise ValueError("fin must be a valid file stream")
    result = dataclasses.replace(params)
    job_section = False
    failed = False
    job_count_read = False
    job_seed_read = False

    for raw in stream:
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        lowered = line.lower()
        if lowered == "begin jobs":
            job_section = True
            continue
        if lowered == "end jobs":
            job_section = False
            continue
        if job_section:
            continue

        numeric = next(
            ((attr, convert, m) for pattern, attr, convert in _NUMERIC_PATTERNS
             if (m := pattern.match(line))),
            None,
        )
        if numeric is not None:
            attr, convert, match = numeric
            setattr(result, attr, convert(match.group(1)))
            if attr == "job_count":
                job_count_read = True
            elif attr == "job_random_seed":
                job_seed_read = True
            continue

        policy = next(
            ((key, attr, enum_type, m) for key, pattern, attr, enum_type in _POLICY_PATTERNS
             if (m := pattern.match(line))),
            None,
        )
        if policy is not None:
            key, attr, enum_type, match = policy
            name = match.group(1)[:31]
            chosen = next(
                (member for member in enum_type if member.value.lower() == name.lower()),
                None,
            )
            if chosen is None:
                _error(f"Invalid {key}: {name}")
                failed = True
            else:
                setattr(result, attr, chosen)
            continue

        print(f"Error parsing line: {line}", file=sys.stderr)
        failed = True

    if not job_count_read and not job_seed_read:
        result.job_load_stream = stream

    if result.memory_size <= result.memory_kernel_size:
        _error("MemorySize must be greater than MemoryKernelSize")
        failed = True
    if job_count_read and not 1 <= result.job_count <= MAX_JOBS:
        _error(f"JobCount must be >= 1 and <= {MAX_JOBS}")
        failed = True

    if failed:
        raise SimError(errno.EINVAL, "parse_config")
    return result


def load_parameters(stream: IO[str] | None) -> SimParameters:
    """Build the parameters of a run: defaults, then ``stream`` if given.

    Seeds left undefined are taken from the process id (jobs) and the
    current time (PIDs).
    """
    params = SimParameters()
    if stream is not None:
        params = parse_config(stream, params)
    if params.job_random_seed is None:
        params.job_random_seed = os.getpid()
    if params.pid_random_seed is None:
        params.pid_random_seed = int(time.time())
    return params