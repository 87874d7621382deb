"""Process control table: the control block of every process in the simulation."""

from __future__ import annotations

import bisect
import dataclasses
import errno
import random
from dataclasses import dataclass
from typing import IO, Iterator

from .common import ProcessState, SimError

_HEADER = (
    "+======================================================================================================================+\n"
    "|                                                   PCT module state                                                   |\n"
    "+-------+-------------+-------------+-------------+------------+------------+-------------+--------------+-------------+\n"
    "|  PID  |    state    |  admission  |  lifetime   | store time | start time | finish time | memory start | memory size |\n"
    "+-------+-------------+-------------+-------------+------------+------------+-------------+--------------+-------------+\n"
)
_FOOTER = (
    "+======================================================================================================================+\n"
)


@dataclass
class ProcessControlBlock:
    """Data kept for one process; ``None`` marks an undefined time or address."""

    pid: int
    state: ProcessState
    admission_time: float
    lifetime: float
    mem_size: int
    store_time: float | None = None
    start_time: float | None = None
    finish_time: float | None = None
    mem_start: int | None = None


def _time_text(value: float | None) -> str:
    return "UNDEF" if value is None else f"{value:.1f}"


def _alt_hex(value: int) -> str:
    # A zero value carries no base prefix in this table's hex columns.
    return "0" if value == 0 else f"0x{value:x}"


class ProcessControlTable:
    """Table of process control blocks kept in ascending order of PID."""

    def __init__(self, max_jobs: int) -> None:
        if max_jobs < 2:
            raise ValueError("max_jobs must be at least 2")
        self.max_jobs = max_jobs
        self._blocks: list[ProcessControlBlock] | None = None
        self._pids: list[int] = []
        self._next_pid_index = 0

    def _require_open(self) -> list[ProcessControlBlock]:
        if self._blocks is None:
            raise RuntimeError("Module is not in a valid open state!")
        return self._blocks

    def _find(self, pid: int, func: str) -> ProcessControlBlock:
        blocks = self._require_open()
        if pid <= 0:
            raise ValueError("a valid process ID must be greater than zero")
        for block in blocks:
            if block.pid == pid:
                return block
        raise SimError(errno.EINVAL, func)

    def open(self, pid0: int, count: int, seed: int) -> None:
        """Open the table and prepare ``count`` PIDs from ``pid0`` in a seeded random order."""
        if self._blocks is not None:
            raise RuntimeError("The module is not in a valid closed state")
        if not 1 < count <= self.max_jobs:
            raise ValueError("cnt must be > 1 and <= MAX_JOBS")
        pids = list(range(pid0, pid0 + count))
        rng = random.Random(seed)
        for i in range(count):
            j = rng.randrange(count)
            pids[i], pids[j] = pids[j], pids[i]
        self._pids = pids + [0] * (self.max_jobs - count)
        self._next_pid_index = 0
        self._blocks = []

    def close(self) -> None:
        """Discard every entry and return to the closed state."""
        self._require_open()
        self._blocks = None
        self._pids = []
        self._next_pid_index = 0

    def print(self, fout: IO[str]) -> None:
        """Write the state of the table to ``fout``."""
        blocks = self._require_open()
        if fout is None:
            raise ValueError("fout must be a valid file stream")
        rows = []
        for b in blocks:
            mem_start = "UNDEF" if b.mem_start is None else _alt_hex(b.mem_start)
            rows.append(
                f"| {b.pid:5d} | {str(b.state):<11} | {b.admission_time:11.1f} | "
                f"{b.lifetime:11.1f} | {_time_text(b.store_time):>10} | "
                f"{_time_text(b.start_time):>10} | {_time_text(b.finish_time):>11} |   "
                f"{mem_start:>10} |   {_alt_hex(b.mem_size):>9} |\n"
            )
        fout.write(_HEADER + "".join(rows) + _FOOTER)

    def new_process(self, admission_time: float, lifetime: float, mem_size: int) -> int:
        """Create a NEW process, insert it by PID and return its PID."""
        blocks = self._require_open()
        if not admission_time >= 0:
            raise ValueError("Bad admission time")
        if not lifetime > 0:
            raise ValueError("Bad lifetime")
        if mem_size <= 0:
            raise ValueError("Bad memory size")
        if self._next_pid_index >= self.max_jobs:
            raise RuntimeError("No available PIDs!")
        pid = self._pids[self._next_pid_index]
        self._next_pid_index += 1
        block = ProcessControlBlock(
            pid=pid,
            state=ProcessState.NEW,
            admission_time=admission_time,
            lifetime=lifetime,
            mem_size=mem_size,
        )
        position = bisect.bisect_left([b.pid for b in blocks], pid)
        blocks.insert(position, block)
        return pid

    def lifetime(self, pid: int) -> float:
        """Return the execution time of process ``pid``."""
        return self._find(pid, "lifetime").lifetime

    def mem_size(self, pid: int) -> int:
        """Return the address space size of process ``pid``."""
        return self._find(pid, "mem_size").mem_size

    def mem_address(self, pid: int) -> int | None:
        """Return the first memory frame of process ``pid``, or ``None`` if undefined."""
        return self._find(pid, "mem_address").mem_start

    def update_state(
        self,
        pid: int,
        state: ProcessState,
        time: float | None = None,
        address: int | None = None,
    ) -> None:
        """Move process ``pid`` to ``state``, recording the time and address it implies."""
        self._require_open()
        if pid == 0:
            raise ValueError("PID can't be zero")
        if not isinstance(state, ProcessState):
            raise ValueError("Wrong state value")
        if state is ProcessState.NEW:
            raise ValueError("on updating, state can not be NEW")
        block = self._find(pid, "update_state")
        if state is ProcessState.TERMINATED:
            block.finish_time = time
        elif state is ProcessState.RUNNING:
            block.start_time = time
        elif state is ProcessState.READY:
            block.store_time = time
            block.mem_start = address
        elif state is ProcessState.SWAPPED:
            block.mem_start = None
        block.state = state

    def __iter__(self) -> Iterator[ProcessControlBlock]:
        return iter([dataclasses.replace(b) for b in self._require_open()])