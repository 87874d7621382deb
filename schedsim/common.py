"""Types shared by the simulator modules: process states, policies and the error type."""

from __future__ import annotations

import enum
import os


class ProcessState(enum.Enum):
    """The state a process is in at a given moment."""

    NEW = "NEW"
    RUNNING = "RUNNING"
    READY = "READY"
    SWAPPED = "SWAPPED"
    TERMINATED = "TERMINATED"

    def __str__(self) -> str:
        return self.value


class SchedulingPolicy(enum.Enum):
    """Order in which ready processes get the processor."""

    FCFS = "FCFS"
    SPN = "SPN"

    def __str__(self) -> str:
        return self.value


class SwappingPolicy(enum.Enum):
    """Rule used to pick a swapped process to bring back into memory."""

    FIFO = "FIFO"
    FIRST_FIT = "FirstFit"

    def __str__(self) -> str:
        return self.value


class MemoryAllocationPolicy(enum.Enum):
    """Rule used to choose a free memory block for a process."""

    BEST_FIT = "BestFit"
    WORST_FIT = "WorstFit"

    def __str__(self) -> str:
        return self.value


class SimError(Exception):
    """Error raised by the simulator, carrying a system error number."""

    def __init__(self, errno_code: int, func: str) -> None:
        self.errno_code = errno_code
        self.func = func
        self.msg = f"{func}: {os.strerror(errno_code)} (error {errno_code})"
        super().__init__(self.msg)

    def __str__(self) -> str:
        return self.msg