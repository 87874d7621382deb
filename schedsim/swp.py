"""Queue of processes whose address space waits in the swap area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterator

from .common import SwappingPolicy


@dataclass
class SwappedProcess:
    """Data kept for a swapped process."""

    pid: int
    size: int


class SwapQueue:
    """Swapped-process queue.

    Entries are always appended at the tail; which one is removed depends
    on the swapping policy.
    """

    def __init__(self) -> None:
        self.policy: SwappingPolicy | None = None
        self._items: list[SwappedProcess] | None = None

    def _require_open(self) -> list[SwappedProcess]:
        if self.policy is None or self._items is None:
            raise RuntimeError("Module is not in a valid open state!")
        return self._items

    def open(self, policy: SwappingPolicy) -> None:
        """Open the queue with the given swapping policy."""
        if self.policy is not None or self._items is not None:
            raise RuntimeError("Module must be in a closed state!")
        if not isinstance(policy, SwappingPolicy):
            raise ValueError("Invalid swapping policy!")
        self.policy = policy
        self._items = []

    def close(self) -> None:
        """Discard all entries and return to the closed state."""
        self._require_open()
        self._items = None
        self.policy = None

    def print(self, fout: IO[str]) -> None:
        """Write the state of the queue as a table to ``fout``."""
        items = self._require_open()
        if fout is None:
            raise ValueError("Output file stream is invalid!")
        if self.policy is SwappingPolicy.FIFO:
            label = "|       (FIFO)        |"
        else:
            label = "|     (FirstFit)      |"
        lines = [
            "+=====================+",
            "|  SWP Module State   |",
            label,
            "+-------+-------------+",
            "|  PID  | memory size |",
            "+-------+-------------+",
        ]
        lines.extend(f"| {p.pid:5d} | {f'0x{p.size:x}':>11} |" for p in items)
        lines.append("+=====================+")
        fout.write("\n".join(lines) + "\n")

    def insert(self, pid: int, size: int) -> None:
        """Append a process to the end of the queue."""
        items = self._require_open()
        if pid <= 0:
            raise ValueError("A valid process ID must be greater than zero")
        if size <= 0:
            raise ValueError("Memory size must be greater than zero")
        items.append(SwappedProcess(pid, size))

    def fetch(self, size_available: int) -> int:
        """Remove the entry the policy selects and return its PID.

        With FIFO only the head is considered; with FirstFit the first entry
        that fits is taken. Returns 0 when no process fits.
        """
        items = self._require_open()
        if not items:
            return 0
        if self.policy is SwappingPolicy.FIFO:
            candidates = items[:1]
        else:
            candidates = items
        for position, process in enumerate(candidates):
            if process.size <= size_available:
                del items[position]
                return process.pid
        return 0

    def __len__(self) -> int:
        return len(self._require_open())

    def __iter__(self) -> Iterator[SwappedProcess]:
        return iter(list(self._require_open()))