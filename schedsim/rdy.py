"""Queue of processes that are in memory and waiting for the processor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterator

from .common import SchedulingPolicy


@dataclass
class ReadyProcess:
    """Data kept for a ready process."""

    pid: int
    lifetime: float


class ReadyQueue:
    """Ready-to-run queue ordered according to the scheduling policy.

    With FCFS entries keep their insertion order; with SPN they are kept
    in ascending order of lifetime.
    """

    def __init__(self) -> None:
        self.policy: SchedulingPolicy | None = None
        self._items: list[ReadyProcess] | None = None

    def _require_open(self) -> list[ReadyProcess]:
        if self.policy is None or self._items is None:
            raise RuntimeError("Module is not in a valid open state!")
        return self._items

    def open(self, policy: SchedulingPolicy) -> None:
        """Open the queue with the given scheduling policy."""
        if self.policy is not None or self._items is not None:
            raise RuntimeError("Module is not in a valid closed state!")
        if not isinstance(policy, SchedulingPolicy):
            raise ValueError("Given policy is not valid")
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
            raise ValueError("fout must be a valid file stream")
        label = "|       (SPN)        |" if self.policy is SchedulingPolicy.SPN else "|       (FCFS)       |"
        lines = [
            "+====================+",
            "|  RDY Module State  |",
            label,
            "+-------+------------+",
            "|  PID  |  lifetime  |",
            "+-------+------------+",
        ]
        lines.extend(f"| {p.pid:5d} | {p.lifetime:10.1f} |" for p in items)
        lines.append("+====================+")
        fout.write("\n".join(lines) + "\n")

    def insert(self, pid: int, lifetime: float) -> None:
        """Add a process at the place its policy dictates."""
        items = self._require_open()
        if pid == 0:
            raise ValueError("a valid process ID must be greater than zero")
        if not lifetime > 0:
            raise ValueError("a valid process lifetime must be greater than zero")
        entry = ReadyProcess(pid, lifetime)
        if self.policy is SchedulingPolicy.FCFS:
            items.append(entry)
            return
        if not items or lifetime < items[0].lifetime:
            items.insert(0, entry)
            return
        position = next(
            (i for i, p in enumerate(items[1:], start=1) if not p.lifetime < lifetime),
            len(items),
        )
        items.insert(position, entry)

    def fetch(self) -> int:
        """Remove the first entry and return its PID, or 0 if the queue is empty."""
        items = self._require_open()
        if not items:
            return 0
        return items.pop(0).pid

    def __len__(self) -> int:
        return len(self._require_open())

    def __iter__(self) -> Iterator[ReadyProcess]:
        return iter(list(self._require_open()))