# schedsim

Components for simulating a computer system with a single processor and a
limited amount of main memory. Jobs have a single CPU burst and occupy one
contiguous region of memory. The package provides these pieces:

- `schedsim.common`: the `ProcessState`, `SchedulingPolicy` (`FCFS`, `SPN`),
  `SwappingPolicy` (`FIFO`, `FIRST_FIT`) and `MemoryAllocationPolicy`
  (`BEST_FIT`, `WORST_FIT`) enumerations, and `SimError`, the exception
  raised when a lookup or a configuration fails. It carries an `errno_code`
  and the name of the function that raised it.
- `schedsim.pct`: `ProcessControlTable`, a table of `ProcessControlBlock`
  entries kept in ascending PID order. PIDs come from a pool of `count`
  values starting at `pid0`, shuffled with a seeded generator. Undefined
  times and addresses are `None`.
- `schedsim.rdy`: `ReadyQueue`, the processes waiting for the processor.
  With FCFS they stay in arrival order. With SPN they are ordered by
  ascending lifetime.
- `schedsim.swp`: `SwapQueue`, the processes whose address space is swapped
  out. New entries go to the tail. `fetch(size_available)` takes the head
  only if it fits (FIFO), or the first entry that fits (FirstFit). It
  returns `0` when nothing fits.
- `schedsim.config`: `SimParameters`, `parse_config(stream, params)` and
  `load_parameters(stream)`.

Each table and queue must be `open`ed before use and can be `close`d again.
Using one in the wrong state raises `RuntimeError`. Bad arguments raise
`ValueError`. Looking up an unknown PID in the process table raises
`SimError` with `EINVAL`. Each one has a `print(fout)` method that writes
its state to a text stream as a fixed-width table. The queues and the table
can be iterated.

## Installation

```
pip install .
```

## Example

```python
import sys

from schedsim.common import SchedulingPolicy, SwappingPolicy, ProcessState
from schedsim.pct import ProcessControlTable
from schedsim.rdy import ReadyQueue
from schedsim.swp import SwapQueue

pct = ProcessControlTable(max_jobs=64)
pct.open(1001, 4, seed=7)

rdy = ReadyQueue()
rdy.open(SchedulingPolicy.SPN)

swp = SwapQueue()
swp.open(SwappingPolicy.FIRST_FIT)

pid = pct.new_process(0.0, 120.5, 0x2000)
rdy.insert(pid, pct.lifetime(pid))
pct.update_state(pid, ProcessState.READY, 0.0, 0x10000)

pct.print(sys.stdout)
rdy.print(sys.stdout)
swp.print(sys.stdout)

print(rdy.fetch())          # the PID just inserted
print(pct.mem_address(pid)) # 65536
```

## Configuration files

A configuration file holds `Key = value` lines. A `#` starts a comment, and
blank lines are ignored. The recognised keys are:

- `MemorySize`, `MemoryKernelSize` and `JobMaxSize`, in hexadecimal.
- `JobRandomSeed`, `PIDStart`, `PIDRandomSeed` and `JobCount`, in decimal.
- `MemoryAllocationPolicy`: `BestFit` or `WorstFit`.
- `SchedulingPolicy`: `FCFS` or `SPN`.
- `SwappingPolicy`: `FIFO` or `FirstFit`.

Policy names are matched without regard to case. Lines between `Begin Jobs`
and `End Jobs` are skipped.

If neither `JobCount` nor `JobRandomSeed` is given, the stream itself is
stored in `job_load_stream`. This marks it as the source of the job list.

The file is also checked as a whole:

- `MemorySize` must exceed `MemoryKernelSize`.
- `JobCount`, if given, must lie between 1 and 64.

Every problem is reported on standard error. Once the whole file has been
read, a `SimError` with `EINVAL` is raised.

`load_parameters` starts from the defaults in `SimParameters` and applies
the file if one is given. It then fills any seed left undefined: the job
seed from the process id, and the PID seed from the current time.

```python
from schedsim.config import load_parameters

with open("sim.conf") as stream:
    params = load_parameters(stream)
print(params.memory_size, params.scheduling_policy)
```

## What the package does not do

There is no simulation driver: nothing advances simulated time or moves
processes between the tables and queues on its own. There is no table of
submitted jobs, so job lists are neither read from a configuration file nor
generated at random. There is no memory allocator, and there is no
command-line program. The components above are meant to be combined by the
caller.

## Running the tests

```
pip install .[test]
pytest
```