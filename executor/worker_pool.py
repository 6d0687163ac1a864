"""Tick-based simulation of a fixed worker pool draining a dependency graph.

Each tick runs three phases in strict order:

1. assignment: idle workers, lowest index first, take the smallest ready task;
2. work: every busy worker spends one tick, finishers are recorded in
   ascending worker index;
3. propagation: successors of this tick's finishers whose prerequisites are
   all complete join the ready queue.

A task unlocked during propagation is therefore assigned no earlier than the
next tick. The run ends once the queue is empty and every worker is idle.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from planner.dependency_graph import DependencyGraph
from planner.scheduler import ReadyQueue

logger = logging.getLogger("stepwise.worker_pool")

CostFn = Callable[[str], int]

DEFAULT_BASE_COST = 60
ALPHABET = string.ascii_uppercase


@dataclass(frozen=True)
class Idle:
    """Worker holds no task."""


@dataclass(frozen=True)
class Working:
    """Worker is busy with ``task`` for ``remaining`` more ticks."""

    task: str
    remaining: int


WorkerStatus = Idle | Working

IDLE = Idle()


@dataclass
class SimulationResult:
    """Completion order and elapsed ticks of one simulation run."""

    order: list[str] = field(default_factory=list)
    total_ticks: int = 0

    def __iter__(self) -> Iterator[object]:
        yield self.order
        yield self.total_ticks


def letter_cost(base_cost: int = DEFAULT_BASE_COST) -> CostFn:
    """Cost function: ``base_cost`` plus the 1-based letter rank (A=1, B=2, ...)."""

    def cost(task: str) -> int:
        if len(task) != 1 or task not in ALPHABET:
            raise ValueError(f"Task {task!r} is not a single uppercase letter.")
        return base_cost + ALPHABET.index(task) + 1

    return cost


class WorkerPool:
    """Fixed-size array of workers indexed ``0..count-1``."""

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"Worker count must be at least 1, got {count}.")
        self.workers: list[WorkerStatus] = [IDLE] * count

    def available(self) -> list[int]:
        """Indices of idle workers, ascending."""
        return [idx for idx, status in enumerate(self.workers) if isinstance(status, Idle)]

    def all_idle(self) -> bool:
        return all(isinstance(status, Idle) for status in self.workers)

    def in_progress(self, task: str) -> bool:
        return any(
            isinstance(status, Working) and status.task == task for status in self.workers
        )

    def assign(self, index: int, task: str, ticks: int) -> None:
        """Move worker ``index`` from idle to working on ``task``."""
        if not isinstance(self.workers[index], Idle):
            raise RuntimeError(f"Worker {index} is busy.")
        if ticks < 1:
            raise ValueError(f"Task {task!r} must cost at least one tick, got {ticks}.")
        self.workers[index] = Working(task=task, remaining=ticks)

    def tick(self) -> list[str]:
        """Advance every busy worker one tick; return finished tasks by worker index."""
        finished: list[str] = []
        for idx, status in enumerate(self.workers):
            if not isinstance(status, Working):
                continue
            if status.remaining == 1:
                self.workers[idx] = IDLE
                finished.append(status.task)
            else:
                self.workers[idx] = Working(task=status.task, remaining=status.remaining - 1)
        return finished


def simulate(
    graph: DependencyGraph,
    worker_count: int,
    cost_fn: CostFn | None = None,
) -> SimulationResult:
    """Run the pool over ``graph`` and return completion order and total ticks."""
    cost = cost_fn or letter_cost()
    pool = WorkerPool(worker_count)
    queue = ReadyQueue(graph.roots)
    completed: set[str] = set()
    result = SimulationResult()

    while queue or not pool.all_idle():
        for idx in pool.available():
            if not queue:
                break
            task = queue.pop()
            pool.assign(idx, task, cost(task))
            logger.debug("t=%d worker %d starts %s", result.total_ticks, idx, task)

        finished = pool.tick()
        for task in finished:
            completed.add(task)
            result.order.append(task)
            logger.debug("t=%d finished %s", result.total_ticks + 1, task)

        for task in finished:
            for nxt in graph.successors_of(task):
                if nxt in completed or pool.in_progress(nxt):
                    continue
                if graph.is_ready(nxt, completed):
                    queue.push(nxt)

        result.total_ticks += 1

    logger.info(
        "Simulated %d tasks on %d workers in %d ticks",
        len(result.order),
        worker_count,
        result.total_ticks,
    )
    return result
