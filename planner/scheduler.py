"""Single-consumer topological walk over a dependency graph."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterable

from planner.dependency_graph import DependencyGraph

logger = logging.getLogger("stepwise.scheduler")


class ReadyQueue:
    """Tasks eligible to start; always yields the smallest identifier first."""

    def __init__(self, tasks: Iterable[str] = ()) -> None:
        self._heap: list[str] = []
        self._members: set[str] = set()
        for task in tasks:
            self.push(task)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, task: object) -> bool:
        return task in self._members

    def push(self, task: str) -> bool:
        """Insert ``task``; return False if it was already queued."""
        if task in self._members:
            return False
        self._members.add(task)
        heapq.heappush(self._heap, task)
        return True

    def pop(self) -> str:
        task = heapq.heappop(self._heap)
        self._members.discard(task)
        return task


def topological_order(graph: DependencyGraph) -> list[str]:
    """Return the deterministic one-at-a-time execution order.

    Whenever several tasks are ready, the lexicographically smallest goes
    next, including tasks that became ready after larger ones were queued.
    """
    queue = ReadyQueue(graph.roots)
    visited: set[str] = set()
    order: list[str] = []

    while queue:
        current = queue.pop()
        visited.add(current)
        order.append(current)
        for nxt in graph.successors_of(current):
            if nxt not in visited and graph.is_ready(nxt, visited):
                queue.push(nxt)

    if len(order) < len(graph):
        logger.warning(
            "Walk stopped after %d of %d tasks; the rest are blocked", len(order), len(graph)
        )
    return order


def render_order(tasks: Iterable[str]) -> str:
    """Concatenate task identifiers, e.g. ``["C", "A"]`` -> ``"CA"``."""
    return "".join(tasks)
