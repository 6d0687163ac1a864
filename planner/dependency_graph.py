"""Task dependency graph built from "must finish before" edges."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

Edge = tuple[str, str]


class CycleError(ValueError):
    """Raised when tasks can never become ready because of a dependency cycle."""

    def __init__(self, members: list[str]) -> None:
        self.members = members
        super().__init__(f"Dependency cycle detected among tasks: {', '.join(members)}")


@dataclass
class DependencyGraph:
    """Read-only DAG of tasks; answers readiness queries.

    ``successors`` maps a task to the tasks unlocked once it completes (may
    hold duplicates when the input repeats an edge). ``prerequisites`` maps a
    task to the tasks that must complete before it may start.
    """

    successors: dict[str, list[str]] = field(default_factory=dict)
    prerequisites: dict[str, set[str]] = field(default_factory=dict)
    roots: frozenset[str] = frozenset()
    isolated: frozenset[str] = frozenset()

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task: object) -> bool:
        return task in self.successors or task in self.prerequisites or task in self.isolated

    @property
    def tasks(self) -> tuple[str, ...]:
        """Every known task, sorted."""
        known = set(self.successors) | set(self.prerequisites) | set(self.isolated)
        return tuple(sorted(known))

    def successors_of(self, task: str) -> tuple[str, ...]:
        """Tasks unlocked by ``task``, deduplicated in first-insertion order."""
        return tuple(dict.fromkeys(self.successors.get(task, ())))

    def prerequisites_of(self, task: str) -> frozenset[str]:
        return frozenset(self.prerequisites.get(task, ()))

    def is_ready(self, task: str, satisfied: Collection[str]) -> bool:
        """Return whether every prerequisite of ``task`` is in ``satisfied``."""
        return all(dep in satisfied for dep in self.prerequisites.get(task, ()))

    def find_cycle_members(self) -> list[str]:
        """Return sorted tasks that can never become ready (empty for a DAG).

        Kahn elimination: repeatedly drop tasks with no remaining
        prerequisites; whatever survives sits on or behind a cycle.
        """
        remaining = {task: set(self.prerequisites.get(task, ())) for task in self.tasks}
        frontier = [task for task, deps in remaining.items() if not deps]
        while frontier:
            done = frontier.pop()
            del remaining[done]
            for nxt in self.successors_of(done):
                deps = remaining.get(nxt)
                if deps is None:
                    continue
                deps.discard(done)
                if not deps:
                    frontier.append(nxt)
        return sorted(remaining)

    def ensure_acyclic(self) -> None:
        """Raise ``CycleError`` if some task is blocked by a cycle."""
        members = self.find_cycle_members()
        if members:
            raise CycleError(members)


def build_graph(edges: Iterable[Edge], tasks: Iterable[str] = ()) -> DependencyGraph:
    """Build a graph from ``(before, after)`` pairs.

    ``tasks`` registers extra tasks that take part in no edge; they are roots.
    Duplicate edges are harmless.
    """
    successors: dict[str, list[str]] = defaultdict(list)
    prerequisites: dict[str, set[str]] = defaultdict(set)
    befores: set[str] = set()
    afters: set[str] = set()

    for before, after in edges:
        successors[before].append(after)
        prerequisites[after].add(before)
        befores.add(before)
        afters.add(after)

    isolated = {task for task in tasks if task not in befores and task not in afters}

    return DependencyGraph(
        successors=dict(successors),
        prerequisites=dict(prerequisites),
        roots=frozenset((befores - afters) | isolated),
        isolated=frozenset(isolated),
    )
