"""Top-level application orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.policy_runtime import SchedulerSettings, load_effective_config, settings_from_config
from executor.worker_pool import letter_cost, simulate
from planner.dependency_graph import DependencyGraph, build_graph
from planner.execution_plan import ExecutionPlan
from planner.scheduler import topological_order
from planner.task_parser import parse_edges

logger = logging.getLogger("stepwise.orchestrator")


def configure_logging(level: str) -> None:
    """Apply ``level`` to the root ``stepwise`` logger."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("stepwise").setLevel(level.upper())


@dataclass
class RuntimeBundle:
    """Holds loaded configuration."""

    config: dict[str, Any]
    settings: SchedulerSettings


class Orchestrator:
    """Wires configuration, parsing and both schedulers for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        return RuntimeBundle(config=config, settings=settings_from_config(config))

    def load_graph(self, text: str, settings: SchedulerSettings) -> DependencyGraph:
        """Parse ``text`` into a graph, rejecting cycles when configured to."""
        graph = build_graph(parse_edges(text))
        logger.info("Built graph with %d tasks and %d roots", len(graph), len(graph.roots))
        if settings.detect_cycles:
            graph.ensure_acyclic()
        return graph

    def order(self, text: str, *, settings: SchedulerSettings | None = None) -> list[str]:
        """Parse ``text`` and return only the single-consumer order."""
        settings = settings or self.build().settings
        return topological_order(self.load_graph(text, settings))

    def plan(
        self,
        text: str,
        *,
        settings: SchedulerSettings | None = None,
        worker_count: int | None = None,
        base_cost: int | None = None,
    ) -> ExecutionPlan:
        """Parse ``text`` and compute the single-consumer order and pool simulation."""
        settings = settings or self.build().settings
        workers = worker_count if worker_count is not None else settings.worker_count
        cost = base_cost if base_cost is not None else settings.base_cost

        graph = self.load_graph(text, settings)
        order = topological_order(graph)
        simulation = simulate(graph, workers, letter_cost(cost))
        return ExecutionPlan(
            order=order,
            completion_order=simulation.order,
            worker_count=workers,
            base_cost=cost,
            total_ticks=simulation.total_ticks,
        )
