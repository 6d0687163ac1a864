"""Typer command handlers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import typer
import yaml

from core.orchestrator import Orchestrator, RuntimeBundle, configure_logging
from planner.dependency_graph import CycleError
from planner.execution_plan import ExecutionPlan
from planner.scheduler import render_order
from planner.task_parser import InvalidInputError


def _abort(exc: Exception) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def _runtime(root: Path | None = None) -> RuntimeBundle:
    try:
        bundle = Orchestrator(root=root).build()
        configure_logging(bundle.settings.logging.level)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        _abort(exc)
    return bundle


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _plan(
    path: str,
    worker_count: int | None = None,
    base_cost: int | None = None,
    root: Path | None = None,
) -> ExecutionPlan:
    bundle = _runtime(root)
    try:
        return Orchestrator(root=root).plan(
            _read_input(path),
            settings=bundle.settings,
            worker_count=worker_count,
            base_cost=base_cost,
        )
    except (InvalidInputError, CycleError, ValueError, OSError) as exc:
        _abort(exc)


def order(path: str = "-", root: Path | None = None) -> None:
    """Print the single-consumer execution order."""
    bundle = _runtime(root)
    try:
        tasks = Orchestrator(root=root).order(_read_input(path), settings=bundle.settings)
    except (InvalidInputError, CycleError, ValueError, OSError) as exc:
        _abort(exc)
    typer.echo(render_order(tasks))


def simulate(
    path: str = "-",
    workers: int | None = None,
    base_cost: int | None = None,
    root: Path | None = None,
) -> None:
    """Print the worker-pool completion order and tick count."""
    plan = _plan(path, worker_count=workers, base_cost=base_cost, root=root)
    typer.echo(f"{plan.completion_text} {plan.total_ticks}")


def run(
    path: str = "-",
    workers: int | None = None,
    base_cost: int | None = None,
    as_json: bool = False,
    root: Path | None = None,
) -> None:
    """Print both schedules."""
    plan = _plan(path, worker_count=workers, base_cost=base_cost, root=root)
    if as_json:
        typer.echo(json.dumps(plan.model_dump(), indent=2))
        return
    typer.echo(plan.order_text)
    typer.echo(f"{plan.completion_text} {plan.total_ticks}")


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(root)
    typer.echo(json.dumps(bundle.settings.model_dump(), indent=2))
