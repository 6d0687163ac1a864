"""Shared graph fixtures."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

Edges = list[tuple[str, str]]


@pytest.fixture
def example_edges() -> Edges:
    return [
        ("C", "A"),
        ("C", "F"),
        ("A", "B"),
        ("A", "D"),
        ("B", "E"),
        ("D", "E"),
        ("F", "E"),
    ]


@pytest.fixture
def random_dag() -> Callable[..., Edges]:
    """Seeded random DAG: edges only run forward in a shuffled alphabet sample."""

    def make(seed: int, size: int = 12, density: float = 0.3) -> Edges:
        rng = random.Random(seed)
        letters = rng.sample("ABCDEFGHIJKLMNOPQRSTUVWXYZ", size)
        return [
            (letters[i], letters[j])
            for i in range(size)
            for j in range(i + 1, size)
            if rng.random() < density
        ]

    return make


@pytest.fixture
def example_text() -> str:
    return (
        "Step C must be finished before step A can begin.\n"
        "Step C must be finished before step F can begin.\n"
        "Step A must be finished before step B can begin.\n"
        "Step A must be finished before step D can begin.\n"
        "Step B must be finished before step E can begin.\n"
        "Step D must be finished before step E can begin.\n"
        "Step F must be finished before step E can begin.\n"
    )
