"""Dependency statement parsing tests."""

from __future__ import annotations

import pytest

from planner.task_parser import InvalidInputError, parse_edge, parse_edges


def test_parse_edge_extracts_before_and_after() -> None:
    assert parse_edge("Step C must be finished before step A can begin.") == ("C", "A")
    assert parse_edge("   Step X must be finished before step Y can begin.  ") == ("X", "Y")


def test_parse_edges_skips_blank_lines(example_edges, example_text: str) -> None:
    assert parse_edges("\n" + example_text + "\n\n") == example_edges
    assert parse_edges("") == []


@pytest.mark.parametrize(
    "line",
    [
        "Step c must be finished before step A can begin.",
        "Step CA must be finished before step A can begin.",
        "Step C must finish before step A can begin.",
        "Step C must be finished before step A can begin. Extra",
    ],
)
def test_parse_edge_rejects_malformed_statements(line: str) -> None:
    with pytest.raises(InvalidInputError):
        parse_edge(line)


def test_parse_edges_reports_line_number() -> None:
    text = "Step C must be finished before step A can begin.\n\nnonsense\n"

    with pytest.raises(InvalidInputError, match="line 3") as excinfo:
        parse_edges(text)

    assert excinfo.value.line_number == 3
    assert isinstance(excinfo.value, ValueError)
