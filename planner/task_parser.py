"""Translate dependency statements into ``(before, after)`` edges."""

from __future__ import annotations

import re

from planner.dependency_graph import Edge

_STATEMENT_RE = re.compile(r"Step ([A-Z]) must be finished before step ([A-Z]) can begin\.")


class InvalidInputError(ValueError):
    """Raised when a dependency statement cannot be parsed."""

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Unrecognized statement{where}: {line.strip()!r}")


def parse_edge(line: str) -> Edge:
    """Parse one statement, e.g. ``Step C must be finished before step A can begin.``"""
    match = _STATEMENT_RE.fullmatch(line.strip())
    if match is None:
        raise InvalidInputError(line)
    return match.group(1), match.group(2)


def parse_edges(text: str) -> list[Edge]:
    """Parse every non-blank line of ``text``."""
    edges: list[Edge] = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            edges.append(parse_edge(line))
        except InvalidInputError as exc:
            raise InvalidInputError(line, number) from exc
    return edges
