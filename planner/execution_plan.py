"""Execution plan models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from planner.scheduler import render_order


class ExecutionPlan(BaseModel):
    """Both schedules computed for one dependency graph."""

    order: list[str] = Field(default_factory=list)
    completion_order: list[str] = Field(default_factory=list)
    worker_count: int = Field(default=1, ge=1)
    base_cost: int = Field(default=0, ge=0)
    total_ticks: int = Field(default=0, ge=0)

    @property
    def order_text(self) -> str:
        return render_order(self.order)

    @property
    def completion_text(self) -> str:
        return render_order(self.completion_order)
