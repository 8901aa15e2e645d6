"""Trace and visualization payload types for display widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .run_types import AnalysisStats
from .step_types import Graph, Step
from . import constants


@dataclass(frozen=True)
class TraceEntry:
    """A single numbered entry of the tracer view.

    Pairs a synthesized Step with the trimmed text of the line it came from.
    """

    step: int
    line: int
    line_content: str
    action: str
    variables: dict[str, str] = field(default_factory=dict)
    call_stack: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "step": self.step,
            "line": self.line,
            "lineContent": self.line_content,
            "action": self.action,
            "callStack": list(self.call_stack),
            "variables": dict(self.variables),
        }


@dataclass(frozen=True)
class ExecutionTrace:
    """Complete tracer payload: every entry plus run statistics."""

    entries: list[TraceEntry] = field(default_factory=list)
    stats: AnalysisStats = field(default_factory=AnalysisStats)
    language: str = constants.DEFAULT_LANGUAGE

    @property
    def total_steps(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": constants.PAYLOAD_TYPE_TRACER,
            "language": self.language,
            "trace": [entry.to_dict() for entry in self.entries],
            "totalSteps": self.total_steps,
            "executionTime": self.stats.total_time,
        }


@dataclass(frozen=True)
class VisualizationResult:
    """Visualizer payload: steps with their variable state, plus the graph."""

    steps: list[Step] = field(default_factory=list)
    graph: Graph = field(default_factory=Graph)
    stats: AnalysisStats = field(default_factory=AnalysisStats)
    language: str = constants.DEFAULT_LANGUAGE

    @property
    def final_state(self) -> dict[str, Any]:
        variables = dict(self.steps[-1].variables) if self.steps else {}
        return {"variables": variables}

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": constants.PAYLOAD_TYPE_VISUALIZER,
            "language": self.language,
            "steps": [
                {
                    "line": step.line,
                    "action": step.action,
                    "state": {"variables": dict(step.variables)},
                }
                for step in self.steps
            ],
            "finalState": self.final_state,
            **self.graph.to_dict(),
        }
