"""Step / Node / Edge records produced by the line tracer."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LineKind(str, Enum):
    FUNCTION = "function"
    OUTPUT = "output"
    ASSIGNMENT = "assignment"
    LOOP = "loop"
    CONDITION = "condition"


class NodeKind(str, Enum):
    FUNCTION = "function"
    VARIABLE = "variable"
    LOOP = "loop"
    CONDITION = "condition"


class LineClassification(BaseModel):
    """Outcome of classifying a single trimmed source line."""

    model_config = ConfigDict(frozen=True)

    line: int
    kind: LineKind
    name: str | None = None
    text: str = ""

    def __str__(self) -> str:
        suffix = f" {self.name}" if self.name else ""
        return f"{self.line:>4}: {self.kind.value}{suffix}"


class Step(BaseModel):
    """A single synthesized entry in the trace.

    Fields cannot be reassigned, the variable snapshot is a read-only
    mapping and the call stack is a tuple.
    """

    model_config = ConfigDict(frozen=True)

    line: int
    action: str
    variables: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    call_stack: tuple[str, ...] = ()

    @field_validator("variables", mode="after")
    @classmethod
    def _freeze_variables(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def __str__(self) -> str:
        if not self.variables:
            return f"L{self.line}  {self.action}"
        names = ", ".join(self.variables)
        return f"L{self.line}  {self.action}  [{names}]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "action": self.action,
            "variables": dict(self.variables),
            "callStack": list(self.call_stack),
        }


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    kind: NodeKind
    label: str
    line: int

    def __str__(self) -> str:
        return f"({self.id}) {self.kind.value} {self.label} @L{self.line}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.kind.value,
            "label": self.label,
            "line": self.line,
        }


class Edge(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: int
    target: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"

    def to_dict(self) -> dict[str, int]:
        return {"source": self.source, "target": self.target}


class Graph(BaseModel):
    nodes: list[Node] = []
    edges: list[Edge] = []

    def __str__(self) -> str:
        lines = [f"nodes={len(self.nodes)}  edges={len(self.edges)}"]
        lines.extend(f"  {node}" for node in self.nodes)
        lines.extend(f"  {edge}" for edge in self.edges)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }


class AnalysisResult(BaseModel):
    """Steps plus the sequential graph, as consumed by display widgets."""

    steps: list[Step] = []
    nodes: list[Node] = []
    edges: list[Edge] = []

    @property
    def graph(self) -> Graph:
        return Graph(nodes=list(self.nodes), edges=list(self.edges))

    def is_empty(self) -> bool:
        return not (self.steps or self.nodes or self.edges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": [step.to_dict() for step in self.steps],
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
