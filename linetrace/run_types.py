"""Analysis run data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class AnalyzerConfig:
    """Groups line-tracer configuration."""

    language: str = constants.DEFAULT_LANGUAGE
    comment_prefix: str = constants.COMMENT_PREFIX
    verbose: bool = False


@dataclass
class AnalysisStats:
    """Timing and size statistics for each analysis stage."""

    source_bytes: int = 0
    source_lines: int = 0
    language: str = ""

    # Stage timings (seconds)
    classify_time: float = 0.0
    synthesize_time: float = 0.0
    graph_time: float = 0.0
    total_time: float = 0.0

    # Output sizes
    classified_lines: int = 0
    step_count: int = 0
    node_count: int = 0
    edge_count: int = 0

    def report(self) -> str:
        lines = [
            "═══ Analysis Statistics ═══",
            f"  Source: {self.source_lines} lines, {self.source_bytes} bytes ({self.language})",
            "",
            f"  {'Stage':<20} {'Time':>10}  {'Output':>30}",
            f"  {'─' * 20} {'─' * 10}  {'─' * 30}",
        ]

        stages = [
            ("Classify lines", self.classify_time, f"{self.classified_lines} lines"),
            ("Synthesize steps", self.synthesize_time, f"{self.step_count} steps"),
            (
                "Build graph",
                self.graph_time,
                f"{self.node_count} nodes, {self.edge_count} edges",
            ),
        ]
        for name, t, output in stages:
            time_str = f"{t * 1000:>8.1f}ms"
            lines.append(f"  {name:<20} {time_str:>10}  {output:>30}")

        lines.append(f"  {'─' * 20} {'─' * 10}  {'─' * 30}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        return "\n".join(lines)
