"""Composable API functions for the line tracer.

Each function corresponds to a CLI workflow (--steps-only, --graph-only,
--mermaid, --trace) but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging

from .classifier import classify_source, split_lines
from .graph import graph_to_mermaid
from .kind_stats import count_kinds
from .languages import require_language
from .run import run
from .run_types import AnalyzerConfig
from .step_types import AnalysisResult, Graph, Step
from .synthesizer import synthesize_steps
from .trace_types import ExecutionTrace, TraceEntry, VisualizationResult
from . import constants

logger = logging.getLogger(__name__)


def analyze_source(source: str, config: AnalyzerConfig | None = None) -> AnalysisResult:
    """Classify *source* and return its steps, nodes and edges.

    Args:
        source: The source code text. Any string is accepted.
        config: Analyzer options.

    Returns:
        An AnalysisResult; empty for empty input.
    """
    result, _stats = run(source, config)
    return result


def build_graph_from_source(source: str) -> Graph:
    """Return the sequential node/edge graph for *source*."""
    return analyze_source(source).graph


def dump_steps(source: str) -> str:
    """Return a human-readable listing with one synthesized step per line."""
    return "\n".join(f"  {step}" for step in synthesize_steps(source))


def dump_graph(source: str) -> str:
    """Return the text representation of the graph for *source*."""
    return str(build_graph_from_source(source))


def dump_mermaid(source: str) -> str:
    """Return a Mermaid flowchart of the graph for *source*."""
    return graph_to_mermaid(build_graph_from_source(source))


def kind_stats(source: str) -> dict[str, int]:
    """Return line-kind frequency counts for *source*.

    Returns:
        A dict mapping line kind names to their occurrence counts.
    """
    return count_kinds(classify_source(source))


def _trace_entries(source: str, steps: list[Step]) -> list[TraceEntry]:
    lines = split_lines(source)
    return [
        TraceEntry(
            step=index + 1,
            line=step.line,
            line_content=lines[step.line - 1].strip(),
            action=step.action,
            variables=dict(step.variables),
            call_stack=list(step.call_stack),
        )
        for index, step in enumerate(steps)
    ]


def trace_source(
    source: str, language: str = constants.DEFAULT_LANGUAGE
) -> ExecutionTrace:
    """Build the tracer payload: numbered entries with their line text.

    Raises:
        ValueError: If *language* is not a supported language.
    """
    require_language(language)
    logger.info("trace_source: language=%s, %d chars", language, len(source))
    result, stats = run(source, AnalyzerConfig(language=language))
    return ExecutionTrace(
        entries=_trace_entries(source, result.steps),
        stats=stats,
        language=language,
    )


def visualize_source(
    source: str, language: str = constants.DEFAULT_LANGUAGE
) -> VisualizationResult:
    """Build the visualizer payload: steps, final variable state and graph.

    Raises:
        ValueError: If *language* is not a supported language.
    """
    require_language(language)
    logger.info("visualize_source: language=%s, %d chars", language, len(source))
    result, stats = run(source, AnalyzerConfig(language=language))
    return VisualizationResult(
        steps=result.steps,
        graph=result.graph,
        stats=stats,
        language=language,
    )
