"""Orchestrator — run() entry point."""

from __future__ import annotations

import logging
import time

from .classifier import classify_source
from .graph import graph_from_classifications
from .run_types import AnalysisStats, AnalyzerConfig
from .step_types import AnalysisResult
from .synthesizer import steps_from_classifications

logger = logging.getLogger(__name__)


def _count_lines(source: str) -> int:
    return source.count("\n") + (1 if source and not source.endswith("\n") else 0)


def run(
    source: str, config: AnalyzerConfig | None = None
) -> tuple[AnalysisResult, AnalysisStats]:
    """End-to-end: classify → synthesize steps → build sequential graph.

    Steps and graph share one classification pass. Never raises for any
    string input; lines no rule matches are skipped.

    Args:
        source: Raw source code string.
        config: Analyzer options; defaults to ``AnalyzerConfig()``.

    Returns:
        The analysis result and per-stage statistics.
    """
    config = config or AnalyzerConfig()
    pipeline_start = time.perf_counter()
    stats = AnalysisStats(
        source_bytes=len(source.encode("utf-8", errors="surrogatepass")),
        source_lines=_count_lines(source),
        language=config.language,
    )

    # 1. Classify
    t0 = time.perf_counter()
    classifications = classify_source(source, config.comment_prefix)
    stats.classify_time = time.perf_counter() - t0
    stats.classified_lines = len(classifications)

    if config.verbose:
        print("═══ Classified lines ═══")
        for classification in classifications:
            print(f"  {classification}")
        print()

    # 2. Steps
    t0 = time.perf_counter()
    steps = steps_from_classifications(classifications)
    stats.synthesize_time = time.perf_counter() - t0
    stats.step_count = len(steps)

    # 3. Graph
    t0 = time.perf_counter()
    graph = graph_from_classifications(classifications, config.comment_prefix)
    stats.graph_time = time.perf_counter() - t0
    stats.node_count = len(graph.nodes)
    stats.edge_count = len(graph.edges)

    stats.total_time = time.perf_counter() - pipeline_start
    logger.info(
        "Analyzed %d lines: %d steps, %d nodes in %.1fms",
        stats.source_lines,
        stats.step_count,
        stats.node_count,
        stats.total_time * 1000,
    )

    if config.verbose:
        print(stats.report())

    return AnalysisResult(steps=steps, nodes=graph.nodes, edges=graph.edges), stats
