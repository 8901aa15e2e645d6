"""Heuristic line tracer: cosmetic step lists and sequential graphs."""

from .run import run  # noqa: F401
from .api import (  # noqa: F401
    analyze_source,
    build_graph_from_source,
    dump_steps,
    dump_graph,
    dump_mermaid,
    kind_stats,
    trace_source,
    visualize_source,
)
