"""Sequential Node/Edge graph builder and Mermaid export."""

from __future__ import annotations

import logging

from .classifier import classify_line, classify_source
from .step_types import Edge, Graph, LineClassification, LineKind, Node, NodeKind
from . import constants

logger = logging.getLogger(__name__)

_NODE_KINDS: dict[LineKind, NodeKind] = {
    LineKind.FUNCTION: NodeKind.FUNCTION,
    LineKind.ASSIGNMENT: NodeKind.VARIABLE,
    LineKind.LOOP: NodeKind.LOOP,
    LineKind.CONDITION: NodeKind.CONDITION,
}

_FIXED_LABELS: dict[NodeKind, str] = {
    NodeKind.LOOP: constants.LOOP_NODE_LABEL,
    NodeKind.CONDITION: constants.CONDITION_NODE_LABEL,
}


def _node_label(kind: NodeKind, classification: LineClassification) -> str:
    return _FIXED_LABELS.get(kind) or classification.name or ""


def _node_classification(
    classification: LineClassification, comment_prefix: str
) -> LineClassification | None:
    """Output has no node kind; such lines are re-checked by the other rules."""
    if classification.kind != LineKind.OUTPUT:
        return classification
    return classify_line(
        classification.text,
        classification.line,
        comment_prefix,
        skip_output=True,
    )


def nodes_from_classifications(
    classifications: list[LineClassification],
    comment_prefix: str = constants.COMMENT_PREFIX,
) -> list[Node]:
    """Create a node for every classification that has a node kind."""
    nodes: list[Node] = []
    for line_classification in classifications:
        classification = _node_classification(line_classification, comment_prefix)
        if classification is None:
            continue
        kind = _NODE_KINDS[classification.kind]
        nodes.append(
            Node(
                id=len(nodes),
                kind=kind,
                label=_node_label(kind, classification),
                line=classification.line,
            )
        )
    return nodes


def chain_edges(nodes: list[Node]) -> list[Edge]:
    """Link node i to node i+1; ignores any real branching or looping."""
    return [
        Edge(source=current.id, target=following.id)
        for current, following in zip(nodes, nodes[1:])
    ]


def graph_from_classifications(
    classifications: list[LineClassification],
    comment_prefix: str = constants.COMMENT_PREFIX,
) -> Graph:
    nodes = nodes_from_classifications(classifications, comment_prefix)
    return Graph(nodes=nodes, edges=chain_edges(nodes))


def build_graph(source: str, comment_prefix: str = constants.COMMENT_PREFIX) -> Graph:
    """Classify *source* and build its sequential graph."""
    graph = graph_from_classifications(
        classify_source(source, comment_prefix), comment_prefix
    )
    logger.debug(
        "Built graph with %d nodes, %d edges", len(graph.nodes), len(graph.edges)
    )
    return graph


def _escape_mermaid(text: str) -> str:
    """Escape characters that break Mermaid node labels."""
    return text.replace('"', "#quot;").replace("<", "#lt;").replace(">", "#gt;")


def _node_id(node: Node) -> str:
    return f"n{node.id}"


def _node_shape(kind: NodeKind) -> tuple[str, str]:
    """Return (open_delim, close_delim) for the Mermaid node shape."""
    if kind == NodeKind.FUNCTION:
        return '[["', '"]]'
    if kind == NodeKind.CONDITION:
        return '{"', '"}'
    if kind == NodeKind.LOOP:
        return '(("', '"))'
    return '["', '"]'


def _render_node(node: Node, indent: str = "    ") -> str:
    open_delim, close_delim = _node_shape(node.kind)
    text = f"<b>{_escape_mermaid(node.label)}</b><br/>{node.kind.value} @ line {node.line}"
    return f"{indent}{_node_id(node)}{open_delim}{text}{close_delim}"


def graph_to_mermaid(graph: Graph) -> str:
    """Convert a Graph to a Mermaid flowchart TD diagram."""
    lines: list[str] = ["flowchart TD"]
    lines.extend(_render_node(node) for node in graph.nodes)
    by_id = {node.id: node for node in graph.nodes}
    for edge in graph.edges:
        lines.append(f"    {_node_id(by_id[edge.source])} --> {_node_id(by_id[edge.target])}")
    if graph.nodes:
        lines.append(f"    style {_node_id(graph.nodes[0])} {constants.MERMAID_ENTRY_STYLE}")
    return "\n".join(lines)
