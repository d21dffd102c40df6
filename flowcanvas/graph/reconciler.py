"""Isolated-node reconciler.

Nodes that take part in no declared connection are chained together in
reading order, and the head of that chain is attached in front of the first
root of the declared graph. The result trends toward one connected graph.
"""
import math
from functools import cmp_to_key
from typing import Callable, Optional

import structlog

from flowcanvas.graph.model import WorkflowGraph, link
from flowcanvas.models.workflow import Workflow, WorkflowNode

logger = structlog.get_logger()

Comparator = Callable[[WorkflowNode, WorkflowNode], int]

ROW_BUCKET_SIZE = 50


def _row(node: WorkflowNode, bucket_size: float) -> int:
    # Half-up rounding so nodes a few pixels apart land in the same row
    return math.floor(node.y / bucket_size + 0.5)


def make_reading_order(bucket_size: float = ROW_BUCKET_SIZE) -> Comparator:
    """Build a top-to-bottom, left-to-right comparator.

    The vertical coordinate is bucketed so that nodes on visually the same
    row are ordered by x instead of by small y noise.
    """

    def compare(a: WorkflowNode, b: WorkflowNode) -> int:
        key_a = (_row(a, bucket_size), a.x)
        key_b = (_row(b, bucket_size), b.x)
        return (key_a > key_b) - (key_a < key_b)

    return compare


reading_order: Comparator = make_reading_order()


def declaration_order(a: WorkflowNode, b: WorkflowNode) -> int:
    """Keep nodes in document order (sorting is stable)."""
    return 0


def reconcile_isolated_nodes(
    graph: WorkflowGraph,
    workflow: Workflow,
    comparator: Optional[Comparator] = None,
) -> WorkflowGraph:
    """Connect nodes missing from the declared connection map.

    Args:
        graph: Graph produced by the builder.
        workflow: Source document, used for node positions.
        comparator: Ordering strategy for the isolated chain.
            Defaults to reading order.

    Returns:
        A new graph with the synthesized edges merged in.
    """
    if len(graph) <= 1:
        return graph

    isolated = {name for name in graph.order if name not in graph.processed}
    if not isolated:
        return graph

    connected = [name for name in graph.order if name in graph.processed]
    compare = comparator or reading_order

    # First node per name, the builder's view of the document
    nodes = [workflow.get_node(name) for name in graph.order]
    ordered = sorted(nodes, key=cmp_to_key(compare))
    chain = [node.name for node in ordered if node.name in isolated]

    connections = dict(graph.connections)
    synthesized = list(graph.synthesized)

    for source, target in zip(chain, chain[1:]):
        link(connections, source, target, main=True)
        synthesized.append((source, target))

    attached_to = None
    if connected:
        roots = [name for name in connected if not connections[name].incoming]
        if roots:
            attached_to = roots[0]
            link(connections, chain[0], attached_to, main=True)
            synthesized.append((chain[0], attached_to))

    logger.info(
        "isolated_nodes_reconciled",
        isolated_count=len(chain),
        connected_count=len(connected),
        synthesized_edges=len(synthesized) - len(graph.synthesized),
        attached_to=attached_to,
    )

    return graph.evolve(connections, synthesized=tuple(synthesized))
