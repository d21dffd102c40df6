"""Workflow graph reconstruction and layered layout."""
from flowcanvas.graph.builder import build_graph
from flowcanvas.graph.capabilities import NODE_CAPABILITIES, NodeCapability, get_capability
from flowcanvas.graph.edges import synthesize_edges
from flowcanvas.graph.layout import compute_layout
from flowcanvas.graph.leveler import assign_levels
from flowcanvas.graph.model import ConnectionInfo, WorkflowGraph
from flowcanvas.graph.pipeline import (
    analyze_connections,
    build_render_model,
    find_node_connections,
)
from flowcanvas.graph.reconciler import (
    declaration_order,
    reading_order,
    reconcile_isolated_nodes,
)

__all__ = [
    "build_graph",
    "reconcile_isolated_nodes",
    "assign_levels",
    "compute_layout",
    "synthesize_edges",
    "analyze_connections",
    "build_render_model",
    "find_node_connections",
    "declaration_order",
    "reading_order",
    "ConnectionInfo",
    "WorkflowGraph",
    "NodeCapability",
    "NODE_CAPABILITIES",
    "get_capability",
]
