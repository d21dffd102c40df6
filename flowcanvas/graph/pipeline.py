"""Render pipeline.

Composes the stages into one call:

    build_graph -> reconcile_isolated_nodes -> assign_levels
        -> compute_layout      (coordinates)
        -> synthesize_edges    (typed edges)

Every call builds its own graph values from the input document, so the
pipeline is safe to run concurrently on the same workflow.
"""
from typing import Mapping, Optional, Union

import structlog

from flowcanvas.config import LayoutOptions, get_settings
from flowcanvas.graph.builder import build_graph
from flowcanvas.graph.capabilities import NodeCapability, get_capability
from flowcanvas.graph.edges import synthesize_edges, to_render_edge
from flowcanvas.graph.layout import compute_layout
from flowcanvas.graph.leveler import assign_levels
from flowcanvas.graph.model import ConnectionInfo, WorkflowGraph
from flowcanvas.graph.reconciler import Comparator, make_reading_order, reconcile_isolated_nodes
from flowcanvas.models.render import (
    NodeRole,
    PositionedNode,
    RenderModel,
    RenderNode,
    RenderNodeData,
)
from flowcanvas.models.workflow import Workflow, parse_workflow

logger = structlog.get_logger()


def _as_workflow(workflow: Union[Workflow, dict]) -> Workflow:
    if isinstance(workflow, Workflow):
        return workflow
    return parse_workflow(workflow)


def _default_comparator() -> Comparator:
    return make_reading_order(get_settings().row_bucket_size)


def analyze_connections(
    workflow: Union[Workflow, dict],
    comparator: Optional[Comparator] = None,
) -> WorkflowGraph:
    """Build, reconcile and level the graph of a workflow."""
    workflow = _as_workflow(workflow)
    graph = build_graph(workflow)
    graph = reconcile_isolated_nodes(graph, workflow, comparator or _default_comparator())
    return assign_levels(graph)


def find_node_connections(workflow: Union[Workflow, dict], node_name: str) -> dict:
    """Declared incoming and outgoing neighbours of one node.

    Only the document's own connections are considered; unknown names
    return empty lists.
    """
    graph = build_graph(_as_workflow(workflow))
    info = graph.info(node_name)
    if info is None:
        return {"incoming": [], "outgoing": []}
    return {"incoming": list(info.incoming), "outgoing": list(info.outgoing)}


def classify_roles(info: ConnectionInfo, declared_outputs: int) -> list[NodeRole]:
    """Topological roles of a node, `step` when none applies."""
    roles = []
    if info.is_root:
        roles.append(NodeRole.ROOT)
    if info.is_leaf:
        roles.append(NodeRole.LEAF)
    if len(set(info.outgoing)) > 1 or declared_outputs > 1:
        roles.append(NodeRole.BRANCH)
    if info.handles_errors:
        roles.append(NodeRole.ERROR_HANDLER)
    return roles or [NodeRole.STEP]


def _render_node(
    positioned: PositionedNode,
    workflow: Workflow,
    graph: WorkflowGraph,
    capabilities: Optional[Mapping[str, NodeCapability]],
) -> RenderNode:
    node = positioned.node
    info = graph.info(node.name) or ConnectionInfo()
    capability = get_capability(node.type, capabilities)

    declared = workflow.connections.get(node.name)
    declared_outputs = 0
    if declared is not None:
        declared_outputs = sum(1 for group in declared.main_groups() if group)

    return RenderNode(
        id=node.id,
        position=positioned.position,
        data=RenderNodeData(
            name=node.name,
            node_type=node.type,
            parameters=node.parameters,
            disabled=node.disabled,
            level=positioned.level,
            roles=classify_roles(info, declared_outputs),
            outputs=max(capability.max_outputs, len(declared.main) if declared else 0),
            has_error_output=capability.supports_error or info.has_error_connections,
            is_start_node=capability.is_trigger,
            is_end_node=info.is_leaf,
        ),
        original_node=node,
    )


def build_render_model(
    workflow: Union[Workflow, dict],
    options: Optional[LayoutOptions] = None,
    capabilities: Optional[Mapping[str, NodeCapability]] = None,
    comparator: Optional[Comparator] = None,
) -> RenderModel:
    """Turn a workflow document into positioned nodes and typed edges.

    Args:
        workflow: Workflow model or raw workflow JSON.
        options: Layout constants. Defaults to the configured settings.
        capabilities: Node-type capability table. Defaults to NODE_CAPABILITIES.
        comparator: Ordering for chaining isolated nodes. Defaults to reading order.

    Returns:
        RenderModel with one node per workflow node, in document order.
    """
    workflow = _as_workflow(workflow)

    if not workflow.nodes:
        logger.warning("empty_workflow", workflow_name=workflow.name)
        return RenderModel()

    graph = analyze_connections(workflow, comparator)
    positioned = compute_layout(workflow, graph, options)
    connections = synthesize_edges(workflow, graph)

    # Names resolve to the first node carrying them
    node_ids: dict[str, str] = {}
    for node in workflow.nodes:
        node_ids.setdefault(node.name, node.id)

    model = RenderModel(
        nodes=[_render_node(item, workflow, graph, capabilities) for item in positioned],
        edges=[to_render_edge(connection, node_ids) for connection in connections],
    )

    logger.info(
        "render_model_built",
        workflow_name=workflow.name,
        node_count=len(model.nodes),
        edge_count=len(model.edges),
        synthesized_count=len(graph.synthesized),
    )

    return model
