"""Layered layout engine.

Nodes sharing a level form a horizontal layer. Layers are stacked
`layer_spacing` apart starting at `base_y`; siblings inside a layer are
`node_spacing` apart and centered on `center_x`, never starting left of
`min_x`. Nodes outside the layered graph fill a grid band of their own,
starting one layer below the last layer, in document order.
"""
from typing import Optional

import structlog

from flowcanvas.config import LayoutOptions, get_settings
from flowcanvas.graph.model import WorkflowGraph
from flowcanvas.models.render import NodePosition, PositionedNode
from flowcanvas.models.workflow import Workflow

logger = structlog.get_logger()


def build_layers(graph: WorkflowGraph) -> list[list[str]]:
    """Group layered node names by level, document order inside a layer.

    A node is layered when the level assigner reached it and it has at
    least one edge.
    """
    layers: list[list[str]] = []
    for name in graph.order:
        info = graph.connections[name]
        if name not in graph.visited or not (info.incoming or info.outgoing):
            continue
        while len(layers) <= info.level:
            layers.append([])
        layers[info.level].append(name)
    return layers


def fallback_level(slot: int, first_level: int, options: LayoutOptions) -> int:
    """Band row of the n-th unplaced node, counted as a level."""
    return first_level + slot // options.fallback_columns


def fallback_position(
    slot: int,
    options: LayoutOptions,
    first_level: int = 0,
) -> NodePosition:
    """Grid slot for the n-th node the layered layout did not place.

    The band starts at `first_level`, normally the level just below the
    last layer, so grid slots never share a row with layered nodes.
    """
    column = slot % options.fallback_columns
    return NodePosition(
        x=options.min_x + column * options.node_spacing,
        y=options.base_y + fallback_level(slot, first_level, options) * options.layer_spacing,
    )


def compute_layout(
    workflow: Workflow,
    graph: WorkflowGraph,
    options: Optional[LayoutOptions] = None,
) -> list[PositionedNode]:
    """Assign coordinates to every node of the workflow, in document order."""
    if options is None:
        options = get_settings().layout_options()

    positions: dict[str, NodePosition] = {}
    layers = build_layers(graph)
    for level, layer in enumerate(layers):
        y = options.base_y + level * options.layer_spacing
        total_width = (len(layer) - 1) * options.node_spacing
        start_x = max(options.min_x, options.center_x - total_width / 2)
        for index, name in enumerate(layer):
            positions[name] = NodePosition(x=start_x + index * options.node_spacing, y=y)

    positioned = []
    placed: set[str] = set()
    fallback_count = 0
    for node in workflow.nodes:
        position = positions.get(node.name)
        if position is None or node.name in placed:
            # Later duplicates of a name land in the band too
            position = fallback_position(fallback_count, options, len(layers))
            level = fallback_level(fallback_count, len(layers), options)
            fallback_count += 1
        else:
            level = graph.connections[node.name].level
        placed.add(node.name)

        positioned.append(PositionedNode(node=node, position=position, level=level))

    logger.debug(
        "layout_computed",
        layer_count=len(layers),
        fallback_count=fallback_count,
    )

    return positioned
