"""Pydantic models for the layout engine."""
from flowcanvas.models.workflow import (
    ConnectionTarget,
    NodeConnections,
    Workflow,
    WorkflowNode,
    parse_workflow,
)
from flowcanvas.models.render import (
    ConnectionKind,
    EdgeStyle,
    NodePosition,
    NodeRole,
    PositionedNode,
    RenderEdge,
    RenderModel,
    RenderNode,
    RenderNodeData,
    TypedConnection,
)

__all__ = [
    "ConnectionTarget",
    "NodeConnections",
    "Workflow",
    "WorkflowNode",
    "parse_workflow",
    "ConnectionKind",
    "EdgeStyle",
    "NodePosition",
    "NodeRole",
    "PositionedNode",
    "RenderEdge",
    "RenderModel",
    "RenderNode",
    "RenderNodeData",
    "TypedConnection",
]
