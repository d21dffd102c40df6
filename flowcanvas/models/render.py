"""Render model handed to the canvas.

Edges and nodes serialize with camelCase aliases (`outputIndex`,
`sourceHandle`, `originalNode`) so the frontend can consume
`model_dump(by_alias=True)` directly.
"""
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from flowcanvas.models.workflow import WorkflowNode


class ConnectionKind(str, Enum):
    """Kinds of edges on the canvas."""
    MAIN = "main"
    ERROR = "error"
    LOGICAL = "logical"


class NodeRole(str, Enum):
    """Topological roles a node can play."""
    ROOT = "root"
    LEAF = "leaf"
    BRANCH = "branch"
    ERROR_HANDLER = "error_handler"
    STEP = "step"


class TypedConnection(BaseModel):
    """A directed edge between two node names."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Source node name")
    target: str = Field(..., description="Target node name")
    kind: ConnectionKind
    output_index: Optional[int] = Field(
        None,
        description="Output slot of the source (main edges only)",
    )


class NodePosition(BaseModel):
    """Canvas coordinates."""

    x: float = 0
    y: float = 0


class PositionedNode(BaseModel):
    """A workflow node with its computed coordinates."""

    node: WorkflowNode
    position: NodePosition
    level: int = 0


class RenderNodeData(BaseModel):
    """Display payload for a canvas node."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    node_type: str = Field(..., alias="nodeType")
    parameters: dict = Field(default_factory=dict)
    disabled: bool = False
    level: int = 0
    roles: list[NodeRole] = Field(default_factory=list)
    outputs: int = 1
    has_error_output: bool = Field(False, alias="hasErrorOutput")
    is_start_node: bool = Field(False, alias="isStartNode")
    is_end_node: bool = Field(False, alias="isEndNode")


class RenderNode(BaseModel):
    """A positioned canvas node."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str = "workflowNode"
    position: NodePosition
    data: RenderNodeData
    original_node: WorkflowNode = Field(..., alias="originalNode")


class EdgeStyle(BaseModel):
    """Rendering hints for an edge."""

    model_config = ConfigDict(populate_by_name=True)

    line: Literal["solid", "dashed"] = "solid"
    color_class: str = Field("main", alias="colorClass")
    stroke: str = "#10b981"
    stroke_width: int = Field(2, alias="strokeWidth")
    dash_array: Optional[str] = Field(None, alias="strokeDasharray")
    opacity: float = 1.0
    animated: bool = False
    handle: Optional[str] = None


class RenderEdge(BaseModel):
    """A typed canvas edge between node ids."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    source: str = Field(..., description="Source node id")
    target: str = Field(..., description="Target node id")
    kind: ConnectionKind
    output_index: Optional[int] = Field(None, alias="outputIndex")
    source_handle: Optional[str] = Field(None, alias="sourceHandle")
    animated: bool = False
    style: EdgeStyle = Field(default_factory=EdgeStyle)


class RenderModel(BaseModel):
    """Nodes and edges ready for the canvas."""

    nodes: list[RenderNode] = Field(default_factory=list)
    edges: list[RenderEdge] = Field(default_factory=list)

    def get_node(self, node_id: str) -> Optional[RenderNode]:
        """Get a render node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def edges_of_kind(self, kind: ConnectionKind) -> list[RenderEdge]:
        """Edges of one kind, in output order."""
        return [edge for edge in self.edges if edge.kind == kind]
