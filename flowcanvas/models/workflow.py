"""Workflow document models.

These mirror the n8n workflow JSON the surrounding application loads from
storage. Parsing is lenient: unknown keys are kept, unknown connection kinds
are ignored by the graph builder, and `null` output groups read as empty.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ConnectionTarget(BaseModel):
    """One target reference inside an output group.

    Example: {"node": "HTTP Request", "type": "main", "index": 0}
    """

    model_config = ConfigDict(extra="allow")

    node: str = Field(..., description="Target node name")
    type: str = Field("main", description="Input type on the target")
    index: int = Field(0, description="Input index on the target")


class NodeConnections(BaseModel):
    """Outgoing connections of one source node.

    The outer list index is the output slot of the source node.
    """

    model_config = ConfigDict(extra="allow")

    main: list[Optional[list[ConnectionTarget]]] = Field(default_factory=list)
    error: list[Optional[list[ConnectionTarget]]] = Field(default_factory=list)

    def main_groups(self) -> list[list[ConnectionTarget]]:
        """Main output groups with `null` slots read as empty."""
        return [group or [] for group in self.main]

    def error_groups(self) -> list[list[ConnectionTarget]]:
        """Error output groups with `null` slots read as empty."""
        return [group or [] for group in self.error]


class WorkflowNode(BaseModel):
    """A step in a workflow document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field("", description="Unique node id (defaults to the name)")
    name: str = Field(..., description="Node name, unique within the workflow")
    type: str = Field("", description="Node type, e.g. 'n8n-nodes-base.if'")
    type_version: float = Field(1, alias="typeVersion")
    position: Optional[tuple[float, float]] = Field(
        None,
        description="Canvas position hint [x, y]",
    )
    parameters: dict[str, Any] = Field(default_factory=dict)
    credentials: dict[str, Any] = Field(default_factory=dict)
    disabled: bool = False

    @model_validator(mode="after")
    def default_id_to_name(self):
        """Documents exported without ids fall back to the node name."""
        if not self.id:
            self.id = self.name
        return self

    @property
    def x(self) -> float:
        return self.position[0] if self.position else 0

    @property
    def y(self) -> float:
        return self.position[1] if self.position else 0


class Workflow(BaseModel):
    """A complete workflow document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[str] = Field(None, description="Workflow ID")
    name: str = Field("Unnamed Workflow", description="Workflow name")
    nodes: list[WorkflowNode] = Field(default_factory=list)
    connections: dict[str, NodeConnections] = Field(
        default_factory=dict,
        description="Node connections: {source: {main|error: [[{node, type, index}]]}}",
    )

    def get_node(self, name: str) -> Optional[WorkflowNode]:
        """Get the first node with this name."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None


def parse_workflow(data: dict) -> Workflow:
    """Parse workflow JSON into a Workflow."""
    return Workflow.model_validate(data)
