"""Declarative capability table for node types.

Rendering needs to know how many output handles a node exposes, whether it
has a dedicated error output, and whether it starts a workflow. The table is
keyed by full n8n type id; callers may pass their own table to the pipeline.

Merge and split nodes expose two handles, matching how the canvas has always
drawn them.
"""
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeCapability(BaseModel):
    """What a node type can do on the canvas."""

    model_config = ConfigDict(frozen=True)

    max_outputs: int = Field(1, ge=1, description="Number of main output handles")
    supports_error: bool = Field(False, description="Has a dedicated error output")
    is_trigger: bool = Field(False, description="Starts a workflow")


DEFAULT_CAPABILITY = NodeCapability()


# =============================================================================
# NODE CAPABILITIES - n8n base nodes
# =============================================================================

NODE_CAPABILITIES: dict[str, NodeCapability] = {
    # =========================================================================
    # TRIGGERS
    # =========================================================================
    "n8n-nodes-base.webhook": NodeCapability(is_trigger=True, supports_error=True),
    "n8n-nodes-base.manualTrigger": NodeCapability(is_trigger=True),
    "n8n-nodes-base.scheduleTrigger": NodeCapability(is_trigger=True),
    "n8n-nodes-base.cron": NodeCapability(is_trigger=True),
    "n8n-nodes-base.start": NodeCapability(is_trigger=True),
    "n8n-nodes-base.formTrigger": NodeCapability(is_trigger=True),
    "n8n-nodes-base.errorTrigger": NodeCapability(is_trigger=True),
    "n8n-nodes-base.emailReadImap": NodeCapability(is_trigger=True, supports_error=True),

    # =========================================================================
    # FLOW CONTROL - multiple outputs
    # =========================================================================
    "n8n-nodes-base.if": NodeCapability(max_outputs=2),
    "n8n-nodes-base.filter": NodeCapability(max_outputs=2),
    "n8n-nodes-base.switch": NodeCapability(max_outputs=4),
    "n8n-nodes-base.splitInBatches": NodeCapability(max_outputs=2),
    "n8n-nodes-base.splitOut": NodeCapability(max_outputs=2),
    "n8n-nodes-base.compareDatasets": NodeCapability(max_outputs=4),
    "n8n-nodes-base.merge": NodeCapability(max_outputs=2),

    # =========================================================================
    # I/O - error-capable
    # =========================================================================
    "n8n-nodes-base.httpRequest": NodeCapability(supports_error=True),
    "n8n-nodes-base.emailSend": NodeCapability(supports_error=True),
    "n8n-nodes-base.gmail": NodeCapability(supports_error=True),
    "n8n-nodes-base.mySql": NodeCapability(supports_error=True),
    "n8n-nodes-base.postgres": NodeCapability(supports_error=True),
    "n8n-nodes-base.mongoDb": NodeCapability(supports_error=True),
}


def get_capability(
    node_type: str,
    table: Optional[Mapping[str, NodeCapability]] = None,
) -> NodeCapability:
    """Look up a node type, falling back to a single-output plain step."""
    if table is None:
        table = NODE_CAPABILITIES
    return table.get(node_type, DEFAULT_CAPABILITY)
