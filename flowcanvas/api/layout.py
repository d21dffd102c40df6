"""Layout API endpoints - turn workflow documents into canvas render models."""
import structlog
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from flowcanvas.graph.pipeline import build_render_model, find_node_connections
from flowcanvas.models.render import RenderModel
from flowcanvas.models.workflow import Workflow
from flowcanvas.utils.workflow_printer import print_render_model

logger = structlog.get_logger()

router = APIRouter()


class NodeConnectionsRequest(BaseModel):
    """Request body for a node neighbourhood lookup."""

    workflow: Workflow = Field(..., description="Workflow document")
    node_name: str = Field(..., description="Node to look up")


class NodeConnectionsResponse(BaseModel):
    """Declared neighbours of a node."""

    node_name: str
    incoming: list[str]
    outgoing: list[str]


@router.post("/layout", response_model=RenderModel)
def layout_workflow(workflow: Workflow) -> RenderModel:
    """
    Compute positioned nodes and typed edges for a workflow.

    Missing connections are synthesized as `logical` edges so the canvas
    shows one connected flow.
    """
    logger.info(
        "layout_request",
        workflow_name=workflow.name,
        node_count=len(workflow.nodes),
    )

    try:
        return build_render_model(workflow)
    except Exception as e:
        logger.error("layout_error", workflow_name=workflow.name, error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/layout/summary", response_class=PlainTextResponse)
def layout_summary(workflow: Workflow) -> str:
    """Plain-text view of the computed layout."""
    try:
        model = build_render_model(workflow)
        return print_render_model(model, title=workflow.name)
    except Exception as e:
        logger.error("layout_summary_error", workflow_name=workflow.name, error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/layout/connections", response_model=NodeConnectionsResponse)
def node_connections(request: NodeConnectionsRequest) -> NodeConnectionsResponse:
    """Declared incoming and outgoing neighbours of one node."""
    if request.workflow.get_node(request.node_name) is None:
        raise HTTPException(
            status_code=404,
            detail=f"Node '{request.node_name}' not found",
        )

    found = find_node_connections(request.workflow, request.node_name)
    return NodeConnectionsResponse(node_name=request.node_name, **found)
