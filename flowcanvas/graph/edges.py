"""Edge synthesizer.

Emits declared main and error connections first, in document order, then a
`logical` edge for every reconciled pair that no declared edge covers.
The list never repeats a (source, target, kind) triple.
"""
import structlog

from flowcanvas.graph.model import WorkflowGraph
from flowcanvas.models.render import ConnectionKind, EdgeStyle, RenderEdge, TypedConnection
from flowcanvas.models.workflow import Workflow

logger = structlog.get_logger()


EDGE_STYLES: dict[ConnectionKind, EdgeStyle] = {
    ConnectionKind.MAIN: EdgeStyle(
        line="solid",
        color_class="main",
        stroke="#10b981",
        opacity=0.8,
        animated=False,
    ),
    ConnectionKind.ERROR: EdgeStyle(
        line="dashed",
        color_class="error",
        stroke="#ef4444",
        dash_array="5,5",
        opacity=1.0,
        animated=True,
        handle="error",
    ),
    ConnectionKind.LOGICAL: EdgeStyle(
        line="dashed",
        color_class="logical",
        stroke="#94a3b8",
        dash_array="4,4",
        opacity=0.5,
        animated=False,
    ),
}


def synthesize_edges(workflow: Workflow, graph: WorkflowGraph) -> list[TypedConnection]:
    """Build the typed edge list for a reconciled graph."""
    edges: list[TypedConnection] = []
    seen: set[tuple[str, str, ConnectionKind]] = set()
    declared_pairs: set[tuple[str, str]] = set()

    def emit(source: str, target: str, kind: ConnectionKind, output_index=None) -> None:
        key = (source, target, kind)
        if key in seen:
            return
        seen.add(key)
        edges.append(
            TypedConnection(
                source=source,
                target=target,
                kind=kind,
                output_index=output_index,
            )
        )

    for source, declared in workflow.connections.items():
        if source not in graph:
            continue
        for output_index, group in enumerate(declared.main_groups()):
            for target in group:
                if target.node in graph:
                    emit(source, target.node, ConnectionKind.MAIN, output_index)
                    declared_pairs.add((source, target.node))
        for group in declared.error_groups():
            for target in group:
                if target.node in graph:
                    emit(source, target.node, ConnectionKind.ERROR)
                    declared_pairs.add((source, target.node))

    declared_count = len(edges)
    for source, target in graph.edges():
        if (source, target) not in declared_pairs:
            emit(source, target, ConnectionKind.LOGICAL)

    logger.debug(
        "edges_synthesized",
        declared_count=declared_count,
        logical_count=len(edges) - declared_count,
    )

    return edges


def edge_id(connection: TypedConnection, source_id: str, target_id: str) -> str:
    if connection.kind == ConnectionKind.MAIN:
        return f"main-{source_id}-{target_id}-{connection.output_index or 0}"
    return f"{connection.kind.value}-{source_id}-{target_id}"


def to_render_edge(connection: TypedConnection, node_ids: dict[str, str]) -> RenderEdge:
    """Convert a named connection to a canvas edge between node ids.

    Main edges from output slot 1 and up use the `output-{index}` handle;
    error edges always leave through the `error` handle.
    """
    source_id = node_ids[connection.source]
    target_id = node_ids[connection.target]
    update = {}
    if connection.kind == ConnectionKind.MAIN and connection.output_index:
        update["handle"] = f"output-{connection.output_index}"
    style = EDGE_STYLES[connection.kind].model_copy(update=update)

    return RenderEdge(
        id=edge_id(connection, source_id, target_id),
        source=source_id,
        target=target_id,
        kind=connection.kind,
        output_index=connection.output_index,
        source_handle=style.handle,
        animated=style.animated,
        style=style,
    )
