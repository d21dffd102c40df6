"""Graph model builder.

Turns the declared `connections` map of a workflow document into one
ConnectionInfo per node. References to unknown node names are skipped:
partially migrated documents are normal input, not a caller error.
"""
import structlog

from flowcanvas.graph.model import WorkflowGraph, link
from flowcanvas.models.workflow import ConnectionTarget, Workflow

logger = structlog.get_logger()


def unique_node_names(workflow: Workflow) -> tuple[str, ...]:
    """Node names in document order, first occurrence wins."""
    seen: dict[str, None] = {}
    for node in workflow.nodes:
        if node.name in seen:
            logger.warning("duplicate_node_name", node_name=node.name)
            continue
        seen[node.name] = None
    return tuple(seen)


def build_graph(workflow: Workflow) -> WorkflowGraph:
    """Build the adjacency records from declared main and error connections."""
    graph = WorkflowGraph.empty(unique_node_names(workflow))
    connections = dict(graph.connections)
    processed: set[str] = set()
    skipped = 0

    def accept(source: str, targets: list[ConnectionTarget], *, error: bool) -> None:
        nonlocal skipped
        for target in targets:
            if target.node not in connections:
                skipped += 1
                logger.debug(
                    "unknown_connection_target",
                    source=source,
                    target=target.node,
                )
                continue
            link(connections, source, target.node, main=not error, error=error)
            processed.add(source)
            processed.add(target.node)

    for source, declared in workflow.connections.items():
        if source not in connections:
            skipped += 1
            logger.debug("unknown_connection_source", source=source)
            continue
        for group in declared.main_groups():
            accept(source, group, error=False)
        for group in declared.error_groups():
            accept(source, group, error=True)

    logger.debug(
        "graph_built",
        node_count=len(graph.order),
        connected_count=len(processed),
        skipped_references=skipped,
    )

    return graph.evolve(connections, processed=frozenset(processed))
