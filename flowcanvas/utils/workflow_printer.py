"""Utility to print render models and leveled graphs as plain text."""

from typing import Union

from flowcanvas.graph.layout import build_layers
from flowcanvas.graph.model import WorkflowGraph
from flowcanvas.models.render import ConnectionKind, RenderModel


_EDGE_ARROWS = {
    ConnectionKind.MAIN: "──→",
    ConnectionKind.ERROR: "══✗",
    ConnectionKind.LOGICAL: "┄┄→",
}


def print_render_model(model: Union[RenderModel, dict], title: str = "Workflow") -> str:
    """
    Convert a render model to a clean text representation.

    Args:
        model: RenderModel (or its by-alias dict dump)
        title: Header line

    Returns:
        Formatted string with nodes grouped by layer, then edges
    """
    if isinstance(model, dict):
        model = RenderModel.model_validate(model)

    lines = []

    # Header
    lines.append("=" * 60)
    lines.append(f"  LAYOUT: {title}")
    lines.append("=" * 60)
    lines.append(f"  Nodes: {len(model.nodes)}    Edges: {len(model.edges)}")
    lines.append("")

    names = {node.id: node.data.name for node in model.nodes}

    # Nodes by level
    lines.append("  LAYERS:")
    lines.append("  " + "-" * 56)

    if not model.nodes:
        lines.append("  (No nodes)")

    by_level: dict[int, list] = {}
    for node in model.nodes:
        by_level.setdefault(node.data.level, []).append(node)

    for level in sorted(by_level):
        lines.append(f"  [{level}]")
        for node in by_level[level]:
            icon = _get_node_icon(node.data.node_type)
            roles = ", ".join(role.value for role in node.data.roles)
            lines.append(
                f"     {icon} {node.data.name} "
                f"@ ({_format_coord(node.position.x)}, {_format_coord(node.position.y)}) "
                f"<{roles}>"
            )

    lines.append("")

    # Edges
    lines.append("  EDGES:")
    lines.append("  " + "-" * 56)

    if not model.edges:
        lines.append("  (No edges)")

    for edge in model.edges:
        arrow = _EDGE_ARROWS[edge.kind]
        line = f"  {names.get(edge.source, edge.source)} {arrow} {names.get(edge.target, edge.target)}"
        if edge.kind == ConnectionKind.MAIN and edge.output_index:
            line += f" (output {edge.output_index})"
        elif edge.kind != ConnectionKind.MAIN:
            line += f" ({edge.kind.value})"
        lines.append(line)

    lines.append("")
    lines.append("=" * 60)

    return "\n".join(lines)


def print_layers(graph: WorkflowGraph) -> str:
    """
    One line per layer of a leveled graph.

    Args:
        graph: Graph returned by assign_levels

    Returns:
        Lines like "0: Trigger" and "1: Check | Notify"
    """
    layers = build_layers(graph)
    if not layers:
        return "(No layers)"
    return "\n".join(f"{level}: {' | '.join(layer)}" for level, layer in enumerate(layers))


def _format_coord(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def _get_node_icon(node_type: str) -> str:
    """Get an icon for a node type."""
    type_lower = node_type.lower()

    if "webhook" in type_lower:
        return "🔗"
    elif "http" in type_lower:
        return "🌐"
    elif "agent" in type_lower or "openai" in type_lower:
        return "🤖"
    elif type_lower.endswith(".if") or "switch" in type_lower:
        return "🔀"
    elif "split" in type_lower:
        return "🔄"
    elif "merge" in type_lower:
        return "📦"
    elif "email" in type_lower or "gmail" in type_lower:
        return "📧"
    elif "postgres" in type_lower or "mysql" in type_lower or "mongo" in type_lower:
        return "🗄️"
    elif "schedule" in type_lower or "cron" in type_lower or "trigger" in type_lower:
        return "⏰"
    else:
        return "⚙️"
