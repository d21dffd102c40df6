"""Level assigner.

Breadth-first relaxation from every root. A node's level is the maximum of
its visited predecessors' levels plus one, and each node is visited once:

- A node is queued once all in-edges from root-reachable nodes have been
  relaxed, so diamonds settle on their longest path.
- When the queue drains while reachable nodes remain, those nodes sit on a
  cycle. The first of them (document order) that already has a visited
  predecessor is released at its current level and the walk continues.
- Nodes no root can reach keep level 0 and are left out of `visited`.
"""
from collections import deque
from dataclasses import replace

import structlog

from flowcanvas.graph.model import ConnectionInfo, WorkflowGraph

logger = structlog.get_logger()


def _reachable(roots: list[str], connections: dict[str, ConnectionInfo]) -> set[str]:
    seen = set(roots)
    stack = list(roots)
    while stack:
        for target in connections[stack.pop()].outgoing:
            if target not in seen:
                seen.add(target)
                stack.append(target)
    return seen


def assign_levels(graph: WorkflowGraph) -> WorkflowGraph:
    """Classify roots/leaves and assign a depth to every node."""
    connections = {
        name: replace(
            info,
            level=0,
            is_root=not info.incoming,
            is_leaf=not info.outgoing,
        )
        for name, info in graph.connections.items()
    }
    roots = [name for name in graph.order if connections[name].is_root]
    reachable = _reachable(roots, connections)

    pending = {
        name: sum(1 for source in connections[name].incoming if source in reachable)
        for name in reachable
    }
    levels = {name: 0 for name in graph.order}
    visited: set[str] = set()
    queue = deque(roots)

    while len(visited) < len(reachable):
        if not queue:
            released = next(
                name for name in graph.order
                if name in reachable
                and name not in visited
                and any(source in visited for source in connections[name].incoming)
            )
            logger.debug("cycle_released", node_name=released, level=levels[released])
            queue.append(released)

        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)

        for target in connections[current].outgoing:
            if target in visited:
                continue
            levels[target] = max(levels[target], levels[current] + 1)
            pending[target] -= 1
            if pending[target] == 0:
                queue.append(target)

    leveled = {
        name: replace(info, level=levels[name])
        for name, info in connections.items()
    }

    logger.debug(
        "levels_assigned",
        root_count=len(roots),
        visited_count=len(visited),
        max_level=max(levels.values(), default=0),
    )

    return graph.evolve(leveled, visited=frozenset(visited))
