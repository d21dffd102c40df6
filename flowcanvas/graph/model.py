"""Immutable graph values threaded through the layout stages.

Builder, reconciler and level assigner each take a `WorkflowGraph` and
return a new one; nothing is mutated in place.
"""
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


@dataclass(frozen=True)
class ConnectionInfo:
    """Adjacency record for one node, keyed by node name in the graph."""

    incoming: tuple[str, ...] = ()
    outgoing: tuple[str, ...] = ()
    level: int = 0
    is_root: bool = False
    is_leaf: bool = False
    has_main_connections: bool = False
    has_error_connections: bool = False
    handles_errors: bool = False


@dataclass(frozen=True)
class WorkflowGraph:
    """Reconstructed workflow graph.

    Attributes:
        order: Unique node names in document order.
        connections: Read-only mapping of node name to its ConnectionInfo.
        processed: Names that take part in at least one declared connection.
        synthesized: (source, target) pairs added by the reconciler.
        visited: Names reached by the level assigner.
    """

    order: tuple[str, ...]
    connections: Mapping[str, ConnectionInfo]
    processed: frozenset[str] = frozenset()
    synthesized: tuple[tuple[str, str], ...] = ()
    visited: frozenset[str] = frozenset()

    def __contains__(self, name: object) -> bool:
        return name in self.connections

    def __len__(self) -> int:
        return len(self.order)

    def info(self, name: str) -> Optional[ConnectionInfo]:
        """Get the ConnectionInfo for a node name."""
        return self.connections.get(name)

    def roots(self) -> list[str]:
        """Names with no incoming edges, in document order."""
        return [name for name in self.order if not self.connections[name].incoming]

    def leaves(self) -> list[str]:
        """Names with no outgoing edges, in document order."""
        return [name for name in self.order if not self.connections[name].outgoing]

    def levels(self) -> dict[str, int]:
        return {name: self.connections[name].level for name in self.order}

    def edges(self) -> Iterator[tuple[str, str]]:
        """Every (source, target) pair, duplicates included."""
        for name in self.order:
            for target in self.connections[name].outgoing:
                yield name, target

    def evolve(self, connections: dict[str, ConnectionInfo], **changes) -> "WorkflowGraph":
        """Return a copy with new connection records and other field changes."""
        return replace(self, connections=MappingProxyType(dict(connections)), **changes)

    @classmethod
    def empty(cls, names: tuple[str, ...]) -> "WorkflowGraph":
        """A graph with a blank record per name and no edges."""
        return cls(
            order=names,
            connections=MappingProxyType({name: ConnectionInfo() for name in names}),
        )


def link(
    connections: dict[str, ConnectionInfo],
    source: str,
    target: str,
    *,
    main: bool = False,
    error: bool = False,
) -> None:
    """Record source -> target in a working copy of the connection records."""
    source_info = connections[source]
    connections[source] = replace(
        source_info,
        outgoing=source_info.outgoing + (target,),
        has_main_connections=source_info.has_main_connections or main,
        has_error_connections=source_info.has_error_connections or error,
    )
    # Re-read: source and target are the same record for self-loops
    target_info = connections[target]
    connections[target] = replace(
        target_info,
        incoming=target_info.incoming + (source,),
        handles_errors=target_info.handles_errors or error,
    )


__all__ = [
    "ConnectionInfo",
    "WorkflowGraph",
    "link",
]
