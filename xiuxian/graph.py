"""Undirected graph nodes and deep cloning of a connected graph."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A graph vertex holding a value and an ordered list of neighbours.

    Nodes compare and hash by identity, so graphs may contain cycles.
    """

    val: int = 0
    neighbors: list[Node] = field(default_factory=list)

    def __repr__(self) -> str:
        linked = ", ".join(str(neighbor.val) for neighbor in self.neighbors)
        return f"Node(val={self.val!r}, neighbors=[{linked}])"


def clone_graph(node: Node | None) -> Node | None:
    """Return a deep copy of the graph reachable from ``node``.

    Neighbour order is preserved and every original node maps to exactly
    one clone, so shared and cyclic references are reproduced faithfully.
    """
    if node is None:
        return None

    clones: dict[Node, Node] = {node: Node(node.val)}
    pending = [node]
    while pending:
        current = pending.pop()
        current_clone = clones[current]
        for neighbor in current.neighbors:
            if neighbor not in clones:
                clones[neighbor] = Node(neighbor.val)
                pending.append(neighbor)
            current_clone.neighbors.append(clones[neighbor])
    return clones[node]