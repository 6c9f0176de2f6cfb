"""Lookup and walking helpers over Node trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from ..models import Node


def find_by_id(root: Node, node_id: str) -> Node | None:
    """Breadth-first search for the first node carrying ``node_id``."""
    queue = deque([root])
    while queue:
        next_up = queue.popleft()
        if next_up.id == node_id:
            return next_up
        queue.extend(next_up.children)
    return None


def find_by_id_dfs(node: Node, node_id: str) -> Node | None:
    """Depth-first (pre-order) search for the first node carrying ``node_id``.

    Matches below the immediate children are returned as well; older
    releases only ever compared the starting node.
    """
    for candidate in iter_preorder(node):
        if candidate.id == node_id:
            return candidate
    return None


def iter_preorder(root: Node) -> Iterator[Node]:
    """Yield the node, then each child's subtree in sequence order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the first child is popped first
        stack.extend(reversed(node.children))


def count_nodes(root: Node | None) -> int:
    if root is None:
        return 0
    return sum(1 for _ in iter_preorder(root))


def max_depth(root: Node | None) -> int:
    """Number of edges on the longest root-to-leaf path."""
    if root is None:
        return 0
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in node.children)
    return deepest
