"""Graphviz dot, ASCII, JSON and debug rendering for node trees."""

from __future__ import annotations

import io
import json
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import TextIO

from ..config import DEFAULT_COLOR, DEFAULT_SHAPE
from ..models import Node, RenderError
from .traversal import count_nodes, iter_preorder, max_depth


def write_dot(root: Node | None, stream: TextIO) -> None:
    """Write the whole tree to ``stream`` as a Graphviz digraph.

    Node declarations come first, then the edges, both in pre-order. Ids are
    quoted as-is without escaping. The stream is left open; the first failed
    write aborts the render with RenderError, including writes to a closed
    stream.
    """
    try:
        for line in _dot_lines(root):
            stream.write(line)
    except (OSError, ValueError) as exc:
        raise RenderError(f"Failed to write dot output: {exc}") from exc


def render_dot(root: Node | None) -> str:
    """Render the tree as a Graphviz digraph string."""
    buffer = io.StringIO()
    write_dot(root, buffer)
    return buffer.getvalue()


def render_debug(root: Node | None) -> str:
    """Render the nested parenthesized form used for diagnostics."""
    if root is None:
        return "()"
    return str(root)


def _dot_lines(root: Node | None) -> Iterator[str]:
    yield "digraph {\n"
    if root is not None:
        yield from _node_shapes(root)
        yield from _node_relationships(root)
    yield "}\n"


def _node_shapes(root: Node) -> Iterator[str]:
    for node in iter_preorder(root):
        # Empty attribute values fall back to the defaults
        shape = node.attributes.get("shape") or DEFAULT_SHAPE
        color = node.attributes.get("color") or DEFAULT_COLOR
        yield f'  "{node.id}" [shape={shape},style=filled,color={color}]\n'


def _node_relationships(root: Node) -> Iterator[str]:
    # Each child's edges follow its own edge line, before its next sibling
    stack = [(root, child) for child in reversed(root.children)]
    while stack:
        parent, node = stack.pop()
        yield f'  "{parent.id}" -> "{node.id}";\n'
        stack.extend((node, child) for child in reversed(node.children))


def render_ascii(root: Node | None) -> str:
    """Render the full tree as an ASCII string."""
    lines = []
    if root is not None:
        lines.append(_format_label(root))
        lines.extend(_render_subtree(root))
        lines.append("")
    lines.append(f"{count_nodes(root)} nodes | max depth {max_depth(root)}")
    return "\n".join(lines)


def _format_label(node: Node) -> str:
    """Format the label for a tree node."""
    if node.name:
        return f"{node.name} [{node.id}]"
    return node.id


def _push_children(stack: list, node: Node, prefix: str) -> None:
    last = len(node.children) - 1
    for i in range(last, -1, -1):
        stack.append((node.children[i], prefix, i == last))


def _render_subtree(root: Node) -> list[str]:
    """Render everything below ``root`` as ASCII lines."""
    lines = []
    stack: list[tuple[Node, str, bool]] = []
    _push_children(stack, root, "")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(prefix + connector + _format_label(node))
        extension = "    " if is_last else "│   "
        _push_children(stack, node, prefix + extension)
    return lines


def render_json(root: Node | None) -> str:
    """Render the tree as a JSON string."""
    output = {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "total_nodes": count_nodes(root),
        "max_depth": max_depth(root),
        "tree": _node_to_dict(root) if root is not None else None,
    }
    # Payloads are opaque, anything json can't handle is stringified
    return json.dumps(output, indent=2, default=str)


def _node_to_dict(node: Node) -> dict:
    """Convert a Node to a JSON-serializable dictionary."""
    return {
        "id": node.id,
        "name": node.name,
        "attributes": node.attributes,
        "data": node.data,
        "children": [_node_to_dict(child) for child in node.children],
    }
