"""Tree reconstruction, lookup and rendering."""

from .deserializer import deserialize
from .loader import load_relations
from .renderer import render_ascii, render_debug, render_dot, render_json, write_dot
from .traversal import count_nodes, find_by_id, find_by_id_dfs, iter_preorder, max_depth

__all__ = [
    "count_nodes",
    "deserialize",
    "find_by_id",
    "find_by_id_dfs",
    "iter_preorder",
    "load_relations",
    "max_depth",
    "render_ascii",
    "render_debug",
    "render_dot",
    "render_json",
    "write_dot",
]
