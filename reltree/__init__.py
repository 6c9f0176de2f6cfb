"""Rebuild trees from parent/child relations and dump them as Graphviz dot."""

from .models import (
    DeserializeResult,
    ErrorType,
    Node,
    Relation,
    RenderError,
    Severity,
    TreeBuildError,
    TreeError,
)
from .tree import (
    deserialize,
    find_by_id,
    find_by_id_dfs,
    render_debug,
    render_dot,
    write_dot,
)

__all__ = [
    "DeserializeResult",
    "ErrorType",
    "Node",
    "Relation",
    "RenderError",
    "Severity",
    "TreeBuildError",
    "TreeError",
    "deserialize",
    "find_by_id",
    "find_by_id_dfs",
    "render_debug",
    "render_dot",
    "write_dot",
]
