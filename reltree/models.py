#!/usr/bin/env python3
"""
Data models for tree reconstruction.

Contains the node and relation structures plus the error records returned
by the deserializer and raised by the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass
class Node:
    """A node in the tree, owning its children exclusively."""
    id: str
    name: str = ""
    children: List[Node] = field(default_factory=list)
    # Opaque payload, passed through untouched
    data: Any = None
    # Extra presentation hints such as "shape" and "color"
    attributes: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        """Compact nested dump: children first, then this node's name."""
        # Finished subtree strings, in the order their roots were completed
        parts: List[str] = []
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
                continue
            start = len(parts) - len(node.children)
            s = "".join(part + " " for part in parts[start:])
            del parts[start:]
            parts.append("(" + s + str(node.name) + ")")
        return parts[0]


@dataclass(frozen=True)
class Relation:
    """A node id and the id of its parent; an empty parent marks the root."""
    id: str
    parent_id: str = ""

    @property
    def is_root(self) -> bool:
        return self.parent_id == ""


class ErrorType(Enum):
    """Types of tree errors."""
    MULTIPLE_ROOTS = "multiple_roots"
    NO_ROOT = "no_root"
    UNRESOLVED_NODES = "unresolved_nodes"
    WRITE_FAILURE = "write_failure"


class Severity(Enum):
    """Error severity levels."""
    # No tree was produced
    ERROR = "error"
    # A partial tree was produced and is still usable
    WARNING = "warning"


@dataclass
class TreeError:
    """Represents a problem found while building or writing a tree."""
    message: str
    error_type: ErrorType
    severity: Severity = Severity.ERROR
    metadata: Optional[Dict] = field(default_factory=dict)

    @classmethod
    def create_error(
        cls,
        message: str,
        error_type: ErrorType,
        metadata: Optional[Dict] = None
    ) -> "TreeError":
        """Create an error with ERROR severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.ERROR,
            metadata=metadata or {}
        )

    @classmethod
    def create_warning(
        cls,
        message: str,
        error_type: ErrorType,
        metadata: Optional[Dict] = None
    ) -> "TreeError":
        """Create an error with WARNING severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.WARNING,
            metadata=metadata or {}
        )

    @property
    def is_fatal(self) -> bool:
        return self.severity == Severity.ERROR

    def to_dict(self) -> Dict:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "type": self.error_type.value,
            "severity": self.severity.value,
            "message": self.message,
        }

        # Add metadata if present
        if self.metadata:
            result.update(self.metadata)

        return result


class TreeBuildError(Exception):
    """Raised on request when a deserialization produced an error."""

    def __init__(self, error: TreeError):
        super().__init__(error.message)
        self.error = error

    @property
    def error_type(self) -> ErrorType:
        return self.error.error_type


class RenderError(OSError):
    """The output stream rejected a write."""

    def __init__(self, message: str):
        super().__init__(message)
        self.error = TreeError.create_error(message, ErrorType.WRITE_FAILURE)


@dataclass
class DeserializeResult:
    """Outcome of a deserialization.

    A fatal error leaves ``root`` unset. When some relations could not be
    attached, ``root`` holds the partial tree and ``error`` is a warning.
    """
    root: Optional[Node] = None
    error: Optional[TreeError] = None
    iterations: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Node:
        """Return the root, raising TreeBuildError if anything went wrong."""
        if self.error is not None:
            raise TreeBuildError(self.error)
        return self.root

    def to_dict(self) -> Dict:
        return {
            "ok": self.ok,
            "iterations": self.iterations,
            "error": self.error.to_dict() if self.error else None,
        }
