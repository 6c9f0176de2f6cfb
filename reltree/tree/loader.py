"""Loading relation lists from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from ..models import Relation


def load_relations(path: Path) -> list[Relation]:
    """Read a JSON array of ``{"id": ..., "parent_id": ...}`` objects.

    A missing or null ``parent_id`` marks the root.
    """
    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    if not isinstance(document, list):
        raise ValueError(f"Expected a JSON array of relations in {path}")

    return [_parse_relation(entry, index) for index, entry in enumerate(document)]


def _parse_relation(entry: object, index: int) -> Relation:
    """Turn one decoded JSON entry into a Relation."""
    if not isinstance(entry, dict):
        raise ValueError(f"Relation {index} is not an object")

    node_id = entry.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise ValueError(f"Relation {index} has a missing or empty id")

    parent_id = entry.get("parent_id")
    if parent_id is None:
        parent_id = ""
    if not isinstance(parent_id, str):
        raise ValueError(f"Relation {index} has a non-string parent_id")

    return Relation(id=node_id, parent_id=parent_id)
