"""Tree reconstruction from flat (id, parent_id) relations."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import MAX_ITERATIONS
from ..models import DeserializeResult, ErrorType, Node, Relation, TreeError
from .traversal import find_by_id


def deserialize(
    relations: Iterable[Relation], max_iterations: int = MAX_ITERATIONS
) -> DeserializeResult:
    """Build a tree from relations given in any order.

    Exactly one relation must have an empty parent id. Relations whose
    parent is listed after them are picked up by later passes; whatever is
    still unattached after ``max_iterations`` passes is reported as a
    warning next to the partial tree.
    """
    relations = list(relations)
    root, error = _find_root(relations)
    if error is not None:
        return DeserializeResult(error=error)

    # Keyed by id, so repeated ids are only attached once
    assigned = {relation.id: relation.is_root for relation in relations}

    iterations = 0
    while not all(assigned.values()) and iterations < max_iterations:
        iterations += 1
        for relation in relations:
            if assigned[relation.id]:
                continue
            parent = find_by_id(root, relation.parent_id)
            if parent is not None:
                parent.children.append(Node(relation.id))
                assigned[relation.id] = True

    unresolved = [node_id for node_id, done in assigned.items() if not done]
    if unresolved:
        return DeserializeResult(
            root=root,
            error=TreeError.create_warning(
                f"Max iterations reached, {len(unresolved)} node(s) could not be assigned",
                ErrorType.UNRESOLVED_NODES,
                metadata={"unresolved": unresolved, "max_iterations": max_iterations},
            ),
            iterations=iterations,
        )

    return DeserializeResult(root=root, iterations=iterations)


def _find_root(relations: list[Relation]) -> tuple[Node | None, TreeError | None]:
    """Locate the single relation without a parent."""
    root = None
    for relation in relations:
        if not relation.is_root:
            continue
        if root is not None:
            return None, TreeError.create_error(
                "Multiple roots have been found",
                ErrorType.MULTIPLE_ROOTS,
                metadata={"roots": [root.id, relation.id]},
            )
        root = Node(relation.id)

    if root is None:
        return None, TreeError.create_error("No root was found", ErrorType.NO_ROOT)
    return root, None
