"""
Tests for rebuilding trees from relations.

Covers root detection, order independence and the partial-tree result
returned when some relations can never be attached.
"""

import random

import pytest

from reltree import (
    ErrorType,
    Relation,
    Severity,
    TreeBuildError,
    deserialize,
    find_by_id,
)
from reltree.config import MAX_ITERATIONS
from reltree.tree import count_nodes, iter_preorder


def sample_relations():
    return [
        Relation("6", "2"),
        Relation("5", "2"),
        Relation("4", "3"),
        Relation("3", "1"),
        Relation("2", "1"),
        Relation("1"),
    ]


def edge_set(root):
    return {
        (node.id, child.id)
        for node in iter_preorder(root)
        for child in node.children
    }


class TestDeserialize:
    """Test suite for deserialize()."""

    def test_sample_tree_shape(self):
        """Test that the sample relations produce the expected hierarchy."""
        result = deserialize(sample_relations())

        assert result.ok, result.error
        root = result.root
        assert root.id == "1"
        assert [c.id for c in root.children] == ["3", "2"]
        assert [c.id for c in find_by_id(root, "2").children] == ["6", "5"]
        assert [c.id for c in find_by_id(root, "3").children] == ["4"]
        assert result.iterations == 2

    def test_node_count_matches_relation_count(self):
        """Test that every relation ends up as exactly one node."""
        relations = sample_relations()
        result = deserialize(relations)

        assert count_nodes(result.root) == len(relations)

    def test_synthesized_nodes_are_bare(self):
        """Test that created nodes carry only their id."""
        result = deserialize(sample_relations())

        node = find_by_id(result.root, "4")
        assert node.name == ""
        assert node.data is None
        assert node.attributes == {}
        assert node.children == []

    def test_order_independence(self):
        """Test that shuffling the input yields the same parent/child pairs."""
        expected = edge_set(deserialize(sample_relations()).root)

        rng = random.Random(1234)
        for _ in range(20):
            relations = sample_relations()
            rng.shuffle(relations)
            result = deserialize(relations)
            assert result.ok
            assert edge_set(result.root) == expected

    def test_parent_before_child_needs_one_pass(self):
        """Test that a topologically ordered list resolves in a single pass."""
        relations = [Relation("a"), Relation("b", "a"), Relation("c", "b")]
        result = deserialize(relations)

        assert result.ok
        assert result.iterations == 1
        assert edge_set(result.root) == {("a", "b"), ("b", "c")}

    def test_single_root_only(self):
        """Test that a lone root relation gives a leaf tree."""
        result = deserialize([Relation("only")])

        assert result.ok
        assert result.root.id == "only"
        assert result.root.children == []
        assert result.iterations == 0

    def test_accepts_any_iterable(self):
        """Test that a generator of relations is consumed correctly."""
        result = deserialize(r for r in sample_relations())

        assert result.ok
        assert count_nodes(result.root) == 6


class TestRootErrors:
    """Test suite for fatal root detection errors."""

    def test_multiple_roots(self):
        """Test that two parentless relations are rejected."""
        result = deserialize([Relation("a"), Relation("b"), Relation("c", "a")])

        assert result.root is None
        assert result.error.error_type == ErrorType.MULTIPLE_ROOTS
        assert result.error.severity == Severity.ERROR
        assert result.error.metadata["roots"] == ["a", "b"]

    def test_no_root(self):
        """Test that a relation list without a root is rejected."""
        result = deserialize([Relation("a", "b"), Relation("b", "a")])

        assert result.root is None
        assert result.error.error_type == ErrorType.NO_ROOT
        assert result.error.is_fatal

    def test_empty_input_has_no_root(self):
        """Test that an empty relation list reports a missing root."""
        result = deserialize([])

        assert result.root is None
        assert result.error.error_type == ErrorType.NO_ROOT

    def test_raise_for_error(self):
        """Test that raise_for_error surfaces the error as an exception."""
        result = deserialize([Relation("a"), Relation("b")])

        with pytest.raises(TreeBuildError) as exc_info:
            result.raise_for_error()
        assert exc_info.value.error_type == ErrorType.MULTIPLE_ROOTS
        assert "Multiple roots" in str(exc_info.value)


class TestUnresolvedNodes:
    """Test suite for relations that can never be attached."""

    def test_missing_parent_returns_partial_tree(self):
        """Test that resolvable relations survive next to a dangling one."""
        relations = sample_relations() + [Relation("7", "missing")]
        result = deserialize(relations, max_iterations=50)

        assert not result.ok
        assert result.error.error_type == ErrorType.UNRESOLVED_NODES
        assert result.error.severity == Severity.WARNING
        assert not result.error.is_fatal
        assert result.error.metadata["unresolved"] == ["7"]
        assert result.iterations == 50
        assert count_nodes(result.root) == 6
        assert find_by_id(result.root, "7") is None

    def test_default_ceiling_is_exhausted(self):
        """Test that the default iteration ceiling is used up before failing."""
        result = deserialize([Relation("root"), Relation("x", "nowhere")])

        assert result.error.error_type == ErrorType.UNRESOLVED_NODES
        assert result.iterations == MAX_ITERATIONS
        assert result.root.id == "root"

    def test_cycle_detached_from_root(self):
        """Test that a cycle not reachable from the root is unresolved."""
        relations = [Relation("r"), Relation("a", "b"), Relation("b", "a"), Relation("c", "r")]
        result = deserialize(relations, max_iterations=10)

        assert result.error.error_type == ErrorType.UNRESOLVED_NODES
        assert set(result.error.metadata["unresolved"]) == {"a", "b"}
        assert edge_set(result.root) == {("r", "c")}

    def test_self_reference_is_unresolved(self):
        """Test that a node naming itself as parent never attaches."""
        result = deserialize([Relation("r"), Relation("s", "s")], max_iterations=3)

        assert result.error.metadata["unresolved"] == ["s"]

    def test_raise_for_error_on_partial_tree(self):
        """Test that a partial tree still raises when asked to."""
        result = deserialize([Relation("r"), Relation("x", "y")], max_iterations=1)

        with pytest.raises(TreeBuildError) as exc_info:
            result.raise_for_error()
        assert exc_info.value.error_type == ErrorType.UNRESOLVED_NODES

    def test_to_dict(self):
        """Test the JSON-friendly view of a partial result."""
        result = deserialize([Relation("r"), Relation("x", "y")], max_iterations=2)

        data = result.to_dict()
        assert data["ok"] is False
        assert data["iterations"] == 2
        assert data["error"]["type"] == "unresolved_nodes"
        assert data["error"]["severity"] == "warning"
        assert data["error"]["unresolved"] == ["x"]
