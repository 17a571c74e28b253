"""Tests for the tree-to-graph traversal.

This module tests:
- Node and edge counts for trees of different shapes
- Identity: one graph-node per node object, shared nodes collapsed
- Deterministic, left-before-right ordering
- Labels and configurable child attributes
- Per-node DEBUG tracing
"""

import logging
import sys

import pytest

from bintreeviz.core.config import BuilderConfig
from bintreeviz.core.graph.builder import NodeIdentity, TreeGraphBuilder, TreeNode
from bintreeviz.core.graph.description import ChildSide


@pytest.fixture
def builder() -> TreeGraphBuilder:
    """Fixture providing a default builder."""
    return TreeGraphBuilder()


class TestTreeShapes:
    """Test conversion of differently shaped trees."""

    def test_empty_tree(self, builder: TreeGraphBuilder):
        """Test that an absent root yields an empty description."""
        description = builder.build(None)
        assert description.is_empty()
        assert description.nodes == []
        assert description.edges == []

    def test_single_node(self, builder: TreeGraphBuilder, node_cls):
        """Test a root without children."""
        description = builder.build(node_cls("root"))
        assert len(description.nodes) == 1
        assert description.edges == []
        assert description.nodes[0].label == "root"

    def test_sample_tree(self, builder: TreeGraphBuilder, sample_tree):
        """Test the seven node sample tree."""
        description = builder.build(sample_tree)
        assert len(description.nodes) == 7
        assert len(description.edges) == 6
        assert set(description.labels().values()) == {
            "root", "left", "right",
            "left.left", "left.right",
            "right.left", "right.right",
        }

    def test_edge_count_is_node_count_minus_one(self, builder: TreeGraphBuilder, node_cls):
        """Test edges == nodes - 1 for an unbalanced tree."""
        root = node_cls("a", node_cls("b", None, node_cls("c", node_cls("d"))), node_cls("e"))
        description = builder.build(root)
        assert len(description.nodes) == 5
        assert len(description.edges) == 4

    def test_right_child_only(self, builder: TreeGraphBuilder, node_cls):
        """Test that a missing left child adds no placeholder."""
        root = node_cls("root", None, node_cls("right"))
        description = builder.build(root)
        assert [n.label for n in description.nodes] == ["root", "right"]
        assert len(description.edges) == 1
        assert description.edges[0].side == ChildSide.RIGHT

    def test_deep_tree_does_not_recurse(self, builder: TreeGraphBuilder, node_cls):
        """Test a degenerate tree deeper than the recursion limit."""
        depth = sys.getrecursionlimit() + 500
        root = node_cls("0")
        current = root
        for i in range(1, depth):
            current.left = node_cls(str(i))
            current = current.left
        description = builder.build(root)
        assert len(description.nodes) == depth
        assert len(description.edges) == depth - 1


class TestIdentity:
    """Test graph-node identity."""

    def test_equal_values_get_distinct_nodes(self, builder: TreeGraphBuilder, node_cls):
        """Test that identity follows objects, not labels."""
        root = node_cls("x", node_cls("x"), node_cls("x"))
        description = builder.build(root)
        assert len(description.nodes) == 3
        assert len(set(description.node_ids())) == 3

    def test_shared_subtree_collapses(self, builder: TreeGraphBuilder, node_cls):
        """Test a diamond: one graph-node with two incoming edges."""
        shared = node_cls("shared", node_cls("below"))
        root = node_cls("root", node_cls("a", shared), node_cls("b", None, shared))
        description = builder.build(root)

        shared_ids = [n.id for n in description.nodes if n.label == "shared"]
        assert len(shared_ids) == 1
        assert description.in_degree(shared_ids[0]) == 2
        # The shared subtree itself is expanded once
        below_id = [n.id for n in description.nodes if n.label == "below"][0]
        assert description.in_degree(below_id) == 1
        assert len(description.nodes) == 5
        assert len(description.edges) == 5

    def test_same_child_twice(self, builder: TreeGraphBuilder, node_cls):
        """Test a node whose left and right are the same object."""
        child = node_cls("child")
        description = builder.build(node_cls("root", child, child))
        assert len(description.nodes) == 2
        assert [(e.side, e.head) for e in description.edges] == [
            (ChildSide.LEFT, "n1"),
            (ChildSide.RIGHT, "n1"),
        ]

    def test_cycle_terminates(self, builder: TreeGraphBuilder, node_cls):
        """Test a back link to an ancestor adds an edge but no new node."""
        a = node_cls("a")
        b = node_cls("b")
        a.left = b
        b.right = a
        description = builder.build(a)
        assert description.node_ids() == ["n0", "n1"]
        assert [(e.tail, e.head) for e in description.edges] == [("n0", "n1"), ("n1", "n0")]
        assert description.in_degree("n0") == 1

    def test_node_identity_is_idempotent(self, node_cls):
        """Test NodeIdentity directly."""
        identity = NodeIdentity("n")
        a, b = node_cls("a"), node_cls("a")
        assert identity.assign(a) == ("n0", True)
        assert identity.assign(b) == ("n1", True)
        assert identity.assign(a) == ("n0", False)
        assert identity.get(b) == "n1"
        assert a in identity
        assert len(identity) == 2

    def test_unhashable_nodes(self, builder: TreeGraphBuilder):
        """Test node types that define __eq__ without __hash__."""

        class EqNode:
            def __init__(self, value, left=None, right=None):
                self.value, self.left, self.right = value, left, right

            def __eq__(self, other):
                return isinstance(other, EqNode) and self.value == other.value

            def __str__(self):
                return self.value

        description = builder.build(EqNode("a", EqNode("b"), EqNode("b")))
        assert len(description.nodes) == 3


class TestOrdering:
    """Test traversal order."""

    def test_preorder_ids(self, builder: TreeGraphBuilder, sample_tree):
        """Test ids are handed out in pre-order."""
        description = builder.build(sample_tree)
        assert [n.label for n in description.nodes] == [
            "root", "left", "left.left", "left.right",
            "right", "right.left", "right.right",
        ]
        assert description.node_ids() == [f"n{i}" for i in range(7)]

    def test_left_edge_before_right_edge(self, builder: TreeGraphBuilder, sample_tree):
        """Test edge creation order."""
        description = builder.build(sample_tree)
        assert [(e.tail, e.head) for e in description.edges] == [
            ("n0", "n1"), ("n1", "n2"), ("n1", "n3"),
            ("n0", "n4"), ("n4", "n5"), ("n4", "n6"),
        ]
        assert [e.side for e in description.edges[:3]] == [
            ChildSide.LEFT, ChildSide.LEFT, ChildSide.RIGHT
        ]

    def test_deterministic(self, builder: TreeGraphBuilder, sample_tree):
        """Test two conversions of the same tree are identical."""
        assert builder.build(sample_tree) == builder.build(sample_tree)

    def test_tree_is_not_mutated(self, builder: TreeGraphBuilder, sample_tree):
        """Test the tree is only read."""
        left, right = sample_tree.left, sample_tree.right
        builder.build(sample_tree)
        assert sample_tree.left is left
        assert sample_tree.right is right
        assert sample_tree.value == "root"


class TestLabelsAndConfig:
    """Test labels and builder configuration."""

    def test_custom_label(self, builder: TreeGraphBuilder, sample_tree):
        """Test a label function overrides str()."""
        description = builder.build(sample_tree, label=lambda n: n.value.upper())
        assert description.nodes[0].label == "ROOT"

    def test_label_coerced_to_str(self, builder: TreeGraphBuilder, node_cls):
        """Test non-string labels are converted."""
        description = builder.build(node_cls("root"), label=lambda n: 42)
        assert description.nodes[0].label == "42"

    def test_custom_child_attrs(self):
        """Test trees with differently named child fields."""

        class Cell:
            def __init__(self, key, lo=None, hi=None):
                self.key, self.lo, self.hi = key, lo, hi

            def __str__(self):
                return str(self.key)

        builder = TreeGraphBuilder(BuilderConfig(left_attr="lo", right_attr="hi", id_prefix="k"))
        description = builder.build(Cell(5, Cell(2), Cell(9)))
        assert description.node_ids() == ["k0", "k1", "k2"]
        assert [n.label for n in description.nodes] == ["5", "2", "9"]

    def test_missing_child_attr_raises(self, builder: TreeGraphBuilder):
        """Test a node without the configured attributes."""

        class Leafless:
            pass

        with pytest.raises(AttributeError):
            builder.build(Leafless())

    def test_tree_node_protocol(self, node_cls):
        """Test the runtime protocol check."""
        assert isinstance(node_cls("a"), TreeNode)
        assert not isinstance(object(), TreeNode)


class TestTracing:
    """Test per-node DEBUG records."""

    def test_trace_logs_nodes_and_edges(self, node_cls, caplog):
        """Test trace=True emits a record per node and per edge."""
        root = node_cls("root", node_cls("left"))
        with caplog.at_level(logging.DEBUG, logger="bintreeviz.core.builder"):
            TreeGraphBuilder(trace=True).build(root)
        messages = [record.getMessage() for record in caplog.records]
        assert "Node n0: 'root'" in messages
        assert "Node n1: 'left'" in messages
        assert "Edge n0 -> n1 (left)" in messages

    def test_no_trace_by_default(self, builder: TreeGraphBuilder, node_cls, caplog):
        """Test the default builder stays quiet at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="bintreeviz.core.builder"):
            builder.build(node_cls("root", node_cls("left")))
        messages = [record.getMessage() for record in caplog.records]
        assert not any(m.startswith(("Node ", "Edge ")) for m in messages)
