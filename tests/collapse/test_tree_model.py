"""Tests for the arena-backed StackTree."""

from flamefold.collapse.builder import build_tree
from flamefold.collapse.models import ROOT, Node, StackTree


class TestStackTree:
    def test_new_tree_has_only_root(self):
        tree = StackTree()
        assert len(tree) == 1
        assert tree.root == Node("")
        assert tree.total == 0

    def test_add_child_returns_index(self):
        tree = StackTree()
        first = tree.add_child(ROOT, "a")
        second = tree.add_child(first, "b")
        assert (first, second) == (1, 2)
        assert tree.node(second).name == "b"
        assert tree.root.children == [first]
        assert tree.node(first).children == [second]

    def test_children_preserve_insertion_order(self):
        tree = StackTree()
        for name in ["z", "a", "m"]:
            tree.add_child(ROOT, name)
        assert [c.name for c in tree.children(ROOT)] == ["z", "a", "m"]

    def test_add_value_accumulates(self):
        tree = StackTree()
        tree.add_value(ROOT, 2)
        tree.add_value(ROOT, 5)
        assert tree.total == 7


class TestWalk:
    def test_depth_first_in_stored_order(self, reference_lines):
        tree = build_tree(reference_lines)
        visited = [(depth, node.name) for depth, node in tree.walk()]
        assert visited == [
            (0, ""),
            (1, "a"),
            (2, "b"),
            (3, "c"),
            (4, "d"),
            (3, "e"),
            (1, "f"),
            (2, "g"),
        ]

    def test_max_depth(self, reference_lines):
        assert build_tree(reference_lines).max_depth == 4

    def test_max_depth_of_empty_tree(self):
        assert StackTree().max_depth == 0
