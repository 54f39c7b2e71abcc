"""Tests for the search tree node variants."""

import dataclasses

import pytest

from graph_search.core.nodes import (
    CostAndStep, KnowsOwnCost, SearchTreePathNode, TreeCostNode, TreeNode,
    TreePathCostNode, TreePathNode, lift_heuristic
)


def line_expander(state):
    """0 -> 1 -> 2 -> ... -> 5, then nothing."""
    return [state + 1] if state < 5 else []


def line_costed(state):
    return [CostAndStep(float(state + 1), state + 1)] if state < 5 else []


class TestTreeNode:
    """Test the plain node variant."""

    def test_initializer_builds_root(self):
        node = TreeNode.initializer(line_expander)(0)
        assert node.state == 0
        assert str(node) == "[0]"

    def test_expand_yields_one_child_per_successor(self, grid_neighbors):
        node = TreeNode.initializer(grid_neighbors)((1, 1))
        children = list(node.expand())

        assert [child.state for child in children] == [(2, 1), (1, 2), (0, 1), (1, 0)]
        assert all(isinstance(child, TreeNode) for child in children)

    def test_expand_is_lazy(self):
        calls = []

        def expander(state):
            calls.append(state)
            return [state + 1]

        node = TreeNode(expander, 0)
        children = node.expand()
        assert calls == []

        first = next(children)
        assert first.state == 1
        assert calls == [0]

    def test_node_is_frozen(self):
        node = TreeNode(line_expander, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.state = 3

    def test_leaf_has_no_children(self):
        assert list(TreeNode(line_expander, 5).expand()) == []


class TestTreeCostNode:
    """Test cost accounting."""

    def test_root_cost_is_zero(self):
        node = TreeCostNode.initializer(line_costed)(0)
        assert node.cost == 0.0
        assert isinstance(node, KnowsOwnCost)
        assert str(node) == "[0@0.0]"

    def test_child_cost_is_parent_plus_edge(self):
        root = TreeCostNode.initializer(line_costed)(0)
        child = next(root.expand())
        grandchild = next(child.expand())

        assert child.cost == 1.0
        assert grandchild.cost == 1.0 + 2.0

    def test_plain_tuples_are_accepted(self):
        node = TreeCostNode(lambda s: [(2.5, 'b'), (0.5, 'c')], 'a', 1.0)
        children = list(node.expand())

        assert [(c.state, c.cost) for c in children] == [('b', 3.5), ('c', 1.5)]

    def test_no_parent_link(self):
        child = next(TreeCostNode.initializer(line_costed)(0).expand())
        assert not hasattr(child, 'parent')


class TestTreePathNode:
    """Test parent links and path reconstruction."""

    def test_root_has_no_parent(self):
        root = TreePathNode.initializer(line_expander)(0)
        assert root.parent is None
        assert root.depth == 0
        assert root.state_path() == [0]

    def test_state_path_runs_from_root(self):
        node = TreePathNode.initializer(line_expander)(0)
        for _ in range(3):
            node = next(node.expand())

        assert node.state_path() == [0, 1, 2, 3]
        assert node.depth == 3
        assert node.path_to_string() == "0 >> 1 >> 2 >> 3"
        assert str(node) == "[0 >> 1 >> 2 >> 3]"

    def test_children_point_at_expanding_node(self, grid_neighbors):
        root = TreePathNode.initializer(grid_neighbors)((0, 0))
        for child in root.expand():
            assert child.parent is root
            assert isinstance(child, SearchTreePathNode)

    def test_deep_path_does_not_recurse(self):
        node = TreePathNode(lambda s: [s + 1], 0)
        for _ in range(5000):
            node = next(node.expand())

        path = node.state_path()
        assert len(path) == 5001
        assert path[0] == 0 and path[-1] == 5000


class TestTreePathCostNode:
    """Test the cost + path variant."""

    def test_path_cost_equals_sum_of_edges(self):
        node = TreePathCostNode.initializer(line_costed)(0)
        while True:
            children = list(node.expand())
            if not children:
                break
            node = children[0]

        assert node.state_path() == [0, 1, 2, 3, 4, 5]
        assert node.cost == sum(range(1, 6))

    def test_every_child_cost_is_parent_cost_plus_edge(self):
        edges = {'a': [(1.5, 'b'), (0.0, 'c')], 'b': [], 'c': []}
        root = TreePathCostNode(lambda s: edges[s], 'a', 2.0)

        for (edge_cost, _), child in zip(edges['a'], root.expand()):
            assert child.cost == root.cost + edge_cost
            assert child.parent is root

    def test_string_form(self):
        root = TreePathCostNode.initializer(line_costed)(0)
        child = next(root.expand())
        assert str(child) == "[0 >> 1@1.0]"


def test_lift_heuristic():
    h = lift_heuristic(lambda state: state * 2.0)
    assert h(TreeNode(line_expander, 3)) == 6.0
