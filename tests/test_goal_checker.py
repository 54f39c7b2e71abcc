"""Tests for goal-checking policies."""

import pytest

from graph_search.core.exceptions import SearchFailure
from graph_search.core.nodes import TreeNode, TreePathCostNode
from graph_search.search.explored_set import track_state_by_hash_set
from graph_search.search.frontier import queue_factory
from graph_search.search.goal_checker import (
    BestGoalChecker, BoundedGoalChecker, PredicateGoalChecker, bounded, first_goal,
    goal_checker_factory, lift_predicate
)
from graph_search.search.graph_searcher import GraphSearcher


def node(state):
    return TreeNode(lambda s: [], state)


class TestPredicateGoalChecker:
    """Test the default first-goal policy."""

    def test_accepts_matching_nodes(self):
        checker = PredicateGoalChecker(lambda n: n.state == 'goal')
        assert checker.test(node('goal'))
        assert not checker.test(node('other'))

    def test_get_raises_search_failure(self):
        with pytest.raises(SearchFailure):
            PredicateGoalChecker(lambda n: True).get()

    def test_lift_predicate_tests_state(self):
        checker = lift_predicate(lambda state: state > 3)
        assert checker.test(node(4))
        assert not checker.test(node(3))

    def test_factory_builds_fresh_checkers(self):
        factory = goal_checker_factory(lambda state: state == 1)
        first, second = factory(), factory()
        assert first is not second
        assert first.test(node(1))


class TestFirstGoal:
    """Test wrapping a checker so it never defers."""

    def test_delegates_test(self):
        wrapped = first_goal(lift_predicate(lambda state: state == 'x'))
        assert wrapped.test(node('x'))
        assert not wrapped.test(node('y'))

    def test_suppresses_deferred_answer(self):
        best = BestGoalChecker(lambda n: True, key=lambda n: 0.0)
        best.test(node('candidate'))
        assert best.get().state == 'candidate'

        with pytest.raises(SearchFailure):
            first_goal(best).get()


class TestBestGoalChecker:
    """Test deferred, best-of-all-candidates goal checking."""

    @pytest.fixture
    def tree(self):
        """Small weighted tree with three leaves of different cost."""
        return {
            'root': [(5.0, 'leaf-5'), (1.0, 'mid')],
            'mid': [(1.0, 'leaf-2'), (7.0, 'leaf-8')],
            'leaf-5': [], 'leaf-2': [], 'leaf-8': [],
        }

    def make_searcher(self, tree, predicate):
        return GraphSearcher(
            lambda: BestGoalChecker(predicate, key=lambda n: n.cost),
            queue_factory,
            track_state_by_hash_set,
            TreePathCostNode.initializer(lambda state: tree[state])
        )

    def test_never_accepts_during_loop(self):
        checker = BestGoalChecker(lambda n: True, key=lambda n: 1.0)
        assert not checker.test(node('a'))
        assert checker.candidates_seen == 1

    def test_returns_cheapest_candidate_after_exhaustion(self, tree):
        searcher = self.make_searcher(tree, lambda n: n.state.startswith('leaf'))
        result = searcher.search('root')

        assert result.state == 'leaf-2'
        assert result.cost == 2.0
        assert result.state_path() == ['root', 'mid', 'leaf-2']
        # Every node was expanded before the deferred answer was produced.
        assert searcher.last_expanded_from_frontier == 5
        assert searcher.last_unexpanded_in_frontier == 0

    def test_first_seen_wins_ties(self):
        checker = BestGoalChecker(lambda n: True, key=lambda n: 1.0)
        checker.test(node('first'))
        checker.test(node('second'))
        assert checker.get().state == 'first'

    def test_no_candidates_fails(self, tree):
        searcher = self.make_searcher(tree, lambda n: False)
        with pytest.raises(SearchFailure):
            searcher.search('root')
        assert not searcher.solvable('root')


class TestBoundedGoalChecker:
    """Test the node budget wrapper."""

    def test_raises_after_budget(self):
        checker = BoundedGoalChecker(lift_predicate(lambda state: False), max_tests=2)
        assert not checker.test(node(1))
        assert not checker.test(node(2))
        with pytest.raises(SearchFailure):
            checker.test(node(3))

    def test_success_within_budget(self):
        checker = BoundedGoalChecker(lift_predicate(lambda state: state == 2), max_tests=2)
        assert not checker.test(node(1))
        assert checker.test(node(2))

    def test_get_delegates(self):
        checker = BoundedGoalChecker(lift_predicate(lambda state: False), max_tests=1)
        with pytest.raises(SearchFailure):
            checker.get()

    def test_rejects_non_positive_budget(self):
        with pytest.raises(ValueError):
            BoundedGoalChecker(lift_predicate(lambda state: False), max_tests=0)
        with pytest.raises(ValueError):
            bounded(goal_checker_factory(lambda state: False), -1)

    def test_bounded_none_keeps_factory(self):
        factory = goal_checker_factory(lambda state: False)
        assert bounded(factory, None) is factory

    def test_bounded_factory_resets_per_search(self):
        factory = bounded(goal_checker_factory(lambda state: False), 1)
        first = factory()
        first.test(node(1))
        second = factory()
        assert not second.test(node(1))

    def test_caps_an_infinite_search(self):
        searcher = GraphSearcher(
            bounded(goal_checker_factory(lambda state: False), 50),
            queue_factory,
            track_state_by_hash_set,
            TreeNode.initializer(lambda n: [n + 1])
        )
        assert not searcher.solvable(0)
        assert searcher.last_expanded_from_frontier == 50
