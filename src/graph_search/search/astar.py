"""A* search.

A* is a priority-queue graph search ordered by f(n) = g(n) + h(n), where
g(n) is the node's accumulated cost and h(n) a heuristic estimate of the
remaining cost. Nodes with smaller f are popped first; equal f values are
not ordered further.

Edge costs must be non-negative and the heuristic admissible and
consistent for the returned path to be optimal; none of this is checked.

Duplicate detection through ``hash_artifact_builder`` never re-opens a
state: the first node generated for a state wins and later, cheaper paths
to it are discarded. On graphs where paths of different cost converge this
can return a suboptimal node. ``create_astar_searcher`` instead tracks the
cheapest cost per state and re-admits a state reached more cheaply, which
keeps A* optimal under the conditions above.
"""

import logging
from typing import Any, Callable, Hashable, Iterable, Optional, TypeVar

from graph_search.core.nodes import CostAndStep, TreeCostNode, TreePathCostNode, lift_heuristic
from graph_search.search.explored_set import (
    do_not_track, state_artifact, track_cheapest_by_artifact_hash_set,
    track_generated_by_artifact_hash_set
)
from graph_search.search.frontier import Comparator, Frontier, priority_queue_factory
from graph_search.search.goal_checker import GoalChecker, bounded, first_goal, goal_checker_factory
from graph_search.search.graph_searcher import SearchConfig
from graph_search.search.observer import HeuristicLoggingObserver, SearchObserver
from graph_search.search.searchers import PriorityQueueSearcher

logger = logging.getLogger(__name__)

S = TypeVar('S')
N = TypeVar('N')

FrontierMetafactory = Callable[[Comparator], Callable[[], Frontier]]


def astar_comparator(heuristic: Callable[[Any], float]) -> Comparator:
    """Comparator popping nodes with smaller g + h first.

    Args:
        heuristic: Estimate of the remaining cost, over nodes

    Returns:
        Comparator over cost-aware nodes
    """
    def compare(n1: Any, n2: Any) -> int:
        diff = (n1.cost + heuristic(n1)) - (n2.cost + heuristic(n2))
        if diff < 0:
            return -1
        if diff > 0:
            return 1
        return 0
    return compare


def _explored_set_factory(hash_artifact_builder: Optional[Callable[[Any], Hashable]]) -> Callable:
    if hash_artifact_builder is None:
        return do_not_track
    return track_generated_by_artifact_hash_set(hash_artifact_builder)


class AStarFrontierSearcher(PriorityQueueSearcher[S, N]):
    """A* ordering over a configurable priority-queue frontier.

    Without an explored-set factory, no duplicate detection is done.
    """

    def __init__(self,
                 goal_checker_factory: Callable[[], GoalChecker],
                 heuristic: Callable[[N], float],
                 frontier_metafactory: FrontierMetafactory,
                 initializer: Callable[[S], N],
                 explored_set_factory: Callable = do_not_track,
                 observer: Optional[SearchObserver] = None):
        """Initialize A* searcher.

        Args:
            goal_checker_factory: Builds the goal checker for one search;
                only its ``test`` is used
            heuristic: Heuristic over nodes
            frontier_metafactory: Maps the A* comparator to a frontier factory
            initializer: Builds the root node (must know its own cost)
            explored_set_factory: Duplicate-detection policy
            observer: Receives loop events
        """
        self.heuristic = heuristic
        super().__init__(lambda: first_goal(goal_checker_factory()),
                         astar_comparator(heuristic),
                         explored_set_factory,
                         initializer,
                         frontier_metafactory=frontier_metafactory,
                         observer=observer)

    def debug_observer(self) -> SearchObserver:
        return HeuristicLoggingObserver(self.heuristic)

    @classmethod
    def simple_nodes(cls,
                     state_test: Callable[[S], bool],
                     heuristic: Callable[[S], float],
                     frontier_metafactory: FrontierMetafactory,
                     expander: Callable[[S], Iterable[CostAndStep]],
                     hash_artifact_builder: Optional[Callable[[Any], Hashable]] = None
                     ) -> 'AStarFrontierSearcher[S, TreeCostNode[S]]':
        """Build over cost-only nodes from state-level functions.

        Args:
            state_test: Goal predicate over states
            heuristic: Heuristic over states
            frontier_metafactory: Maps the comparator to a frontier factory
            expander: Successor function yielding (edge cost, state) pairs
            hash_artifact_builder: Enables duplicate detection on this key
        """
        return cls(goal_checker_factory(state_test), lift_heuristic(heuristic),
                   frontier_metafactory, TreeCostNode.initializer(expander),
                   _explored_set_factory(hash_artifact_builder))

    @classmethod
    def path_nodes(cls,
                   state_test: Callable[[S], bool],
                   heuristic: Callable[[S], float],
                   frontier_metafactory: FrontierMetafactory,
                   expander: Callable[[S], Iterable[CostAndStep]],
                   hash_artifact_builder: Optional[Callable[[Any], Hashable]] = None
                   ) -> 'AStarFrontierSearcher[S, TreePathCostNode[S]]':
        """Like ``simple_nodes``, but result nodes carry their path."""
        return cls(goal_checker_factory(state_test), lift_heuristic(heuristic),
                   frontier_metafactory, TreePathCostNode.initializer(expander),
                   _explored_set_factory(hash_artifact_builder))


class AStarSearcher(AStarFrontierSearcher[S, N]):
    """A* over the standard binary-heap priority queue."""

    def __init__(self,
                 goal_checker_factory: Callable[[], GoalChecker],
                 heuristic: Callable[[N], float],
                 initializer: Callable[[S], N],
                 explored_set_factory: Callable = do_not_track,
                 observer: Optional[SearchObserver] = None):
        super().__init__(goal_checker_factory, heuristic, priority_queue_factory,
                         initializer, explored_set_factory, observer)

    @classmethod
    def simple_nodes(cls,
                     state_test: Callable[[S], bool],
                     heuristic: Callable[[S], float],
                     expander: Callable[[S], Iterable[CostAndStep]],
                     hash_artifact_builder: Optional[Callable[[Any], Hashable]] = None
                     ) -> 'AStarSearcher[S, TreeCostNode[S]]':
        """Build over cost-only nodes from state-level functions."""
        return cls(goal_checker_factory(state_test), lift_heuristic(heuristic),
                   TreeCostNode.initializer(expander),
                   _explored_set_factory(hash_artifact_builder))

    @classmethod
    def path_nodes(cls,
                   state_test: Callable[[S], bool],
                   heuristic: Callable[[S], float],
                   expander: Callable[[S], Iterable[CostAndStep]],
                   hash_artifact_builder: Optional[Callable[[Any], Hashable]] = None
                   ) -> 'AStarSearcher[S, TreePathCostNode[S]]':
        """Build over path-carrying cost nodes from state-level functions."""
        return cls(goal_checker_factory(state_test), lift_heuristic(heuristic),
                   TreePathCostNode.initializer(expander),
                   _explored_set_factory(hash_artifact_builder))


def create_astar_searcher(state_test: Callable[[S], bool],
                          heuristic: Callable[[S], float],
                          expander: Callable[[S], Iterable[CostAndStep]],
                          track_explored: Optional[bool] = None,
                          with_paths: Optional[bool] = None,
                          max_expansions: Optional[int] = None,
                          debug: Optional[bool] = None,
                          config: Optional[SearchConfig] = None) -> AStarSearcher:
    """Factory function to create an A* searcher over hashable states.

    Options left as None come from ``config``, else from the loaded Hydra
    configuration (``search.*``), else from ``SearchConfig`` defaults.

    Args:
        state_test: Goal predicate over states
        heuristic: Heuristic over states
        expander: Successor function yielding (edge cost, state) pairs
        track_explored: Enable duplicate detection on raw states
        with_paths: Build path-carrying nodes
        max_expansions: Give up (SearchFailure) after testing this many nodes
        debug: Log every search event
        config: Explicit defaults

    Returns:
        Configured AStarSearcher instance
    """
    if config is None:
        from graph_search.config import get_config
        config = SearchConfig.from_config(get_config())

    if track_explored is None:
        track_explored = config.track_explored
    if with_paths is None:
        with_paths = config.with_paths
    if max_expansions is None:
        max_expansions = config.max_expansions
    if debug is None:
        debug = config.debug

    if with_paths:
        initializer = TreePathCostNode.initializer(expander)
    else:
        initializer = TreeCostNode.initializer(expander)
    if track_explored:
        explored_set_factory = track_cheapest_by_artifact_hash_set(state_artifact)
    else:
        explored_set_factory = do_not_track

    searcher = AStarSearcher(goal_checker_factory(state_test), lift_heuristic(heuristic),
                             initializer, explored_set_factory)
    searcher.goal_checker_factory = bounded(searcher.goal_checker_factory, max_expansions)
    searcher.set_debug(debug)

    logger.debug(f"Created A* searcher: track_explored={track_explored}, "
                 f"with_paths={with_paths}, max_expansions={max_expansions}")
    return searcher
