"""Breadth-first and priority-queue specialisations of ``GraphSearcher``."""

import logging
from typing import Callable, Iterable, Optional, TypeVar

from graph_search.core.nodes import TreeNode, TreePathNode
from graph_search.search.explored_set import track_state_by_hash_set
from graph_search.search.frontier import Comparator, Frontier, priority_queue_factory, queue_factory
from graph_search.search.goal_checker import GoalChecker, goal_checker_factory
from graph_search.search.graph_searcher import GraphSearcher
from graph_search.search.observer import SearchObserver

logger = logging.getLogger(__name__)

S = TypeVar('S')
N = TypeVar('N')


class BreadthFirstSearcher(GraphSearcher[S, N]):
    """Graph search over a FIFO frontier.

    By default duplicates are detected on the raw state, which must then be
    hashable.
    """

    def __init__(self,
                 goal_checker_factory: Callable[[], GoalChecker],
                 initializer: Callable[[S], N],
                 explored_set_factory: Callable = track_state_by_hash_set,
                 observer: Optional[SearchObserver] = None):
        super().__init__(goal_checker_factory, queue_factory,
                         explored_set_factory, initializer, observer)
        logger.debug(f"Created {type(self).__name__}")

    @classmethod
    def from_checker_initializer(cls, state_checker: Callable[[S], bool],
                                 initializer: Callable[[S], N]) -> 'BreadthFirstSearcher[S, N]':
        """Build from a state predicate and a root-node initializer."""
        return cls(goal_checker_factory(state_checker), initializer)

    @classmethod
    def build(cls, state_checker: Callable[[S], bool],
              expander: Callable[[S], Iterable[S]]) -> 'BreadthFirstSearcher[S, TreeNode[S]]':
        """Build over plain nodes from a state predicate and successor function."""
        return cls(goal_checker_factory(state_checker), TreeNode.initializer(expander))

    @classmethod
    def build_with_paths(cls, state_checker: Callable[[S], bool],
                         expander: Callable[[S], Iterable[S]]) -> 'BreadthFirstSearcher[S, TreePathNode[S]]':
        """Like ``build``, but the result node can reconstruct its path."""
        return cls(goal_checker_factory(state_checker), TreePathNode.initializer(expander))


class PriorityQueueSearcher(GraphSearcher[S, N]):
    """Graph search whose frontier pops nodes in ``prioritizer`` order.

    The frontier structure itself comes from ``frontier_metafactory``, which
    maps the comparator to a frontier factory.
    """

    def __init__(self,
                 goal_checker_factory: Callable[[], GoalChecker],
                 prioritizer: Comparator,
                 explored_set_factory: Callable,
                 initializer: Callable[[S], N],
                 frontier_metafactory: Callable[[Comparator], Callable[[], Frontier]] = priority_queue_factory,
                 observer: Optional[SearchObserver] = None):
        self.prioritizer = prioritizer
        super().__init__(goal_checker_factory, frontier_metafactory(prioritizer),
                         explored_set_factory, initializer, observer)
        logger.debug(f"Created {type(self).__name__}")
