"""Generic graph-search control loop.

``GraphSearcher`` is parameterised by four factories, each called once per
``search()`` invocation:

- a goal-checker factory (``() -> GoalChecker``),
- a frontier factory (``() -> Frontier``),
- an explored-set factory (``frontier -> ExploredSet``),
- an initializer building the root node from the initial state.

Because every search gets fresh instances, one configured searcher can be
reused for any number of problems.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar

from omegaconf import DictConfig, OmegaConf

from graph_search.core.exceptions import SearchFailure
from graph_search.search.base import Searcher
from graph_search.search.explored_set import ExploredSet
from graph_search.search.frontier import Frontier
from graph_search.search.goal_checker import GoalChecker
from graph_search.search.observer import LoggingSearchObserver, SearchObserver

logger = logging.getLogger(__name__)

S = TypeVar('S')
N = TypeVar('N')


@dataclass
class SearchConfig:
    """Options for the convenience searcher factories."""
    track_explored: bool = True  # Duplicate detection on raw states
    with_paths: bool = True  # Keep parent links for path reconstruction
    max_expansions: Optional[int] = None  # Node budget; None is unbounded
    debug: bool = False  # Log every search event

    @classmethod
    def from_config(cls, config: Optional[DictConfig]) -> 'SearchConfig':
        """Read the ``search`` section of a loaded configuration.

        Args:
            config: Full configuration; None yields the defaults

        Returns:
            SearchConfig with defaults for missing keys
        """
        defaults = cls()
        if config is None:
            return defaults
        return cls(
            track_explored=bool(OmegaConf.select(config, 'search.track_explored',
                                                 default=defaults.track_explored)),
            with_paths=bool(OmegaConf.select(config, 'search.with_paths',
                                             default=defaults.with_paths)),
            max_expansions=OmegaConf.select(config, 'search.max_expansions',
                                            default=defaults.max_expansions),
            debug=bool(OmegaConf.select(config, 'search.debug', default=defaults.debug)),
        )


@dataclass
class SearchStatistics:
    """Counters describing the most recent search.

    All counters are -1 until a search has run. ``unexpanded_in_frontier``
    stays -1 until the search terminates.
    """
    added_to_frontier: int = -1
    not_added_to_frontier: int = -1
    expanded_from_frontier: int = -1
    unexpanded_in_frontier: int = -1

    def reset(self) -> None:
        """Counters at the start of a search: only the root is added."""
        self.added_to_frontier = 1
        self.not_added_to_frontier = 0
        self.expanded_from_frontier = 0
        self.unexpanded_in_frontier = -1

    def to_dict(self) -> Dict[str, int]:
        return {
            'added_to_frontier': self.added_to_frontier,
            'not_added_to_frontier': self.not_added_to_frontier,
            'expanded_from_frontier': self.expanded_from_frontier,
            'unexpanded_in_frontier': self.unexpanded_in_frontier
        }


class GraphSearcher(Searcher[S, N]):
    """Graph search with pluggable frontier, explored set and goal test."""

    def __init__(self,
                 goal_checker_factory: Callable[[], GoalChecker],
                 frontier_factory: Callable[[], Frontier],
                 explored_set_factory: Callable[[Frontier], ExploredSet],
                 initializer: Callable[[S], N],
                 observer: Optional[SearchObserver] = None):
        """Initialize the searcher.

        Args:
            goal_checker_factory: Builds the goal checker for one search
            frontier_factory: Builds an empty frontier for one search
            explored_set_factory: Builds the explored set, given the frontier
            initializer: Builds the root node from the initial state
            observer: Receives loop events; defaults to a no-op observer
        """
        self.goal_checker_factory = goal_checker_factory
        self.frontier_factory = frontier_factory
        self.explored_set_factory = explored_set_factory
        self.initializer = initializer
        self.observer = observer
        self._debug = False
        self.statistics = SearchStatistics()

    def search(self, initial: S) -> N:
        """Search from ``initial`` until a goal is accepted or the frontier empties.

        Args:
            initial: Initial state

        Returns:
            The goal node accepted by the goal checker, or its deferred answer

        Raises:
            SearchFailure: If the goal checker has no answer
        """
        observer = self._active_observer()
        stats = self.statistics

        frontier = self.frontier_factory()
        initial_node = self.initializer(initial)
        observer.initial_node(initial_node)
        frontier.add(initial_node)
        stats.reset()

        explored_set = self.explored_set_factory(frontier)
        explored_set.note_initial(initial_node)

        goal_checker = self.goal_checker_factory()

        logger.info(f"Starting {type(self).__name__} from {initial_node}")
        observer.frontier_snapshot(frontier)

        try:
            while not frontier.is_empty():
                node = frontier.pop()
                observer.frontier_removal(node)

                if goal_checker.test(node):
                    observer.goal_found(node)
                    stats.unexpanded_in_frontier = frontier.count_open()
                    logger.info(f"Goal found after {stats.expanded_from_frontier} expansions: {node}")
                    return node

                explored_set.note_explored(node)
                stats.expanded_from_frontier += 1
                for child in node.expand():
                    observer.expansion(child)
                    if explored_set.should_add_to_frontier(child):
                        observer.frontier_addition(child)
                        stats.added_to_frontier += 1
                        frontier.add(child)
                    else:
                        observer.frontier_nonaddition(child)
                        stats.not_added_to_frontier += 1
                observer.frontier_snapshot(frontier)
        except SearchFailure:
            # Raised by a goal checker that gives up early, e.g. on a node budget.
            stats.unexpanded_in_frontier = frontier.count_open()
            logger.info(f"Search abandoned after {stats.expanded_from_frontier} expansions")
            raise

        # The goal checker may have been holding candidates back; let it
        # answer now, or raise SearchFailure.
        observer.frontier_exhausted(goal_checker)
        stats.unexpanded_in_frontier = frontier.count_open()
        logger.info(f"Frontier exhausted after {stats.expanded_from_frontier} expansions")
        return goal_checker.get()

    def _active_observer(self) -> SearchObserver:
        if self.observer is not None:
            return self.observer
        if self._debug:
            return self.debug_observer()
        return SearchObserver()

    def debug_observer(self) -> SearchObserver:
        """Observer used when debugging is on and none was supplied."""
        return LoggingSearchObserver()

    @property
    def debug(self) -> bool:
        return self._debug

    def set_debug(self, debug: bool) -> None:
        self._debug = debug

    @property
    def last_added_to_frontier(self) -> int:
        return self.statistics.added_to_frontier

    @property
    def last_not_added_to_frontier(self) -> int:
        return self.statistics.not_added_to_frontier

    @property
    def last_expanded_from_frontier(self) -> int:
        return self.statistics.expanded_from_frontier

    @property
    def last_unexpanded_in_frontier(self) -> int:
        return self.statistics.unexpanded_in_frontier

    def get_search_stats(self) -> Dict[str, Any]:
        """Counters of the most recent search, plus the searcher type."""
        stats: Dict[str, Any] = self.statistics.to_dict()
        stats['searcher'] = type(self).__name__
        return stats
