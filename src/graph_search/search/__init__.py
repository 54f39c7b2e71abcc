"""Graph search algorithms.

This module implements the generic graph-search control loop together with
its pluggable frontier, explored-set and goal-checking policies, and the
breadth-first, priority-queue and A* searchers built on it.
"""

from .base import Searcher
from .frontier import Frontier, QueueFrontier, PriorityQueueFrontier, queue_factory, priority_queue_factory
from .explored_set import (
    ExploredSet, DoNotTrack, ArtifactHashSet, CheapestArtifactHashSet, do_not_track,
    track_generated_by_artifact_hash_set, track_cheapest_by_artifact_hash_set,
    track_state_by_hash_set, state_artifact, ndarray_artifact
)
from .goal_checker import (
    GoalChecker, PredicateGoalChecker, BestGoalChecker, BoundedGoalChecker,
    first_goal, lift_predicate, goal_checker_factory
)
from .observer import SearchObserver, LoggingSearchObserver, HeuristicLoggingObserver
from .graph_searcher import GraphSearcher, SearchConfig, SearchStatistics
from .searchers import BreadthFirstSearcher, PriorityQueueSearcher
from .astar import AStarFrontierSearcher, AStarSearcher, astar_comparator, create_astar_searcher

__all__ = [
    'Searcher',
    'Frontier',
    'QueueFrontier',
    'PriorityQueueFrontier',
    'queue_factory',
    'priority_queue_factory',
    'ExploredSet',
    'DoNotTrack',
    'ArtifactHashSet',
    'CheapestArtifactHashSet',
    'do_not_track',
    'track_generated_by_artifact_hash_set',
    'track_cheapest_by_artifact_hash_set',
    'track_state_by_hash_set',
    'state_artifact',
    'ndarray_artifact',
    'GoalChecker',
    'PredicateGoalChecker',
    'BestGoalChecker',
    'BoundedGoalChecker',
    'first_goal',
    'lift_predicate',
    'goal_checker_factory',
    'SearchObserver',
    'LoggingSearchObserver',
    'HeuristicLoggingObserver',
    'GraphSearcher',
    'SearchConfig',
    'SearchStatistics',
    'BreadthFirstSearcher',
    'PriorityQueueSearcher',
    'AStarFrontierSearcher',
    'AStarSearcher',
    'astar_comparator',
    'create_astar_searcher'
]
