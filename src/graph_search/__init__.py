"""Generic state-space search engine.

Graph search parameterised over frontier, explored-set and goal-checking
policies, with breadth-first and A* specialisations.
"""

from .core import SearchFailure, FrontierEmpty, CostAndStep
from .search import (
    GraphSearcher, BreadthFirstSearcher, PriorityQueueSearcher,
    AStarFrontierSearcher, AStarSearcher, create_astar_searcher
)

__version__ = "0.1.0"

__all__ = [
    'SearchFailure',
    'FrontierEmpty',
    'CostAndStep',
    'GraphSearcher',
    'BreadthFirstSearcher',
    'PriorityQueueSearcher',
    'AStarFrontierSearcher',
    'AStarSearcher',
    'create_astar_searcher'
]
