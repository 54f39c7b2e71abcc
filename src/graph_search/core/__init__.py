"""Core data model: search tree nodes and error types."""

from .exceptions import SearchFailure, FrontierEmpty
from .nodes import (
    CostAndStep, SearchTreeNode, SearchTreePathNode, KnowsOwnCost,
    TreeNode, TreeCostNode, TreePathNode, TreePathCostNode, lift_heuristic
)

__all__ = [
    'SearchFailure',
    'FrontierEmpty',
    'CostAndStep',
    'SearchTreeNode',
    'SearchTreePathNode',
    'KnowsOwnCost',
    'TreeNode',
    'TreeCostNode',
    'TreePathNode',
    'TreePathCostNode',
    'lift_heuristic'
]
