"""Search tree nodes.

A node wraps one state of the search space together with the metadata a
particular algorithm needs. Four variants are provided:

- ``TreeNode``: the state only.
- ``TreeCostNode``: the state and the accumulated path cost g(n).
- ``TreePathNode``: the state and a link to the parent node.
- ``TreePathCostNode``: the state, the path cost and the parent link.

Each node carries the caller-supplied expander so that ``expand()`` can
generate successor nodes of the same variant. Nodes are frozen once built.

Cost-aware variants assume non-negative edge costs. Negative costs are not
rejected, but A* gives no optimality guarantee with them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, List, NamedTuple, Optional, TypeVar

S = TypeVar('S')


class CostAndStep(NamedTuple):
    """One successor produced by a cost-aware expander."""
    cost: float
    state: Any


class SearchTreeNode(ABC, Generic[S]):
    """Common interface of every node variant."""

    state: S

    @abstractmethod
    def expand(self) -> Iterator['SearchTreeNode[S]']:
        """Lazily generate the children of this node."""


class KnowsOwnCost:
    """Marker for nodes exposing an accumulated ``cost``."""

    cost: float


class SearchTreePathNode(SearchTreeNode[S]):
    """Nodes that remember the node they were expanded from."""

    parent: Optional['SearchTreePathNode[S]']

    def state_path(self) -> List[S]:
        """Return the states from the root down to this node."""
        states = []
        node = self
        while node is not None:
            states.append(node.state)
            node = node.parent
        return list(reversed(states))

    def path_to_string(self) -> str:
        """Render the state path as ``root >> ... >> state``."""
        return " >> ".join(str(state) for state in self.state_path())

    @property
    def depth(self) -> int:
        """Number of edges between the root and this node."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth


@dataclass(frozen=True, eq=False)
class TreeNode(SearchTreeNode[S]):
    """Plain wrapper around a state: no cost, no history."""

    expander: Callable[[S], Iterable[S]] = field(repr=False)
    state: S

    def expand(self) -> Iterator['TreeNode[S]']:
        for dest in self.expander(self.state):
            yield TreeNode(self.expander, dest)

    @classmethod
    def initializer(cls, expander: Callable[[S], Iterable[S]]) -> Callable[[S], 'TreeNode[S]']:
        """Build the root-node constructor for ``expander``."""
        return lambda state: cls(expander, state)

    def __str__(self) -> str:
        return f"[{self.state}]"


@dataclass(frozen=True, eq=False)
class TreeCostNode(SearchTreeNode[S], KnowsOwnCost):
    """State plus accumulated path cost."""

    expander: Callable[[S], Iterable[CostAndStep]] = field(repr=False)
    state: S
    cost: float = 0.0

    def expand(self) -> Iterator['TreeCostNode[S]']:
        for step_cost, dest in self.expander(self.state):
            yield TreeCostNode(self.expander, dest, self.cost + step_cost)

    @classmethod
    def initializer(cls, expander: Callable[[S], Iterable[CostAndStep]]) -> Callable[[S], 'TreeCostNode[S]']:
        """Build the root-node constructor for ``expander``; roots cost 0."""
        return lambda state: cls(expander, state, 0.0)

    def __str__(self) -> str:
        return f"[{self.state}@{self.cost}]"


@dataclass(frozen=True, eq=False)
class TreePathNode(SearchTreePathNode[S]):
    """State plus a link to the parent node."""

    expander: Callable[[S], Iterable[S]] = field(repr=False)
    state: S
    parent: Optional['TreePathNode[S]'] = field(default=None, repr=False)

    def expand(self) -> Iterator['TreePathNode[S]']:
        for dest in self.expander(self.state):
            yield TreePathNode(self.expander, dest, self)

    @classmethod
    def initializer(cls, expander: Callable[[S], Iterable[S]]) -> Callable[[S], 'TreePathNode[S]']:
        """Build the root-node constructor for ``expander``."""
        return lambda state: cls(expander, state)

    def __str__(self) -> str:
        return f"[{self.path_to_string()}]"


@dataclass(frozen=True, eq=False)
class TreePathCostNode(SearchTreePathNode[S], KnowsOwnCost):
    """State, accumulated path cost and parent link."""

    expander: Callable[[S], Iterable[CostAndStep]] = field(repr=False)
    state: S
    cost: float = 0.0
    parent: Optional['TreePathCostNode[S]'] = field(default=None, repr=False)

    def expand(self) -> Iterator['TreePathCostNode[S]']:
        for step_cost, dest in self.expander(self.state):
            yield TreePathCostNode(self.expander, dest, self.cost + step_cost, self)

    @classmethod
    def initializer(cls, expander: Callable[[S], Iterable[CostAndStep]]) -> Callable[[S], 'TreePathCostNode[S]']:
        """Build the root-node constructor for ``expander``; roots cost 0."""
        return lambda state: cls(expander, state, 0.0)

    def __str__(self) -> str:
        return f"[{self.path_to_string()}@{self.cost}]"


def lift_heuristic(heuristic: Callable[[S], float]) -> Callable[[SearchTreeNode[S]], float]:
    """Turn a heuristic over states into a heuristic over nodes."""
    return lambda node: heuristic(node.state)
