"""Frontier (open set) implementations.

The frontier decides which generated-but-unexpanded node is examined next.
``QueueFrontier`` gives breadth-first order; ``PriorityQueueFrontier`` pops
nodes in the order defined by a comparator.
"""

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections import deque
from functools import cmp_to_key
from typing import Callable, Deque, Generic, List, Tuple, TypeVar

from graph_search.core.exceptions import FrontierEmpty

logger = logging.getLogger(__name__)

N = TypeVar('N')

# Negative when the first node should be popped before the second.
Comparator = Callable[[N, N], int]


class Frontier(ABC, Generic[N]):
    """Abstract container of open nodes."""

    @abstractmethod
    def add(self, node: N) -> None:
        """Add a freshly generated node."""

    @abstractmethod
    def pop(self) -> N:
        """Remove and return the next node.

        Raises:
            FrontierEmpty: If the frontier holds no nodes
        """

    @abstractmethod
    def count_open(self) -> int:
        """Number of nodes currently held."""

    def is_empty(self) -> bool:
        return self.count_open() == 0

    def __len__(self) -> int:
        return self.count_open()

    @abstractmethod
    def open_nodes(self) -> List[N]:
        """Snapshot of the held nodes, in no guaranteed order."""

    def debug_display(self) -> None:
        """Log the frontier contents at DEBUG level."""
        if logger.isEnabledFor(logging.DEBUG):
            nodes = ", ".join(str(node) for node in self.open_nodes())
            logger.debug(f"Frontier ({self.count_open()} open): {nodes}")


class QueueFrontier(Frontier[N]):
    """FIFO frontier: the oldest node is popped first."""

    def __init__(self) -> None:
        self._queue: Deque[N] = deque()

    def add(self, node: N) -> None:
        self._queue.append(node)

    def pop(self) -> N:
        if not self._queue:
            raise FrontierEmpty()
        return self._queue.popleft()

    def count_open(self) -> int:
        return len(self._queue)

    def open_nodes(self) -> List[N]:
        return list(self._queue)


class PriorityQueueFrontier(Frontier[N]):
    """Binary-heap frontier ordered by a comparator.

    Nodes that compare equal are popped in insertion order, which keeps runs
    deterministic without promising any particular tie-breaking policy.
    """

    def __init__(self, comparator: Comparator) -> None:
        self.comparator = comparator
        self._key = cmp_to_key(comparator)
        self._heap: List[Tuple[object, int, N]] = []
        self._counter = itertools.count()

    def add(self, node: N) -> None:
        heapq.heappush(self._heap, (self._key(node), next(self._counter), node))

    def pop(self) -> N:
        if not self._heap:
            raise FrontierEmpty()
        return heapq.heappop(self._heap)[2]

    def peek(self) -> N:
        """Return the next node without removing it."""
        if not self._heap:
            raise FrontierEmpty()
        return self._heap[0][2]

    def count_open(self) -> int:
        return len(self._heap)

    def open_nodes(self) -> List[N]:
        return [entry[2] for entry in sorted(self._heap)]


def queue_factory() -> QueueFrontier:
    """Frontier factory for breadth-first search."""
    return QueueFrontier()


def priority_queue_factory(comparator: Comparator) -> Callable[[], PriorityQueueFrontier]:
    """Build a factory producing a fresh priority queue per search.

    Args:
        comparator: Ordering over nodes; smaller pops first

    Returns:
        Zero-argument frontier factory
    """
    return lambda: PriorityQueueFrontier(comparator)
