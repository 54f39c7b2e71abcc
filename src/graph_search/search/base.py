"""Abstract searcher interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from graph_search.core.exceptions import SearchFailure

S = TypeVar('S')
N = TypeVar('N')


class Searcher(ABC, Generic[S, N]):
    """Something that maps an initial state to a goal node."""

    @abstractmethod
    def search(self, initial: S) -> N:
        """Search from ``initial``.

        Raises:
            SearchFailure: If no goal node is found
        """

    def solvable(self, initial: S) -> bool:
        """Return whether ``search(initial)`` finds a goal.

        Only ``SearchFailure`` is treated as "unsolvable"; any other error
        propagates.
        """
        try:
            self.search(initial)
        except SearchFailure:
            return False
        return True
