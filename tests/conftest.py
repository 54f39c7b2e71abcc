"""Shared fixtures: small search problems used across the test suite."""

from collections import Counter
from typing import Callable, Dict, List, Tuple

import pytest

from graph_search.config import clear_config
from graph_search.core.nodes import CostAndStep

Cell = Tuple[int, int]


def make_grid_neighbors(size: int) -> Callable[[Cell], List[Cell]]:
    """4-neighbourhood successor function on a size x size grid."""
    def neighbors(cell: Cell) -> List[Cell]:
        row, col = cell
        result = []
        for d_row, d_col in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < size and 0 <= n_col < size:
                result.append((n_row, n_col))
        return result
    return neighbors


class CountingExpander:
    """Wrap a successor function and count how often each state is expanded."""

    def __init__(self, expander: Callable):
        self.expander = expander
        self.calls: Counter = Counter()

    def __call__(self, state):
        self.calls[state] += 1
        return self.expander(state)


@pytest.fixture(autouse=True)
def _clear_global_config():
    """Keep the global Hydra configuration from leaking between tests."""
    clear_config()
    yield
    clear_config()


@pytest.fixture
def grid_neighbors():
    """Successors on the 3x3 grid, uncosted."""
    return make_grid_neighbors(3)


@pytest.fixture
def grid_costed(grid_neighbors):
    """Successors on the 3x3 grid with unit edge costs."""
    return lambda cell: [CostAndStep(1.0, n) for n in grid_neighbors(cell)]


@pytest.fixture
def manhattan():
    """Manhattan distance to the (2, 2) corner."""
    return lambda cell: abs(2 - cell[0]) + abs(2 - cell[1])


@pytest.fixture
def converging_graph() -> Dict[str, List[Tuple[float, str]]]:
    """Weighted digraph where the cheapest route to C and D is found late.

    A-B-C-D costs 3; the first path generated to C (A-C) and to D (B-D)
    is more expensive.
    """
    return {
        'A': [(1.0, 'B'), (4.0, 'C')],
        'B': [(1.0, 'C'), (5.0, 'D')],
        'C': [(1.0, 'D')],
        'D': [],
    }


@pytest.fixture
def diamond_graph() -> Dict[str, List[str]]:
    """Acyclic graph with two routes converging on D."""
    return {
        'A': ['B', 'C'],
        'B': ['D'],
        'C': ['D'],
        'D': ['E'],
        'E': [],
    }
