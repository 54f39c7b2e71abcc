"""Observers for the search control loop.

Observers receive one callback per loop event and never influence the
outcome of a search. ``SearchObserver`` ignores every event;
``LoggingSearchObserver`` reports them through ``logging`` at DEBUG level.
"""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class SearchObserver:
    """No-op base observer; override the events of interest."""

    def initial_node(self, node: Any) -> None:
        pass

    def frontier_removal(self, node: Any) -> None:
        pass

    def expansion(self, node: Any) -> None:
        pass

    def frontier_addition(self, node: Any) -> None:
        pass

    def frontier_nonaddition(self, node: Any) -> None:
        pass

    def frontier_exhausted(self, goal_checker: Any) -> None:
        pass

    def goal_found(self, node: Any) -> None:
        pass

    def frontier_snapshot(self, frontier: Any) -> None:
        pass


class LoggingSearchObserver(SearchObserver):
    """Log every search event."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logger

    def initial_node(self, node: Any) -> None:
        self.log.debug(f"Initial node: {node}")

    def frontier_removal(self, node: Any) -> None:
        self.log.debug(f"Popped node {node}")

    def expansion(self, node: Any) -> None:
        self.log.debug(f"- Expanded to {node}")

    def frontier_addition(self, node: Any) -> None:
        self.log.debug("  - Added")

    def frontier_nonaddition(self, node: Any) -> None:
        self.log.debug("  - Not added")

    def frontier_exhausted(self, goal_checker: Any) -> None:
        self.log.debug("Frontier exhausted")

    def goal_found(self, node: Any) -> None:
        self.log.debug("- Node is goal")

    def frontier_snapshot(self, frontier: Any) -> None:
        frontier.debug_display()


class HeuristicLoggingObserver(LoggingSearchObserver):
    """Logging observer that also reports heuristic values (for A*)."""

    def __init__(self, heuristic: Callable[[Any], float],
                 log: Optional[logging.Logger] = None) -> None:
        super().__init__(log)
        self.heuristic = heuristic

    def frontier_removal(self, node: Any) -> None:
        self.log.debug(f"Popped node {node} h={self.heuristic(node)}")

    def frontier_addition(self, node: Any) -> None:
        self.log.debug(f"  - Adding with h={self.heuristic(node)}")
