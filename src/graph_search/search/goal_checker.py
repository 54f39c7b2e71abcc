"""Goal-checking policies.

A goal checker has two hooks. ``test`` is called on every node as it is
popped from the frontier; returning True ends the search with that node.
``get`` is called only when the frontier is exhausted and either returns a
deferred answer or raises ``SearchFailure``.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from graph_search.core.exceptions import SearchFailure

logger = logging.getLogger(__name__)

S = TypeVar('S')
N = TypeVar('N')


class GoalChecker(ABC, Generic[N]):
    """Decides which popped node, if any, is the search result."""

    @abstractmethod
    def test(self, node: N) -> bool:
        """Return True to accept ``node`` as the result right away."""

    @abstractmethod
    def get(self) -> N:
        """Final answer after the frontier is exhausted.

        Raises:
            SearchFailure: If there is no answer
        """


class PredicateGoalChecker(GoalChecker[N]):
    """Accept the first node satisfying ``predicate``."""

    def __init__(self, predicate: Callable[[N], bool]) -> None:
        self.predicate = predicate

    def test(self, node: N) -> bool:
        return bool(self.predicate(node))

    def get(self) -> N:
        raise SearchFailure()


class _FirstGoal(GoalChecker[N]):

    def __init__(self, checker: GoalChecker[N]) -> None:
        self.checker = checker

    def test(self, node: N) -> bool:
        return self.checker.test(node)

    def get(self) -> N:
        raise SearchFailure()


def first_goal(checker: GoalChecker[N]) -> GoalChecker[N]:
    """Reuse ``checker.test`` but never produce a deferred result."""
    return _FirstGoal(checker)


def lift_predicate(predicate: Callable[[S], bool]) -> PredicateGoalChecker:
    """Goal checker testing ``predicate`` on the node's state."""
    return PredicateGoalChecker(lambda node: predicate(node.state))


def goal_checker_factory(predicate: Callable[[S], bool]) -> Callable[[], PredicateGoalChecker]:
    """Factory of state-predicate goal checkers, one per search."""
    return lambda: lift_predicate(predicate)


class BestGoalChecker(GoalChecker[N]):
    """Defer the decision until the whole space has been searched.

    Every node satisfying ``predicate`` is a candidate; none is accepted
    during the loop. After exhaustion ``get`` returns the candidate with the
    smallest ``key`` (the first one seen on ties).
    """

    def __init__(self, predicate: Callable[[N], bool], key: Callable[[N], float]) -> None:
        self.predicate = predicate
        self.key = key
        self.best: Optional[N] = None
        self.best_key = math.inf
        self.candidates_seen = 0

    def test(self, node: N) -> bool:
        if self.predicate(node):
            self.candidates_seen += 1
            node_key = self.key(node)
            if self.best is None or node_key < self.best_key:
                self.best = node
                self.best_key = node_key
                logger.debug(f"New best candidate {node} (key={node_key})")
        return False

    def get(self) -> N:
        if self.best is None:
            raise SearchFailure()
        return self.best


class BoundedGoalChecker(GoalChecker[N]):
    """Cap the number of nodes a search may examine.

    Wraps another checker; once more than ``max_tests`` nodes have been
    tested without success, raises ``SearchFailure`` out of the search.
    """

    def __init__(self, checker: GoalChecker[N], max_tests: int) -> None:
        if max_tests <= 0:
            raise ValueError(f"max_tests must be positive, got {max_tests}")
        self.checker = checker
        self.max_tests = max_tests
        self.tests = 0

    def test(self, node: N) -> bool:
        if self.tests >= self.max_tests:
            logger.info(f"Search budget of {self.max_tests} nodes exhausted")
            raise SearchFailure(f"Node budget of {self.max_tests} exhausted")
        self.tests += 1
        return self.checker.test(node)

    def get(self) -> N:
        return self.checker.get()


def bounded(factory: Callable[[], GoalChecker[N]], max_tests: Optional[int]) -> Callable[[], GoalChecker[N]]:
    """Wrap a goal-checker factory with a node budget (None leaves it as is)."""
    if max_tests is None:
        return factory
    if max_tests <= 0:
        raise ValueError(f"max_tests must be positive, got {max_tests}")
    return lambda: BoundedGoalChecker(factory(), max_tests)
