"""Explored-set policies for duplicate detection.

An explored set is consulted for every freshly generated child and decides
whether it goes into the frontier. Tracking is by a hashable "artifact"
derived from the node, usually the state itself.

Policy factories take the frontier the search was seeded with, so that a
policy may inspect it; the policies shipped here do not need to.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Hashable, Set, Tuple, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

N = TypeVar('N')

ExploredSetFactory = Callable[[Any], 'ExploredSet']


class ExploredSet(ABC, Generic[N]):
    """Record of nodes already generated or expanded."""

    @abstractmethod
    def note_initial(self, node: N) -> None:
        """Register the root node; called once per search."""

    @abstractmethod
    def note_explored(self, node: N) -> None:
        """Called when ``node`` is popped and about to be expanded."""

    @abstractmethod
    def should_add_to_frontier(self, node: N) -> bool:
        """Return whether a freshly generated child is new.

        Records the child as seen when it is new.
        """


class DoNotTrack(ExploredSet[N]):
    """Accept every child.

    Only safe for tree-shaped spaces, or where re-expanding states is an
    acceptable price for the saved memory.
    """

    def note_initial(self, node: N) -> None:
        pass

    def note_explored(self, node: N) -> None:
        pass

    def should_add_to_frontier(self, node: N) -> bool:
        return True


class ArtifactHashSet(ExploredSet[N]):
    """Track nodes by a hashable artifact built from each node."""

    def __init__(self, artifact_builder: Callable[[N], Hashable]) -> None:
        self.artifact_builder = artifact_builder
        self.tracker: Set[Hashable] = set()

    def note_initial(self, node: N) -> None:
        self.tracker.add(self.artifact_builder(node))

    def note_explored(self, node: N) -> None:
        pass

    def should_add_to_frontier(self, node: N) -> bool:
        artifact = self.artifact_builder(node)
        if artifact in self.tracker:
            return False
        self.tracker.add(artifact)
        return True

    def __len__(self) -> int:
        return len(self.tracker)


class CheapestArtifactHashSet(ExploredSet[N]):
    """Track artifacts together with the cheapest cost seen for each.

    A child is admitted when its artifact is new or when it reaches a known
    artifact strictly more cheaply than any earlier node. Requires nodes
    with a ``cost``. The more expensive copies already in the frontier stay
    there and are expanded when popped.
    """

    def __init__(self, artifact_builder: Callable[[N], Hashable]) -> None:
        self.artifact_builder = artifact_builder
        self.best_costs: Dict[Hashable, float] = {}

    def note_initial(self, node: N) -> None:
        self.best_costs[self.artifact_builder(node)] = node.cost

    def note_explored(self, node: N) -> None:
        pass

    def should_add_to_frontier(self, node: N) -> bool:
        artifact = self.artifact_builder(node)
        known = self.best_costs.get(artifact)
        if known is not None and known <= node.cost:
            return False
        self.best_costs[artifact] = node.cost
        return True

    def __len__(self) -> int:
        return len(self.best_costs)


def do_not_track(frontier: Any = None) -> DoNotTrack:
    """Explored-set factory that disables duplicate detection."""
    return DoNotTrack()


def track_generated_by_artifact_hash_set(
        artifact_builder: Callable[[N], Hashable]) -> ExploredSetFactory:
    """Build an explored-set factory keyed by ``artifact_builder(node)``.

    Args:
        artifact_builder: Maps a node to a hashable key

    Returns:
        Factory taking the frontier and returning a fresh tracker
    """
    def factory(frontier: Any = None) -> ArtifactHashSet:
        return ArtifactHashSet(artifact_builder)
    return factory


def track_cheapest_by_artifact_hash_set(
        artifact_builder: Callable[[N], Hashable]) -> ExploredSetFactory:
    """Build a cost-aware explored-set factory keyed by ``artifact_builder``."""
    def factory(frontier: Any = None) -> CheapestArtifactHashSet:
        return CheapestArtifactHashSet(artifact_builder)
    return factory


def state_artifact(node: Any) -> Hashable:
    """Use the node's state itself as the tracking key."""
    return node.state


def track_state_by_hash_set(frontier: Any = None) -> ArtifactHashSet:
    """Explored-set factory tracking raw (hashable) states."""
    return ArtifactHashSet(state_artifact)


def ndarray_artifact(node: Any) -> Tuple[Tuple[int, ...], str, bytes]:
    """Hashable key for nodes whose state is a numpy array.

    Arrays are not hashable, so the key combines shape, dtype and raw bytes;
    equal arrays of the same dtype map to the same key.
    """
    state = np.ascontiguousarray(node.state)
    return state.shape, state.dtype.str, state.tobytes()
