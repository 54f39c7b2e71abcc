"""Error types raised by the search engine."""


class SearchFailure(Exception):
    """Raised when a search ends without producing a goal node.

    This is the normal outcome for an unsolvable problem, not a defect:
    callers are expected to catch it (``Searcher.solvable`` does).
    """

    def __init__(self, message: str = "No goal node found"):
        super().__init__(message)


class FrontierEmpty(RuntimeError):
    """Raised when popping from an empty frontier.

    The control loop always checks ``is_empty()`` before popping, so this
    indicates a broken frontier implementation and should not be caught.
    """

    MESSAGE = "Frontier (unexpectedly) empty"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)
