"""Per-call nesting depth accounting for the recovery parser."""

DEFAULT_MAX_DEPTH = 1000


class DepthLimitExceeded(RecursionError):
    """
    Raised when a document nests deeper than the configured ceiling.

    Never escapes the parser: the whole document degrades to null instead.
    """

    def __init__(self, max_depth: int, pos: int) -> None:
        self.max_depth = max_depth
        self.pos = pos
        super().__init__(
            f"Nesting deeper than {max_depth} levels at position {pos}"
        )


class DepthGuard:
    """
    Counts open containers for a single parse.

    One guard is created per call; it is never shared between documents.
    """

    __slots__ = ("depth", "max_depth")

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth
        self.depth = 0

    def enter(self, pos: int = 0) -> None:
        """Records entry into an array or object."""
        self.depth += 1
        if self.depth > self.max_depth:
            raise DepthLimitExceeded(self.max_depth, pos)

    def leave(self) -> None:
        """Records the close of the innermost container."""
        if self.depth > 0:
            self.depth -= 1
