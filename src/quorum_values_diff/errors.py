"""Exception hierarchy for quorum-values-diff.

Every error raised by the library derives from ``QuorumDiffError``.  The
concrete classes also derive from the matching builtin so callers that
already catch ``ValueError`` or ``RecursionError`` keep working.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "DepthLimitExceededError",
    "DocumentLoadError",
    "InvalidQuorumError",
    "QuorumDiffError",
]


class QuorumDiffError(Exception):
    """Base class for all quorum-values-diff errors."""


class InvalidQuorumError(QuorumDiffError, ValueError):
    """Raised when a quorum is not a real number in (0, 1]."""

    def __init__(self, quorum: object) -> None:
        self.quorum = quorum
        super().__init__(f"quorum must be in (0, 1], got {quorum!r}")


class DepthLimitExceededError(QuorumDiffError, RecursionError):
    """Raised when a tree is nested deeper than the configured limit.

    Attributes:
        path:              JSON Pointer of the position where the limit was
                           hit ("" when unknown).
        max_depth:         The configured limit.
        recursion_limit:   The interpreter recursion limit when that, not
                           ``max_depth``, stopped the walk; otherwise None.
    """

    def __init__(
        self, path: str, max_depth: int, recursion_limit: int | None = None
    ) -> None:
        self.path = path
        self.max_depth = max_depth
        self.recursion_limit = recursion_limit
        if recursion_limit is None:
            message = (
                f"value tree nested deeper than max_depth={max_depth} "
                f"at {path or '/'!r}"
            )
        else:
            message = (
                f"value tree nested deeper than the interpreter recursion limit "
                f"({recursion_limit}) allows; max_depth={max_depth} was not reached"
            )
        super().__init__(message)


class DocumentLoadError(QuorumDiffError):
    """Raised when an input document cannot be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot load {self.path}: {reason}")
