"""Errors raised by graphnorm."""


class GraphNormError(Exception):
    """Base error for this package."""


class IdentifierFieldError(GraphNormError, KeyError):
    """Raised when a record has no usable value in the identifier field being normalized."""

    def __init__(self, field: str, reason: str = "missing"):
        self.field = field
        self.reason = reason
        super().__init__(f"identifier field '{field}' is {reason}")

    def __str__(self) -> str:
        return self.args[0]


class SnapshotNotFoundError(GraphNormError, FileNotFoundError):
    """Raised when a requested snapshot does not exist on disk."""
