class SequenceError(ValueError):
    """base class for conditions signalled by sequence operations."""
    pass


class OutOfRangeError(SequenceError, IndexError):
    """raised when an index lies outside the bounds of a sequence."""

    def __init__(self, index: int, message: str = None):
        self.index = index
        super().__init__(message or f"index {index} is out of range")


class AmbiguousMatchError(SequenceError):
    """raised when more than one element satisfies a single-match condition."""

    def __init__(self, message: str = "more than one element satisfies the condition"):
        super().__init__(message)


class NotFoundError(SequenceError, LookupError):
    """raised when no element satisfies the condition."""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


class CursorStateError(SequenceError):
    """raised when a cursor's current value is read while it is not positioned on an element."""
    pass
