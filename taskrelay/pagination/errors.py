class PaginationError(ValueError):
    """Base class for errors caused by invalid connection arguments."""


class InvalidOrder(PaginationError):
    """Raised when an ordering selector is not recognized."""

    def __init__(self, token, known=()):
        self.token = token
        self.known = tuple(known)
        message = f"Unknown ordering {token!r}"
        if self.known:
            message += f"; expected one of: {', '.join(self.known)}"
        super().__init__(message)


class InvalidCursor(PaginationError):
    """Raised when an after/before cursor is malformed or belongs to another ordering."""

    def __init__(self, cursor: str, reason: str):
        self.cursor = cursor
        self.reason = reason
        super().__init__(f"Invalid cursor {cursor!r}: {reason}")


class InvalidPaginationArgs(PaginationError):
    """Raised for out-of-range first/last values."""
