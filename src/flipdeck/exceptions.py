"""Exception hierarchy for flipdeck collaborators."""


class FlipdeckError(Exception):
    """Base exception for all flipdeck errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class AuthenticationError(FlipdeckError):
    """Sign-in or sign-out failed (cancelled by the user or provider unreachable)."""


class StoreUnavailableError(FlipdeckError):
    """The remote card store rejected or could not complete a call."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        """Initialize with the store operation name and an optional reason."""
        self.operation = operation
        super().__init__(message or f"Card store unavailable during {operation}")
