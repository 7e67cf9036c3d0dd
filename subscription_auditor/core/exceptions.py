class AuditorError(Exception):
    """Base class for errors raised by the subscription auditor."""


class ValidationError(AuditorError, ValueError):
    """A record or parameter was rejected before it could reach the ledger."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
