"""Payment snapshot retrieval exceptions."""

from .base import DomainException


class SnapshotFetchException(DomainException):
    """Raised by a snapshot source when payment data cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="SNAPSHOT_FETCH_FAILED",
        )
        self.status_code = status_code
