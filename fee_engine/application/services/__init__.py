"""Application services (use cases)."""

from .refresh_service import PaymentRefresher

__all__ = [
    "PaymentRefresher",
]
