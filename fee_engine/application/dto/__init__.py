"""Data Transfer Objects for application layer."""

from .payment import PaymentView

__all__ = [
    "PaymentView",
]
