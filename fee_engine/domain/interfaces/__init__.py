"""
Domain Interfaces (Ports)
"""

from .sources import PaymentSnapshotSource

__all__ = [
    "PaymentSnapshotSource",
]
