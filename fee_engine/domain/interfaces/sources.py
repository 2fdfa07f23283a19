"""External data source interfaces."""

from abc import ABC, abstractmethod

from fee_engine.domain.entities import PaymentSnapshot


class PaymentSnapshotSource(ABC):
    """
    Abstract source of payment data from the backend.

    The refresh loop calls this once per tick; implementations own
    the transport and authentication.
    """

    @abstractmethod
    async def fetch_snapshot(self) -> PaymentSnapshot:
        """
        Fetch the current children and payments in one consistent read.

        Returns:
            A PaymentSnapshot built from a single backend response set

        Raises:
            SnapshotFetchException: If the backend cannot be reached or
                returns an error
        """
        ...
