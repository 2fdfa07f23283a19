"""Refresh service - keeps the payment snapshot current while payments are open."""

import asyncio
import contextlib
from typing import Optional

import structlog

from fee_engine.core.config import settings
from fee_engine.core.metrics import (
    record_refresh_failure,
    record_refresh_skipped,
    record_refresh_success,
    set_polling_active,
    track_refresh_latency,
)
from fee_engine.domain.entities import PaymentSnapshot
from fee_engine.domain.exceptions import SnapshotFetchException
from fee_engine.domain.interfaces import PaymentSnapshotSource
from fee_engine.service.billing import is_open, should_poll

logger = structlog.get_logger(__name__)


class PaymentRefresher:
    """
    Cooperative refresh loop over a payment snapshot source.

    At most one fetch is in flight at a time. A successful fetch
    replaces the snapshot as a whole; a failed fetch leaves the last
    good snapshot in place. The loop ticks only while should_poll()
    holds for the current snapshot.
    """

    def __init__(
        self,
        source: PaymentSnapshotSource,
        interval: float | None = None,
        initial_snapshot: Optional[PaymentSnapshot] = None,
    ):
        self._source = source
        self._interval = interval if interval is not None else settings.poll_interval_seconds
        self._snapshot = initial_snapshot
        self._in_flight = False
        self._task: Optional[asyncio.Task] = None

    @property
    def snapshot(self) -> Optional[PaymentSnapshot]:
        return self._snapshot

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def should_poll(self) -> bool:
        """Whether the current snapshot still has open payments or pending amounts."""
        snapshot = self._snapshot
        if snapshot is None:
            return False
        return should_poll(snapshot.children, snapshot.payments)

    async def refresh(self) -> bool:
        """
        Fetch a new snapshot unless one is already being fetched.

        Returns:
            True if the snapshot was replaced, False if the refresh was
            skipped or the fetch failed
        """
        if self._in_flight:
            logger.debug("refresh_skipped")
            record_refresh_skipped()
            return False

        self._in_flight = True
        try:
            with track_refresh_latency():
                snapshot = await self._source.fetch_snapshot()
        except SnapshotFetchException as e:
            logger.warning(
                "refresh_failed",
                code=e.code,
                message=e.message,
                status_code=e.status_code,
            )
            record_refresh_failure()
            return False
        finally:
            self._in_flight = False

        self._snapshot = snapshot
        open_count = sum(1 for payment in snapshot.payments if is_open(payment))
        record_refresh_success(open_count)

        logger.info(
            "snapshot_refreshed",
            children=len(snapshot.children),
            payments=len(snapshot.payments),
            open_payments=open_count,
        )
        return True

    async def run(self) -> None:
        """
        Poll until nothing is left to wait for.

        Fetches once when there is no snapshot yet, then refreshes
        every interval while should_poll() is true. Each refresh
        completes before the next tick is scheduled.
        """
        set_polling_active(True)
        logger.info("polling_started", interval_seconds=self._interval)
        try:
            if self._snapshot is None:
                await self.refresh()

            while self.should_poll():
                await asyncio.sleep(self._interval)
                await self.refresh()
        finally:
            set_polling_active(False)
            logger.info("polling_stopped", has_snapshot=self._snapshot is not None)

    def start(self) -> asyncio.Task:
        """Start the loop as a background task; returns the running task if any."""
        if self.is_running:
            return self._task
        self._task = asyncio.create_task(self.run())
        return self._task

    async def stop(self) -> None:
        """
        Cancel the loop. The last snapshot stays available.

        Raises:
            Exception: Whatever error ended the loop before it was stopped
        """
        task = self._task
        self._task = None
        if task is None:
            return
        if task.done():
            if not task.cancelled():
                task.result()
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
