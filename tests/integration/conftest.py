"""
Fixtures for integration tests.

Provides:
- Mock snapshot source with scripted responses and an optional gate
- Payment refresher wired to the mock source with a short interval
"""

import asyncio
from typing import AsyncGenerator, List, Optional, Union

import pytest
import pytest_asyncio

from fee_engine.application.services import PaymentRefresher
from fee_engine.domain.entities import PaymentSnapshot
from fee_engine.domain.exceptions import SnapshotFetchException
from fee_engine.domain.interfaces import PaymentSnapshotSource
from tests.factories import open_snapshot, settled_snapshot

TEST_INTERVAL = 0.01


# =============================================================================
# Mock Sources
# =============================================================================

class MockSnapshotSource(PaymentSnapshotSource):
    """
    Mock source that replays scripted responses.

    Each call consumes the next response; the last one repeats once the
    script runs out. Exceptions in the script are raised instead of
    returned. When a gate is given, every fetch waits for it.
    """

    def __init__(
        self,
        responses: List[Union[PaymentSnapshot, Exception]],
        gate: Optional[asyncio.Event] = None,
    ):
        self.responses = list(responses)
        self.gate = gate
        self.call_count = 0
        self.active_calls = 0
        self.max_concurrent_calls = 0

    async def fetch_snapshot(self) -> PaymentSnapshot:
        self.call_count += 1
        self.active_calls += 1
        self.max_concurrent_calls = max(self.max_concurrent_calls, self.active_calls)
        try:
            if self.gate is not None:
                await self.gate.wait()
            else:
                await asyncio.sleep(0)

            index = min(self.call_count, len(self.responses)) - 1
            response = self.responses[index]
            if isinstance(response, Exception):
                raise response
            return response
        finally:
            self.active_calls -= 1


def failure() -> SnapshotFetchException:
    return SnapshotFetchException("Payment API unavailable", status_code=503)


# =============================================================================
# Refresher Fixtures
# =============================================================================

@pytest.fixture
def open_then_settled_source() -> MockSnapshotSource:
    """Source whose payments settle on the second fetch."""
    return MockSnapshotSource([open_snapshot(), settled_snapshot()])


@pytest.fixture
def always_open_source() -> MockSnapshotSource:
    """Source that never settles."""
    return MockSnapshotSource([open_snapshot()])


@pytest_asyncio.fixture
async def running_refresher(
    always_open_source: MockSnapshotSource,
) -> AsyncGenerator[PaymentRefresher, None]:
    """Refresher started against a never-settling source; stopped on teardown."""
    refresher = PaymentRefresher(always_open_source, interval=TEST_INTERVAL)
    refresher.start()

    yield refresher

    await refresher.stop()
