import asyncio
from datetime import timezone

import pytest

from infra.adapter.asyncio_cancellation_token import AsyncioCancellationToken
from infra.adapter.system_clock import SystemClock


def test_system_clock_returns_aware_utc_time() -> None:
    assert SystemClock().now().tzinfo is timezone.utc


@pytest.mark.asyncio
async def test_cancellation_token_sleep_elapses_when_not_cancelled() -> None:
    token = AsyncioCancellationToken()

    assert await token.sleep(0.01) is False
    assert token.is_cancelled is False


@pytest.mark.asyncio
async def test_cancellation_token_interrupts_sleep() -> None:
    token = AsyncioCancellationToken()

    sleeper = asyncio.create_task(token.sleep(3600))
    await asyncio.sleep(0)
    token.cancel()

    assert await asyncio.wait_for(sleeper, timeout=1) is True


@pytest.mark.asyncio
async def test_cancelled_token_returns_immediately() -> None:
    token = AsyncioCancellationToken()
    token.cancel()

    assert await token.sleep(3600) is True
