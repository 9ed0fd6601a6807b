import asyncio

import httpx
import structlog

from core.domain.probe_result import ProbeResult
from core.port.health_probe import HealthProbe

logger = structlog.stdlib.get_logger(__name__)


class HttpxHealthProbe(HealthProbe):
    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def probe(self, url: str, connect_timeout: float, max_timeout: float) -> ProbeResult:
        timeout = httpx.Timeout(max_timeout, connect=connect_timeout)

        try:
            async with asyncio.timeout(max_timeout):
                response = await self.http_client.get(url, timeout=timeout, follow_redirects=False)
        except (TimeoutError, httpx.TimeoutException):
            logger.debug(f"Health check timeout for '{url}' (timeout: {max_timeout}s)")
            return ProbeResult.transport_failure("Request timeout")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Health check request failed for '{url}': {e}")
            return ProbeResult.transport_failure(str(e) or e.__class__.__name__)

        return ProbeResult(status_code=response.status_code)
