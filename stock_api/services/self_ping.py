import asyncio
from typing import Optional

import httpx

from stock_api.utils.logger import logger

DEFAULT_INTERVAL_SECONDS = 300  # 5 minutes


class SelfPinger:
    """
    Periodically calls the service's own test route so hosted instances stay warm.

    The loop runs as an asyncio task on the server's event loop. Each tick is
    independent: errors are logged and the next tick is the only retry.
    """

    def __init__(
        self,
        url: str,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.interval_seconds = interval_seconds
        self.timeout = timeout
        self.transport = transport
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def _client(self) -> httpx.AsyncClient:
        # Leave httpx's default timeout in place unless one is configured
        client_kwargs = {"transport": self.transport}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout
        return httpx.AsyncClient(**client_kwargs)

    async def ping_once(self) -> bool:
        """Issues a single GET against the ping URL. Returns True on a 2xx response."""
        try:
            async with self._client() as client:
                response = await client.get(self.url)
                response.raise_for_status()
            logger.info(f"✅ Self-ping {self.url} response: {response.text[:200]}")
            return True
        except httpx.HTTPError as exc:
            logger.error(f"❌ Self-ping {self.url} failed: {exc}")
        except Exception as e:
            logger.error(f"❌ Unexpected error during self-ping: {e}", exc_info=True)
        return False

    async def _run(self):
        logger.info(f"Self-ping started: {self.url} every {self.interval_seconds} seconds")
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.ping_once()

    def start(self):
        """Schedules the ping loop on the running event loop."""
        if self.running:
            logger.warning("Self-ping already running")
            return
        self._task = asyncio.create_task(self._run(), name="self-ping")

    async def stop(self):
        """Cancels the ping loop and waits for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Self-ping stopped")
