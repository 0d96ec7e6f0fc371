"""
Top-level client tying the transport to both catalogs.
"""

from typing import Optional

from acnh_cli.api.client import AcnhAPIClient
from acnh_cli.catalog import BGMCatalog, SongCatalog
from acnh_cli.models.config import ClientConfig


class AcnhClient:
    """
    Entry point of the library.

    Usage:
        async with AcnhClient() as client:
            track = await client.bgm.by_hour_and_weather(18, Weather.RAINY)
            path = await client.bgm.download_to_temp(track)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[AcnhAPIClient] = None,
    ):
        self.config = config or ClientConfig()
        self.transport = transport or AcnhAPIClient(self.config)
        self.bgm = BGMCatalog(self.transport)
        self.songs = SongCatalog(self.transport)

    async def close(self) -> None:
        """Closes the underlying HTTP session."""
        await self.transport.close()

    async def __aenter__(self) -> "AcnhClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
