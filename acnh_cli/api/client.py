"""
Async HTTP transport for the ACNH JSON API.
"""

import asyncio
import logging
import time
from typing import Any, Optional

import aiofiles
import aiohttp

from acnh_cli.exceptions import RemoteError, TransportError
from acnh_cli.models.config import ClientConfig

log = logging.getLogger(__name__)


class AcnhAPIClient:
    """
    Thin async client for the ACNH API.

    Responsibilities:
    - Path templating against the configured base URL and API version
    - Mapping connection failures to TransportError and non-200 statuses to RemoteError
    - Streaming binary assets to disk

    No retries are performed and no responses are cached.
    """

    def __init__(self, config: ClientConfig):
        """
        Initializes the transport.

        Args:
            config: Validated client configuration. The transport owns the
                aiohttp session it builds from it.
        """
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def _initialize_session(self) -> aiohttp.ClientSession:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept-Encoding": "gzip, deflate",
                },
                timeout=aiohttp.ClientTimeout(
                    total=self.config.timeout, connect=self.config.connect_timeout
                ),
            )
        return self._session

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_url(self, path_template: str, **path_params: Any) -> str:
        """Fills the path template and prefixes it with the base URL."""
        path = path_template.format(api_version=self.config.api_version, **path_params)
        return self.config.base_url + path

    async def get_json(self, path_template: str, **path_params: Any) -> Any:
        """
        Performs a GET and returns the decoded JSON body.

        Raises:
            TransportError: If the request fails or the body is not valid JSON.
            RemoteError: If the status code is not 200.
        """
        session = await self._initialize_session()
        url = self.build_url(path_template, **path_params)
        start_time = time.monotonic()

        try:
            async with session.get(
                url, headers={"Accept": "application/json"}
            ) as r:
                duration_ms = (time.monotonic() - start_time) * 1000
                log.debug(f"GET {url} -> {r.status} ({duration_ms:.0f} ms)")

                if r.status != 200:
                    raise RemoteError(r.status, url)
                return await r.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"Malformed JSON response from {url}: {e}") from e

    async def download_to(
        self, path_template: str, output_path: str, **path_params: Any
    ) -> None:
        """
        Performs a GET and streams the response body to `output_path`.

        The file is written in place. If the transfer fails after the file has
        been opened, the partial file is left on disk.

        Raises:
            TransportError: If the request or the transfer fails, or the file
                cannot be written.
            RemoteError: If the status code is not 200.
        """
        session = await self._initialize_session()
        url = self.build_url(path_template, **path_params)

        try:
            async with session.get(url, allow_redirects=True) as response:
                if response.status != 200:
                    raise RemoteError(response.status, url)

                bytes_downloaded = 0
                async with aiofiles.open(output_path, "wb") as f:
                    async for chunk in response.content.iter_chunked(
                        self.config.chunk_size
                    ):
                        await f.write(chunk)
                        bytes_downloaded += len(chunk)
                log.debug(f"Wrote {bytes_downloaded} bytes from {url} to {output_path}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Download from {url} failed: {e}") from e
        except OSError as e:
            raise TransportError(f"Could not write {output_path}: {e}") from e
