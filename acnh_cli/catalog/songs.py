"""
Song catalog: K.K. Slider songs looked up by id or name.
"""

from pathlib import Path
from typing import List

from acnh_cli.api import endpoints
from acnh_cli.api.client import AcnhAPIClient
from acnh_cli.models.records import SONG_NAME_LANGUAGE_CODE, Song

from .fetcher import CatalogFetcher
from .query import QueryEngine, name_matches
from .resolver import AssetResolver


class SongCatalog:
    """Query and download operations over the song catalog."""

    def __init__(self, transport: AcnhAPIClient):
        self._engine: QueryEngine[Song] = QueryEngine(
            CatalogFetcher(
                transport,
                Song,
                list_path=endpoints.SONG_LIST,
                item_path=endpoints.SONG_ITEM,
                id_param="song_id",
            )
        )
        self._resolver = AssetResolver(
            transport, asset_path=endpoints.SONG_ASSET, id_param="song_id"
        )

    async def list(self) -> List[Song]:
        """Returns every song the API provides."""
        return await self._engine.all()

    async def by_id(self, song_id: int) -> Song:
        """Gets a single song. A missing id surfaces as RemoteError."""
        return await self._engine.by_id(song_id)

    async def by_name(self, name: str) -> Song:
        """
        Gets a song by name, ignoring case.

        Only the EUen name of each song is compared.
        """
        return await self._engine.first(
            name_matches(name), f"{SONG_NAME_LANGUAGE_CODE} name {name!r}"
        )

    async def download(self, song: Song, directory: str | Path) -> str:
        """Downloads the song as an MP3 into an existing directory."""
        return await self._resolver.download(song, directory)

    async def download_to_temp(self, song: Song) -> str:
        """Downloads the song as an MP3 into the system temp directory."""
        return await self._resolver.download_to_temp(song)
