"""
Background music catalog: hourly tracks filtered by hour and weather.
"""

from pathlib import Path
from typing import List

from acnh_cli.api import endpoints
from acnh_cli.api.client import AcnhAPIClient
from acnh_cli.models.records import BGMTrack, Weather

from .fetcher import CatalogFetcher
from .query import QueryEngine, hour_and_weather_are, hour_is, weather_is
from .resolver import AssetResolver
from .validation import validate_hour, validate_weather


class BGMCatalog:
    """Query and download operations over the background music catalog."""

    def __init__(self, transport: AcnhAPIClient):
        self._engine: QueryEngine[BGMTrack] = QueryEngine(
            CatalogFetcher(
                transport,
                BGMTrack,
                list_path=endpoints.BGM_LIST,
                item_path=endpoints.BGM_ITEM,
                id_param="track_id",
            )
        )
        self._resolver = AssetResolver(
            transport, asset_path=endpoints.BGM_ASSET, id_param="track_id"
        )

    async def list(self) -> List[BGMTrack]:
        """Returns every background track the API provides."""
        return await self._engine.all()

    async def by_id(self, track_id: int) -> BGMTrack:
        """Gets a single track. A missing id surfaces as RemoteError."""
        return await self._engine.by_id(track_id)

    async def by_hour(self, hour: int) -> List[BGMTrack]:
        """Gets every track played at the given hour, regardless of weather."""
        hour = validate_hour(hour)
        return await self._engine.select(hour_is(hour), f"hour {hour}")

    async def by_weather(self, weather: Weather | str) -> List[BGMTrack]:
        """Gets every track played in the given weather, regardless of hour."""
        weather = validate_weather(weather)
        return await self._engine.select(
            weather_is(weather), f"weather {weather.value}"
        )

    async def by_hour_and_weather(
        self, hour: int, weather: Weather | str
    ) -> BGMTrack:
        """Gets the first track played at the given hour in the given weather."""
        hour = validate_hour(hour)
        weather = validate_weather(weather)
        return await self._engine.first(
            hour_and_weather_are(hour, weather),
            f"hour {hour} and weather {weather.value}",
        )

    async def download(self, track: BGMTrack, directory: str | Path) -> str:
        """Downloads the track as an MP3 into an existing directory."""
        return await self._resolver.download(track, directory)

    async def download_to_temp(self, track: BGMTrack) -> str:
        """Downloads the track as an MP3 into the system temp directory."""
        return await self._resolver.download_to_temp(track)
