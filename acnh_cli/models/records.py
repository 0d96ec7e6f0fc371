"""
Pydantic models for the two catalog record variants served by the API.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Songs are looked up by their name in this locale only.
SONG_NAME_LANGUAGE_CODE = "EUen"


class Weather(str, Enum):
    """A weather condition under which a background track plays."""

    SUNNY = "Sunny"
    RAINY = "Rainy"
    SNOWY = "Snowy"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    file_name: str = Field(alias="file-name")
    music_uri: str | None = None


class BGMTrack(_Record):
    """A background track played at a given hour under a given weather."""

    hour: int
    weather: Weather


class Song(_Record):
    """A K.K. Slider song."""

    name: dict[str, str] = Field(default_factory=dict)
    buy_price: int | None = Field(default=None, alias="buy-price")
    sell_price: int | None = Field(default=None, alias="sell-price")
    is_orderable: bool | None = Field(default=None, alias="isOrderable")
    image_uri: str | None = None

    @property
    def display_name(self) -> str:
        """The song's name in the lookup locale, or an empty string if absent."""
        return self.name.get(f"name-{SONG_NAME_LANGUAGE_CODE}", "")
