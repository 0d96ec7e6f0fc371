"""
Generic query engine over a fetched catalog.

The engine knows nothing about a particular record variant. Predicates are
built against small capability protocols, so a variant supports a filter
exactly when its records expose the matching attribute.
"""

import logging
from typing import Callable, Generic, Protocol, TypeVar

from acnh_cli.exceptions import NotFoundError
from acnh_cli.models.records import Weather

from .fetcher import CatalogFetcher

log = logging.getLogger(__name__)

R = TypeVar("R")
Predicate = Callable[[R], bool]


class HasHour(Protocol):
    hour: int


class HasWeather(Protocol):
    weather: Weather


class HasHourAndWeather(HasHour, HasWeather, Protocol):
    pass


class HasName(Protocol):
    @property
    def display_name(self) -> str: ...


def hour_is(hour: int) -> Predicate[HasHour]:
    return lambda record: record.hour == hour


def weather_is(weather: Weather) -> Predicate[HasWeather]:
    return lambda record: record.weather == weather


def hour_and_weather_are(
    hour: int, weather: Weather
) -> Predicate[HasHourAndWeather]:
    return lambda record: record.hour == hour and record.weather == weather


def name_matches(name: str) -> Predicate[HasName]:
    """Case-insensitive equality against the record's display name."""
    wanted = name.casefold()
    return lambda record: record.display_name.casefold() == wanted


class QueryEngine(Generic[R]):
    """
    Applies predicates to a freshly fetched catalog.

    Every call fetches the whole catalog again; nothing is cached.
    """

    def __init__(self, fetcher: CatalogFetcher):
        self._fetcher = fetcher

    @property
    def record_name(self) -> str:
        return self._fetcher.record_type.__name__

    async def all(self) -> list[R]:
        """Returns the whole catalog. An empty catalog is a valid result."""
        return await self._fetcher.fetch_all()

    async def by_id(self, record_id: int) -> R:
        """Looks a record up through the single-record endpoint."""
        return await self._fetcher.fetch_one(record_id)

    async def select(self, predicate: Predicate, description: str) -> list[R]:
        """
        Returns every record matching the predicate, in fetch order.

        Raises:
            NotFoundError: If nothing matches.
        """
        matched = [record for record in await self.all() if predicate(record)]
        if not matched:
            raise NotFoundError(f"No {self.record_name} found with {description}")
        log.debug(f"{len(matched)} {self.record_name} records match {description}")
        return matched

    async def first(self, predicate: Predicate, description: str) -> R:
        """
        Returns the first record matching the predicate, in fetch order.

        Fetch order is whatever the API sends, so when several records match
        the one returned is not guaranteed to be stable between calls.

        Raises:
            NotFoundError: If nothing matches.
        """
        matched = await self.select(predicate, description)
        if len(matched) > 1:
            log.debug(
                f"{len(matched)} {self.record_name} records match {description}; "
                f"returning id {getattr(matched[0], 'id', '?')}"
            )
        return matched[0]
