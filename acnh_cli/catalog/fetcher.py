"""
Retrieves full catalogs and single records from the API and parses them into
record models.
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from acnh_cli.api.client import AcnhAPIClient
from acnh_cli.exceptions import TransportError

log = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class CatalogFetcher(Generic[R]):
    """
    Fetches one catalog variant.

    Args:
        transport: The API transport.
        record_type: The model each catalog value parses into.
        list_path: Path template of the bulk listing endpoint.
        item_path: Path template of the single-record endpoint.
        id_param: Name of the id placeholder in `item_path`.
    """

    def __init__(
        self,
        transport: AcnhAPIClient,
        record_type: type[R],
        list_path: str,
        item_path: str,
        id_param: str,
    ):
        self._transport = transport
        self.record_type = record_type
        self.list_path = list_path
        self.item_path = item_path
        self.id_param = id_param

    def _parse(self, data: Any) -> R:
        try:
            return self.record_type.model_validate(data)
        except ValidationError as e:
            raise TransportError(
                f"Malformed {self.record_type.__name__} in response: {e}"
            ) from e

    async def fetch_all(self) -> list[R]:
        """
        Returns every record of the catalog in wire order. Keys of the wire
        object are discarded and records are not deduplicated.
        """
        payload = await self._transport.get_json(self.list_path)
        if not isinstance(payload, dict):
            raise TransportError(
                f"Expected a JSON object from {self.list_path}, "
                f"got {type(payload).__name__}"
            )
        records = [self._parse(value) for value in payload.values()]
        log.debug(f"Fetched {len(records)} {self.record_type.__name__} records")
        return records

    async def fetch_one(self, record_id: int) -> R:
        """Returns a single record from the per-record endpoint."""
        payload = await self._transport.get_json(
            self.item_path, **{self.id_param: record_id}
        )
        return self._parse(payload)
