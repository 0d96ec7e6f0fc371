"""
Resolves a catalog record to its audio asset on local disk.
"""

import logging
from pathlib import Path

from acnh_cli.api.client import AcnhAPIClient
from acnh_cli.exceptions import ValidationError
from acnh_cli.utils.path import dir_exists, join_asset_path, system_temp_dir

from .validation import ASSET_FILE_EXTENSION

log = logging.getLogger(__name__)


class AssetResolver:
    """
    Downloads the asset of a record into an existing directory.

    Args:
        transport: The API transport.
        asset_path: Path template of the per-record asset endpoint.
        id_param: Name of the id placeholder in `asset_path`.
        extension: File extension appended to the record's file stem.
    """

    def __init__(
        self,
        transport: AcnhAPIClient,
        asset_path: str,
        id_param: str,
        extension: str = ASSET_FILE_EXTENSION,
    ):
        self._transport = transport
        self.asset_path = asset_path
        self.id_param = id_param
        self.extension = extension

    async def download(self, record, directory: str | Path) -> str:
        """
        Downloads the record's asset to `directory/<file_name><extension>`.

        The directory must already exist; it is never created. The file is
        written in place, so a failed transfer may leave a partial file behind.

        Returns:
            The output path, joined but not canonicalized.

        Raises:
            ValidationError: If the directory does not exist or the file name is unsafe.
            TransportError: If the request or the transfer fails.
            RemoteError: If the API answers with a non-200 status.
        """
        if not dir_exists(directory):
            raise ValidationError(
                f"destination download directory does not exist: {directory}"
            )
        output_path = join_asset_path(directory, record.file_name, self.extension)

        log.debug(f"Downloading asset for id {record.id} to {output_path}")
        await self._transport.download_to(
            self.asset_path, output_path, **{self.id_param: record.id}
        )
        return output_path

    async def download_to_temp(self, record) -> str:
        """Same as `download`, into the system temporary directory."""
        return await self.download(record, system_temp_dir())
