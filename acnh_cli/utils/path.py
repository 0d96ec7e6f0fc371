"""
Filesystem helpers used when resolving download destinations.
"""

import os
import tempfile
from pathlib import Path

from pathvalidate import ValidationError as PathValidationError
from pathvalidate import validate_filename

from acnh_cli.exceptions import ValidationError


def dir_exists(directory_path: str | Path) -> bool:
    """Returns True if the path exists and is a directory."""
    return os.path.isdir(directory_path)


def system_temp_dir() -> str:
    """Returns the process's system-provided temporary directory."""
    return tempfile.gettempdir()


def join_asset_path(directory_path: str | Path, file_stem: str, extension: str) -> str:
    """
    Builds the output path for an asset without normalizing the directory.

    Raises:
        ValidationError: If the stem is not a valid single file name.
    """
    file_name = file_stem + extension
    try:
        validate_filename(file_name, platform="auto")
    except PathValidationError as e:
        raise ValidationError(f"Invalid asset file name '{file_name}': {e}") from e
    return os.path.join(directory_path, file_name)
