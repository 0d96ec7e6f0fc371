"""
acnh-cli: a read-through client for the Animal Crossing: New Horizons music catalog.
"""

__version__ = "0.1.0"

from acnh_cli.client import AcnhClient  # noqa: E402
from acnh_cli.models import BGMTrack, ClientConfig, Song, Weather  # noqa: E402

__all__ = ["AcnhClient", "BGMTrack", "ClientConfig", "Song", "Weather", "__version__"]
