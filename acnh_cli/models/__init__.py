"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: the client configuration and catalog records.
"""

from .config import ClientConfig
from .records import BGMTrack, Song, Weather

__all__ = ["BGMTrack", "ClientConfig", "Song", "Weather"]
