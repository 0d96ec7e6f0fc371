"""
Catalog query and download engine.

`BGMCatalog` and `SongCatalog` expose the per-variant operations. Both are
thin facades over the generic `QueryEngine`, which filters a freshly fetched
catalog, and `AssetResolver`, which writes a record's audio file to disk.
"""

from .bgm import BGMCatalog
from .fetcher import CatalogFetcher
from .query import QueryEngine
from .resolver import AssetResolver
from .songs import SongCatalog

__all__ = ["AssetResolver", "BGMCatalog", "CatalogFetcher", "QueryEngine", "SongCatalog"]
