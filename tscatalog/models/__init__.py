"""Data models for translation catalogs."""

from .catalog import Catalog, CatalogEntry, CatalogKey, EntryStatus, LoadWarning

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CatalogKey",
    "EntryStatus",
    "LoadWarning",
]
