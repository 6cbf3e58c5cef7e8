"""Load Qt Linguist catalogs and resolve translated strings."""

from .errors import CatalogLoadError, EmptyCatalogError, MalformedCatalogError
from .extraction.ts_parser import TSParser, load
from .models.catalog import Catalog, CatalogEntry, EntryStatus, LoadWarning
from .resolution.plural_rules import category
from .resolution.resolver import CatalogSet, Translator, resolve

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CatalogLoadError",
    "CatalogSet",
    "EmptyCatalogError",
    "EntryStatus",
    "LoadWarning",
    "MalformedCatalogError",
    "TSParser",
    "Translator",
    "category",
    "load",
    "resolve",
]
