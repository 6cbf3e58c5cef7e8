"""Exceptions raised while loading catalogs."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.catalog import Catalog


class CatalogLoadError(Exception):
    """Base class for catalog load failures."""


class MalformedCatalogError(CatalogLoadError):
    """The document is not well-formed TS XML. The catalog must not be used."""


class EmptyCatalogError(CatalogLoadError):
    """
    The document parsed but produced no entries.

    Not fatal: ``catalog`` holds the empty catalog so callers can still
    publish it and serve source text for everything.
    """

    def __init__(self, message: str, catalog: Optional["Catalog"] = None):
        super().__init__(message)
        self.catalog = catalog
