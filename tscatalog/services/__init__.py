"""Catalog discovery and publication."""

from .catalog_manager import CatalogManager, CatalogState, system_language
from .locator import CatalogLocator, candidate_tags

__all__ = [
    "CatalogLocator",
    "CatalogManager",
    "CatalogState",
    "candidate_tags",
    "system_language",
]
