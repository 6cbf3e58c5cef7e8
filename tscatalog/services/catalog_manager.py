"""Holder for the active catalogs with atomic language switching."""

import locale
import logging
import threading
from enum import Enum
from typing import List, Optional, Sequence

from ..errors import EmptyCatalogError, MalformedCatalogError
from ..extraction.ts_parser import TSParser
from ..models.catalog import Catalog
from ..resolution.resolver import CatalogSet, Translator, resolve
from .locator import CatalogLocator

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class CatalogState(str, Enum):
    """Lifecycle of a published catalog set."""

    LOADED = "loaded"
    RETIRED = "retired"


def system_language() -> str:
    """Language tag of the process locale, ``en`` when none is set."""
    language, _ = locale.getlocale()
    return language or DEFAULT_LANGUAGE


class CatalogManager:
    """
    Publishes the catalog set used for lookups.

    Readers call ``current()`` (or ``resolve``) without locking and get an
    immutable snapshot. Switching language builds the new set off to the
    side and publishes it with a single reference assignment, so a reader
    never sees a half-loaded set and keeps its old snapshot until it asks
    again. The lock only serializes concurrent switches.
    """

    def __init__(
        self,
        locator: CatalogLocator,
        catalog_names: Sequence[str],
        parser: Optional[TSParser] = None,
    ):
        """
        Initialize the manager.

        Args:
            locator: Maps (name, language) to catalog files
            catalog_names: Catalogs to load per language, highest priority first
            parser: Parser used to load catalog files
        """
        self.locator = locator
        self.catalog_names = list(catalog_names)
        self.parser = parser or TSParser()
        self._current = CatalogSet(language_tag="", catalogs=())
        self._switch_lock = threading.Lock()

    def current(self) -> CatalogSet:
        """Return the published snapshot."""
        return self._current

    @property
    def language(self) -> str:
        return self._current.language_tag

    def translator(self) -> Translator:
        """Return a translator bound to the current snapshot."""
        return Translator(self._current)

    def resolve(
        self,
        context: str,
        source_text: str,
        disambiguation: Optional[str] = None,
        plural_count: Optional[int] = None,
        args: Sequence[str] = (),
    ) -> str:
        """Resolve against the snapshot current at call time."""
        return resolve(self._current, context, source_text, disambiguation, plural_count, args)

    def state_of(self, catalog_set: CatalogSet) -> CatalogState:
        """A set is loaded while published and retired once superseded."""
        if catalog_set is self._current:
            return CatalogState.LOADED
        return CatalogState.RETIRED

    def publish(self, catalog_set: CatalogSet) -> CatalogSet:
        """Make a fully built set the current one."""
        with self._switch_lock:
            return self._swap(catalog_set)

    def switch_language(self, language_tag: str = "") -> CatalogSet:
        """
        Load every configured catalog for a language and publish them.

        Args:
            language_tag: Target language; empty uses the system locale

        Returns:
            The newly published CatalogSet
        """
        tag = language_tag or system_language()
        with self._switch_lock:
            catalogs = self._load_catalogs(tag)
            return self._swap(CatalogSet(language_tag=tag, catalogs=tuple(catalogs)))

    def _swap(self, catalog_set: CatalogSet) -> CatalogSet:
        previous = self._current
        self._current = catalog_set
        logger.info(
            "Active language: '%s' (%d catalogs), was '%s'",
            catalog_set.language_tag,
            len(catalog_set),
            previous.language_tag,
        )
        return catalog_set

    def _load_catalogs(self, language_tag: str) -> List[Catalog]:
        """Load the configured catalogs; broken ones are logged and left out."""
        catalogs: List[Catalog] = []
        for name in self.catalog_names:
            path = self.locator.locate(name, language_tag)
            if path is None:
                logger.info("No '%s' catalog for '%s', running untranslated", name, language_tag)
                continue

            try:
                catalog = self.parser.parse(str(path), language_tag)
            except MalformedCatalogError as e:
                logger.error("Skipping catalog %s: %s", path, e)
                continue
            except EmptyCatalogError as e:
                logger.warning("Catalog %s is empty: %s", path, e)
                catalog = e.catalog

            catalogs.append(catalog)
        return catalogs
