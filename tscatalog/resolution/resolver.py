"""Translation lookup against loaded catalogs."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from ..models.catalog import Catalog, CatalogEntry, EntryStatus
from .placeholders import substitute
from .plural_rules import category

logger = logging.getLogger(__name__)


def find_entry(
    catalog: Catalog,
    context: str,
    source_text: str,
    disambiguation: Optional[str] = None,
) -> Optional[CatalogEntry]:
    """
    Find the entry serving a lookup.

    Strategy:
    1. Exact (context, source, disambiguation) match
    2. With a disambiguation that is not in the catalog, retry without one
    3. Without a disambiguation, take the only candidate, or the
       first-registered one when several share the source text
    """
    entry = catalog.lookup(context, source_text, disambiguation)
    if entry is not None:
        return entry

    if disambiguation:
        return catalog.lookup(context, source_text, None)

    candidates = catalog.candidates(context, source_text)
    if not candidates:
        return None

    if len(candidates) > 1:
        logger.warning(
            "Ambiguous lookup for '%s' in context '%s': %d candidates, using '%s'",
            source_text,
            context,
            len(candidates),
            candidates[0].disambiguation,
        )
    return candidates[0]


def select_text(
    entry: Optional[CatalogEntry],
    language_tag: str,
    source_text: str,
    plural_count: Optional[int] = None,
) -> str:
    """Pick the translated variant, or the source text when there is none."""
    if entry is None or entry.status is not EntryStatus.FINISHED:
        return source_text

    index = 0
    if entry.is_plural and plural_count is not None:
        index = category(language_tag, plural_count)

    text = entry.variant(index)
    return source_text if text is None else text


def resolve(
    catalog: Union[Catalog, "CatalogSet"],
    context: str,
    source_text: str,
    disambiguation: Optional[str] = None,
    plural_count: Optional[int] = None,
    args: Sequence[str] = (),
) -> str:
    """
    Resolve a lookup to its final display string.

    Missing and unfinished translations resolve to ``source_text``. Positional
    markers are substituted in either case, so untranslated strings still
    render their arguments.

    Args:
        catalog: A loaded Catalog or CatalogSet
        context: Context name (e.g., the UI class)
        source_text: Untranslated text as written in code
        disambiguation: Optional comment telling apart identical source texts
        plural_count: Optional quantity selecting the plural variant
        args: Values for %1, %2, ... in order

    Returns:
        The resolved string; never empty unless the translation itself is
    """
    if isinstance(catalog, CatalogSet):
        return catalog.resolve(context, source_text, disambiguation, plural_count, args)

    entry = find_entry(catalog, context, source_text, disambiguation)
    text = select_text(entry, catalog.language_tag, source_text, plural_count)
    return substitute(text, args, plural_count)


@dataclass(frozen=True)
class CatalogSet:
    """
    Immutable ordered group of catalogs for one language.

    Catalogs are consulted in order; the first one holding a finished entry
    for the lookup wins.
    """

    language_tag: str
    catalogs: Tuple[Catalog, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "catalogs", tuple(self.catalogs))

    def __len__(self) -> int:
        return len(self.catalogs)

    def find_entry(
        self,
        context: str,
        source_text: str,
        disambiguation: Optional[str] = None,
    ) -> Tuple[Optional[Catalog], Optional[CatalogEntry]]:
        """Return the first finished entry for the lookup and its catalog."""
        for catalog in self.catalogs:
            entry = find_entry(catalog, context, source_text, disambiguation)
            if entry is not None and entry.status is EntryStatus.FINISHED:
                return catalog, entry
        return None, None

    def resolve(
        self,
        context: str,
        source_text: str,
        disambiguation: Optional[str] = None,
        plural_count: Optional[int] = None,
        args: Sequence[str] = (),
    ) -> str:
        catalog, entry = self.find_entry(context, source_text, disambiguation)
        language_tag = catalog.language_tag if catalog is not None else self.language_tag
        text = select_text(entry, language_tag, source_text, plural_count)
        return substitute(text, args, plural_count)


@dataclass(frozen=True)
class Translator:
    """Callable helper bound to one catalog or catalog set."""

    catalog: Union[Catalog, CatalogSet]

    @property
    def language_tag(self) -> str:
        return self.catalog.language_tag

    def __call__(
        self,
        context: str,
        source_text: str,
        *args: str,
        disambiguation: Optional[str] = None,
        n: Optional[int] = None,
    ) -> str:
        return resolve(self.catalog, context, source_text, disambiguation, n, args)
