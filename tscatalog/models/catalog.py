"""Data models for loaded translation catalogs."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple


CatalogKey = Tuple[str, str, Optional[str]]


class EntryStatus(str, Enum):
    """Translation status of a catalog entry."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"
    OBSOLETE = "obsolete"


@dataclass(frozen=True)
class CatalogEntry:
    """A single translatable message and its translated variants."""

    context: str
    source_text: str
    disambiguation: Optional[str] = None
    translation_variants: Tuple[str, ...] = ()
    status: EntryStatus = EntryStatus.FINISHED
    is_plural: bool = False
    locations: Tuple[Tuple[str, int], ...] = ()
    extra_comment: Optional[str] = None

    @property
    def key(self) -> CatalogKey:
        return (self.context, self.source_text, self.disambiguation)

    @property
    def is_resolvable(self) -> bool:
        """Obsolete entries are kept for tooling but never served."""
        return self.status is not EntryStatus.OBSOLETE

    def variant(self, index: int) -> Optional[str]:
        """
        Return the variant at ``index``, clamped to the available range.

        Returns None when the entry carries no variants at all.
        """
        if not self.translation_variants:
            return None
        index = max(0, min(index, len(self.translation_variants) - 1))
        return self.translation_variants[index]


@dataclass(frozen=True)
class LoadWarning:
    """A non-fatal anomaly recorded while loading a catalog."""

    kind: str  # duplicate_key, malformed_record, missing_source, plural_mismatch, language_mismatch
    message: str
    key: Optional[CatalogKey] = None
    line: Optional[int] = None


@dataclass(frozen=True, eq=False)
class Catalog:
    """
    Immutable table of entries for one target language.

    Entries are keyed by ``(context, source_text, disambiguation)`` and kept
    in load order. A second index groups resolvable entries by
    ``(context, source_text)`` for lookups that omit the disambiguation.
    """

    language_tag: str
    entries: Mapping[CatalogKey, CatalogEntry] = field(default_factory=dict)
    warnings: Tuple[LoadWarning, ...] = ()
    _candidates: Mapping[Tuple[str, str], Tuple[CatalogEntry, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        entries = MappingProxyType(dict(self.entries))
        grouped: Dict[Tuple[str, str], List[CatalogEntry]] = {}
        for entry in entries.values():
            if entry.is_resolvable:
                grouped.setdefault((entry.context, entry.source_text), []).append(entry)

        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(
            self,
            "_candidates",
            MappingProxyType({pair: tuple(group) for pair, group in grouped.items()}),
        )

    @classmethod
    def from_entries(
        cls,
        language_tag: str,
        entries: Iterable[CatalogEntry],
        warnings: Iterable[LoadWarning] = (),
    ) -> "Catalog":
        """Build a catalog from entries; later duplicates replace earlier ones."""
        table: Dict[CatalogKey, CatalogEntry] = {}
        for entry in entries:
            table[entry.key] = entry
        return cls(language_tag=language_tag, entries=table, warnings=tuple(warnings))

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(
        self, context: str, source_text: str, disambiguation: Optional[str] = None
    ) -> Optional[CatalogEntry]:
        """Exact key lookup among resolvable entries."""
        entry = self.entries.get((context, source_text, disambiguation or None))
        if entry is None or not entry.is_resolvable:
            return None
        return entry

    def candidates(self, context: str, source_text: str) -> Tuple[CatalogEntry, ...]:
        """Resolvable entries sharing context and source, first-registered first."""
        return self._candidates.get((context, source_text), ())

    def contexts(self) -> List[str]:
        """Context names in first-seen order."""
        seen: Dict[str, None] = {}
        for context, _, _ in self.entries:
            seen.setdefault(context, None)
        return list(seen)

    def count_status(self, status: EntryStatus) -> int:
        return sum(1 for entry in self.entries.values() if entry.status is status)

    @property
    def finished_count(self) -> int:
        return self.count_status(EntryStatus.FINISHED)

    @property
    def unfinished_count(self) -> int:
        return self.count_status(EntryStatus.UNFINISHED)

    @property
    def obsolete_count(self) -> int:
        return self.count_status(EntryStatus.OBSOLETE)

    @property
    def plural_entry_count(self) -> int:
        return sum(1 for entry in self.entries.values() if entry.is_plural)

    def get_unfinished_entries(self) -> List[CatalogEntry]:
        """Entries that still fall back to their source text."""
        return [
            entry for entry in self.entries.values()
            if entry.status is EntryStatus.UNFINISHED
        ]
