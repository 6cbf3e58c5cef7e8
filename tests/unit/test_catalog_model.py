"""Tests for the immutable catalog model."""

import dataclasses

import pytest

from tscatalog.models.catalog import Catalog, CatalogEntry, EntryStatus


def test_catalog_is_read_only(finnish_catalog) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        finnish_catalog.language_tag = "sv"

    with pytest.raises(TypeError):
        finnish_catalog.entries[("A", "B", None)] = CatalogEntry(context="A", source_text="B")


def test_catalog_copies_input_mapping() -> None:
    entry = CatalogEntry(context="A", source_text="Open", translation_variants=("Avaa",))
    table = {entry.key: entry}
    catalog = Catalog(language_tag="fi", entries=table)

    table.clear()

    assert len(catalog) == 1


def test_counts_and_contexts(finnish_catalog) -> None:
    assert len(finnish_catalog) == 12
    assert finnish_catalog.finished_count == 10
    assert finnish_catalog.unfinished_count == 1
    assert finnish_catalog.obsolete_count == 1
    assert finnish_catalog.plural_entry_count == 2
    assert finnish_catalog.contexts() == ["About", "BaseGui", "Helper", "InfoFile", "PrefSubtitles"]
    assert [e.source_text for e in finnish_catalog.get_unfinished_entries()] == ["&Close"]


def test_lookup_treats_empty_disambiguation_as_none(finnish_catalog) -> None:
    assert finnish_catalog.lookup("BaseGui", "&Open", "") is finnish_catalog.lookup("BaseGui", "&Open")


def test_obsolete_entries_are_not_served(finnish_catalog) -> None:
    assert finnish_catalog.lookup("BaseGui", "Old menu") is None
    assert finnish_catalog.candidates("BaseGui", "Old menu") == ()
    assert finnish_catalog.entries[("BaseGui", "Old menu", None)].status is EntryStatus.OBSOLETE


def test_later_duplicate_replaces_earlier() -> None:
    catalog = Catalog.from_entries(
        "fi",
        [
            CatalogEntry(context="A", source_text="Open", translation_variants=("Avaa",)),
            CatalogEntry(context="A", source_text="Save", translation_variants=("Tallenna",)),
            CatalogEntry(context="A", source_text="Open", translation_variants=("Aukaise",)),
        ],
    )

    assert len(catalog) == 2
    assert catalog.lookup("A", "Open").translation_variants == ("Aukaise",)
    assert [key[1] for key in catalog.entries] == ["Open", "Save"]


def test_variant_clamps_index() -> None:
    entry = CatalogEntry(context="A", source_text="%n file(s)", translation_variants=("one", "many"))

    assert entry.variant(-1) == "one"
    assert entry.variant(7) == "many"
    assert CatalogEntry(context="A", source_text="x").variant(0) is None
