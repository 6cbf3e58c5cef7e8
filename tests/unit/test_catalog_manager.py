"""Tests for publishing catalogs and switching language."""

import logging
import threading

import pytest

from conftest import make_context, make_message, make_ts
from tscatalog.resolution.resolver import CatalogSet
from tscatalog.services import catalog_manager
from tscatalog.services.catalog_manager import CatalogManager, CatalogState
from tscatalog.services.locator import CatalogLocator


@pytest.fixture()
def manager(translations_dir) -> CatalogManager:
    return CatalogManager(CatalogLocator([translations_dir]), ["app"])


def test_starts_untranslated(manager) -> None:
    assert len(manager.current()) == 0
    assert manager.resolve("BaseGui", "&Open") == "&Open"


def test_switch_language_loads_and_publishes(manager) -> None:
    snapshot = manager.switch_language("fi_FI")

    assert manager.current() is snapshot
    assert manager.language == "fi_FI"
    assert manager.resolve("BaseGui", "&Open") == "&Avaa"
    assert manager.resolve("Helper", "%1 second(s)", plural_count=5, args=["5"]) == "5 sekuntia"
    assert manager.translator()("BaseGui", "&Open") == "&Avaa"


def test_switch_retires_previous_snapshot(manager) -> None:
    finnish = manager.switch_language("fi")
    dutch = manager.switch_language("nl")

    assert manager.state_of(finnish) is CatalogState.RETIRED
    assert manager.state_of(dutch) is CatalogState.LOADED
    # The retired snapshot is still fully usable by whoever holds it
    assert finnish.resolve("BaseGui", "&Open") == "&Avaa"
    assert manager.resolve("BaseGui", "&Open") == "&Openen"


def test_reader_keeps_snapshot_during_concurrent_switch(manager) -> None:
    manager.switch_language("fi")
    fetched = threading.Event()
    switched = threading.Event()
    results = {}

    def reader() -> None:
        snapshot = manager.current()
        fetched.set()
        switched.wait(timeout=5)
        results["during"] = snapshot.resolve("BaseGui", "&Open")
        results["after"] = manager.current().resolve("BaseGui", "&Open")

    thread = threading.Thread(target=reader)
    thread.start()
    assert fetched.wait(timeout=5)
    manager.switch_language("nl")
    switched.set()
    thread.join(timeout=5)

    assert results == {"during": "&Avaa", "after": "&Openen"}


def test_missing_language_runs_untranslated(manager) -> None:
    snapshot = manager.switch_language("de")

    assert len(snapshot) == 0
    assert manager.resolve("BaseGui", "&Open") == "&Open"


def test_malformed_catalog_is_skipped(manager, translations_dir, caplog) -> None:
    (translations_dir / "app_sv.ts").write_text("<TS><context>", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        snapshot = manager.switch_language("sv")

    assert len(snapshot) == 0
    assert "Skipping catalog" in caplog.text


def test_empty_catalog_is_published(manager, translations_dir) -> None:
    (translations_dir / "app_sv.ts").write_text(make_ts("", language="sv"), encoding="utf-8")

    snapshot = manager.switch_language("sv")

    assert len(snapshot) == 1
    assert len(snapshot.catalogs[0]) == 0
    assert manager.resolve("BaseGui", "&Open") == "&Open"


def test_catalog_names_are_consulted_in_order(translations_dir) -> None:
    (translations_dir / "qt_fi.ts").write_text(
        make_ts(
            make_context(
                "BaseGui",
                make_message("&amp;Open", "&amp;Avaa tiedosto"),
                make_message("&amp;Close", "&amp;Sulje"),
            )
        ),
        encoding="utf-8",
    )
    manager = CatalogManager(CatalogLocator([translations_dir]), ["app", "qt"])

    manager.switch_language("fi")

    assert manager.resolve("BaseGui", "&Open") == "&Avaa"
    # Unfinished in the app catalog, so the next catalog answers
    assert manager.resolve("BaseGui", "&Close") == "&Sulje"


def test_empty_language_uses_system_locale(manager, monkeypatch) -> None:
    monkeypatch.setattr(catalog_manager, "system_language", lambda: "nl")

    snapshot = manager.switch_language("")

    assert snapshot.language_tag == "nl"
    assert manager.resolve("BaseGui", "&Close") == "&Sluiten"


def test_publish_prebuilt_set(manager, finnish_catalog) -> None:
    previous = manager.switch_language("nl")
    prebuilt = CatalogSet(language_tag="fi_FI", catalogs=(finnish_catalog,))

    assert manager.publish(prebuilt) is prebuilt

    assert manager.current() is prebuilt
    assert manager.state_of(previous) is CatalogState.RETIRED
    assert manager.resolve("BaseGui", "&Open") == "&Avaa"
