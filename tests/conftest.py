"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the project root is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from tscatalog.extraction.ts_parser import load  # noqa: E402
from tscatalog.models.catalog import Catalog  # noqa: E402


FINNISH_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS><TS version="1.1" language="fi_FI">
<defaultcodec></defaultcodec>
<context>
    <name>About</name>
    <message>
        <location filename="../about.cpp" line="53"/>
        <source>Version: %1</source>
        <translation>Versio: %1</translation>
    </message>
    <message>
        <location filename="../about.cpp" line="221"/>
        <source>%1, %2 and %3</source>
        <translation>%1, %2 ja %3</translation>
    </message>
    <message>
        <location filename="../about.cpp" line="220"/>
        <source>%1 and %2</source>
        <translation>%1 ja %2</translation>
    </message>
</context>
<context>
    <name>BaseGui</name>
    <message>
        <location filename="../basegui.cpp" line="300"/>
        <source>&amp;Open</source>
        <translation>&amp;Avaa</translation>
    </message>
    <message>
        <location filename="../basegui.cpp" line="310"/>
        <source>&amp;Close</source>
        <translation type="unfinished"></translation>
    </message>
    <message>
        <location filename="../basegui.cpp" line="320"/>
        <source>Old menu</source>
        <translation type="obsolete">Vanha valikko</translation>
    </message>
</context>
<context>
    <name>Helper</name>
    <message numerus="yes">
        <location filename="../helper.cpp" line="83"/>
        <source>%1 second(s)</source>
        <translation>
            <numerusform>sekunti</numerusform>
            <numerusform>%1 sekuntia</numerusform>
        </translation>
    </message>
    <message numerus="yes">
        <location filename="../helper.cpp" line="82"/>
        <source>%n minute(s)</source>
        <translation>
            <numerusform>%n minuutti</numerusform>
            <numerusform>%n minuuttia</numerusform>
        </translation>
    </message>
</context>
<context>
    <name>InfoFile</name>
    <message>
        <location filename="../infofile.cpp" line="152"/>
        <source>ID</source>
        <comment>Info for translators: this is a identification code</comment>
        <translation></translation>
    </message>
</context>
<context>
    <name>PrefSubtitles</name>
    <message>
        <location filename="../prefsubtitles.cpp" line="109"/>
        <source>Top</source>
        <comment>vertical alignment</comment>
        <translation>Ylhäällä</translation>
    </message>
    <message>
        <location filename="../prefsubtitles.cpp" line="100"/>
        <source>Top</source>
        <comment>horizontal alignment</comment>
        <translation>Yläreunassa</translation>
    </message>
    <message>
        <location filename="../prefsubtitles.cpp" line="101"/>
        <source>Left</source>
        <comment>horizontal alignment</comment>
        <translation>Vasemmalla</translation>
    </message>
</context>
</TS>
"""


def make_ts(body: str, language: str = "fi") -> str:
    """Wrap context blocks in a TS document."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<!DOCTYPE TS><TS version="2.1" language="{language}">\n'
        f"{body}\n"
        "</TS>\n"
    )


def make_context(name: str, *messages: str) -> str:
    return f"<context><name>{name}</name>{''.join(messages)}</context>"


def make_message(source: str, translation: str = "", comment: str = None, type_: str = None) -> str:
    comment_xml = f"<comment>{comment}</comment>" if comment is not None else ""
    type_xml = f' type="{type_}"' if type_ else ""
    return (
        f"<message><source>{source}</source>{comment_xml}"
        f"<translation{type_xml}>{translation}</translation></message>"
    )


@pytest.fixture()
def finnish_ts() -> bytes:
    return FINNISH_TS.encode("utf-8")


@pytest.fixture()
def finnish_catalog(finnish_ts: bytes) -> Catalog:
    """The sample Finnish catalog, loaded."""
    return load(finnish_ts, "fi_FI")


@pytest.fixture()
def translations_dir(tmp_path: Path) -> Path:
    """A translations directory holding Finnish and Dutch catalogs."""
    directory = tmp_path / "translations"
    directory.mkdir()
    (directory / "app_fi.ts").write_text(FINNISH_TS, encoding="utf-8")
    (directory / "app_nl.ts").write_text(
        make_ts(
            make_context(
                "BaseGui",
                make_message("&amp;Open", "&amp;Openen"),
                make_message("&amp;Close", "&amp;Sluiten"),
            ),
            language="nl",
        ),
        encoding="utf-8",
    )
    return directory
