"""Parser for Qt Linguist .ts translation catalogs."""

import logging
import re
import string
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from lxml import etree

from ..errors import EmptyCatalogError, MalformedCatalogError
from ..models.catalog import Catalog, CatalogEntry, CatalogKey, EntryStatus, LoadWarning
from ..resolution.plural_rules import form_count, normalize_tag

logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(r"[+-]?[0-9]+")

_STATUS_BY_TYPE = {
    None: EntryStatus.FINISHED,
    "": EntryStatus.FINISHED,
    "unfinished": EntryStatus.UNFINISHED,
    "obsolete": EntryStatus.OBSOLETE,
    "vanished": EntryStatus.OBSOLETE,
}


class _SkipRecord(Exception):
    """Raised inside the record parser to drop a single message."""

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def load(
    document: Union[bytes, str],
    declared_language_tag: Optional[str] = None,
) -> Catalog:
    """
    Parse one .ts document into a Catalog.

    Args:
        document: Raw document content
        declared_language_tag: Target language; overrides the document's
            ``language`` attribute when given

    Returns:
        The loaded Catalog, with per-record anomalies in ``catalog.warnings``

    Raises:
        MalformedCatalogError: The document is not well-formed TS XML
        EmptyCatalogError: The document holds no usable records; the empty
            catalog is attached to the exception
    """
    return TSParser().parse_bytes(document, declared_language_tag)


class TSParser:
    """Parser for .ts files."""

    def __init__(self) -> None:
        self._xml_parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
        )

    def parse(self, file_path: str, language_tag: Optional[str] = None) -> Catalog:
        """
        Parse a .ts file and return the loaded catalog.

        Args:
            file_path: Path to the .ts file
            language_tag: Optional declared language tag

        Returns:
            Catalog loaded from the file
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not path.suffix == ".ts":
            raise ValueError(f"Expected .ts file, got: {path.suffix}")

        logger.debug("Reading catalog %s", path)
        return self.parse_bytes(path.read_bytes(), language_tag, source_name=path.name)

    def parse_bytes(
        self,
        content: Union[bytes, str],
        language_tag: Optional[str] = None,
        source_name: str = "<document>",
    ) -> Catalog:
        """Parse .ts content held in memory."""
        if isinstance(content, str):
            content = content.encode("utf-8")

        try:
            root = etree.fromstring(content, self._xml_parser)
        except etree.XMLSyntaxError as e:
            raise MalformedCatalogError(f"Invalid XML in {source_name}: {e}") from e

        if root is None or root.tag != "TS":
            tag = None if root is None else root.tag
            raise MalformedCatalogError(f"Expected <TS> root element in {source_name}, got: {tag}")

        return self._parse_root(root, language_tag, source_name)

    def _parse_root(
        self,
        root: etree._Element,
        declared_language: Optional[str],
        source_name: str,
    ) -> Catalog:
        """Build the catalog from the <TS> element."""
        warnings: List[LoadWarning] = []
        document_language = root.get("language") or ""
        language = declared_language or document_language

        if (
            declared_language
            and document_language
            and _base_language(declared_language) != _base_language(document_language)
        ):
            warnings.append(
                LoadWarning(
                    kind="language_mismatch",
                    message=f"Document declares language '{document_language}', "
                    f"loading as '{declared_language}'",
                )
            )

        expected_forms = form_count(language)
        table: Dict[CatalogKey, CatalogEntry] = {}

        for context_el in root.iterfind("context"):
            context = _element_text(context_el.find("name"))
            for message_el in context_el.iterfind("message"):
                try:
                    entry = self._parse_message(context, message_el)
                except _SkipRecord as skip:
                    warnings.append(
                        LoadWarning(kind=skip.kind, message=skip.message, line=message_el.sourceline)
                    )
                    continue

                if entry.key in table:
                    warnings.append(
                        LoadWarning(
                            kind="duplicate_key",
                            message=f"Duplicate message '{entry.source_text}' in context "
                            f"'{context}', keeping the later one",
                            key=entry.key,
                            line=message_el.sourceline,
                        )
                    )

                if (
                    entry.is_plural
                    and entry.status is EntryStatus.FINISHED
                    and len(entry.translation_variants) != expected_forms
                ):
                    warnings.append(
                        LoadWarning(
                            kind="plural_mismatch",
                            message=f"'{entry.source_text}' has {len(entry.translation_variants)} "
                            f"plural forms, '{language}' expects {expected_forms}",
                            key=entry.key,
                            line=message_el.sourceline,
                        )
                    )

                table[entry.key] = entry

        for warning in warnings:
            logger.warning("%s: %s (line %s)", source_name, warning.message, warning.line)

        catalog = Catalog(language_tag=language, entries=table, warnings=tuple(warnings))

        if not table:
            raise EmptyCatalogError(f"No usable messages in {source_name}", catalog=catalog)

        logger.info(
            "Loaded %d messages for '%s' from %s (%d warnings)",
            len(catalog),
            language,
            source_name,
            len(warnings),
        )
        return catalog

    def _parse_message(self, context: str, message_el: etree._Element) -> CatalogEntry:
        """Parse a single <message> record."""
        source_el = message_el.find("source")
        source_text = _element_text(source_el)
        if source_el is None or not source_text:
            raise _SkipRecord("missing_source", f"Message without source text in context '{context}'")

        numerus = message_el.get("numerus", "no")
        if numerus not in ("yes", "no"):
            raise _SkipRecord(
                "malformed_record", f"Invalid numerus marker '{numerus}' on '{source_text}'"
            )
        is_plural = numerus == "yes"

        translation_el = message_el.find("translation")
        if translation_el is None:
            status = EntryStatus.UNFINISHED
            variants: Tuple[str, ...] = ()
        else:
            translation_type = translation_el.get("type")
            if translation_type not in _STATUS_BY_TYPE:
                raise _SkipRecord(
                    "malformed_record",
                    f"Unknown translation type '{translation_type}' on '{source_text}'",
                )
            status = _STATUS_BY_TYPE[translation_type]
            variants = self._parse_variants(source_text, translation_el, status, is_plural)

        return CatalogEntry(
            context=context,
            source_text=source_text,
            disambiguation=_element_text(message_el.find("comment")) or None,
            translation_variants=variants,
            status=status,
            is_plural=is_plural,
            locations=tuple(
                (location.get("filename", ""), _parse_line(location.get("line")))
                for location in message_el.iterfind("location")
            ),
            extra_comment=_element_text(message_el.find("extracomment")) or None,
        )

    def _parse_variants(
        self,
        source_text: str,
        translation_el: etree._Element,
        status: EntryStatus,
        is_plural: bool,
    ) -> Tuple[str, ...]:
        """Collect translation variants from a <translation> element."""
        numerus_forms = translation_el.findall("numerusform")

        if is_plural:
            if numerus_forms:
                return tuple(_variant_text(form) for form in numerus_forms)
            if status is EntryStatus.FINISHED:
                raise _SkipRecord(
                    "malformed_record", f"Plural message '{source_text}' has no numerus forms"
                )
            return ()

        if numerus_forms:
            raise _SkipRecord(
                "malformed_record",
                f"Numerus forms on non-plural message '{source_text}'",
            )

        text = _variant_text(translation_el)

        if status is EntryStatus.FINISHED or text:
            return (text,)
        return ()


def _variant_text(element: etree._Element) -> str:
    """Text of a translation or numerus form; the first length variant is the primary one."""
    length_variants = element.findall("lengthvariant")
    return _element_text(length_variants[0] if length_variants else element)


def _element_text(element: Optional[etree._Element]) -> str:
    """Return element text with <byte value="..."/> escapes decoded."""
    if element is None:
        return ""

    parts = [element.text or ""]
    for child in element:
        if child.tag == "byte":
            parts.append(_decode_byte(child.get("value", "")))
        parts.append(child.tail or "")
    return "".join(parts)


def _decode_byte(value: str) -> str:
    """Decode a TS byte escape: ``x9`` is hexadecimal, ``9`` decimal."""
    if value[:1] in ("x", "X") and value[1:]:
        digits, base = value[1:], 16
    else:
        digits, base = value, 10

    allowed = string.hexdigits if base == 16 else string.digits
    if not digits or any(c not in allowed for c in digits):
        return ""
    code = int(digits, base)
    return chr(code) if code <= 0x10FFFF else ""


def _parse_line(value: Optional[str]) -> int:
    """Location lines may be absolute (``53``) or relative (``+3``)."""
    if not value or not _LINE_PATTERN.fullmatch(value):
        return 0
    return int(value)


def _base_language(language_tag: str) -> str:
    return normalize_tag(language_tag).split("_")[0]
