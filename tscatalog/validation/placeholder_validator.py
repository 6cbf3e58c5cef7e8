"""Validator for Qt positional placeholders in catalog translations."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models.catalog import Catalog, CatalogEntry, EntryStatus
from ..resolution.placeholders import extract_placeholders


@dataclass
class PlaceholderIssue:
    """Represents a placeholder validation issue."""

    error_type: str  # missing, extra, accelerator, newline
    message: str
    severity: str  # critical, warning
    entry: Optional[CatalogEntry] = None
    variant_index: int = 0


class PlaceholderValidator:
    """
    Validates that Qt markers are preserved in translations.

    Markers include:
    - %1 .. %99 - Positional arguments
    - %L1 - Locale-aware positional argument
    - %n - Plural count
    """

    def validate(
        self, source: str, translation: str, plural: bool = False
    ) -> Tuple[bool, List[PlaceholderIssue]]:
        """
        Validate that placeholders in source match those in translation.

        Args:
            source: Original source text
            translation: Translated text
            plural: Plural variants may drop the count (``"sekunti"`` for
                ``"%1 second(s)"``), so missing markers are only warnings

        Returns:
            Tuple of (is_valid, list of issues)
        """
        issues = []

        source_set = set(extract_placeholders(source))
        trans_set = set(extract_placeholders(translation))

        for placeholder in sorted(source_set - trans_set):
            issues.append(
                PlaceholderIssue(
                    error_type="missing",
                    message=f"Missing placeholder in translation: {placeholder}",
                    severity="warning" if plural else "critical",
                )
            )

        for placeholder in sorted(trans_set - source_set):
            issues.append(
                PlaceholderIssue(
                    error_type="extra",
                    message=f"Extra placeholder in translation: {placeholder}",
                    severity="critical",
                )
            )

        # Keyboard accelerators (&Open) should survive translation
        if _has_accelerator(source) and translation and not _has_accelerator(translation):
            issues.append(
                PlaceholderIssue(
                    error_type="accelerator",
                    message="Keyboard accelerator '&' dropped in translation",
                    severity="warning",
                )
            )

        source_newlines = source.count("\n")
        trans_newlines = translation.count("\n")
        if translation and source_newlines != trans_newlines:
            issues.append(
                PlaceholderIssue(
                    error_type="newline",
                    message=f"Newline count changed: {source_newlines} -> {trans_newlines}",
                    severity="warning",
                )
            )

        is_valid = not any(issue.severity == "critical" for issue in issues)
        return is_valid, issues

    def check_catalog(self, catalog: Catalog) -> List[PlaceholderIssue]:
        """Validate every variant of every finished entry in a catalog."""
        found = []
        for entry in catalog.entries.values():
            if entry.status is not EntryStatus.FINISHED:
                continue
            for index, variant in enumerate(entry.translation_variants):
                _, issues = self.validate(entry.source_text, variant, plural=entry.is_plural)
                for issue in issues:
                    issue.entry = entry
                    issue.variant_index = index
                found.extend(issues)
        return found


def _has_accelerator(text: str) -> bool:
    """True when ``text`` marks a mnemonic (``&File``); ``&&`` is a literal ampersand."""
    stripped = text.replace("&&", "")
    index = stripped.find("&")
    return index != -1 and index + 1 < len(stripped) and not stripped[index + 1].isspace()
