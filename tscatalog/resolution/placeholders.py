"""Positional placeholder substitution for resolved strings."""

import re
from typing import Optional, Sequence

# Qt style markers: %1 .. %99, the locale-aware %L1 form, and %n for plural counts
PLACEHOLDER_PATTERN = re.compile(
    r"%"
    r"(?:"
    r"(?P<locale>L)?(?P<position>\d{1,2})"  # Positional marker (e.g., %1, %L2)
    r"|(?P<count>n)"  # Plural count marker
    r")"
)


def substitute(
    text: str,
    args: Sequence[str] = (),
    plural_count: Optional[int] = None,
) -> str:
    """
    Replace positional markers in ``text`` with ``args``.

    ``%1`` takes ``args[0]``, ``%2`` takes ``args[1]`` and so on. Markers
    without a matching argument are left as they are. ``%n`` takes
    ``plural_count`` when one is given. Substituted text is not rescanned.
    """
    if "%" not in text:
        return text

    def _replace(match: "re.Match[str]") -> str:
        if match.group("count"):
            if plural_count is None:
                return match.group(0)
            return str(plural_count)

        position = int(match.group("position"))
        if 1 <= position <= len(args):
            return str(args[position - 1])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def extract_placeholders(text: str) -> list:
    """Return the markers found in ``text`` in order, normalized (``%L1`` -> ``%1``)."""
    placeholders = []
    for match in PLACEHOLDER_PATTERN.finditer(text):
        if match.group("count"):
            placeholders.append("%n")
        else:
            placeholders.append(f"%{int(match.group('position'))}")
    return placeholders
