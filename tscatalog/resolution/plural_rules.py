"""Plural category rules per target language."""

from dataclasses import dataclass
from typing import Callable, Dict


@dataclass(frozen=True)
class PluralRule:
    """A language plural rule: number of forms and the form selector."""

    name: str
    forms: int
    select: Callable[[int], int]


def _slavic_east(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 <= n % 100 <= 10:
        return 1
    if 10 < n % 100 < 20:
        return 2
    return 3


def _arabic(n: int) -> int:
    if n <= 2:
        return n
    if 3 <= n % 100 <= 10:
        return 3
    if n % 100 >= 11:
        return 4
    return 5


NO_PLURALS = PluralRule("none", 1, lambda n: 0)
ENGLISH = PluralRule("english", 2, lambda n: 0 if n == 1 else 1)
FRENCH = PluralRule("french", 2, lambda n: 0 if n <= 1 else 1)
ICELANDIC = PluralRule("icelandic", 2, lambda n: 0 if n % 10 == 1 and n % 100 != 11 else 1)
SLAVIC_EAST = PluralRule("slavic_east", 3, _slavic_east)
CZECH = PluralRule("czech", 3, lambda n: 0 if n == 1 else 1 if 2 <= n <= 4 else 2)
POLISH = PluralRule("polish", 3, _polish)
LITHUANIAN = PluralRule("lithuanian", 3, _lithuanian)
LATVIAN = PluralRule(
    "latvian", 3, lambda n: 0 if n % 10 == 1 and n % 100 != 11 else 1 if n != 0 else 2
)
ROMANIAN = PluralRule(
    "romanian", 3, lambda n: 0 if n == 1 else 1 if n == 0 or 0 < n % 100 < 20 else 2
)
SLOVENIAN = PluralRule(
    "slovenian",
    4,
    lambda n: 0 if n % 100 == 1 else 1 if n % 100 == 2 else 2 if n % 100 in (3, 4) else 3,
)
WELSH = PluralRule(
    "welsh", 4, lambda n: 0 if n == 1 else 1 if n == 2 else 2 if n in (8, 11) else 3
)
MALTESE = PluralRule("maltese", 4, _maltese)
IRISH = PluralRule(
    "irish",
    5,
    lambda n: 0 if n == 1 else 1 if n == 2 else 2 if 3 <= n <= 6 else 3 if 7 <= n <= 10 else 4,
)
ARABIC = PluralRule("arabic", 6, _arabic)


def _assign(rule: PluralRule, *languages: str) -> Dict[str, PluralRule]:
    return {language: rule for language in languages}


RULES: Dict[str, PluralRule] = {
    **_assign(
        NO_PLURALS,
        "ja", "ko", "zh", "vi", "th", "id", "ms", "lo", "km", "my", "bo", "dz",
    ),
    **_assign(
        ENGLISH,
        "en", "de", "nl", "fi", "sv", "da", "nb", "nn", "no", "it", "es", "pt",
        "el", "et", "hu", "bg", "ca", "eu", "gl", "he", "tr", "af", "sq", "eo",
        "fa", "ka", "hy", "az", "kk", "ky", "uz", "ur", "hi", "bn", "ta", "te",
        "ml", "kn", "mr", "gu", "pa", "ne", "si", "sw", "fo", "fy", "lb", "ast",
    ),
    **_assign(FRENCH, "fr", "pt_br", "oc", "tl", "fil", "br", "ln", "mg", "ti", "wa"),
    **_assign(ICELANDIC, "is", "mk"),
    **_assign(SLAVIC_EAST, "ru", "uk", "be", "sr", "hr", "bs", "sh"),
    **_assign(CZECH, "cs", "sk"),
    **_assign(POLISH, "pl"),
    **_assign(LITHUANIAN, "lt"),
    **_assign(LATVIAN, "lv"),
    **_assign(ROMANIAN, "ro", "mo"),
    **_assign(SLOVENIAN, "sl"),
    **_assign(WELSH, "cy"),
    **_assign(MALTESE, "mt"),
    **_assign(IRISH, "ga"),
    **_assign(ARABIC, "ar"),
}

DEFAULT_RULE = ENGLISH


def normalize_tag(language_tag: str) -> str:
    """Normalize ``fi-FI``, ``fi_FI.UTF-8`` and ``FI_fi`` to ``fi_fi``."""
    tag = (language_tag or "").strip().split(".")[0].split("@")[0]
    return tag.replace("-", "_").lower()


def rule_for(language_tag: str) -> PluralRule:
    """
    Return the plural rule for a language tag.

    The full tag is tried first so territory-specific rules (``pt_BR``) win
    over the bare language. Unknown languages get the two-form rule.
    """
    tag = normalize_tag(language_tag)
    if tag in RULES:
        return RULES[tag]
    return RULES.get(tag.split("_")[0], DEFAULT_RULE)


def category(language_tag: str, n: int) -> int:
    """Return the plural variant index for quantity ``n``."""
    rule = rule_for(language_tag)
    return rule.select(abs(int(n)))


def form_count(language_tag: str) -> int:
    """Return how many plural variants the language expects."""
    return rule_for(language_tag).forms
