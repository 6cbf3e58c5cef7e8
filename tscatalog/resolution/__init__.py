"""Translation lookup, plural selection and argument substitution."""

from .placeholders import substitute
from .plural_rules import category, form_count
from .resolver import CatalogSet, Translator, find_entry, resolve

__all__ = [
    "CatalogSet",
    "Translator",
    "category",
    "find_entry",
    "form_count",
    "resolve",
    "substitute",
]
