"""Read-only diagnostics for loaded catalogs."""

from .placeholder_validator import PlaceholderIssue, PlaceholderValidator

__all__ = ["PlaceholderIssue", "PlaceholderValidator"]
