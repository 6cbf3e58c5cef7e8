"""Catalog loading from .ts documents."""

from .ts_parser import TSParser, load

__all__ = ["TSParser", "load"]
