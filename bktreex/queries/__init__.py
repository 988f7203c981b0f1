"""Query helpers built on top of `BKTree.search`."""

from .range import range_search

__all__ = ["range_search"]
