"""Core data structures for the BK-tree."""

from .node import BKNode
from .tree import (
    DEFAULT_THRESHOLD,
    BKTree,
    EmptyIndexError,
    TreeState,
    TreeStats,
    validate_threshold,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "BKNode",
    "BKTree",
    "EmptyIndexError",
    "TreeState",
    "TreeStats",
    "validate_threshold",
]
