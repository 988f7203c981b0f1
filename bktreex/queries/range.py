from __future__ import annotations

from typing import Dict, Iterable, List

from bktreex.core.tree import DEFAULT_THRESHOLD, BKTree, EmptyIndexError, validate_threshold
from bktreex.logging import get_logger

LOGGER = get_logger(__name__)


def range_search(
    tree: BKTree,
    queries: Iterable[str],
    threshold: int = DEFAULT_THRESHOLD,
) -> List[Dict[str, int]]:
    """Run `tree.search` for each query, preserving input order."""

    if isinstance(queries, str):
        raise TypeError("`queries` must be a sequence of str, not a single str.")
    batch = list(queries)
    for idx, query in enumerate(batch):
        if not isinstance(query, str):
            raise TypeError(f"`queries[{idx}]` must be a str, received {type(query).__name__}.")
    threshold = validate_threshold(threshold)
    if tree.is_empty():
        raise EmptyIndexError("Cannot search a BK-tree before any term is added.")

    results = [tree.search(query, threshold) for query in batch]
    LOGGER.debug(
        "Range search answered %d queries at threshold %d (%d matches)",
        len(batch),
        threshold,
        sum(len(found) for found in results),
    )
    return results


__all__ = ["range_search"]
