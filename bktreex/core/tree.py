from __future__ import annotations

import dataclasses
import enum
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional

from numpy.random import Generator

from bktreex.algo.order import compute_insert_order
from bktreex.core.node import BKNode
from bktreex.logging import get_logger
from bktreex.metrics import kernel_name, resolve_distance

LOGGER = get_logger(__name__)

DEFAULT_THRESHOLD = 2


class EmptyIndexError(RuntimeError):
    """Raised when a query reaches a tree that holds no terms yet."""


class TreeState(enum.Enum):
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class TreeStats:
    num_insertions: int = 0
    num_duplicates: int = 0
    num_batches: int = 0


def _require_term(term: Any, name: str = "term") -> str:
    if not isinstance(term, str):
        raise TypeError(f"`{name}` must be a str, received {type(term).__name__}.")
    return term


def validate_threshold(threshold: Any) -> int:
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Integral):
        raise TypeError(
            f"`threshold` must be an integer, received {type(threshold).__name__}."
        )
    threshold = int(threshold)
    if threshold < 0:
        raise ValueError(f"`threshold` must be non-negative, received {threshold}.")
    return threshold


class BKTree:
    """Burkhard-Keller tree over Levenshtein distance.

    The tree starts in ``TreeState.EMPTY``; the first ``add`` plants the root
    and moves it to ``TreeState.POPULATED`` for good.
    """

    def __init__(self, *, enable_numba: bool | None = None) -> None:
        self._distance = resolve_distance(enable_numba)
        self.root: Optional[BKNode] = None
        self.state = TreeState.EMPTY
        self.stats = TreeStats()

    @classmethod
    def from_terms(
        cls,
        terms: Iterable[str],
        *,
        seed: int | None = None,
        rng: Generator | None = None,
        enable_numba: bool | None = None,
    ) -> "BKTree":
        tree = cls(enable_numba=enable_numba)
        tree.add_list(terms, seed=seed, rng=rng)
        return tree

    @property
    def kernel(self) -> str:
        return kernel_name(self._distance)

    def is_empty(self) -> bool:
        return self.state is TreeState.EMPTY

    def _plant_root(self, term: str) -> None:
        if self.state is not TreeState.EMPTY:
            raise RuntimeError("Root already planted; the tree is populated.")
        self.root = BKNode(term)
        self.state = TreeState.POPULATED
        LOGGER.debug("Planted root %r using %s kernel", term, self.kernel)

    def add(self, term: str) -> bool:
        """Insert `term`; return False when an equal term is already indexed."""

        _require_term(term)
        if self.state is TreeState.EMPTY:
            self._plant_root(term)
            inserted = True
        else:
            inserted = self.root.add(term, distance=self._distance)

        if inserted:
            self.stats = dataclasses.replace(
                self.stats, num_insertions=self.stats.num_insertions + 1
            )
        else:
            self.stats = dataclasses.replace(
                self.stats, num_duplicates=self.stats.num_duplicates + 1
            )
        return inserted

    def search(self, term: str, threshold: int = DEFAULT_THRESHOLD) -> Dict[str, int]:
        """Map every indexed term within `threshold` of `term` to its distance."""

        _require_term(term)
        threshold = validate_threshold(threshold)
        if self.state is TreeState.EMPTY:
            raise EmptyIndexError("Cannot search a BK-tree before any term is added.")

        collected: Dict[str, int] = {}
        self.root.search(term, threshold, collected, distance=self._distance)
        return collected

    def add_list(
        self,
        terms: Iterable[str],
        *,
        seed: int | None = None,
        rng: Generator | None = None,
    ) -> None:
        """Insert `terms` in a random order; duplicates are skipped silently.

        Sorted input would otherwise degrade the tree towards a linked list.
        """

        if isinstance(terms, str):
            raise TypeError("`terms` must be a sequence of str, not a single str.")
        items: List[str] = list(terms)
        for idx, term in enumerate(items):
            _require_term(term, name=f"terms[{idx}]")

        order = compute_insert_order(len(items), seed=seed, rng=rng)
        if order.permutation is not None:
            items = [items[int(idx)] for idx in order.permutation]

        before = self.stats.num_insertions
        for term in items:
            self.add(term)
        self.stats = dataclasses.replace(self.stats, num_batches=self.stats.num_batches + 1)

        LOGGER.debug(
            "Bulk load inserted %d of %d terms (tree size %d)",
            self.stats.num_insertions - before,
            len(items),
            len(self),
        )

    def terms(self) -> List[str]:
        return list(self)

    def describe(self) -> Dict[str, Any]:
        """Return counters plus shape metrics of the current tree."""

        height = 0
        max_fanout = 0
        if self.root is not None:
            height = self.root.height()
            max_fanout = max(len(node.children) for node in self.root.iter_nodes())
        return {
            "state": self.state.value,
            "kernel": self.kernel,
            "size": len(self),
            "num_insertions": self.stats.num_insertions,
            "num_duplicates": self.stats.num_duplicates,
            "num_batches": self.stats.num_batches,
            "height": height,
            "max_fanout": max_fanout,
        }

    def __len__(self) -> int:
        return self.stats.num_insertions

    def __iter__(self) -> Iterator[str]:
        if self.root is None:
            return iter(())
        return (node.term for node in self.root.iter_nodes())

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str) or self.root is None:
            return False
        collected: Dict[str, int] = {}
        self.root.search(term, 0, collected, distance=self._distance)
        return term in collected

    def __repr__(self) -> str:
        return f"BKTree(size={len(self)}, state={self.state.value}, kernel={self.kernel})"


__all__ = [
    "BKTree",
    "DEFAULT_THRESHOLD",
    "EmptyIndexError",
    "TreeState",
    "TreeStats",
    "validate_threshold",
]
