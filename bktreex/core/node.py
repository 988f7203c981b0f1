from __future__ import annotations

from typing import Dict, Iterator, List, MutableMapping

from bktreex.metrics import DistanceFn, levenshtein


class BKNode:
    """Tree vertex holding one term and its children keyed by edit distance.

    A child stored under key ``k`` satisfies ``distance(self.term, child.term) == k``.
    """

    __slots__ = ("term", "children")

    def __init__(self, term: str) -> None:
        self.term = term
        self.children: Dict[int, BKNode] = {}

    def __repr__(self) -> str:
        return f"BKNode(term={self.term!r}, children={sorted(self.children)})"

    def add(self, term: str, *, distance: DistanceFn = levenshtein) -> bool:
        """Attach `term` below this node; return False when it is already present."""

        node = self
        while True:
            score = distance(term, node.term)
            if score == 0:
                return False
            child = node.children.get(score)
            if child is None:
                node.children[score] = BKNode(term)
                return True
            node = child

    def search(
        self,
        term: str,
        threshold: int,
        collected: MutableMapping[str, int],
        *,
        distance: DistanceFn = levenshtein,
    ) -> None:
        """Record every term within `threshold` of `term` into `collected`.

        Only children keyed within ``[d - threshold, d + threshold]`` of the
        node distance ``d`` are visited. When that band spans more keys than
        the node has children, the existing edges are filtered instead.
        """

        stack: List[BKNode] = [self]
        while stack:
            node = stack.pop()
            score = distance(term, node.term)
            if score <= threshold:
                collected[node.term] = score
            children = node.children
            if not children:
                continue
            low = max(1, score - threshold)
            high = score + threshold
            if high - low + 1 > len(children):
                stack.extend(child for key, child in children.items() if low <= key <= high)
                continue
            for key in range(low, high + 1):
                child = children.get(key)
                if child is not None:
                    stack.append(child)

    def iter_nodes(self) -> Iterator[BKNode]:
        """Yield this node and its descendants breadth-first."""

        frontier: List[BKNode] = [self]
        while frontier:
            next_frontier: List[BKNode] = []
            for node in frontier:
                yield node
                next_frontier.extend(node.children.values())
            frontier = next_frontier

    def height(self) -> int:
        """Number of levels below and including this node."""

        levels = 0
        frontier: List[BKNode] = [self]
        while frontier:
            levels += 1
            frontier = [child for node in frontier for child in node.children.values()]
        return levels


__all__ = ["BKNode"]
