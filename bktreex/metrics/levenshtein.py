from __future__ import annotations

from typing import Callable

import numpy as np
from numba import njit

DistanceFn = Callable[[str, str], int]


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"`{name}` must be a str, received {type(value).__name__}.")
    return value


def levenshtein(a: str, b: str) -> int:
    """Edit distance between `a` and `b` counted over Unicode code points.

    Two rolling rows are sized over the shorter string, so memory stays
    O(min(len(a), len(b))).
    """

    _require_text(a, "a")
    _require_text(b, "b")
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # rows run over the shorter string
    if len(a) > len(b):
        a, b = b, a

    previous = list(range(len(a) + 1))
    current = [0] * (len(a) + 1)
    for j, char_b in enumerate(b, start=1):
        current[0] = j
        for i, char_a in enumerate(a, start=1):
            cost = 0 if char_a == char_b else 1
            best = previous[i] + 1
            insertion = current[i - 1] + 1
            if insertion < best:
                best = insertion
            substitution = previous[i - 1] + cost
            if substitution < best:
                best = substitution
            current[i] = best
        previous, current = current, previous
    return previous[len(a)]


@njit(cache=True)
def _levenshtein_codes(short: np.ndarray, long: np.ndarray) -> int:
    n_short = short.shape[0]
    n_long = long.shape[0]
    previous = np.arange(n_short + 1, dtype=np.int64)
    current = np.zeros(n_short + 1, dtype=np.int64)
    for j in range(1, n_long + 1):
        current[0] = j
        code = long[j - 1]
        for i in range(1, n_short + 1):
            cost = 0 if short[i - 1] == code else 1
            best = previous[i] + 1
            insertion = current[i - 1] + 1
            if insertion < best:
                best = insertion
            substitution = previous[i - 1] + cost
            if substitution < best:
                best = substitution
            current[i] = best
        for i in range(n_short + 1):
            previous[i] = current[i]
    return previous[n_short]


def _code_points(value: str) -> np.ndarray:
    return np.frombuffer(value.encode("utf-32-le", "surrogatepass"), dtype=np.uint32)


def levenshtein_numba(a: str, b: str) -> int:
    """Numba-compiled edit distance; agrees with `levenshtein` on every input."""

    _require_text(a, "a")
    _require_text(b, "b")
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) > len(b):
        a, b = b, a
    return int(_levenshtein_codes(_code_points(a), _code_points(b)))


__all__ = [
    "DistanceFn",
    "levenshtein",
    "levenshtein_numba",
]
