from __future__ import annotations

from typing import List, Sequence

import numpy as np
from numpy.random import Generator

_DEFAULT_ALPHABET = "abcdefghij"


def random_words(
    rng: Generator,
    count: int,
    *,
    min_length: int = 1,
    max_length: int = 8,
    alphabet: Sequence[str] = _DEFAULT_ALPHABET,
) -> List[str]:
    """Draw `count` words over a small alphabet so near neighbours are common."""

    symbols = np.asarray(list(alphabet))
    lengths = rng.integers(min_length, max_length + 1, size=count)
    return ["".join(rng.choice(symbols, size=int(length))) for length in lengths]


def perturb_word(rng: Generator, word: str, edits: int, alphabet: Sequence[str] = _DEFAULT_ALPHABET) -> str:
    """Apply up to `edits` random single-character edits to `word`."""

    chars = list(word)
    for _ in range(edits):
        op = int(rng.integers(0, 3)) if chars else 1
        if op == 0:
            del chars[int(rng.integers(0, len(chars)))]
        elif op == 1:
            chars.insert(int(rng.integers(0, len(chars) + 1)), str(rng.choice(list(alphabet))))
        else:
            chars[int(rng.integers(0, len(chars)))] = str(rng.choice(list(alphabet)))
    return "".join(chars)
