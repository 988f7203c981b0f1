from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.random import Generator, default_rng

from bktreex import config as bk_config

InsertOrderStrategy = Literal["natural", "random"]
_SUPPORTED_STRATEGIES = ("natural", "random")


@dataclass(frozen=True)
class InsertOrderResult:
    permutation: Any
    strategy: str


def resolve_rng(*, seed: int | None = None, rng: Generator | None = None) -> Generator:
    """Return `rng`, or a generator seeded from `seed` or the runtime config."""

    if rng is not None and seed is not None:
        raise ValueError("Pass either `seed` or `rng`, not both.")
    if rng is not None:
        return rng
    if seed is None:
        seed = bk_config.runtime_config().seed
    return default_rng(seed)


def fisher_yates_permutation(count: int, rng: Generator) -> np.ndarray:
    """Uniform permutation of ``range(count)``.

    Walks from the last index down to 1 and swaps each slot with a uniformly
    drawn index at or below it.
    """

    permutation = np.arange(count, dtype=np.int64)
    for i in range(count - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        permutation[i], permutation[j] = permutation[j], permutation[i]
    return permutation


def compute_insert_order(
    count: int,
    *,
    strategy: InsertOrderStrategy = "random",
    seed: int | None = None,
    rng: Generator | None = None,
) -> InsertOrderResult:
    """Return the order in which `count` terms should be inserted.

    ``permutation`` is None when the input order is kept as is.
    """

    if strategy not in _SUPPORTED_STRATEGIES:
        raise ValueError(
            f"Unsupported insert order strategy '{strategy}'. Expected one of {_SUPPORTED_STRATEGIES}."
        )
    if count < 0:
        raise ValueError("`count` must be non-negative.")
    if strategy == "natural" or count <= 1:
        return InsertOrderResult(permutation=None, strategy=strategy)

    generator = resolve_rng(seed=seed, rng=rng)
    return InsertOrderResult(
        permutation=fisher_yates_permutation(count, generator),
        strategy=strategy,
    )


__all__ = [
    "InsertOrderResult",
    "InsertOrderStrategy",
    "compute_insert_order",
    "fisher_yates_permutation",
    "resolve_rng",
]
