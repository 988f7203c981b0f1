"""Insertion ordering routines used by bulk loads."""

from .order import (
    InsertOrderResult,
    InsertOrderStrategy,
    compute_insert_order,
    fisher_yates_permutation,
    resolve_rng,
)

__all__ = [
    "InsertOrderResult",
    "InsertOrderStrategy",
    "compute_insert_order",
    "fisher_yates_permutation",
    "resolve_rng",
]
