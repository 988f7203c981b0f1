"""bktreex: BK-tree index for fuzzy string lookup under Levenshtein distance.

Quick Start
-----------
>>> from bktreex import BKTree
>>>
>>> tree = BKTree()
>>> tree.add_list(["cat", "cats", "dog", "bat"], seed=0)
>>> sorted(tree.search("cat", 1).items())
[('bat', 1), ('cat', 0), ('cats', 1)]

Classes
-------
BKTree : Main interface for inserting terms and running threshold queries.
BKNode : Tree vertex holding one term and its distance-keyed children.
RuntimeConfig : Environment-driven configuration (log level, kernel, seed).
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("bktreex")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

from .config import RuntimeConfig, reset_runtime_config_cache, runtime_config
from .core import (
    DEFAULT_THRESHOLD,
    BKNode,
    BKTree,
    EmptyIndexError,
    TreeState,
    TreeStats,
)
from .algo import InsertOrderResult, compute_insert_order
from .metrics import available_kernels, levenshtein, levenshtein_numba, resolve_distance
from .queries import range_search

__all__ = [
    "__version__",
    "BKTree",
    "BKNode",
    "DEFAULT_THRESHOLD",
    "EmptyIndexError",
    "TreeState",
    "TreeStats",
    "InsertOrderResult",
    "compute_insert_order",
    "available_kernels",
    "levenshtein",
    "levenshtein_numba",
    "resolve_distance",
    "range_search",
    "RuntimeConfig",
    "runtime_config",
    "reset_runtime_config_cache",
]
