"""Edit-distance kernels and runtime kernel selection."""

from __future__ import annotations

from bktreex import config as bk_config

from .levenshtein import DistanceFn, levenshtein, levenshtein_numba

_KERNELS = {
    "python": levenshtein,
    "numba": levenshtein_numba,
}


def available_kernels() -> tuple[str, ...]:
    return tuple(_KERNELS)


def resolve_distance(enable_numba: bool | None = None) -> DistanceFn:
    """Return the distance kernel, deferring to the runtime config when unset."""

    if enable_numba is None:
        enable_numba = bk_config.runtime_config().enable_numba
    return _KERNELS["numba" if enable_numba else "python"]


def kernel_name(distance: DistanceFn) -> str:
    for name, kernel in _KERNELS.items():
        if kernel is distance:
            return name
    return getattr(distance, "__name__", "custom")


__all__ = [
    "DistanceFn",
    "available_kernels",
    "kernel_name",
    "levenshtein",
    "levenshtein_numba",
    "resolve_distance",
]
