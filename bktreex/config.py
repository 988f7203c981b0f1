from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _normalise_log_level(value: str | None) -> str:
    if value is None or value.strip() == "":
        return "INFO"
    value = value.strip().upper()
    if value not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Expected one of {sorted(_SUPPORTED_LOG_LEVELS)}."
        )
    return value


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    enable_numba: bool
    seed: int | None

    @property
    def kernel(self) -> str:
        return "numba" if self.enable_numba else "python"


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("bktreex")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    log_level = _normalise_log_level(os.getenv("BKTREEX_LOG_LEVEL"))
    enable_numba = _bool_from_env(os.getenv("BKTREEX_ENABLE_NUMBA"), default=False)
    seed = _parse_optional_int(os.getenv("BKTREEX_SEED"))

    config = RuntimeConfig(
        log_level=log_level,
        enable_numba=enable_numba,
        seed=seed,
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
