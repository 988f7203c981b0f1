"""Loggers under the ``bktreex`` namespace, levelled by `RuntimeConfig`."""

from __future__ import annotations

import logging
from typing import Optional

from . import config as bk_config

_ROOT_NAME = "bktreex"


def _qualified_name(name: Optional[str]) -> str:
    if not name or name == _ROOT_NAME:
        return _ROOT_NAME
    if name.startswith(_ROOT_NAME + "."):
        return name
    return f"{_ROOT_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``bktreex`` child logger for `name`.

    Accepts either a short suffix (``"core.tree"``) or a module ``__name__``
    already inside the package; both resolve to ``bktreex.core.tree``.
    """

    runtime = bk_config.runtime_config()
    logger = logging.getLogger(_qualified_name(name))
    logger.setLevel(runtime.log_level)
    return logger
