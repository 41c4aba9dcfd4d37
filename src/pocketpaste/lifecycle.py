"""Reset hooks for process-wide singletons.

``get_pastebin_client()`` and ``get_tool_registry()`` cache a shared
instance. Each registers a reset hook here the first time it builds one,
so ``reset_all()`` returns the process to a clean state (the test suite
calls it after every test).

Created: 2026-10-12
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

_resets: dict[str, Callable[[], None]] = {}


def register(name: str, reset: Callable[[], None]) -> None:
    """Remember ``reset`` under ``name``, replacing any earlier hook."""
    _resets[name] = reset


def registered() -> list[str]:
    return list(_resets)


def reset_all() -> None:
    """Run and forget every reset hook. A failing hook is logged and skipped."""
    hooks = list(_resets.items())
    _resets.clear()
    for name, reset in hooks:
        try:
            reset()
        except Exception:
            logger.warning("Error resetting %s", name, exc_info=True)
        else:
            logger.debug("Reset %s", name)
