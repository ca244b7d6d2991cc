"""
Generator modules register themselves with ``registry`` when imported.

``ensure_algorithms_loaded`` walks this package once and imports every module
that is not shared infrastructure, so adding an algorithm means adding a file.
"""
from __future__ import annotations

import importlib
import pkgutil
import threading
from typing import FrozenSet, List

__all__ = ["ensure_algorithms_loaded", "loaded_modules"]

# Shared infrastructure, not generators
_INFRASTRUCTURE: FrozenSet[str] = frozenset({"base", "common", "registry"})
_load_lock = threading.Lock()
_loaded: List[str] = []
_done = False


def ensure_algorithms_loaded() -> None:
    """Import every generator module once; safe to call from worker threads."""

    global _done
    if _done:
        return
    with _load_lock:
        if _done:
            return
        for module_info in pkgutil.iter_modules(__path__):  # type: ignore[name-defined]
            name = module_info.name
            if name.startswith("_") or name in _INFRASTRUCTURE:
                continue
            importlib.import_module(f"{__name__}.{name}")
            _loaded.append(name)
        _done = True


def loaded_modules() -> List[str]:
    """Generator module names imported by the autoloader, in load order."""
    ensure_algorithms_loaded()
    return list(_loaded)
