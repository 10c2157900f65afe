"""
Rebuilders refresh solution units before a dispatch when auto-compile is enabled.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Protocol, runtime_checkable

from aocutils.foundation.exceptions import BuildFailureError

from .discovery import discover
from .units import UnitRegistry, default_registry

logger = logging.getLogger(__name__)


@runtime_checkable
class Rebuilder(Protocol):
    def rebuild(self) -> None: ...


class NullRebuilder:
    """Stands in when no build step is available."""

    def rebuild(self) -> None:
        return None


def _source_removed(module: ModuleType) -> bool:
    # importlib.util.find_spec would return the cached __spec__ of a loaded module.
    origin = getattr(module, "__file__", None)
    return origin is not None and not Path(origin).exists()


class ModuleReloader:
    """
    Reload a package of solution modules so freshly edited units are visible.

    Units owned by each module are discarded right before the module is reloaded, so a module
    that fails to reload leaves no stale unit behind. Any failure is raised as
    ``BuildFailureError``. Modules are reloaded parents first, in name order; a module that
    imported helpers from a sibling keeps the sibling's previous objects until its next reload.
    Modules whose source file was deleted or renamed are forgotten together with their units.
    """

    def __init__(self, package: str, registry: UnitRegistry | None = None) -> None:
        self.package = package
        self.registry = registry if registry is not None else default_registry()

    def _loaded_modules(self) -> list[str]:
        prefix = f"{self.package}."
        names = [name for name in sys.modules if name == self.package or name.startswith(prefix)]
        return sorted(names, key=lambda name: (name.count("."), name))

    def _forget(self, name: str, module: ModuleType) -> None:
        self.registry.discard_module(name)
        sys.modules.pop(name, None)
        parent_name, _, leaf = name.rpartition(".")
        parent = sys.modules.get(parent_name)
        if parent is not None and getattr(parent, leaf, None) is module:
            delattr(parent, leaf)
        logger.info("Dropped %s: its source file no longer exists", name)

    def rebuild(self) -> None:
        loaded = self._loaded_modules()
        logger.debug("Rebuilding %s (%d module(s) loaded)", self.package, len(loaded))
        try:
            importlib.invalidate_caches()
            for name in loaded:
                module = sys.modules.get(name)
                if module is None:
                    continue
                if _source_removed(module):
                    self._forget(name, module)
                    continue
                self.registry.discard_module(name)
                importlib.reload(module)
            discover(self.package, self.registry)
        except Exception as exc:
            logger.debug("Rebuild of %s failed", self.package, exc_info=True)
            raise BuildFailureError(self.package, exc) from exc


__all__ = ["Rebuilder", "NullRebuilder", "ModuleReloader"]
