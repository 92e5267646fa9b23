"""Resolution of service ``class`` values into factories."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Mapping
from typing import Any

LOGGER = logging.getLogger(__name__)

Factory = Callable[..., Any]


class ClassRegistry:
    """Map class identifiers to factories, optionally falling back to imports."""

    def __init__(
        self,
        classes: Mapping[str, Factory] | None = None,
        *,
        allow_import_paths: bool = True,
    ) -> None:
        self._classes: dict[str, Factory] = dict(classes or {})
        self._allow_import_paths = allow_import_paths

    def register(self, name: str, factory: Factory) -> None:
        """Register a factory under a class identifier."""
        self._classes[name] = factory

    def resolve(self, target: Any) -> Factory | None:
        """Return a factory for ``target`` or ``None`` when it cannot be built."""
        if isinstance(target, str):
            if target in self._classes:
                return self._classes[target]
            if self._allow_import_paths:
                return _import_path(target)
            return None
        if callable(target):
            return target
        return None


def _import_path(path: str) -> Factory | None:
    """Import the class at ``package.module:Name`` or ``package.module.Name``."""
    if ":" in path:
        module_name, _, attribute = path.partition(":")
    else:
        module_name, _, attribute = path.rpartition(".")
    if not module_name or not attribute:
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        LOGGER.debug("Unable to import module %s for %s", module_name, path)
        return None
    factory = getattr(module, attribute, None)
    return factory if isinstance(factory, type) else None


__all__ = ["ClassRegistry", "Factory"]
