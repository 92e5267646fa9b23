"""Protocol interfaces for code that consumes a container."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContainerInterface(Protocol):
    """Lookup contract shared by service containers."""

    def get(self, service_id: str) -> Any:
        """Return the instance registered under ``service_id``."""
        raise NotImplementedError

    def has(self, service_id: str) -> bool:
        """Return ``True`` when ``service_id`` has a definition."""
        raise NotImplementedError


__all__ = ["ContainerInterface"]
