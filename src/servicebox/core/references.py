"""Argument placeholders resolved by the container at build time."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServiceReference:
    """Resolve to the service registered under ``name``."""

    name: str


@dataclass(frozen=True, slots=True)
class ParameterReference:
    """Resolve to the parameter found at the dotted path ``name``."""

    name: str


__all__ = ["ParameterReference", "ServiceReference"]
