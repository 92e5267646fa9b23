"""Core container, reference markers, configuration and logging."""

from .config import ContainerSettings, LoggingSettings, load_container_settings
from .container import Container
from .errors import ContainerError, NotFoundError, ParameterNotFoundError
from .interfaces import ContainerInterface
from .logging import configure_logging
from .references import ParameterReference, ServiceReference
from .registry import ClassRegistry

__all__ = [
    "ClassRegistry",
    "Container",
    "ContainerError",
    "ContainerInterface",
    "ContainerSettings",
    "LoggingSettings",
    "NotFoundError",
    "ParameterNotFoundError",
    "ParameterReference",
    "ServiceReference",
    "configure_logging",
    "load_container_settings",
]
