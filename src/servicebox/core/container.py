"""Lazy service container wiring definitions, references and parameters."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import AbstractContextManager, contextmanager, nullcontext
from typing import Any

from .config import ContainerSettings
from .errors import ContainerError, NotFoundError, ParameterNotFoundError
from .logging import configure_logging
from .references import ParameterReference, ServiceReference
from .registry import ClassRegistry

LOGGER = logging.getLogger(__name__)


class Container:
    """Build services on first request and cache them for the container lifetime.

    ``services`` maps a service id to a definition mapping with a mandatory
    ``class`` key, an optional ``arguments`` list and an optional ``calls``
    list of ``{"method": ..., "arguments": [...]}`` records. Arguments may be
    literals, :class:`ServiceReference` or :class:`ParameterReference`
    instances. ``parameters`` is a nested mapping addressed by dotted ids.
    """

    def __init__(
        self,
        services: Mapping[str, Any] | None = None,
        parameters: Mapping[str, Any] | None = None,
        *,
        classes: Mapping[str, Callable[..., Any]] | None = None,
        settings: ContainerSettings | None = None,
    ) -> None:
        self._settings = settings or ContainerSettings()
        if self._settings.logging.enabled:
            configure_logging(self._settings.logging)
        self._services: dict[str, Any] = dict(services or {})
        self._parameters: Mapping[str, Any] = parameters or {}
        self._registry = ClassRegistry(
            classes, allow_import_paths=self._settings.allow_import_paths
        )
        self._instances: dict[str, Any] = {}
        self._building: set[str] = set()
        self._lock = threading.RLock() if self._settings.thread_safe else None

    def get(self, service_id: str) -> Any:
        """Return the instance for ``service_id``, building it on first use."""
        if not self.has(service_id):
            raise NotFoundError(service_id)
        with self._guard():
            if service_id not in self._instances:
                self._instances[service_id] = self._create_service(service_id)
                LOGGER.debug("Cached service %s", service_id)
            return self._instances[service_id]

    def has(self, service_id: str) -> bool:
        """Return ``True`` if a definition exists, regardless of build state."""
        return service_id in self._services

    def __contains__(self, service_id: object) -> bool:
        return isinstance(service_id, str) and self.has(service_id)

    def get_parameter(self, parameter_id: str) -> Any:
        """Look up a dotted path such as ``mailer.smtp.port`` in the parameters."""
        context: Any = self._parameters
        for token in parameter_id.split("."):
            if not isinstance(context, Mapping) or token not in context:
                raise ParameterNotFoundError(parameter_id)
            context = context[token]
        return context

    def resolve_arguments(self, owner_id: str, specs: Sequence[Any]) -> list[Any]:
        """Replace references in ``specs`` with their values, keeping order."""
        if isinstance(specs, (str, bytes)) or not isinstance(specs, Sequence):
            raise ContainerError(
                f"{owner_id} service arguments must be a list", service_id=owner_id
            )
        arguments: list[Any] = []
        for spec in specs:
            if isinstance(spec, ServiceReference):
                arguments.append(self.get(spec.name))
            elif isinstance(spec, ParameterReference):
                arguments.append(self.get_parameter(spec.name))
            else:
                arguments.append(spec)
        return arguments

    def _guard(self) -> AbstractContextManager[Any]:
        return self._lock if self._lock is not None else nullcontext()

    @contextmanager
    def _building_scope(self, service_id: str) -> Iterator[None]:
        self._building.add(service_id)
        try:
            yield
        finally:
            self._building.discard(service_id)

    def _create_service(self, service_id: str) -> Any:
        entry = self._services[service_id]

        if not isinstance(entry, Mapping) or entry.get("class") is None:
            raise ContainerError(
                f"{service_id} service entry must be an array containing a 'class' key",
                service_id=service_id,
            )
        factory = self._registry.resolve(entry["class"])
        if factory is None:
            raise ContainerError(
                f"{service_id} service class does not exist: {entry['class']}",
                service_id=service_id,
            )
        if service_id in self._building:
            LOGGER.warning("Circular reference detected while building %s", service_id)
            raise ContainerError(
                f"{service_id} service contains a circular reference",
                service_id=service_id,
            )

        with self._building_scope(service_id):
            LOGGER.debug("Building service %s", service_id)
            arguments = self.resolve_arguments(service_id, _argument_specs(entry))
            service = factory(*arguments)
            calls = entry.get("calls")
            if calls is not None:
                self._initialize_service(service, service_id, calls)
        return service

    def _initialize_service(
        self, service: Any, service_id: str, calls: Sequence[Any]
    ) -> None:
        for call in calls:
            if not isinstance(call, Mapping) or call.get("method") is None:
                raise ContainerError(
                    f"{service_id} service calls must be arrays containing a 'method' key",
                    service_id=service_id,
                )
            method_name = call["method"]
            method = (
                getattr(service, method_name, None)
                if isinstance(method_name, str)
                else None
            )
            if not callable(method):
                raise ContainerError(
                    f"{service_id} service asks for call to uncallable method: "
                    f"{method_name}",
                    service_id=service_id,
                )
            arguments = self.resolve_arguments(service_id, _argument_specs(call))
            LOGGER.debug("Calling %s.%s", service_id, method_name)
            method(*arguments)


def _argument_specs(record: Mapping[str, Any]) -> Sequence[Any]:
    """Return the argument specs of a definition, treating ``None`` as absent."""
    specs = record.get("arguments")
    return [] if specs is None else specs


__all__ = ["Container"]
