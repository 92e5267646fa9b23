"""Exceptions raised by the service container."""

from __future__ import annotations


class ContainerError(RuntimeError):
    """Raised when a service definition cannot be turned into an instance."""

    def __init__(self, message: str, *, service_id: str | None = None) -> None:
        super().__init__(message)
        self.service_id = service_id


class NotFoundError(ContainerError):
    """Raised when a requested service has no definition."""

    def __init__(self, service_id: str) -> None:
        super().__init__(f"Service not found: {service_id}", service_id=service_id)


class ParameterNotFoundError(ContainerError):
    """Raised when a dotted parameter path cannot be fully resolved."""

    def __init__(self, parameter_id: str) -> None:
        super().__init__(f"Parameter not found: {parameter_id}")
        self.parameter_id = parameter_id


__all__ = ["ContainerError", "NotFoundError", "ParameterNotFoundError"]
