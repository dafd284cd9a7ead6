from __future__ import annotations

import logging
from typing import Any, TypeVar

from dideclare.metadata import TypeMetadataProvider
from dideclare.registrar import Registrar
from dideclare.resolver import ContractResolver
from dideclare.runtime_metadata import RuntimeTypeMetadata
from dideclare.scanner import TypeScanner
from dideclare.services import ServiceContainer

ContainerT = TypeVar("ContainerT", bound=ServiceContainer)

logger = logging.getLogger(__name__)


class DeclarativeConfigurator:
    """Run the scan, resolve and register pass against a container.

    The configurator keeps no state between passes; each call to
    ``configure`` rescans its scopes.

    Args:
        metadata: Type metadata provider. Defaults to ``RuntimeTypeMetadata()``.

    """

    def __init__(self, metadata: TypeMetadataProvider | None = None) -> None:
        self.metadata = metadata or RuntimeTypeMetadata()
        self.scanner = TypeScanner(self.metadata)
        self.resolver = ContractResolver(self.metadata)
        self.registrar = Registrar(self.metadata, self.resolver)

    def configure(self, container: ContainerT, *scopes: Any, stacklevel: int = 1) -> ContainerT:
        """Register every marked type found in ``scopes`` with ``container``.

        Args:
            container: Container receiving the registrations.
            *scopes: Scopes to scan. None means the caller's own module.
            stacklevel: Frame distance of the caller whose module is the
                default scope, counted from the caller of ``configure``.

        Returns:
            The same container, to allow chaining.

        Raises:
            DIDeclareScopeLoadError: If a scope cannot be inspected. Nothing
                is registered.
            DIDeclareNoContractError: If a contract cannot be inferred. Types
                processed before the failing one stay registered.

        """
        implementations = self.scanner.scan(scopes, stacklevel=stacklevel + 1)
        count = self.registrar.register(container, implementations)
        logger.info(
            "Declarative configuration registered %d service(s) from %d type(s)",
            count,
            len(implementations),
        )
        return container


def configure_declaratively(
    container: ContainerT,
    *scopes: Any,
    metadata: TypeMetadataProvider | None = None,
) -> ContainerT:
    """Register the marked types of ``scopes`` with ``container``.

    Scopes are modules, packages (walked recursively) or dotted module names.
    When none is given, the module calling this function is scanned.

    Args:
        container: Container exposing ``add(contract, implementation, lifetime)``.
        *scopes: Scopes to scan.
        metadata: Type metadata provider. Defaults to ``RuntimeTypeMetadata()``.

    Returns:
        The same container, to allow chaining.

    Raises:
        DIDeclareScopeLoadError: If a scope cannot be inspected.
        DIDeclareNoContractError: If a contract cannot be inferred.

    Examples:
        .. code-block:: python

            services = configure_declaratively(ServiceCollection(), "myapp.services")

    """
    return DeclarativeConfigurator(metadata).configure(container, *scopes, stacklevel=2)


__all__ = ["DeclarativeConfigurator", "configure_declaratively"]
