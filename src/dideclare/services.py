from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from dideclare.lifetime import Lifetime

if TYPE_CHECKING:
    from typing_extensions import Self


class ServiceContainer(Protocol):
    """Protocol for the container populated by declarative configuration.

    The container owns instance creation and lifetime enforcement; the
    registrar only calls ``add`` once per resolved registration.
    """

    def add(self, contract: Any, implementation: Any, lifetime: Lifetime) -> None:
        """Register ``implementation`` as the provider of ``contract``.

        Args:
            contract: Dependency key exposed by the registration.
            implementation: Implementation type.
            lifetime: Lifetime of the provided instances.

        """


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """A single (contract, implementation, lifetime) registration."""

    contract: Any
    implementation: Any
    lifetime: Lifetime


class ServiceCollection:
    """Ordered list of service descriptors.

    Registrations are kept in the order they were added and are never
    deduplicated; lookups by contract return the last registration.
    """

    def __init__(self) -> None:
        self._descriptors: list[ServiceDescriptor] = []

    def add(self, contract: Any, implementation: Any, lifetime: Lifetime) -> None:
        """Append a registration.

        Args:
            contract: Dependency key exposed by the registration.
            implementation: Implementation type.
            lifetime: Lifetime of the provided instances.

        """
        self._descriptors.append(ServiceDescriptor(contract, implementation, lifetime))

    def add_singleton(self, contract: Any, implementation: Any | None = None) -> Self:
        """Append a singleton registration and return the collection.

        Args:
            contract: Dependency key exposed by the registration.
            implementation: Implementation type. Defaults to ``contract``.

        """
        self.add(contract, contract if implementation is None else implementation, Lifetime.SINGLETON)
        return self

    def add_scoped(self, contract: Any, implementation: Any | None = None) -> Self:
        """Append a scoped registration and return the collection.

        Args:
            contract: Dependency key exposed by the registration.
            implementation: Implementation type. Defaults to ``contract``.

        """
        self.add(contract, contract if implementation is None else implementation, Lifetime.SCOPED)
        return self

    def add_transient(self, contract: Any, implementation: Any | None = None) -> Self:
        """Append a transient registration and return the collection.

        Args:
            contract: Dependency key exposed by the registration.
            implementation: Implementation type. Defaults to ``contract``.

        """
        self.add(contract, contract if implementation is None else implementation, Lifetime.TRANSIENT)
        return self

    def get(self, contract: Any) -> ServiceDescriptor | None:
        """Return the effective registration for a contract: the last one added.

        Args:
            contract: Dependency key to look up.

        """
        for descriptor in reversed(self._descriptors):
            if descriptor.contract == contract:
                return descriptor
        return None

    def get_all(self, contract: Any) -> tuple[ServiceDescriptor, ...]:
        """Return every registration for a contract, in registration order.

        Args:
            contract: Dependency key to look up.

        """
        return tuple(descriptor for descriptor in self._descriptors if descriptor.contract == contract)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(tuple(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __getitem__(self, index: int) -> ServiceDescriptor:
        return self._descriptors[index]


__all__ = ["ServiceCollection", "ServiceContainer", "ServiceDescriptor"]
