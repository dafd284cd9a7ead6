from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from dideclare.exceptions import DIDeclareInvalidLifetimeError
from dideclare.lifetime import Lifetime
from dideclare.markers import ServiceImplementation
from dideclare.metadata import TypeMetadataProvider
from dideclare.resolver import ContractResolver
from dideclare.services import ServiceContainer

logger = logging.getLogger(__name__)


class Registrar:
    """Turn markers into container registrations.

    Args:
        metadata: Provider used to read markers.
        resolver: Resolver used for markers without an explicit contract.

    """

    def __init__(self, metadata: TypeMetadataProvider, resolver: ContractResolver | None = None) -> None:
        self._metadata = metadata
        self._resolver = resolver or ContractResolver(metadata)

    def register(self, container: ServiceContainer, implementations: Iterable[Any]) -> int:
        """Register every marker of every implementation, in order.

        Explicit markers register their contract as is. Other markers register
        one entry per resolved contract. All markers of a type are resolved
        before its first ``add`` call, so a failure leaves none of that type's
        registrations behind; registrations of earlier types stay in the
        container.

        Args:
            container: Container receiving ``add`` calls.
            implementations: Marked types, usually from ``TypeScanner.scan``.

        Returns:
            Number of ``add`` calls issued.

        Raises:
            DIDeclareNoContractError: If a contract cannot be inferred.
            DIDeclareInvalidLifetimeError: If a marker carries an unknown lifetime.

        """
        count = 0
        for implementation in implementations:
            planned = [
                (contract, marker.lifetime)
                for marker in self._metadata.get_markers(implementation)
                for contract in self._contracts_for(implementation, marker)
            ]
            for contract, lifetime in planned:
                self._add(container, contract, implementation, lifetime)
            count += len(planned)
        return count

    def _contracts_for(self, implementation: Any, marker: ServiceImplementation) -> tuple[Any, ...]:
        if not isinstance(marker.lifetime, Lifetime):
            msg = f"Invalid lifetime {marker.lifetime!r} for {self._metadata.get_name(implementation)}."
            raise DIDeclareInvalidLifetimeError(msg)
        if marker.is_explicit:
            return (marker.provides,)
        return self._resolver.resolve(implementation)

    def _add(self, container: ServiceContainer, contract: Any, implementation: Any, lifetime: Lifetime) -> None:
        logger.debug(
            "Registering %s as %s (lifetime=%s)",
            self._metadata.get_name(implementation),
            self._metadata.get_name(contract),
            lifetime.name,
        )
        container.add(contract, implementation, lifetime)


__all__ = ["Registrar"]
