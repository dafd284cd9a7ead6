from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from dideclare.markers import ServiceImplementation


class TypeMetadataProvider(Protocol):
    """Protocol for the type metadata consumed by the scanner and resolver.

    Implementations stand in for reflection: ``RuntimeTypeMetadata`` reads
    live Python classes, ``DeclaredTypeMetadata`` reads a hand-authored table.
    All sequences are returned in a deterministic order.
    """

    def load_scope(self, scope: Any) -> Any:
        """Validate a scope and return the object ``list_types`` accepts.

        Args:
            scope: Scope value supplied by the caller.

        Raises:
            DIDeclareScopeLoadError: If the scope cannot be inspected.

        """

    def list_types(self, scope: Any) -> Sequence[Any]:
        """Return the types defined in a loaded scope, in declaration order.

        Args:
            scope: Value returned by ``load_scope``.

        Raises:
            DIDeclareScopeLoadError: If part of the scope cannot be inspected.

        """

    def get_markers(self, implementation: Any) -> Sequence[ServiceImplementation]:
        """Return the markers declared on an implementation type, in declaration order.

        Args:
            implementation: Implementation type.

        """

    def get_direct_contracts(self, implementation: Any) -> Sequence[Any]:
        """Return the contracts named in an implementation type's own declaration.

        Args:
            implementation: Implementation type.

        """

    def get_all_contracts(self, implementation: Any) -> Sequence[Any]:
        """Return every contract an implementation type fulfills, transitively.

        Args:
            implementation: Implementation type.

        """

    def get_base_type(self, implementation: Any) -> Any | None:
        """Return the implementation's base type, or ``None`` when it has none.

        Args:
            implementation: Implementation type.

        """

    def get_base_types(self, implementation: Any) -> Sequence[Any]:
        """Return every non-contract base of an implementation type.

        With multiple inheritance this includes mixins as well as the
        primary base type. Contracts satisfied by any of them are not
        attributed to the implementation again.

        Args:
            implementation: Implementation type.

        """

    def get_extended_contracts(self, contract: Any) -> Sequence[Any]:
        """Return every contract the given contract extends, transitively.

        Args:
            contract: Contract type.

        """

    def get_name(self, key: Any) -> str:
        """Return the fully-qualified name used to order types and contracts.

        Args:
            key: Implementation type or contract.

        """


__all__ = ["TypeMetadataProvider"]
