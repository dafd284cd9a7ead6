from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from dideclare._internal.type_checks import qualified_name
from dideclare.exceptions import DIDeclareInvalidDeclarationError, DIDeclareScopeLoadError
from dideclare.markers import ServiceImplementation


@dataclass(frozen=True, slots=True)
class _DeclaredType:
    markers: tuple[ServiceImplementation, ...]
    contracts: tuple[Any, ...]
    base: Any | None


class DeclaredTypeMetadata:
    """Type metadata authored as an explicit table instead of read from classes.

    Types and contracts are arbitrary hashable keys, usually classes or
    strings. Contracts must be declared before they are extended or
    implemented, and base types before their subclasses, which keeps the
    extension graph acyclic by construction.

    Examples:
        .. code-block:: python

            metadata = DeclaredTypeMetadata()
            metadata.add_contract("IAlpha")
            metadata.add_type(
                "Alpha",
                scope="app",
                contracts=["IAlpha"],
                markers=[ServiceImplementation(lifetime=Lifetime.SINGLETON)],
            )
            configure_declaratively(services, "app", metadata=metadata)

    """

    def __init__(self) -> None:
        self._contracts: dict[Any, tuple[Any, ...]] = {}
        self._types: dict[Any, _DeclaredType] = {}
        self._scopes: dict[Any, list[Any]] = {}

    def add_contract(self, contract: Any, *, extends: Iterable[Any] = ()) -> None:
        """Declare a contract and the contracts it extends.

        Args:
            contract: Contract key.
            extends: Previously declared contracts this contract extends.

        Raises:
            DIDeclareInvalidDeclarationError: If the contract is already
                declared or extends an undeclared contract.

        """
        if contract in self._contracts:
            msg = f"Contract {contract!r} is already declared."
            raise DIDeclareInvalidDeclarationError(msg)
        ancestors: list[Any] = []
        for parent in extends:
            self._require_contract(parent, owner=contract)
            ancestors.extend((parent, *self._contracts[parent]))
        self._contracts[contract] = tuple(dict.fromkeys(ancestors))

    def add_type(
        self,
        implementation: Any,
        *,
        scope: Any,
        markers: Iterable[ServiceImplementation] = (),
        contracts: Iterable[Any] = (),
        base: Any | None = None,
    ) -> None:
        """Declare an implementation type.

        Args:
            implementation: Implementation key.
            scope: Scope the type belongs to. Module objects are keyed by name.
            markers: Registration markers, in declaration order.
            contracts: Contracts the type implements in its own declaration.
            base: Previously declared base type, if any.

        Raises:
            DIDeclareInvalidDeclarationError: If the type is already declared,
                references undeclared contracts or base type, or a marker is
                not a ``ServiceImplementation``.

        """
        if implementation in self._types:
            msg = f"Type {implementation!r} is already declared."
            raise DIDeclareInvalidDeclarationError(msg)
        if base is not None and base not in self._types:
            msg = f"Base type {base!r} of {implementation!r} must be declared first."
            raise DIDeclareInvalidDeclarationError(msg)
        declared_contracts = tuple(contracts)
        for declared in declared_contracts:
            self._require_contract(declared, owner=implementation)
        declared_markers = tuple(markers)
        for marker in declared_markers:
            if not isinstance(marker, ServiceImplementation):
                msg = f"Marker {marker!r} on {implementation!r} must be a ServiceImplementation."
                raise DIDeclareInvalidDeclarationError(msg)

        self._types[implementation] = _DeclaredType(
            markers=declared_markers,
            contracts=declared_contracts,
            base=base,
        )
        self._scopes.setdefault(_scope_key(scope), []).append(implementation)

    def load_scope(self, scope: Any) -> Any:
        """Return the table key of a declared scope.

        Args:
            scope: Scope key or module object.

        Raises:
            DIDeclareScopeLoadError: If no type was declared in the scope.

        """
        key = _scope_key(scope)
        if key not in self._scopes:
            msg = f"Scope {key!r} has no declared types."
            raise DIDeclareScopeLoadError(msg)
        return key

    def list_types(self, scope: Any) -> tuple[Any, ...]:
        """Return the types declared in a scope, in declaration order.

        Args:
            scope: Key returned by ``load_scope``.

        """
        return tuple(self._scopes[scope])

    def get_markers(self, implementation: Any) -> tuple[ServiceImplementation, ...]:
        """Return the declared markers of a type.

        Args:
            implementation: Implementation key.

        """
        return self._types[implementation].markers

    def get_direct_contracts(self, implementation: Any) -> tuple[Any, ...]:
        """Return the contracts named in the type's own declaration.

        Args:
            implementation: Implementation key.

        """
        return self._types[implementation].contracts

    def get_all_contracts(self, implementation: Any) -> tuple[Any, ...]:
        """Return the declared contracts, their ancestors and the base type's contracts.

        Args:
            implementation: Implementation key.

        """
        declared = self._types[implementation]
        contracts: list[Any] = []
        for direct in declared.contracts:
            contracts.extend((direct, *self._contracts[direct]))
        if declared.base is not None:
            contracts.extend(self.get_all_contracts(declared.base))
        return tuple(dict.fromkeys(contracts))

    def get_base_type(self, implementation: Any) -> Any | None:
        """Return the declared base type, if any.

        Args:
            implementation: Implementation key.

        """
        return self._types[implementation].base

    def get_base_types(self, implementation: Any) -> tuple[Any, ...]:
        """Return the declared base type as a one-element tuple, or an empty tuple.

        Args:
            implementation: Implementation key.

        """
        base = self._types[implementation].base
        return () if base is None else (base,)

    def get_extended_contracts(self, contract: Any) -> Sequence[Any]:
        """Return every contract the given contract extends.

        Args:
            contract: Contract key. Undeclared keys extend nothing.

        """
        return self._contracts.get(contract, ())

    def get_name(self, key: Any) -> str:
        """Return ``module.qualname`` for classes and ``str(key)`` otherwise.

        Args:
            key: Implementation or contract key.

        """
        return qualified_name(key)

    def _require_contract(self, contract: Any, *, owner: Any) -> None:
        if contract not in self._contracts:
            msg = f"Contract {contract!r} referenced by {owner!r} is not declared."
            raise DIDeclareInvalidDeclarationError(msg)


def _scope_key(scope: Any) -> Any:
    if isinstance(scope, ModuleType):
        return scope.__name__
    return scope


__all__ = ["DeclaredTypeMetadata"]
