from __future__ import annotations

from typing import Any

from dideclare.exceptions import DIDeclareNoContractError
from dideclare.metadata import TypeMetadataProvider


class ContractResolver:
    """Infer the contracts an implementation type is registered under.

    Used for markers that do not name a contract. The result depends only on
    static type metadata and is recomputed on every call.

    Args:
        metadata: Provider used to read contracts and base types.

    """

    def __init__(self, metadata: TypeMetadataProvider) -> None:
        self._metadata = metadata

    def direct_contracts(self, implementation: Any) -> tuple[Any, ...]:
        """Return the contracts an implementation introduces itself.

        These are all contracts of the type minus all contracts of its base
        types, so contracts satisfied by an ancestor are not attributed to the
        descendant again. Every non-contract base counts, mixins included.

        Args:
            implementation: Implementation type.

        """
        all_contracts = self._metadata.get_all_contracts(implementation)
        inherited: set[Any] = set()
        for base_type in self._metadata.get_base_types(implementation):
            inherited.update(self._metadata.get_all_contracts(base_type))
        return tuple(contract for contract in all_contracts if contract not in inherited)

    def resolve(self, implementation: Any) -> tuple[Any, ...]:
        """Return the most specific contracts an implementation introduces.

        A direct contract extended by another direct contract is dropped, so
        ``class Impl(IReadWrite)`` with ``IReadWrite(IRead)`` resolves to
        ``IReadWrite`` alone. Unrelated siblings are all kept.

        Args:
            implementation: Implementation type.

        Returns:
            Contracts ordered by fully-qualified name.

        Raises:
            DIDeclareNoContractError: If the type introduces no contract.

        """
        direct = self.direct_contracts(implementation)
        if not direct:
            msg = (
                f"Type {self._metadata.get_name(implementation)} does not directly implement any contract. "
                "Pass the contract explicitly to @service_implementation."
            )
            raise DIDeclareNoContractError(msg)

        if len(direct) > 1:
            extended: set[Any] = set()
            for contract in direct:
                extended.update(self._metadata.get_extended_contracts(contract))
            direct = tuple(contract for contract in direct if contract not in extended)

        return tuple(sorted(direct, key=self._metadata.get_name))


__all__ = ["ContractResolver"]
