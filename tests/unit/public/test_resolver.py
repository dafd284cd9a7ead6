from __future__ import annotations

from abc import ABC
from typing import Protocol

import pytest

from dideclare import ContractResolver, DIDeclareNoContractError, RuntimeTypeMetadata, contract


class IAlpha(ABC):
    pass


class IReader(Protocol):
    def read(self) -> str: ...


class IReadWriter(IReader, Protocol):
    def write(self, value: str) -> None: ...


class IAppendOnlyWriter(IReadWriter, Protocol):
    def append(self, value: str) -> None: ...


class ITwoA(ABC):
    pass


class ITwoB(ABC):
    pass


@pytest.fixture()
def resolver(runtime_metadata: RuntimeTypeMetadata) -> ContractResolver:
    return ContractResolver(runtime_metadata)


def test_single_direct_contract_is_returned(resolver: ContractResolver) -> None:
    class Alpha(IAlpha):
        pass

    assert resolver.resolve(Alpha) == (IAlpha,)


def test_extended_contract_is_elided(resolver: ContractResolver) -> None:
    class Store(IReadWriter):
        def read(self) -> str:
            return ""

        def write(self, value: str) -> None:
            pass

    assert resolver.direct_contracts(Store) == (IReadWriter, IReader)
    assert resolver.resolve(Store) == (IReadWriter,)


def test_extended_contract_listed_explicitly_is_still_elided(resolver: ContractResolver) -> None:
    class Store(IReadWriter, IReader):
        def read(self) -> str:
            return ""

        def write(self, value: str) -> None:
            pass

    assert resolver.resolve(Store) == (IReadWriter,)


def test_multi_level_extension_chain_keeps_only_the_leaf(resolver: ContractResolver) -> None:
    class Journal(IAppendOnlyWriter):
        def read(self) -> str:
            return ""

        def write(self, value: str) -> None:
            pass

        def append(self, value: str) -> None:
            pass

    assert resolver.resolve(Journal) == (IAppendOnlyWriter,)


def test_unrelated_siblings_are_all_kept_in_name_order(resolver: ContractResolver) -> None:
    class Two(ITwoB, ITwoA):
        pass

    assert resolver.resolve(Two) == (ITwoA, ITwoB)


def test_siblings_and_extension_combined(resolver: ContractResolver) -> None:
    class Mixed(IReadWriter, IAlpha):
        def read(self) -> str:
            return ""

        def write(self, value: str) -> None:
            pass

    assert resolver.resolve(Mixed) == (IAlpha, IReadWriter)


def test_contracts_of_base_type_are_not_reattributed(resolver: ContractResolver) -> None:
    class Alpha(IAlpha):
        pass

    class ExtendedAlpha(Alpha, ITwoA):
        pass

    assert resolver.direct_contracts(ExtendedAlpha) == (ITwoA,)
    assert resolver.resolve(ExtendedAlpha) == (ITwoA,)


class LoggingMixin:
    def log(self, message: str) -> None:
        pass


class BaseRepository(IAlpha):
    pass


def test_contracts_of_every_concrete_base_are_subtracted(resolver: ContractResolver) -> None:
    class AuditedRepository(LoggingMixin, BaseRepository, ITwoA):
        pass

    assert resolver.direct_contracts(AuditedRepository) == (ITwoA,)
    assert resolver.resolve(AuditedRepository) == (ITwoA,)


def test_mixin_before_base_type_does_not_hide_inherited_contracts(resolver: ContractResolver) -> None:
    class SubRepository(LoggingMixin, BaseRepository):
        pass

    with pytest.raises(DIDeclareNoContractError, match="SubRepository"):
        resolver.resolve(SubRepository)


def test_contract_reached_through_extension_of_base_contract_is_inherited(resolver: ContractResolver) -> None:
    class Reader(IReader):
        def read(self) -> str:
            return ""

    class ReaderWriter(Reader, IReadWriter):
        def write(self, value: str) -> None:
            pass

    assert resolver.resolve(ReaderWriter) == (IReadWriter,)


def test_subclass_without_new_contracts_fails(resolver: ContractResolver) -> None:
    class Alpha(IAlpha):
        pass

    class SubAlpha(Alpha):
        pass

    with pytest.raises(DIDeclareNoContractError, match="SubAlpha does not directly implement any contract"):
        resolver.resolve(SubAlpha)


def test_type_without_contracts_fails(resolver: ContractResolver) -> None:
    class Plain:
        pass

    assert resolver.direct_contracts(Plain) == ()
    with pytest.raises(DIDeclareNoContractError):
        resolver.resolve(Plain)


def test_contract_flagged_base_class_is_a_contract(resolver: ContractResolver) -> None:
    @contract
    class Clock:
        def now(self) -> float:
            return 0.0

    class FixedClock(Clock):
        pass

    assert resolver.resolve(FixedClock) == (Clock,)


def test_resolution_is_recomputed_on_every_call(resolver: ContractResolver) -> None:
    class Two(ITwoA, ITwoB):
        pass

    first = resolver.resolve(Two)
    second = resolver.resolve(Two)

    assert first == second == (ITwoA, ITwoB)
