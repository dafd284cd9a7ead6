"""Explicit contracts and contract inference rules.

An implementation that introduces one contract is registered under it.
Unrelated contracts are all registered, a contract extended by another one is
dropped, and ``provides=`` bypasses inference entirely.
"""

from __future__ import annotations

from typing import Protocol

from dideclare import (
    ContractResolver,
    DIDeclareNoContractError,
    Lifetime,
    RuntimeTypeMetadata,
    ServiceCollection,
    configure_declaratively,
    service_implementation,
)


class Reader(Protocol):
    def read(self) -> str: ...


class ReadWriter(Reader, Protocol):
    def write(self, value: str) -> None: ...


class Closeable(Protocol):
    def close(self) -> None: ...


@service_implementation(lifetime=Lifetime.TRANSIENT)
class FileStore(ReadWriter, Closeable):
    def read(self) -> str:
        return ""

    def write(self, value: str) -> None:
        _ = value

    def close(self) -> None:
        return None


@service_implementation(Reader)
class CachedReader(Reader):
    def read(self) -> str:
        return "cached"


class Settings:
    pass


service_implementation(Settings, lifetime=Lifetime.SINGLETON)(Settings)


def main() -> None:
    services = configure_declaratively(ServiceCollection())

    contracts = [descriptor.contract.__name__ for descriptor in services]
    print(f"contracts={','.join(contracts)}")  # => contracts=Reader,Closeable,ReadWriter,Settings

    reader = services.get(Reader)
    assert reader is not None
    print(f"reader={reader.implementation.__name__}")  # => reader=CachedReader

    class Orphan:
        pass

    try:
        ContractResolver(RuntimeTypeMetadata()).resolve(Orphan)
    except DIDeclareNoContractError:
        print("orphan_error=no_contract")  # => orphan_error=no_contract


if __name__ == "__main__":
    main()
