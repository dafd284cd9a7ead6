"""Declarative configuration from a hand-authored metadata table.

``DeclaredTypeMetadata`` replaces class inspection with an explicit table of
types, contracts and markers. Keys can be any hashable value.
"""

from __future__ import annotations

from dideclare import (
    DeclaredTypeMetadata,
    Lifetime,
    ServiceCollection,
    ServiceImplementation,
    configure_declaratively,
)


def build_metadata() -> DeclaredTypeMetadata:
    metadata = DeclaredTypeMetadata()
    metadata.add_contract("IReader")
    metadata.add_contract("IReadWriter", extends=["IReader"])
    metadata.add_contract("IClock")

    metadata.add_type(
        "FileStore",
        scope="storage",
        contracts=["IReadWriter"],
        markers=[ServiceImplementation(lifetime=Lifetime.SINGLETON)],
    )
    metadata.add_type(
        "SystemClock",
        scope="storage",
        contracts=["IClock"],
        markers=[ServiceImplementation("IClock", Lifetime.TRANSIENT)],
    )
    return metadata


def main() -> None:
    services = configure_declaratively(ServiceCollection(), "storage", metadata=build_metadata())

    lines = [f"{d.contract}:{d.implementation}:{d.lifetime.name}" for d in services]
    print(" ".join(lines))  # => IReadWriter:FileStore:SINGLETON IClock:SystemClock:TRANSIENT


if __name__ == "__main__":
    main()
