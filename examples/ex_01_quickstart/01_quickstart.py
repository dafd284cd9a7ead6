"""Quickstart: mark implementations, then register them in one call.

Decorate concrete classes with ``@service_implementation`` and let
``configure_declaratively`` find them and infer the contracts they provide.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dideclare import Lifetime, ServiceCollection, configure_declaratively, service_implementation


class UserRepository(ABC):
    @abstractmethod
    def get(self, user_id: int) -> str: ...


class Mailer(ABC):
    @abstractmethod
    def send(self, to: str) -> None: ...


@service_implementation(lifetime=Lifetime.SINGLETON)
class SqlUserRepository(UserRepository):
    def get(self, user_id: int) -> str:
        return f"user-{user_id}"


@service_implementation()
class SmtpMailer(Mailer):
    def send(self, to: str) -> None:
        _ = to


def main() -> None:
    # No scope given: the calling module is scanned.
    services = configure_declaratively(ServiceCollection())

    repository = services.get(UserRepository)
    mailer = services.get(Mailer)
    assert repository is not None
    assert mailer is not None

    print(f"registrations={len(services)}")  # => registrations=2
    print(f"repository={repository.implementation.__name__}")  # => repository=SqlUserRepository
    print(f"repository_lifetime={repository.lifetime.name}")  # => repository_lifetime=SINGLETON
    print(f"mailer_lifetime={mailer.lifetime.name}")  # => mailer_lifetime=SCOPED


if __name__ == "__main__":
    main()
