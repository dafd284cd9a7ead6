from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from dideclare._internal.type_checks import is_runtime_class
from dideclare.exceptions import DIDeclareInvalidDeclarationError, DIDeclareInvalidLifetimeError
from dideclare.lifetime import DEFAULT_LIFETIME, Lifetime

C = TypeVar("C", bound=type[Any])

MARKERS_ATTR = "__dideclare_markers__"


@dataclass(frozen=True, slots=True)
class ServiceImplementation:
    """Declare how an implementation type is bound into a container.

    ``provides`` names the contract explicitly. When it is ``None`` the
    contract is inferred from the contracts the type directly implements.

    Examples:
        .. code-block:: python

            ServiceImplementation(lifetime=Lifetime.SINGLETON)
            ServiceImplementation(UserRepository, Lifetime.TRANSIENT)

    """

    provides: Any = None
    lifetime: Lifetime = DEFAULT_LIFETIME

    def __post_init__(self) -> None:
        if isinstance(self.provides, Lifetime):
            msg = (
                f"{self.provides!r} was passed as the contract. "
                "Pass lifetimes with the `lifetime=` keyword."
            )
            raise DIDeclareInvalidDeclarationError(msg)
        if not isinstance(self.lifetime, Lifetime):
            msg = f"Invalid lifetime {self.lifetime!r}; expected a member of Lifetime."
            raise DIDeclareInvalidLifetimeError(msg)

    @property
    def is_explicit(self) -> bool:
        """Return true when the marker names its contract."""
        return self.provides is not None


def service_implementation(
    provides: Any = None,
    *,
    lifetime: Lifetime = DEFAULT_LIFETIME,
) -> Callable[[C], C]:
    """Mark a class as the implementation of a contract.

    Decorators may be stacked; markers are kept in source order, top to
    bottom. Markers belong to the decorated class only and are not inherited
    by its subclasses.

    Args:
        provides: Contract to register the class under, or ``None`` to infer
            it from the contracts the class directly implements.
        lifetime: Lifetime forwarded to the container.

    Returns:
        A class decorator returning the class unchanged apart from its markers.

    Raises:
        DIDeclareInvalidLifetimeError: If ``lifetime`` is not a ``Lifetime``.
        DIDeclareInvalidDeclarationError: If a ``Lifetime`` is passed as
            ``provides`` or the decorated object is not a class.

    Examples:
        .. code-block:: python

            @service_implementation(lifetime=Lifetime.SINGLETON)
            class SqlUserRepository(UserRepository): ...

    """
    marker = ServiceImplementation(provides=provides, lifetime=lifetime)

    def decorator(implementation: C) -> C:
        if not is_runtime_class(implementation):
            msg = f"@service_implementation can only decorate classes, got {implementation!r}."
            raise DIDeclareInvalidDeclarationError(msg)
        # Decorators run bottom-up, so prepend to keep source order.
        setattr(implementation, MARKERS_ATTR, (marker, *get_markers(implementation)))
        return implementation

    return decorator


def get_markers(implementation: type[Any]) -> tuple[ServiceImplementation, ...]:
    """Return the markers declared on ``implementation`` itself, in source order.

    Args:
        implementation: Class to read. Markers of its base classes are ignored.

    """
    return implementation.__dict__.get(MARKERS_ATTR, ())


__all__ = ["MARKERS_ATTR", "ServiceImplementation", "get_markers", "service_implementation"]
