from __future__ import annotations

import abc
import inspect
from dataclasses import dataclass
from typing import Any, TypeGuard, TypeVar

from dideclare._internal.type_checks import is_runtime_class

C = TypeVar("C", bound=type[Any])

CONTRACT_ATTR = "__dideclare_contract__"


def contract(cls: C) -> C:
    """Flag a plain class as a contract.

    Protocols, abstract classes and direct ``abc.ABC`` subclasses are
    contracts already. Use this for concrete base classes that should still
    act as a registration target for their subclasses.

    Args:
        cls: Class to flag.

    Examples:
        .. code-block:: python

            @contract
            class Clock:
                def now(self) -> float:
                    return time.time()

    """
    setattr(cls, CONTRACT_ATTR, True)
    return cls


@dataclass(frozen=True, slots=True)
class ContractPolicy:
    """Decide which runtime classes count as contracts."""

    ignored_modules: tuple[str, ...] = ("builtins", "abc", "typing", "typing_extensions")
    """Classes defined in these modules (``object``, ``ABC``, ``Protocol``, ``Generic``) are never contracts."""

    def is_contract(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a candidate is a contract an implementation can be registered under.

        Args:
            candidate: Value being checked, usually an entry of a class ``__mro__``.

        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ in self.ignored_modules:
            return False
        namespace = candidate.__dict__
        if namespace.get(CONTRACT_ATTR, False):
            return True
        # typing sets ``_is_protocol`` on every subclass, False for implementations.
        if namespace.get("_is_protocol", False):
            return True
        if abc.ABC in candidate.__bases__:
            return True
        return inspect.isabstract(candidate)


__all__ = ["CONTRACT_ATTR", "ContractPolicy", "contract"]
