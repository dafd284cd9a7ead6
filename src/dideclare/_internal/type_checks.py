from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked before reading class metadata from it.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def qualified_name(candidate: object) -> str:
    """Return the dotted ``module.qualname`` of a class, or ``str()`` of any other key.

    Args:
        candidate: Class or table key to name.

    """
    if is_runtime_class(candidate):
        return f"{candidate.__module__}.{candidate.__qualname__}"
    return str(candidate)


__all__ = ["is_runtime_class", "qualified_name"]
