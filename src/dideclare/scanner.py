from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dideclare._internal.frames import caller_module_name
from dideclare.metadata import TypeMetadataProvider


class TypeScanner:
    """Find marked implementation types across scopes.

    Args:
        metadata: Provider used to load scopes and read markers.

    """

    def __init__(self, metadata: TypeMetadataProvider) -> None:
        self._metadata = metadata

    def scan(self, scopes: Sequence[Any] = (), *, stacklevel: int = 1) -> tuple[Any, ...]:
        """Return every type in ``scopes`` carrying at least one marker.

        Every scope is loaded and listed before any marker is read, so a
        scope that cannot be inspected fails the scan up front. Types are
        ordered by fully-qualified name; a type reachable from several scopes
        is listed once.

        Args:
            scopes: Scopes to search. Empty means the caller's own module.
            stacklevel: Frame distance of the caller whose module is the
                default scope, counted from the caller of ``scan``.

        Returns:
            Marked types ordered by fully-qualified name.

        Raises:
            DIDeclareScopeLoadError: If a scope cannot be inspected.

        """
        if not scopes:
            scopes = (caller_module_name(stacklevel),)

        loaded = [self._metadata.load_scope(scope) for scope in scopes]
        candidates = [
            implementation for scope in loaded for implementation in self._metadata.list_types(scope)
        ]

        marked = [
            implementation
            for implementation in dict.fromkeys(candidates)
            if self._metadata.get_markers(implementation)
        ]
        # ``sorted`` is stable: equal names keep scope order, then declaration order.
        return tuple(sorted(marked, key=self._metadata.get_name))


__all__ = ["TypeScanner"]
