from __future__ import annotations

import importlib
import pkgutil
import sys
from types import ModuleType
from typing import Any

from dideclare._internal.type_checks import is_runtime_class, qualified_name
from dideclare.contracts import ContractPolicy
from dideclare.exceptions import DIDeclareScopeLoadError
from dideclare.markers import ServiceImplementation, get_markers


class RuntimeTypeMetadata:
    """Read type metadata from live Python classes.

    Scopes are modules, packages or dotted module names. Packages are walked
    recursively unless ``recursive`` is false. Only classes defined in a
    scanned module are listed (imported names are skipped), including classes
    nested in them.

    Args:
        policy: Decides which classes count as contracts.
        recursive: Also scan every submodule of a package scope.

    """

    def __init__(self, policy: ContractPolicy | None = None, *, recursive: bool = True) -> None:
        self._policy = policy or ContractPolicy()
        self._recursive = recursive

    @property
    def policy(self) -> ContractPolicy:
        """Return the contract policy used by this provider."""
        return self._policy

    def load_scope(self, scope: Any) -> ModuleType:
        """Return the module for a scope, importing it when given by name.

        Args:
            scope: Module object or dotted module name.

        Raises:
            DIDeclareScopeLoadError: If the module cannot be imported or the
                scope is neither a module nor a string.

        """
        if isinstance(scope, ModuleType):
            return scope
        if isinstance(scope, str):
            return _import_module(scope)
        msg = f"Scope {scope!r} must be a module or a dotted module name."
        raise DIDeclareScopeLoadError(msg)

    def list_types(self, scope: ModuleType) -> tuple[type[Any], ...]:
        """Return the classes defined in a module and, for packages, its submodules.

        Args:
            scope: Module returned by ``load_scope``.

        Raises:
            DIDeclareScopeLoadError: If a package submodule cannot be imported.

        """
        found: list[type[Any]] = []
        for module in self._iter_modules(scope):
            for value in list(vars(module).values()):
                if is_runtime_class(value) and value.__module__ == module.__name__:
                    _collect_class(value, found)
        return tuple(dict.fromkeys(found))

    def get_markers(self, implementation: type[Any]) -> tuple[ServiceImplementation, ...]:
        """Return the markers declared on the class itself.

        Args:
            implementation: Implementation class.

        """
        return get_markers(implementation)

    def get_direct_contracts(self, implementation: type[Any]) -> tuple[type[Any], ...]:
        """Return the contracts listed among the class's own bases.

        Args:
            implementation: Implementation class.

        """
        return tuple(base for base in implementation.__bases__ if self._policy.is_contract(base))

    def get_all_contracts(self, implementation: type[Any]) -> tuple[type[Any], ...]:
        """Return every contract in the class's MRO, excluding the class itself.

        Args:
            implementation: Implementation class.

        """
        return tuple(cls for cls in implementation.__mro__[1:] if self._policy.is_contract(cls))

    def get_base_type(self, implementation: type[Any]) -> type[Any] | None:
        """Return the first base that is neither a contract nor a builtin/typing class.

        Args:
            implementation: Implementation class.

        """
        base_types = self.get_base_types(implementation)
        return base_types[0] if base_types else None

    def get_base_types(self, implementation: type[Any]) -> tuple[type[Any], ...]:
        """Return every base that is neither a contract nor a builtin/typing class.

        Mixins listed before the main base class are included.

        Args:
            implementation: Implementation class.

        """
        return tuple(
            base
            for base in implementation.__bases__
            if base.__module__ not in self._policy.ignored_modules and not self._policy.is_contract(base)
        )

    def get_extended_contracts(self, contract: type[Any]) -> tuple[type[Any], ...]:
        """Return every contract the given contract inherits from.

        Args:
            contract: Contract class.

        """
        return self.get_all_contracts(contract)

    def get_name(self, key: Any) -> str:
        """Return ``module.qualname`` for classes.

        Args:
            key: Implementation class or contract.

        """
        return qualified_name(key)

    def _iter_modules(self, root: ModuleType) -> list[ModuleType]:
        modules = [root]
        package_path = getattr(root, "__path__", None)
        if not self._recursive or package_path is None:
            return modules

        walk = pkgutil.walk_packages(package_path, prefix=f"{root.__name__}.", onerror=_raise_walk_error)
        for module_info in walk:
            modules.append(_import_module(module_info.name))
        return modules


def _import_module(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as e:
        msg = f"Cannot import scope {name!r}: {e}"
        raise DIDeclareScopeLoadError(msg) from e


def _raise_walk_error(name: str) -> None:
    # ``walk_packages`` calls this from inside its ``except`` block and
    # swallows the failure unless it raises.
    error = sys.exc_info()[1]
    if not isinstance(error, ImportError):
        raise
    msg = f"Cannot import scope {name!r}: {error}"
    raise DIDeclareScopeLoadError(msg) from error


def _collect_class(cls: type[Any], found: list[type[Any]]) -> None:
    found.append(cls)
    for name, value in list(vars(cls).items()):
        if is_runtime_class(value) and value.__qualname__ == f"{cls.__qualname__}.{name}":
            _collect_class(value, found)


__all__ = ["RuntimeTypeMetadata"]
