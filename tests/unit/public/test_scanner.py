from __future__ import annotations

import sys
from abc import ABC

import pytest

from dideclare import (
    DIDeclareScopeLoadError,
    Lifetime,
    RuntimeTypeMetadata,
    TypeScanner,
    service_implementation,
)
from tests.scan_targets.assembly_one.one import One
from tests.scan_targets.assembly_one.three import Three
from tests.scan_targets.assembly_one.two import Two
from tests.scan_targets.layered.stores import BaseCache, FileStore, TimedCache

ASSEMBLY_ONE = "tests.scan_targets.assembly_one"
LAYERED = "tests.scan_targets.layered"


class _ILocal(ABC):
    pass


@service_implementation(lifetime=Lifetime.TRANSIENT)
class _ScannerLocalService(_ILocal):
    class Nested(_ILocal):
        pass


service_implementation()(_ScannerLocalService.Nested)


@pytest.fixture()
def scanner(runtime_metadata: RuntimeTypeMetadata) -> TypeScanner:
    return TypeScanner(runtime_metadata)


def test_scan_returns_marked_types_ordered_by_qualified_name(scanner: TypeScanner) -> None:
    assert scanner.scan([ASSEMBLY_ONE]) == (One, Three, Two)


def test_scan_walks_package_submodules(scanner: TypeScanner) -> None:
    assert scanner.scan([LAYERED]) == (BaseCache, FileStore, TimedCache)


def test_scan_merges_scopes_and_sorts_across_them(scanner: TypeScanner) -> None:
    assert scanner.scan([LAYERED, ASSEMBLY_ONE]) == (One, Three, Two, BaseCache, FileStore, TimedCache)


def test_scan_lists_a_type_reachable_from_overlapping_scopes_once(scanner: TypeScanner) -> None:
    scopes = [f"{ASSEMBLY_ONE}.two", ASSEMBLY_ONE, f"{ASSEMBLY_ONE}.two"]

    assert scanner.scan(scopes) == (One, Three, Two)


def test_scan_accepts_module_objects(scanner: TypeScanner) -> None:
    module = sys.modules[f"{ASSEMBLY_ONE}.three"]

    assert scanner.scan([module]) == (Three,)


def test_scan_skips_imported_names(scanner: TypeScanner) -> None:
    # ``two`` re-exports ``One`` from ``one``.
    assert scanner.scan([f"{ASSEMBLY_ONE}.two"]) == (Two,)


def test_scan_without_recursion_reads_only_the_package_module() -> None:
    scanner = TypeScanner(RuntimeTypeMetadata(recursive=False))

    assert scanner.scan([ASSEMBLY_ONE]) == ()


def test_scan_defaults_to_the_callers_module(scanner: TypeScanner) -> None:
    assert scanner.scan() == (_ScannerLocalService, _ScannerLocalService.Nested)


def test_scan_finds_nested_classes(scanner: TypeScanner) -> None:
    assert _ScannerLocalService.Nested in scanner.scan([__name__])


def test_scan_is_deterministic(scanner: TypeScanner) -> None:
    assert scanner.scan([LAYERED, ASSEMBLY_ONE]) == scanner.scan([LAYERED, ASSEMBLY_ONE])


def test_scan_fails_for_unknown_module(scanner: TypeScanner) -> None:
    with pytest.raises(DIDeclareScopeLoadError, match="Cannot import scope") as exc_info:
        scanner.scan(["tests.scan_targets.does_not_exist"])

    assert isinstance(exc_info.value.__cause__, ImportError)


def test_scan_fails_when_a_submodule_cannot_be_imported(scanner: TypeScanner) -> None:
    with pytest.raises(DIDeclareScopeLoadError, match="needs_missing_module") as exc_info:
        scanner.scan(["tests.scan_targets.unimportable"])

    assert isinstance(exc_info.value.__cause__, ImportError)


def test_scan_chains_the_import_error_of_a_subpackage(scanner: TypeScanner) -> None:
    with pytest.raises(DIDeclareScopeLoadError, match="inner") as exc_info:
        scanner.scan(["tests.scan_targets.unimportable_subpackage"])

    assert isinstance(exc_info.value.__cause__, ImportError)


def test_scan_propagates_errors_other_than_import_errors(scanner: TypeScanner) -> None:
    with pytest.raises(RuntimeError, match="configuration is not available"):
        scanner.scan(["tests.scan_targets.failing_import"])


def test_scan_fails_for_scope_of_wrong_type(scanner: TypeScanner) -> None:
    with pytest.raises(DIDeclareScopeLoadError, match="must be a module"):
        scanner.scan([42])


def test_scan_loads_every_scope_before_reading_markers(runtime_metadata: RuntimeTypeMetadata) -> None:
    read: list[object] = []

    class _TracingMetadata(RuntimeTypeMetadata):
        def get_markers(self, implementation: type) -> tuple:
            read.append(implementation)
            return super().get_markers(implementation)

    scanner = TypeScanner(_TracingMetadata())

    with pytest.raises(DIDeclareScopeLoadError):
        scanner.scan([ASSEMBLY_ONE, "tests.scan_targets.does_not_exist"])

    assert read == []
