from __future__ import annotations

from dideclare import Lifetime, service_implementation
from tests.scan_targets.assembly_one.contracts import ITwoA, ITwoB
from tests.scan_targets.assembly_one.one import One

__all__ = ["One", "Two"]


@service_implementation(lifetime=Lifetime.TRANSIENT)
class Two(ITwoA, ITwoB):
    pass
