"""Shared pytest fixtures for dideclare tests."""

from __future__ import annotations

from typing import Any

import pytest

from dideclare.lifetime import Lifetime
from dideclare.runtime_metadata import RuntimeTypeMetadata
from dideclare.services import ServiceCollection


class RecordingContainer:
    """Container that only records the ``add`` calls it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any, Lifetime]] = []

    def add(self, contract: Any, implementation: Any, lifetime: Lifetime) -> None:
        self.calls.append((contract, implementation, lifetime))


@pytest.fixture()
def services() -> ServiceCollection:
    """Empty service collection."""
    return ServiceCollection()


@pytest.fixture()
def recording_container() -> RecordingContainer:
    """Container recording every registration call."""
    return RecordingContainer()


@pytest.fixture()
def runtime_metadata() -> RuntimeTypeMetadata:
    """Runtime metadata provider with the default contract policy."""
    return RuntimeTypeMetadata()
