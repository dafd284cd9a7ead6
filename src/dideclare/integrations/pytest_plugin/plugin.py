from __future__ import annotations

import pytest

from dideclare.configuration import configure_declaratively
from dideclare.metadata import TypeMetadataProvider
from dideclare.runtime_metadata import RuntimeTypeMetadata
from dideclare.services import ServiceCollection

_SCOPES_MARKER = "dideclare_scopes"


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``dideclare_scopes`` marker.

    Args:
        config: Pytest configuration object.

    """
    config.addinivalue_line(
        "markers",
        f"{_SCOPES_MARKER}(*scopes): configure the dideclare_services fixture from the given scopes "
        "(the test module when no scope is given).",
    )


@pytest.fixture()
def dideclare_metadata() -> TypeMetadataProvider:
    """Provide the type metadata used to configure ``dideclare_services``.

    Override this fixture to configure tests from a ``DeclaredTypeMetadata``
    table or a ``RuntimeTypeMetadata`` with a custom contract policy.

    Returns:
        A new ``RuntimeTypeMetadata`` instance.

    """
    return RuntimeTypeMetadata()


@pytest.fixture()
def dideclare_services(
    request: pytest.FixtureRequest,
    dideclare_metadata: TypeMetadataProvider,
) -> ServiceCollection:
    """Create a per-test service collection.

    Tests marked with ``@pytest.mark.dideclare_scopes(...)`` get the
    collection already configured from those scopes; unmarked tests get an
    empty collection.

    Args:
        request: Pytest request of the running test.
        dideclare_metadata: Metadata provider used for the configuration.

    Returns:
        A new ``ServiceCollection`` instance.

    """
    services = ServiceCollection()
    marker = request.node.get_closest_marker(_SCOPES_MARKER)
    if marker is None:
        return services

    scopes = marker.args or (request.module,)
    return configure_declaratively(services, *scopes, metadata=dideclare_metadata)
