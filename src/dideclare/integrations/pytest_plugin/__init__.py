from dideclare.integrations.pytest_plugin.plugin import (
    dideclare_metadata,
    dideclare_services,
    pytest_configure,
)

__all__ = ["dideclare_metadata", "dideclare_services", "pytest_configure"]
