from __future__ import annotations

from enum import Enum, auto


class Lifetime(Enum):
    """Define how long a container keeps an implementation instance.

    The value is fixed when the marker is declared and forwarded unchanged to
    the container, which owns the actual instance management.
    """

    TRANSIENT = auto()
    """A new instance is created every time the service is requested."""

    SINGLETON = auto()
    """A single instance is created and shared for the lifetime of the container."""

    SCOPED = auto()
    """Instance is shared within a scope, different instances across scopes."""


DEFAULT_LIFETIME = Lifetime.SCOPED
"""Lifetime used by markers that do not name one."""
