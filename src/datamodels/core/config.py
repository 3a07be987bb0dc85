"""Runtime settings.

Settings are read once at the CLI entry point from the environment and stored
in the DataModelsContext. All fields are read-only after construction.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from datamodels.core.memory_cache import MEMORY_CACHE_TTL_SECONDS

DEFAULT_COMPONENT_NAME = "rbus-datamodels"
IDLE_POLL_SECONDS = 1.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RuntimeSettings:
    """Immutable runtime settings.

    Attributes:
        component_name: Name the process registers under on the bus
        debug: Whether debug logging is enabled
        memory_ttl_seconds: Lifetime of the cached memory snapshot
        idle_poll_seconds: Interval at which the idle loop checks for shutdown
    """

    component_name: str = DEFAULT_COMPONENT_NAME
    debug: bool = False
    memory_ttl_seconds: float = MEMORY_CACHE_TTL_SECONDS
    idle_poll_seconds: float = IDLE_POLL_SECONDS

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "RuntimeSettings":
        """Build settings from DATAMODELS_* environment variables.

        Recognized variables:
            DATAMODELS_COMPONENT_NAME: Bus component name
            DATAMODELS_DEBUG: Enable debug logging when set to 1/true/yes/on
        """
        if environ is None:
            environ = os.environ
        component_name = environ.get("DATAMODELS_COMPONENT_NAME", "").strip()
        return RuntimeSettings(
            component_name=component_name or DEFAULT_COMPONENT_NAME,
            debug=environ.get("DATAMODELS_DEBUG", "").strip().lower() in _TRUTHY,
        )
