"""OS query abstraction with one implementation per platform."""

import sys

from datamodels.core.system.abc import MemoryStats, SystemInfo


def create_system_info() -> SystemInfo:
    """Select the SystemInfo implementation for the running platform."""
    if sys.platform == "darwin":
        from datamodels.core.system.darwin import DarwinSystemInfo

        return DarwinSystemInfo()

    from datamodels.core.system.linux import LinuxSystemInfo

    return LinuxSystemInfo()


__all__ = [
    "MemoryStats",
    "SystemInfo",
    "create_system_info",
]
