"""macOS implementation of SystemInfo backed by IOKit tools and psutil."""

import time

import psutil

from datamodels.core.subprocess import run_subprocess_with_context
from datamodels.core.system.abc import MemoryStats, SystemInfo
from datamodels.core.system.interfaces import first_hardware_address
from datamodels.core.system.parsing import parse_ioreg_serial


class DarwinSystemInfo(SystemInfo):
    """Production implementation for macOS.

    The serial number comes from the IOPlatformExpertDevice registry entry.
    Memory follows the VM statistics split: free is free plus inactive pages,
    used is active plus wired pages.
    """

    def serial_number(self) -> str:
        result = run_subprocess_with_context(
            ["ioreg", "-rd1", "-c", "IOPlatformExpertDevice"],
            operation_context="read platform serial number",
        )
        return parse_ioreg_serial(result.stdout)

    def hardware_address(self) -> bytes:
        return first_hardware_address()

    def uptime_seconds(self) -> int:
        return int(time.time() - psutil.boot_time())

    def memory_stats(self) -> MemoryStats:
        vm = psutil.virtual_memory()
        return MemoryStats(
            total=vm.total // 1024,
            free=(vm.free + vm.inactive) // 1024,
            used=(vm.active + vm.wired) // 1024,
        )
