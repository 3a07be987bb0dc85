"""Linux implementation of SystemInfo backed by procfs and psutil."""

from pathlib import Path

from datamodels.core.system.abc import MemoryStats, SystemInfo
from datamodels.core.system.interfaces import first_hardware_address
from datamodels.core.system.parsing import parse_meminfo, parse_proc_uptime


class LinuxSystemInfo(SystemInfo):
    """Reads /proc for uptime and memory; interfaces come from psutil.

    Linux has no platform serial registry, so the device identifier is the
    first non-loopback hardware address rendered as 12 uppercase hex digits.
    """

    def __init__(self, proc_root: Path = Path("/proc")) -> None:
        """Create LinuxSystemInfo.

        Args:
            proc_root: Mount point of procfs, overridable for tests
        """
        self._proc_root = proc_root

    def serial_number(self) -> str:
        return self.hardware_address().hex().upper()

    def hardware_address(self) -> bytes:
        return first_hardware_address()

    def uptime_seconds(self) -> int:
        text = (self._proc_root / "uptime").read_text(encoding="utf-8")
        return parse_proc_uptime(text)

    def memory_stats(self) -> MemoryStats:
        text = (self._proc_root / "meminfo").read_text(encoding="utf-8")
        return parse_meminfo(text)
