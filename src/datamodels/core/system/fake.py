"""Fake SystemInfo implementation for testing.

FakeSystemInfo returns configured values without touching the OS and
counts queries so tests can verify caching behavior.
"""

from datamodels.core.system.abc import MemoryStats, SystemInfo


class FakeSystemInfo(SystemInfo):
    """In-memory fake of OS queries.

    A value configured as None makes the corresponding query fail with
    RuntimeError, the same way a real implementation reports an
    undiscoverable source.

    Attributes:
        memory: Stats returned by memory_stats(); may be reassigned between
            calls to simulate changing memory usage
        fail_memory: When True, memory_stats() raises OSError
    """

    def __init__(
        self,
        serial: str | None = "C02XK0AAJGH5",
        hardware_address: bytes | None = bytes.fromhex("a4831e0b5c7f"),
        uptime: int | None = 35212,
        memory: MemoryStats | None = None,
    ) -> None:
        self._serial = serial
        self._hardware_address = hardware_address
        self._uptime = uptime
        if memory is None:
            memory = MemoryStats(total=16384000, free=8192000, used=8192000)
        self.memory = memory
        self.fail_memory = False
        self._memory_calls = 0

    @property
    def memory_calls(self) -> int:
        """Number of memory_stats() queries performed, for test assertions."""
        return self._memory_calls

    def serial_number(self) -> str:
        if self._serial is None:
            raise RuntimeError("No serial number configured")
        return self._serial

    def hardware_address(self) -> bytes:
        if self._hardware_address is None:
            raise RuntimeError("No non-loopback interface with a hardware address found")
        return self._hardware_address

    def uptime_seconds(self) -> int:
        if self._uptime is None:
            raise OSError("uptime source unavailable")
        return self._uptime

    def memory_stats(self) -> MemoryStats:
        self._memory_calls += 1
        if self.fail_memory:
            raise OSError("memory source unavailable")
        return self.memory
