"""OS query interface for computed attributes.

Providers are written against this interface only; one implementation per
platform is selected at startup. Implementations signal failure by raising
OSError, RuntimeError, or ValueError, which providers report as acquisition
errors for the single call that triggered the query.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class MemoryStats:
    """Memory counters in kilobytes.

    Attributes:
        total: Physical memory size
        free: Memory available for reuse (free plus reclaimable categories)
        used: Memory in active use
    """

    total: int
    free: int
    used: int


class SystemInfo(ABC):
    """Abstract interface for live OS state queries.

    Real implementations read kernel interfaces or call system tools. The
    fake implementation returns configured values and counts calls.
    """

    @abstractmethod
    def serial_number(self) -> str:
        """Return a stable hardware identifier for this device.

        Raises:
            OSError: If the identifier source cannot be read
            RuntimeError: If no identifier is discoverable
        """
        ...

    @abstractmethod
    def hardware_address(self) -> bytes:
        """Return the 6-byte hardware address of the first non-loopback interface.

        Raises:
            OSError: If interfaces cannot be enumerated
            RuntimeError: If no non-loopback interface has a hardware address
        """
        ...

    @abstractmethod
    def uptime_seconds(self) -> int:
        """Return whole seconds elapsed since boot.

        Raises:
            OSError: If the uptime source cannot be read
            ValueError: If the uptime source is malformed
        """
        ...

    @abstractmethod
    def memory_stats(self) -> MemoryStats:
        """Query memory counters. Assumed expensive; callers should cache.

        Raises:
            OSError: If the memory source cannot be read
            ValueError: If the memory source is malformed or incomplete
        """
        ...
