"""TTL-memoized memory snapshot shared by the memory attributes."""

import logging
import threading
from dataclasses import dataclass

from datamodels.core.system.abc import SystemInfo
from datamodels.core.time.abc import Time

logger = logging.getLogger(__name__)

MEMORY_CACHE_TTL_SECONDS = 5.0


@dataclass(frozen=True)
class MemorySnapshot:
    """Memory counters in kilobytes plus the monotonic time they were read.

    Attributes:
        total: Physical memory size
        free: Free plus reclaimable memory
        used: Memory in active use
        last_updated: Monotonic reading taken when the counters were queried
    """

    total: int
    free: int
    used: int
    last_updated: float


class MemoryCache:
    """Single process-wide memory snapshot refreshed lazily.

    The snapshot starts empty. Each read refreshes it only when it is older
    than the TTL. A failed refresh leaves the previous snapshot in place and
    raises to the caller; the stale snapshot is never returned in that case.
    Refreshes are serialized so concurrent readers never observe a partial
    update or trigger duplicate queries.
    """

    def __init__(
        self,
        system: SystemInfo,
        time: Time,
        ttl_seconds: float = MEMORY_CACHE_TTL_SECONDS,
    ) -> None:
        self._system = system
        self._time = time
        self._ttl_seconds = ttl_seconds
        self._snapshot: MemorySnapshot | None = None
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> MemorySnapshot | None:
        """Last successfully queried snapshot, without refreshing."""
        return self._snapshot

    def refresh_if_stale(self) -> MemorySnapshot:
        """Return the cached snapshot, querying the OS first if it has expired.

        Returns:
            Snapshot no older than the TTL

        Raises:
            OSError: If the OS memory query fails
            ValueError: If the OS memory source is malformed
            RuntimeError: If the OS memory query cannot be performed
        """
        with self._lock:
            now = self._time.monotonic()
            current = self._snapshot
            if current is not None and now - current.last_updated <= self._ttl_seconds:
                return current

            stats = self._system.memory_stats()
            refreshed = MemorySnapshot(
                total=stats.total,
                free=stats.free,
                used=stats.used,
                last_updated=now,
            )
            self._snapshot = refreshed
            logger.debug(
                "Memory snapshot refreshed: total=%d free=%d used=%d",
                refreshed.total,
                refreshed.free,
                refreshed.used,
            )
            return refreshed
