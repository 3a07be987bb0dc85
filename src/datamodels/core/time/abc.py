"""Clock operations abstraction for testing.

This module provides an ABC for clock reads (wall-clock and monotonic) so
that TTL expiry and time-formatting providers can be tested without real
waiting.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current wall-clock time as a timezone-aware local datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic reading in seconds, for measuring elapsed time."""
        ...
