"""Fake Time implementation for testing.

FakeTime is an in-memory clock that only moves when told to, enabling
deterministic tests of TTL expiry and time rendering.
"""

from datetime import UTC, datetime, timedelta

from datamodels.core.time.abc import Time


class FakeTime(Time):
    """In-memory fake clock.

    advance() moves the wall clock and the monotonic clock together.
    All initial state is provided via constructor.
    """

    def __init__(
        self,
        current: datetime | None = None,
        monotonic_start: float = 1000.0,
    ) -> None:
        """Create FakeTime.

        Args:
            current: Initial wall-clock time; must be timezone-aware.
                Defaults to 2024-02-07T23:52:32.000123 UTC.
            monotonic_start: Initial monotonic reading in seconds
        """
        if current is None:
            current = datetime(2024, 2, 7, 23, 52, 32, 123, tzinfo=UTC)
        self._current = current
        self._monotonic = monotonic_start

    def advance(self, seconds: float) -> None:
        """Move both clocks forward by seconds."""
        self._current += timedelta(seconds=seconds)
        self._monotonic += seconds

    def now(self) -> datetime:
        return self._current

    def monotonic(self) -> float:
        return self._monotonic
