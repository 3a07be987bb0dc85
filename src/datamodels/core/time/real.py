"""Real clock implementation backed by the time and datetime modules."""

import time
from datetime import datetime

from datamodels.core.time.abc import Time


class RealTime(Time):
    """Production implementation using the system clocks."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def monotonic(self) -> float:
        return time.monotonic()
