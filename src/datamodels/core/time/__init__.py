from datamodels.core.time.abc import Time
from datamodels.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
