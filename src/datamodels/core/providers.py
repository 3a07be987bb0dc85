"""Computed attribute providers.

Each provider synthesizes a Value from live OS state on every read. Providers
hold no state of their own; everything they need arrives through the
ProviderContext. OS failures surface as AcquisitionError for the single read
that triggered them.
"""

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from datamodels.core.errors import AcquisitionError
from datamodels.core.memory_cache import MemoryCache, MemorySnapshot
from datamodels.core.system.abc import SystemInfo
from datamodels.core.time.abc import Time
from datamodels.core.value import Value

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_UINT32_MASK = 0xFFFFFFFF

LOCAL_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


@dataclass(frozen=True)
class ProviderContext:
    """Collaborators available to computed providers."""

    system: SystemInfo
    time: Time
    memory: MemoryCache


Getter = Callable[[ProviderContext], Value]
Setter = Callable[[ProviderContext, Value], None]


def acquires(source: str) -> Callable[[Getter], Getter]:
    """Decorate a provider so OS failures are reported as AcquisitionError.

    Args:
        source: Human-readable name of what the provider reads, used in errors
    """

    def decorator(provider: Getter) -> Getter:
        @functools.wraps(provider)
        def wrapper(ctx: ProviderContext) -> Value:
            try:
                return provider(ctx)
            except (OSError, RuntimeError, ValueError) as e:
                logger.warning("Failed to acquire %s: %s", source, e)
                raise AcquisitionError(source, str(e)) from e

        return wrapper

    return decorator


@acquires("serial number")
def get_serial_number(ctx: ProviderContext) -> Value:
    return Value.string(ctx.system.serial_number())


@acquires("system time")
def get_system_time(ctx: ProviderContext) -> Value:
    """Wall-clock time since the epoch as "<sec>.<usec>" with six-digit microseconds."""
    elapsed = ctx.time.now() - _EPOCH
    seconds = elapsed.days * 86400 + elapsed.seconds
    return Value.string(f"{seconds}.{elapsed.microseconds:06d}")


@acquires("uptime")
def get_uptime(ctx: ProviderContext) -> Value:
    return Value.string(str(ctx.system.uptime_seconds()))


@acquires("MAC address")
def get_mac_address(ctx: ProviderContext) -> Value:
    """Hardware address as six colon-separated lowercase hex octets."""
    address = ctx.system.hardware_address()
    return Value.string(":".join(f"{octet:02x}" for octet in address[:6]))


@acquires("local time")
def get_local_time(ctx: ProviderContext) -> Value:
    return Value.datetime(ctx.time.now().strftime(LOCAL_TIME_FORMAT))


def _memory_field(ctx: ProviderContext, pick: Callable[[MemorySnapshot], int]) -> Value:
    # Reported as an unsigned 32-bit kilobyte count; larger figures wrap
    return Value.uint32(pick(ctx.memory.refresh_if_stale()) & _UINT32_MASK)


@acquires("total memory")
def get_memory_total(ctx: ProviderContext) -> Value:
    return _memory_field(ctx, lambda snapshot: snapshot.total)


@acquires("used memory")
def get_memory_used(ctx: ProviderContext) -> Value:
    return _memory_field(ctx, lambda snapshot: snapshot.used)


@acquires("free memory")
def get_memory_free(ctx: ProviderContext) -> Value:
    return _memory_field(ctx, lambda snapshot: snapshot.free)
