"""Application context with dependency injection."""

from dataclasses import dataclass

from datamodels.bus.abc import Bus
from datamodels.core.config import RuntimeSettings
from datamodels.core.memory_cache import MemoryCache
from datamodels.core.providers import ProviderContext
from datamodels.core.shutdown import CancellationToken
from datamodels.core.system import SystemInfo, create_system_info
from datamodels.core.time.abc import Time
from datamodels.core.time.real import RealTime


@dataclass(frozen=True)
class DataModelsContext:
    """Immutable context holding all dependencies of the process.

    Created at the CLI entry point and threaded through startup. The
    registry receives `providers`; the idle loop watches `cancellation`.
    """

    system: SystemInfo
    time: Time
    bus: Bus
    settings: RuntimeSettings
    providers: ProviderContext
    cancellation: CancellationToken

    @staticmethod
    def for_test(
        system: SystemInfo | None = None,
        time: Time | None = None,
        bus: Bus | None = None,
        settings: RuntimeSettings | None = None,
        cancellation: CancellationToken | None = None,
    ) -> "DataModelsContext":
        """Create a context backed by fakes, overriding any given dependency.

        Args:
            system: SystemInfo implementation; defaults to FakeSystemInfo()
            time: Time implementation; defaults to FakeTime()
            bus: Bus implementation; defaults to a fresh LocalBus()
            settings: Runtime settings; defaults to RuntimeSettings()
            cancellation: Shutdown token; defaults to a token that is already
                cancelled so the idle loop returns immediately

        Returns:
            DataModelsContext for use in tests
        """
        from datamodels.bus.local import LocalBus
        from datamodels.core.system.fake import FakeSystemInfo
        from datamodels.core.time.fake import FakeTime

        if cancellation is None:
            cancellation = CancellationToken()
            cancellation.cancel()

        return _build_context(
            system=system if system is not None else FakeSystemInfo(),
            time=time if time is not None else FakeTime(),
            bus=bus if bus is not None else LocalBus(),
            settings=settings if settings is not None else RuntimeSettings(),
            cancellation=cancellation,
        )


def _build_context(
    system: SystemInfo,
    time: Time,
    bus: Bus,
    settings: RuntimeSettings,
    cancellation: CancellationToken,
) -> DataModelsContext:
    memory = MemoryCache(system, time, ttl_seconds=settings.memory_ttl_seconds)
    return DataModelsContext(
        system=system,
        time=time,
        bus=bus,
        settings=settings,
        providers=ProviderContext(system=system, time=time, memory=memory),
        cancellation=cancellation,
    )


def create_context(settings: RuntimeSettings) -> DataModelsContext:
    """Create the production context for the running platform.

    The in-process LocalBus stands in for the bus runtime connection.
    """
    from datamodels.bus.local import LocalBus

    return _build_context(
        system=create_system_info(),
        time=RealTime(),
        bus=LocalBus(),
        settings=settings,
        cancellation=CancellationToken(),
    )
