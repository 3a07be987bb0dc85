"""Bridge between the Registry and a Bus.

Builds one bus element per distinct attribute name, translates registry
exceptions into bus status codes, and publishes initial values at startup.
"""

import logging

from datamodels.bus.abc import Bus
from datamodels.bus.types import BusError, DataElement, GetReply, SubscriptionAction
from datamodels.core.errors import (
    AcquisitionError,
    AttributeNotFoundError,
    ResourceError,
    TypeMismatchError,
)
from datamodels.core.registry import Registry
from datamodels.core.value import Value, as_string

logger = logging.getLogger(__name__)


def log_value_change(name: str, value: Value | None) -> None:
    """Value-change listener that logs the new value."""
    if value is None:
        logger.info("Value change event for %s: No new value provided", name)
        return
    logger.info("Value changed for %s: %s", name, as_string(value))


class BusAdapter:
    """Exposes a Registry's get/set dispatch as bus handlers.

    A name declared more than once (a schema entry shadowing a built-in) is
    registered once; calls resolve to the first entry, as registry lookups do.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def element_names(self) -> list[str]:
        """Distinct attribute names in registry order."""
        names: list[str] = []
        seen: set[str] = set()
        for name in self._registry.names:
            if name in seen:
                logger.warning(
                    "Data model %s is declared more than once; the first declaration wins",
                    name,
                )
                continue
            seen.add(name)
            names.append(name)
        return names

    def elements(self) -> list[DataElement]:
        return [
            DataElement(
                name=name,
                get_handler=self.handle_get,
                set_handler=self.handle_set,
                subscribe_handler=self.handle_subscribe,
            )
            for name in self.element_names()
        ]

    def handle_get(self, name: str) -> GetReply:
        try:
            return GetReply(BusError.SUCCESS, self._registry.get(name))
        except AttributeNotFoundError:
            logger.debug("Get for unknown data model %s", name)
            return GetReply(BusError.INVALID_INPUT)
        except AcquisitionError as e:
            logger.warning("Get for %s failed: %s", name, e)
            return GetReply(BusError.BUS_ERROR)

    def handle_set(self, name: str, value: Value) -> BusError:
        try:
            self._registry.set(name, value)
        except (AttributeNotFoundError, TypeMismatchError) as e:
            logger.debug("Rejected set for %s: %s", name, e)
            return BusError.INVALID_INPUT
        except ResourceError as e:
            logger.error("Set for %s failed: %s", name, e)
            return BusError.OUT_OF_RESOURCES
        return BusError.SUCCESS

    def handle_subscribe(self, name: str, action: SubscriptionAction) -> BusError:
        logger.info("Subscribe handler called for %s, action: %s", name, action.value)
        return BusError.SUCCESS

    def register(self, bus: Bus) -> list[str]:
        """Register one element per distinct name on bus.

        Returns:
            The registered names, for later unregistration

        Raises:
            RegistrationError: If the bus refuses the elements
        """
        elements = self.elements()
        bus.register(elements)
        return [element.name for element in elements]

    def publish_initial_values(self, bus: Bus) -> int:
        """Publish every attribute's resolved value once.

        A name declared more than once is published with its first entry's
        value only. Publish failures are logged and skipped.

        Returns:
            Number of values the bus accepted
        """
        accepted = 0
        seen: set[str] = set()
        for name, value in self._registry.for_each():
            if name in seen:
                continue
            seen.add(name)
            rc = bus.publish(name, value)
            if rc is BusError.SUCCESS:
                accepted += 1
            else:
                logger.warning("Failed to set %s: %s", name, rc.name)
        return accepted
