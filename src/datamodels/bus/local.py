"""In-process Bus implementation.

LocalBus keeps registered elements in memory and invokes their handlers
directly, one call at a time. It backs the CLI when no external bus runtime
is attached and serves as the bus double in tests.
"""

import logging
import threading
from collections.abc import Sequence

from datamodels.bus.abc import Bus
from datamodels.bus.types import (
    BusError,
    DataElement,
    GetReply,
    SubscriptionAction,
    ValueListener,
)
from datamodels.core.errors import RegistrationError
from datamodels.core.value import Value

logger = logging.getLogger(__name__)


class LocalBus(Bus):
    """Serialized in-memory bus.

    Handler invocations hold a single lock, matching a runtime that never
    dispatches two handlers concurrently.

    Attributes:
        published: Last value published per element name, for inspection
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._component_name: str | None = None
        self._elements: dict[str, DataElement] = {}
        self._listeners: dict[str, list[ValueListener]] = {}
        self.published: dict[str, Value] = {}

    @property
    def is_open(self) -> bool:
        return self._component_name is not None

    @property
    def component_name(self) -> str | None:
        return self._component_name

    @property
    def element_names(self) -> list[str]:
        return list(self._elements)

    def open(self, component_name: str) -> None:
        with self._lock:
            if self.is_open:
                raise RegistrationError(f"Bus already open as {self._component_name}")
            if not component_name:
                raise RegistrationError("Component name must not be empty")
            self._component_name = component_name
        logger.debug("Opened local bus as %s", component_name)

    def register(self, elements: Sequence[DataElement]) -> None:
        with self._lock:
            if not self.is_open:
                raise RegistrationError("Bus is not open")
            seen: set[str] = set()
            for element in elements:
                if element.name in self._elements or element.name in seen:
                    raise RegistrationError(
                        f"Failed to register data elements: {BusError.ELEMENT_NAME_DUPLICATE.name} "
                        f"({element.name})"
                    )
                seen.add(element.name)
            for element in elements:
                self._elements[element.name] = element
        logger.debug("Registered %d elements", len(elements))

    def unregister(self, names: Sequence[str]) -> None:
        with self._lock:
            for name in names:
                self._elements.pop(name, None)
                self._listeners.pop(name, None)
                self.published.pop(name, None)

    def publish(self, name: str, value: Value) -> BusError:
        with self._lock:
            if not self.is_open:
                return BusError.NOT_INITIALIZED
            if name not in self._elements:
                return BusError.DESTINATION_NOT_FOUND
            self.published[name] = value
            self._notify(name, value)
            return BusError.SUCCESS

    def close(self) -> None:
        with self._lock:
            self._elements.clear()
            self._listeners.clear()
            self.published.clear()
            self._component_name = None

    def get(self, name: str) -> GetReply:
        """Invoke the get handler registered for name."""
        with self._lock:
            element = self._elements.get(name)
            if element is None:
                return GetReply(BusError.DESTINATION_NOT_FOUND)
            return element.get_handler(name)

    def set(self, name: str, value: Value) -> BusError:
        """Invoke the set handler registered for name; notify subscribers on success."""
        with self._lock:
            element = self._elements.get(name)
            if element is None:
                return BusError.DESTINATION_NOT_FOUND
            rc = element.set_handler(name, value)
            if rc is BusError.SUCCESS:
                self._notify(name, value)
            return rc

    def subscribe(self, name: str, listener: ValueListener) -> BusError:
        """Subscribe listener to value changes of name, consulting the element's handler."""
        with self._lock:
            element = self._elements.get(name)
            if element is None:
                return BusError.DESTINATION_NOT_FOUND
            rc = element.subscribe_handler(name, SubscriptionAction.SUBSCRIBE)
            if rc is BusError.SUCCESS:
                self._listeners.setdefault(name, []).append(listener)
            return rc

    def unsubscribe(self, name: str, listener: ValueListener) -> BusError:
        with self._lock:
            element = self._elements.get(name)
            listeners = self._listeners.get(name, [])
            if element is None or listener not in listeners:
                return BusError.INVALID_INPUT
            listeners.remove(listener)
            return element.subscribe_handler(name, SubscriptionAction.UNSUBSCRIBE)

    def _notify(self, name: str, value: Value | None) -> None:
        for listener in list(self._listeners.get(name, [])):
            listener(name, value)
