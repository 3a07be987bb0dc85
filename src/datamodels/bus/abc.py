"""Bus runtime interface.

The bus runtime is an external collaborator: it owns transport, element
registration, and subscriptions, and calls the registered handlers by
element name. This interface is the part of that runtime the process uses.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from datamodels.bus.types import BusError, DataElement, ValueListener
from datamodels.core.value import Value


class Bus(ABC):
    """Abstract publish/subscribe-and-RPC bus connection."""

    @abstractmethod
    def open(self, component_name: str) -> None:
        """Connect to the bus as component_name.

        Raises:
            RegistrationError: If the connection cannot be opened
        """
        ...

    @abstractmethod
    def register(self, elements: Sequence[DataElement]) -> None:
        """Register elements so the runtime routes calls to their handlers.

        Raises:
            RegistrationError: If the bus is not open or refuses an element
        """
        ...

    @abstractmethod
    def unregister(self, names: Sequence[str]) -> None:
        """Remove previously registered elements; unknown names are ignored."""
        ...

    @abstractmethod
    def publish(self, name: str, value: Value) -> BusError:
        """Announce an element's value to the bus (set with commit).

        Returns:
            SUCCESS, or the error code the bus reported
        """
        ...

    @abstractmethod
    def subscribe(self, name: str, listener: ValueListener) -> BusError:
        """Deliver value changes of element name to listener.

        Returns:
            SUCCESS, or the error code the element's subscribe handler returned
        """
        ...

    @abstractmethod
    def unsubscribe(self, name: str, listener: ValueListener) -> BusError:
        """Stop delivering value changes of element name to listener."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Disconnect from the bus. Safe to call when not open."""
        ...
