"""Types shared between the registry adapter and bus implementations."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum

from datamodels.core.value import Value


class BusError(IntEnum):
    """Status codes returned by bus handlers, numbered as the bus runtime numbers them."""

    SUCCESS = 0
    BUS_ERROR = 1
    INVALID_INPUT = 2
    NOT_INITIALIZED = 3
    OUT_OF_RESOURCES = 4
    DESTINATION_NOT_FOUND = 5
    DESTINATION_NOT_REACHABLE = 6
    DESTINATION_RESPONSE_FAILURE = 7
    INVALID_RESPONSE_FROM_DESTINATION = 8
    INVALID_OPERATION = 9
    INVALID_EVENT = 10
    INVALID_HANDLE = 11
    SESSION_ALREADY_EXIST = 12
    COMPONENT_NAME_DUPLICATE = 13
    ELEMENT_NAME_DUPLICATE = 14


class SubscriptionAction(Enum):
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"


@dataclass(frozen=True)
class GetReply:
    """Outcome of a get handler: a value on SUCCESS, otherwise None."""

    error: BusError
    value: Value | None = None


GetHandler = Callable[[str], GetReply]
SetHandler = Callable[[str, Value], BusError]
SubscribeHandler = Callable[[str, SubscriptionAction], BusError]
ValueListener = Callable[[str, Value | None], None]


@dataclass(frozen=True)
class DataElement:
    """One property registered on the bus with its callback table."""

    name: str
    get_handler: GetHandler
    set_handler: SetHandler
    subscribe_handler: SubscribeHandler
