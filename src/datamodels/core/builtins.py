"""Built-in computed attributes appended after the schema-declared ones."""

from dataclasses import dataclass

from datamodels.core.attribute import Attribute
from datamodels.core.providers import (
    Getter,
    Setter,
    get_local_time,
    get_mac_address,
    get_memory_free,
    get_memory_total,
    get_memory_used,
    get_serial_number,
    get_system_time,
    get_uptime,
)
from datamodels.core.value import Kind, Value

UNKNOWN = "unknown"


@dataclass(frozen=True)
class BuiltinTemplate:
    """Static declaration of a built-in attribute.

    Templates are never handed out; the loader instantiates a fresh
    Attribute from each one so registries never share state.
    """

    name: str
    kind: Kind
    default: Value
    getter: Getter | None = None
    setter: Setter | None = None

    def instantiate(self) -> Attribute:
        return Attribute(
            name=self.name,
            kind=self.kind,
            stored_value=self.default,
            getter=self.getter,
            setter=self.setter,
        )


BUILTIN_TEMPLATES: tuple[BuiltinTemplate, ...] = (
    BuiltinTemplate(
        name="Device.DeviceInfo.SerialNumber",
        kind=Kind.STRING,
        default=Value.string(UNKNOWN),
        getter=get_serial_number,
    ),
    BuiltinTemplate(
        name="Device.DeviceInfo.X_RDKCENTRAL-COM_SystemTime",
        kind=Kind.STRING,
        default=Value.string(UNKNOWN),
        getter=get_system_time,
    ),
    BuiltinTemplate(
        name="Device.DeviceInfo.UpTime",
        kind=Kind.STRING,
        default=Value.string(UNKNOWN),
        getter=get_uptime,
    ),
    BuiltinTemplate(
        name="Device.DeviceInfo.X_COMCAST-COM_CM_MAC",
        kind=Kind.STRING,
        default=Value.string(UNKNOWN),
        getter=get_mac_address,
    ),
    BuiltinTemplate(
        name="Device.DeviceInfo.MemoryStatus.Total",
        kind=Kind.UINT32,
        default=Value.uint32(0),
        getter=get_memory_total,
    ),
    BuiltinTemplate(
        name="Device.DeviceInfo.MemoryStatus.Used",
        kind=Kind.UINT32,
        default=Value.uint32(0),
        getter=get_memory_used,
    ),
    BuiltinTemplate(
        name="Device.DeviceInfo.MemoryStatus.Free",
        kind=Kind.UINT32,
        default=Value.uint32(0),
        getter=get_memory_free,
    ),
    BuiltinTemplate(
        name="Device.Time.CurrentLocalTime",
        kind=Kind.DATETIME,
        default=Value.datetime(UNKNOWN),
        getter=get_local_time,
    ),
)

BUILTIN_COUNT = len(BUILTIN_TEMPLATES)
