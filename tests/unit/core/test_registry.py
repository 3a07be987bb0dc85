"""Tests for Registry get/set dispatch."""

import threading

import pytest

from datamodels.core.attribute import Attribute
from datamodels.core.builtins import BUILTIN_TEMPLATES
from datamodels.core.context import DataModelsContext
from datamodels.core.errors import (
    AcquisitionError,
    AttributeNotFoundError,
    ResourceError,
    TypeMismatchError,
)
from datamodels.core.providers import ProviderContext
from datamodels.core.registry import Registry
from datamodels.core.system.fake import FakeSystemInfo
from datamodels.core.value import Kind, Value


def _registry(*attributes: Attribute, providers: ProviderContext | None = None) -> Registry:
    if providers is None:
        providers = DataModelsContext.for_test().providers
    return Registry(list(attributes), providers)


def _stored(name: str, value: Value) -> Attribute:
    return Attribute(name=name, kind=value.kind, stored_value=value)


@pytest.mark.parametrize(
    "value",
    [
        Value.string("text"),
        Value.int32(-7),
        Value.uint32(7),
        Value.boolean(True),
        Value.int64(-(2**40)),
        Value.uint64(2**63),
        Value.datetime("2024-02-07T23:52:32"),
        Value.base64("aGVsbG8="),
        Value.float32(1.5),
        Value.float64(2.25),
        Value.byte(255),
    ],
)
def test_set_then_get_returns_written_value(value: Value) -> None:
    registry = _registry(_stored("Device.X", Value.default_for(value.kind)))

    registry.set("Device.X", value)

    assert registry.get("Device.X") == value


def test_get_unknown_name_raises() -> None:
    registry = _registry(_stored("Device.X", Value.int32(1)))

    with pytest.raises(AttributeNotFoundError):
        registry.get("Device.Missing")


def test_set_unknown_name_leaves_registry_unchanged() -> None:
    registry = _registry(_stored("Device.X", Value.int32(1)))

    with pytest.raises(AttributeNotFoundError):
        registry.set("Device.Missing", Value.int32(2))

    assert registry.names == ["Device.X"]
    assert registry.get("Device.X") == Value.int32(1)


def test_set_with_other_kind_keeps_stored_value() -> None:
    """No coercion: an Int64 is not accepted by an Int32 attribute."""
    registry = _registry(_stored("Device.X", Value.int32(1)))

    with pytest.raises(TypeMismatchError) as exc_info:
        registry.set("Device.X", Value.int64(2))

    assert exc_info.value.expected == "INT32"
    assert exc_info.value.actual == "INT64"
    assert registry.get("Device.X") == Value.int32(1)


def test_string_kinds_are_distinct_for_set() -> None:
    registry = _registry(_stored("Device.X", Value.datetime("unknown")))

    with pytest.raises(TypeMismatchError):
        registry.set("Device.X", Value.string("2024-02-07T23:52:32"))


def test_getter_takes_precedence_over_stored_value() -> None:
    attribute = Attribute(
        name="Device.Computed",
        kind=Kind.STRING,
        stored_value=Value.string("stored"),
        getter=lambda ctx: Value.string("computed"),
    )
    registry = _registry(attribute)

    assert registry.get("Device.Computed") == Value.string("computed")


def test_set_on_computed_attribute_without_setter_updates_stored_value() -> None:
    attribute = Attribute(
        name="Device.Computed",
        kind=Kind.STRING,
        stored_value=Value.string("stored"),
        getter=lambda ctx: Value.string("computed"),
    )
    registry = _registry(attribute)

    registry.set("Device.Computed", Value.string("written"))

    assert attribute.stored_value == Value.string("written")
    assert registry.get("Device.Computed") == Value.string("computed")


def test_custom_setter_receives_value_without_kind_check() -> None:
    received: list[Value] = []
    attribute = Attribute(
        name="Device.Custom",
        kind=Kind.STRING,
        stored_value=Value.string(""),
        setter=lambda ctx, value: received.append(value),
    )
    registry = _registry(attribute)

    registry.set("Device.Custom", Value.uint32(3))

    assert received == [Value.uint32(3)]
    assert attribute.stored_value == Value.string("")


def test_setter_memory_error_becomes_resource_error() -> None:
    def exhausted(ctx: ProviderContext, value: Value) -> None:
        raise MemoryError

    attribute = Attribute(
        name="Device.Custom",
        kind=Kind.STRING,
        stored_value=Value.string("kept"),
        setter=exhausted,
    )
    registry = _registry(attribute)

    with pytest.raises(ResourceError):
        registry.set("Device.Custom", Value.string("new"))
    assert attribute.stored_value == Value.string("kept")


def test_first_attribute_with_name_wins() -> None:
    first = _stored("Device.Dup", Value.string("first"))
    second = _stored("Device.Dup", Value.string("second"))
    registry = _registry(first, second)

    registry.set("Device.Dup", Value.string("written"))

    assert registry.get("Device.Dup") == Value.string("written")
    assert second.stored_value == Value.string("second")
    assert registry.find("Device.Dup") is first


def test_find_returns_none_for_unknown_name() -> None:
    registry = _registry(_stored("Device.X", Value.int32(1)))

    assert registry.find("Device.Missing") is None


def test_acquisition_error_propagates_from_get() -> None:
    ctx = DataModelsContext.for_test(system=FakeSystemInfo(serial=None))

    registry = Registry([BUILTIN_TEMPLATES[0].instantiate()], ctx.providers)

    with pytest.raises(AcquisitionError) as exc_info:
        registry.get("Device.DeviceInfo.SerialNumber")
    assert exc_info.value.source == "serial number"


def test_for_each_yields_in_order_and_falls_back_on_failure() -> None:
    ctx = DataModelsContext.for_test(system=FakeSystemInfo(uptime=None))

    uptime = BUILTIN_TEMPLATES[2].instantiate()
    registry = Registry(
        [_stored("Device.A", Value.int32(1)), uptime, _stored("Device.B", Value.boolean(True))],
        ctx.providers,
    )

    assert list(registry.for_each()) == [
        ("Device.A", Value.int32(1)),
        ("Device.DeviceInfo.UpTime", Value.string("unknown")),
        ("Device.B", Value.boolean(True)),
    ]


def test_for_each_is_single_pass() -> None:
    registry = _registry(_stored("Device.A", Value.int32(1)))

    sequence = registry.for_each()

    assert list(sequence) == [("Device.A", Value.int32(1))]
    assert list(sequence) == []
    assert list(registry.for_each()) == [("Device.A", Value.int32(1))]


def test_concurrent_sets_leave_one_complete_value() -> None:
    registry = _registry(_stored("Device.Counter", Value.uint32(0)))
    written = [Value.uint32(n) for n in range(1, 9)]

    threads = [
        threading.Thread(target=registry.set, args=("Device.Counter", value))
        for value in written
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert registry.get("Device.Counter") in written
