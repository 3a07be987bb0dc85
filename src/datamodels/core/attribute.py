"""Registry entry for one named, typed attribute."""

from dataclasses import dataclass

from datamodels.core.errors import TypeMismatchError
from datamodels.core.providers import Getter, Setter
from datamodels.core.value import Kind, Value

MAX_NAME_BYTES = 255


@dataclass(eq=False)
class Attribute:
    """One named attribute, either directly stored or computed.

    Reads go to the getter when one is present, otherwise to stored_value.
    Writes go to the setter when one is present, otherwise they replace
    stored_value after an exact kind check. Only stored_value changes after
    the registry is built.

    Attributes:
        name: Dotted attribute name; lookups resolve to the first entry with it
        kind: Declared kind; stored_value always has this kind
        stored_value: Current directly-stored value
        getter: Computed provider, or None for stored attributes
        setter: Custom write handler, or None for stored attributes
    """

    name: str
    kind: Kind
    stored_value: Value
    getter: Getter | None = None
    setter: Setter | None = None

    def __post_init__(self) -> None:
        if self.stored_value.kind is not self.kind:
            raise TypeMismatchError(self.name, self.kind.name, self.stored_value.kind.name)

    @property
    def is_computed(self) -> bool:
        return self.getter is not None
