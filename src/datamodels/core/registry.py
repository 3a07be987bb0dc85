"""Name-indexed get/set dispatch over the ordered attribute list."""

import logging
from collections.abc import Iterator, Sequence

from datamodels.core.attribute import Attribute
from datamodels.core.errors import (
    AcquisitionError,
    AttributeNotFoundError,
    ResourceError,
    TypeMismatchError,
)
from datamodels.core.providers import ProviderContext
from datamodels.core.rwlock import ReadWriteLock
from datamodels.core.value import Value

logger = logging.getLogger(__name__)


class Registry:
    """Ordered collection of every attribute for the process lifetime.

    Lookups scan in order and resolve to the first attribute with a matching
    name, so a schema-declared attribute shadows a built-in of the same name.
    The attribute list is fixed at construction; only stored values change.

    Reads take the shared side of a reader/writer lock and writes the
    exclusive side, so handlers may be invoked from any number of threads.
    """

    def __init__(self, attributes: Sequence[Attribute], context: ProviderContext) -> None:
        """Create a Registry.

        Args:
            attributes: Entries in lookup order; ownership passes to the registry
            context: Collaborators handed to computed getters and setters
        """
        self._attributes: tuple[Attribute, ...] = tuple(attributes)
        self._context = context
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        return len(self._attributes)

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        """Entries in lookup order."""
        return self._attributes

    @property
    def names(self) -> list[str]:
        """Attribute names in registry order, including shadowed duplicates."""
        return [attribute.name for attribute in self._attributes]

    def _find(self, name: str) -> Attribute:
        for attribute in self._attributes:
            if attribute.name == name:
                return attribute
        raise AttributeNotFoundError(name)

    def find(self, name: str) -> Attribute | None:
        """Return the attribute a lookup for name resolves to, or None."""
        try:
            return self._find(name)
        except AttributeNotFoundError:
            return None

    def _resolve(self, attribute: Attribute) -> Value:
        if attribute.getter is not None:
            return attribute.getter(self._context)
        return attribute.stored_value

    def get(self, name: str) -> Value:
        """Read the current value of an attribute.

        Args:
            name: Attribute name

        Returns:
            The computed value for computed attributes, else the stored value

        Raises:
            AttributeNotFoundError: If no attribute has this name
            AcquisitionError: If the attribute's provider failed
        """
        with self._lock.read():
            return self._resolve(self._find(name))

    def set(self, name: str, value: Value) -> None:
        """Write an attribute.

        Attributes with a custom setter receive the value as-is. All others
        require the value's kind to equal the attribute's kind exactly; no
        coercion is attempted. The stored value is swapped in one assignment,
        so a failed write leaves the previous value intact.

        Args:
            name: Attribute name
            value: New value

        Raises:
            AttributeNotFoundError: If no attribute has this name
            TypeMismatchError: If value.kind differs from the attribute's kind
            ResourceError: If memory ran out while applying the write
        """
        with self._lock.write():
            attribute = self._find(name)
            try:
                if attribute.setter is not None:
                    attribute.setter(self._context, value)
                    return
                if value.kind is not attribute.kind:
                    raise TypeMismatchError(name, attribute.kind.name, value.kind.name)
                attribute.stored_value = value
            except MemoryError as e:
                raise ResourceError(f"Out of memory while setting {name}") from e
        logger.debug("Set %s (%s)", name, value.kind.name)

    def for_each(self) -> Iterator[tuple[str, Value]]:
        """Yield every attribute's name and resolved value in registry order.

        Single pass; call again for a fresh sequence. When a computed
        attribute's provider fails, its stored value is yielded instead and
        the failure is logged, so one unavailable OS source does not end the
        sequence.
        """
        for attribute in self._attributes:
            with self._lock.read():
                try:
                    value = self._resolve(attribute)
                except AcquisitionError as e:
                    logger.warning(
                        "Using stored value for %s after acquisition failure: %s",
                        attribute.name,
                        e,
                    )
                    value = attribute.stored_value
            yield attribute.name, value
