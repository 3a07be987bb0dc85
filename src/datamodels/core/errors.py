"""Error taxonomy for the attribute registry.

Startup errors (ConfigError, RegistrationError, ResourceError) abort the
process. Per-call errors (AcquisitionError, AttributeNotFoundError,
TypeMismatchError) are reported to the single caller and never fatal.
"""


class DataModelError(Exception):
    """Base class for all registry errors."""


class InvalidValueError(DataModelError):
    """Raised when a raw payload cannot be represented as the requested kind."""


class ValueOutOfRangeError(InvalidValueError):
    """Raised when a number does not fit the target kind's representable range."""


class ConfigError(DataModelError):
    """Raised when the attribute schema cannot be loaded."""


class SchemaFileError(ConfigError):
    """Raised when the schema file is missing, unreadable, or not a non-empty JSON array."""


class InvalidDeclarationError(ConfigError):
    """Raised when a schema record has a bad name or type code."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid declaration for item {index}: {reason}")


class OutOfRangeError(ConfigError):
    """Raised when a schema literal is out of range for its declared kind."""

    def __init__(self, index: int, name: str, reason: str) -> None:
        self.index = index
        self.name = name
        super().__init__(f"Value out of range for {name} at item {index}: {reason}")


class ConfigResourceError(ConfigError):
    """Raised when memory runs out while building the registry."""


class RegistrationError(DataModelError):
    """Raised when the bus cannot be opened or refuses element registration."""


class AcquisitionError(DataModelError):
    """Raised when a computed provider's OS query fails."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to acquire {source}: {reason}")


class AttributeNotFoundError(DataModelError):
    """Raised when no attribute with the given name is registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Attribute {name} not found")


class TypeMismatchError(DataModelError):
    """Raised when a written value's kind differs from the attribute's kind."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Type mismatch for {name}: expected {expected}, got {actual}")


class ResourceError(DataModelError):
    """Raised when a registry write cannot allocate the memory it needs."""
