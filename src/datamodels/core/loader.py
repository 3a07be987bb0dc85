"""Build the Registry from schema declarations plus the built-in attributes.

Loading is all-or-nothing: the first invalid record aborts the whole load and
no registry is produced.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from datamodels.core.attribute import Attribute
from datamodels.core.builtins import BUILTIN_TEMPLATES, BuiltinTemplate
from datamodels.core.errors import (
    ConfigResourceError,
    InvalidDeclarationError,
    OutOfRangeError,
    ValueOutOfRangeError,
)
from datamodels.core.providers import ProviderContext
from datamodels.core.registry import Registry
from datamodels.core.schema import SchemaRecord, read_schema_file
from datamodels.core.value import make

logger = logging.getLogger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


def _declared_attribute(index: int, raw: Any) -> Attribute:
    try:
        record = SchemaRecord.model_validate(raw)
    except ValidationError as e:
        raise InvalidDeclarationError(index, _describe_validation_error(e)) from e

    try:
        value = make(record.kind, record.value)
    except ValueOutOfRangeError as e:
        raise OutOfRangeError(index, record.name, str(e)) from e

    return Attribute(name=record.name, kind=record.kind, stored_value=value)


def load(
    records: Sequence[Any],
    context: ProviderContext,
    builtins: Sequence[BuiltinTemplate] = BUILTIN_TEMPLATES,
) -> Registry:
    """Build a Registry from decoded schema records.

    Declared attributes come first, in record order, followed by one fresh
    Attribute per built-in template.

    Args:
        records: Decoded JSON records
        context: Collaborators for computed attributes
        builtins: Built-in templates to append

    Returns:
        Registry with len(records) + len(builtins) attributes

    Raises:
        InvalidDeclarationError: If a record is not an object or has a bad name/type
        OutOfRangeError: If a numeric literal does not fit its declared kind
        ConfigResourceError: If memory runs out while building attributes
    """
    try:
        attributes = [_declared_attribute(index, raw) for index, raw in enumerate(records)]
        attributes.extend(template.instantiate() for template in builtins)
    except MemoryError as e:
        raise ConfigResourceError("Out of memory while building data models") from e

    logger.info(
        "Loaded %d declared and %d built-in data models",
        len(records),
        len(builtins),
    )
    return Registry(attributes, context)


def load_file(path: Path, context: ProviderContext) -> Registry:
    """Read the schema file at path and build a Registry from it.

    Raises:
        SchemaFileError: If the file cannot be read or is not a non-empty array
        InvalidDeclarationError: If a record is invalid
        OutOfRangeError: If a literal is out of range
        ConfigResourceError: If memory runs out
    """
    logger.debug("Loading data models from %s", path)
    return load(read_schema_file(path), context)
