"""Schema file format for externally declared attributes.

The schema file is a JSON array with one object per attribute:

    [{"name": "Device.Example.Attr", "type": 1, "value": 42}, ...]

`type` is the numeric Kind code (0-10). `value` is optional; a missing or
mistyped literal yields the kind's default.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from datamodels.core.attribute import MAX_NAME_BYTES
from datamodels.core.errors import SchemaFileError
from datamodels.core.value import Kind

DEFAULT_SCHEMA_PATH = Path("datamodels.json")


class SchemaRecord(BaseModel):
    """One attribute declaration from the schema file.

    Attributes:
        name: Non-empty attribute name of at most 255 UTF-8 bytes
        kind: Declared kind, read from the "type" code
        value: Raw JSON literal, None when absent; converted by the loader
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    kind: Kind = Field(alias="type")
    value: Any = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        """Validate name is a non-empty string that fits the name limit."""
        if not isinstance(v, str) or not v:
            msg = "name must be a non-empty string"
            raise ValueError(msg)
        if len(v.encode("utf-8")) > MAX_NAME_BYTES:
            msg = f"name exceeds {MAX_NAME_BYTES} bytes"
            raise ValueError(msg)
        return v

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Any) -> Kind:
        """Validate type is an integer code in [0, 10]."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            msg = "type must be an integer"
            raise ValueError(msg)
        if isinstance(v, float):
            if not v.is_integer():
                msg = "type must be an integer"
                raise ValueError(msg)
            v = int(v)
        if not Kind.STRING <= v <= Kind.BYTE:
            msg = f"type must be between {int(Kind.STRING)} and {int(Kind.BYTE)}"
            raise ValueError(msg)
        return Kind(v)


def read_schema_file(path: Path) -> list[Any]:
    """Read and decode the schema file.

    Args:
        path: Path to the JSON schema file

    Returns:
        Decoded, non-empty list of raw records

    Raises:
        SchemaFileError: If the file is missing, unreadable, not valid JSON,
            not an array, or an empty array
    """
    if not path.exists():
        raise SchemaFileError(f"Schema file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaFileError(f"Failed to read schema file {path}: {e}") from e

    try:
        data = json.loads(text)
    except ValueError as e:
        raise SchemaFileError(f"Failed to parse JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise SchemaFileError(f"JSON root is not an array in {path}")
    if not data:
        raise SchemaFileError(f"No data models found in {path}")
    return data
