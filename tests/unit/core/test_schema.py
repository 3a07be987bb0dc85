"""Tests for schema record validation and schema file reading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from datamodels.core.errors import SchemaFileError
from datamodels.core.schema import SchemaRecord, read_schema_file
from datamodels.core.value import Kind


def test_record_reads_kind_from_type_code() -> None:
    record = SchemaRecord.model_validate({"name": "X.Y", "type": 2, "value": 7})

    assert record.name == "X.Y"
    assert record.kind is Kind.UINT32
    assert record.value == 7


def test_record_without_value_has_none_value() -> None:
    record = SchemaRecord.model_validate({"name": "X.Y", "type": 3})

    assert record.value is None


def test_record_ignores_unknown_keys() -> None:
    record = SchemaRecord.model_validate({"name": "X.Y", "type": 0, "comment": "lab only"})

    assert record.kind is Kind.STRING


def test_record_accepts_integral_float_type_code() -> None:
    record = SchemaRecord.model_validate({"name": "X.Y", "type": 9.0})

    assert record.kind is Kind.FLOAT64


@pytest.mark.parametrize("type_code", [-1, 11, 2.5, True, "2", None])
def test_record_rejects_bad_type_codes(type_code: object) -> None:
    with pytest.raises(ValidationError):
        SchemaRecord.model_validate({"name": "X.Y", "type": type_code})


@pytest.mark.parametrize("name", ["", 5, None])
def test_record_rejects_bad_names(name: object) -> None:
    with pytest.raises(ValidationError):
        SchemaRecord.model_validate({"name": name, "type": 0})


def test_record_requires_name_and_type() -> None:
    with pytest.raises(ValidationError):
        SchemaRecord.model_validate({"type": 0})
    with pytest.raises(ValidationError):
        SchemaRecord.model_validate({"name": "X.Y"})


def test_record_name_limit_counts_utf8_bytes() -> None:
    assert SchemaRecord.model_validate({"name": "a" * 255, "type": 0}).name == "a" * 255

    with pytest.raises(ValidationError):
        SchemaRecord.model_validate({"name": "a" * 256, "type": 0})
    # 128 two-byte characters is 256 bytes
    with pytest.raises(ValidationError):
        SchemaRecord.model_validate({"name": "é" * 128, "type": 0})


def test_read_schema_file_returns_records(tmp_path: Path) -> None:
    path = tmp_path / "datamodels.json"
    path.write_text(json.dumps([{"name": "X.Y", "type": 2, "value": 7}]), encoding="utf-8")

    assert read_schema_file(path) == [{"name": "X.Y", "type": 2, "value": 7}]


def test_read_schema_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SchemaFileError, match="not found"):
        read_schema_file(tmp_path / "missing.json")


def test_read_schema_file_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "datamodels.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(SchemaFileError, match="Failed to parse JSON"):
        read_schema_file(path)


def test_read_schema_file_root_must_be_array(tmp_path: Path) -> None:
    path = tmp_path / "datamodels.json"
    path.write_text('{"name": "X.Y", "type": 2}', encoding="utf-8")

    with pytest.raises(SchemaFileError, match="not an array"):
        read_schema_file(path)


def test_read_schema_file_rejects_empty_array(tmp_path: Path) -> None:
    path = tmp_path / "datamodels.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(SchemaFileError, match="No data models"):
        read_schema_file(path)


def test_read_schema_file_rejects_integer_literal_beyond_parser_limit(tmp_path: Path) -> None:
    path = tmp_path / "datamodels.json"
    path.write_text('[{"name": "X.Y", "type": 7, "value": ' + "9" * 5000 + "}]", encoding="utf-8")

    with pytest.raises(SchemaFileError, match="Failed to parse JSON"):
        read_schema_file(path)
