"""
Tests for document assembly and the SchemaConverterService.
"""
from typing import Literal

import pytest

from defschema import d
from defschema.config import Config, ConversionOptions
from defschema.exceptions import UnsupportedCheckError
from defschema.models.checks import Check
from defschema.schema_gen.converter import JSON_SCHEMA_7_URI, SchemaConverterService, to_json_schema


class BogusCheck(Check):
    kind: Literal["bogus"] = "bogus"


@pytest.fixture
def app_config() -> Config:
    return Config(conversion=ConversionOptions(error_messages=True))

@pytest.fixture
def converter_service(app_config: Config) -> SchemaConverterService:
    return SchemaConverterService(app_config=app_config)


def test_schema_uri_comes_first() -> None:
    result = to_json_schema(d.string())
    assert result == {"$schema": JSON_SCHEMA_7_URI, "type": "string"}
    assert next(iter(result)) == "$schema"


def test_openapi_has_no_schema_uri() -> None:
    assert to_json_schema(d.string(), ConversionOptions(target="openApi3")) == {"type": "string"}


def test_named_root() -> None:
    assert to_json_schema(d.string().email(), name="Email") == {
        "$schema": JSON_SCHEMA_7_URI,
        "$ref": "#/definitions/Email",
        "definitions": {"Email": {"type": "string", "format": "email"}},
    }


def test_named_definitions_are_referenced() -> None:
    address = d.object({"street": d.string()})
    user = d.object({"home": address, "work": address.optional()})

    result = to_json_schema(user, definitions={"Address": address})

    assert result["definitions"]["Address"]["properties"] == {"street": {"type": "string"}}
    assert result["properties"]["home"] == {"$ref": "#/definitions/Address"}
    assert result["properties"]["work"] == {"$ref": "#/definitions/Address"}
    assert result["required"] == ["home"]


def test_named_root_with_named_definitions() -> None:
    address = d.object({"street": d.string()})
    result = to_json_schema(d.object({"address": address}), name="User", definitions={"Address": address})
    assert result["$ref"] == "#/definitions/User"
    assert set(result["definitions"]) == {"Address", "User"}
    assert result["definitions"]["User"]["properties"]["address"] == {"$ref": "#/definitions/Address"}


def test_custom_definition_path() -> None:
    result = to_json_schema(d.number(), ConversionOptions(definition_path="$defs"), name="N")
    assert result["$ref"] == "#/$defs/N"
    assert result["$defs"] == {"N": {"type": "number"}}


def test_recursive_named_root() -> None:
    node = d.object({"next": d.lazy(lambda: node).optional()})
    result = to_json_schema(node, name="Node")
    assert result["definitions"]["Node"]["properties"]["next"] == {"$ref": "#/definitions/Node"}


def test_service_uses_configured_options(converter_service: SchemaConverterService) -> None:
    result = converter_service.convert(d.string().min(1, "Required."))
    assert result["errorMessage"] == {"minLength": "Required."}


def test_service_overrides(converter_service: SchemaConverterService) -> None:
    result = converter_service.convert(d.string().min(1, "Required."), error_messages=False, target="openApi3")
    assert result == {"type": "string", "minLength": 1}
    assert converter_service.options().error_messages is True


def test_convert_many_reports_failures(converter_service: SchemaConverterService) -> None:
    broken = d.string().model_copy(update={"checks": (BogusCheck(),)})

    results = converter_service.convert_many({"Name": d.string(), "Broken": broken})

    assert not results["Name"].has_errors
    assert results["Name"].json_schema["$ref"] == "#/definitions/Name"
    assert results["Broken"].has_errors
    assert results["Broken"].json_schema is None
    assert "bogus" in results["Broken"].error_message


def test_convert_many_fail_fast(converter_service: SchemaConverterService) -> None:
    broken = d.string().model_copy(update={"checks": (BogusCheck(),)})
    with pytest.raises(UnsupportedCheckError):
        converter_service.convert_many({"Broken": broken, "Name": d.string()}, fail_fast=True)
