from typing import Optional

from pydantic import BaseModel, Field

from mcp_server_starter.server_core import SchemaValidator


def test_sanitize_schema_removes_metadata():
    schema = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "$id": "http://example.com/schema",
        "title": "MySchema",
        "type": "object",
        "properties": {
            "field": {"type": "string", "title": "FieldTitle"}
        },
        "definitions": {"SomeDef": {}}
    }
    sanitized = SchemaValidator.sanitize_schema(schema)

    assert "$schema" not in sanitized
    assert "$id" not in sanitized
    assert "title" not in sanitized
    assert "definitions" not in sanitized
    assert "title" not in sanitized["properties"]["field"]


def test_sanitize_schema_simplifies_optional():
    # Simulating Optional[int] -> anyOf: [type: integer, type: null]
    schema = {
        "type": "object",
        "properties": {
            "optional_field": {
                "anyOf": [
                    {"type": "integer", "description": "An integer"},
                    {"type": "null"}
                ],
                "default": None,
                "description": "Parent description"
            }
        }
    }
    sanitized = SchemaValidator.sanitize_schema(schema)
    field = sanitized["properties"]["optional_field"]

    assert "anyOf" not in field
    assert "default" not in field
    assert field["type"] == "integer"
    assert field["description"] == "Parent description"


def test_sanitize_schema_enforces_additional_properties():
    schema = {
        "type": "object",
        "properties": {
            "field": {"type": "string"}
        }
    }
    sanitized = SchemaValidator.sanitize_schema(schema)
    assert sanitized["additionalProperties"] is False


def test_sanitize_schema_does_not_mutate_input():
    schema = {"type": "object", "title": "Args", "properties": {"a": {"type": "string", "title": "A"}}}
    SchemaValidator.sanitize_schema(schema)
    assert schema["title"] == "Args"
    assert schema["properties"]["a"]["title"] == "A"


def test_from_model_uses_aliases():
    class PagedArgs(BaseModel):
        range_start: Optional[str] = Field(default=None, alias="rangeStart", description="Start of the range")
        page_size: int = Field(alias="pageSize", ge=1)

    schema = SchemaValidator.from_model(PagedArgs)

    assert set(schema["properties"]) == {"rangeStart", "pageSize"}
    assert schema["required"] == ["pageSize"]
    assert schema["properties"]["rangeStart"] == {"type": "string", "description": "Start of the range"}
    assert schema["properties"]["pageSize"] == {"type": "integer", "minimum": 1}
