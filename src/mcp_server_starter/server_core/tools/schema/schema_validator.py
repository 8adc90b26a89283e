from typing import Any, Dict, Type

from pydantic import BaseModel


class SchemaValidator:
    """
    Helper class for building and sanitizing the JSON schemas published for tools.
    """

    @staticmethod
    def from_model(model: Type[BaseModel]) -> Dict[str, Any]:
        """
        Generates the published input schema for a tool's argument model.

        Args:
            model: The pydantic model that decodes the tool's arguments.

        Returns:
            A sanitized JSON schema using the model's field aliases.
        """
        return SchemaValidator.sanitize_schema(model.model_json_schema(by_alias=True))

    @staticmethod
    def sanitize_schema(schema: Any) -> Any:
        """
        Cleans up the schema for publication to MCP clients.
        Removes $defs, $schema, $id, title.
        Simplifies Optional fields (anyOf with null).
        Enforces additionalProperties: false for objects.

        Args:
            schema: The JSON schema to sanitize.

        Returns:
            The sanitized schema.
        """
        if not isinstance(schema, dict):
            return schema

        new_schema = schema.copy()

        # 1. Remove metadata keys
        for key in ["$defs", "$schema", "$id", "title", "definitions"]:
            new_schema.pop(key, None)

        # 2. Handle anyOf with null (Optional fields)
        if "anyOf" in new_schema:
            any_of = new_schema["anyOf"]
            non_null = [x for x in any_of if x.get("type") != "null"]

            if len(non_null) == 1 and isinstance(non_null[0], dict):
                # Parent description wins; the null default is dropped with the anyOf
                merged = non_null[0].copy()
                if "description" in new_schema:
                    merged["description"] = new_schema["description"]
                return SchemaValidator.sanitize_schema(merged)

        # 3. Enforce additionalProperties: false for objects
        if new_schema.get("type") == "object":
            if "additionalProperties" not in new_schema:
                new_schema["additionalProperties"] = False

        # Recurse on children
        for key, value in new_schema.items():
            if isinstance(value, dict):
                new_schema[key] = SchemaValidator.sanitize_schema(value)
            elif isinstance(value, list):
                new_schema[key] = [
                    SchemaValidator.sanitize_schema(item) if isinstance(item, dict) else item for item in value
                ]

        return new_schema
