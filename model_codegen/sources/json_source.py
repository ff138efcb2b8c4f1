"""Column metadata loaded from a JSON table-definition document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from pydantic import ValidationError

from model_codegen.core.exceptions import MetadataSourceError, TableNotFoundError
from model_codegen.core.schemas import (
    SIZED_TYPES,
    UNBOUNDED_SIZE,
    ColumnDescriptor,
    TableSchema,
)
from model_codegen.logger import logger

# JSON Schema for table-definition documents
TABLES_DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Table Definitions",
    "type": "object",
    "properties": {
        "tables": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "columns": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string", "minLength": 1},
                                "data_type": {"type": "string", "minLength": 1},
                                "is_key": {"type": "boolean"},
                                "is_auto_increment": {"type": "boolean"},
                                "is_unique": {"type": "boolean"},
                                "allow_null": {"type": "boolean"},
                                "size": {"type": "integer", "minimum": 0},
                            },
                            "required": ["name", "data_type"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["name", "columns"],
            },
        }
    },
    "required": ["tables"],
}


class JSONSchemaColumnSource:
    """Serves table metadata from a JSON document.

    The document is validated against ``TABLES_DOCUMENT_SCHEMA`` (JSON Schema
    Draft 7) when loaded. Tables are served in document order.
    """

    def __init__(self, document: dict[str, Any], origin: str = "<document>") -> None:
        """Initialize the source from an already parsed document.

        Args:
            document: Parsed table-definition document
            origin: Description of where the document came from, for errors

        Raises:
            MetadataSourceError: If the document is not a valid definition
        """
        self.origin = origin
        self.tables = self._load_tables(document)

    @classmethod
    def from_file(cls, path: Path) -> JSONSchemaColumnSource:
        """Load a table-definition document from disk.

        Args:
            path: Path to the JSON file

        Returns:
            A source serving the file's tables

        Raises:
            FileNotFoundError: If the file doesn't exist
            MetadataSourceError: If the file is not valid JSON or not a valid definition
        """
        if not path.exists():
            raise FileNotFoundError(f"Table definition file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise MetadataSourceError(str(path), [f"Invalid JSON: {e}"]) from e

        return cls(document, origin=str(path))

    def _load_tables(self, document: dict[str, Any]) -> dict[str, TableSchema]:
        validator = Draft7Validator(TABLES_DOCUMENT_SCHEMA)
        errors: list[str] = []
        for error in sorted(validator.iter_errors(document), key=str):
            location = "/".join(str(p) for p in error.absolute_path) or "<root>"
            errors.append(f"{location}: {error.message}")
        if errors:
            raise MetadataSourceError(self.origin, errors)

        tables: dict[str, TableSchema] = {}
        for table in document["tables"]:
            try:
                columns = tuple(
                    ColumnDescriptor(**self._with_default_size(column))
                    for column in table["columns"]
                )
            except ValidationError as e:
                raise MetadataSourceError(
                    self.origin, [f"{table['name']}: {err['msg']}" for err in e.errors()]
                ) from e
            tables[table["name"]] = TableSchema(name=table["name"], columns=columns)

        logger.debug("Loaded %d table(s) from %s", len(tables), self.origin)
        return tables

    @staticmethod
    def _with_default_size(column: dict[str, Any]) -> dict[str, Any]:
        """Treat string and binary columns without a size as unbounded."""
        if "size" in column:
            return column
        if column["data_type"] not in {data_type.value for data_type in SIZED_TYPES}:
            return column
        return {**column, "size": UNBOUNDED_SIZE}

    def get_table_names(self) -> list[str]:
        return list(self.tables)

    def get_columns(self, table_name: str) -> list[ColumnDescriptor]:
        """Return the columns of a table in declaration order.

        Raises:
            TableNotFoundError: If the document has no such table
        """
        if table_name not in self.tables:
            raise TableNotFoundError(table_name)
        return list(self.tables[table_name].columns)
