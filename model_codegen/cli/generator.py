"""Main class that orchestrates the model generation process."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from model_codegen.builders.legacy import LegacyModelBuilder, LegacyObjectModelBuilder
from model_codegen.builders.model_builder import ModelBuilder
from model_codegen.builders.object_model_builder import ObjectModelBuilder
from model_codegen.core.config import FileNamesConfig, TemplateConfig, config
from model_codegen.core.schemas import TableSchema
from model_codegen.io.output_manager import OutputManager
from model_codegen.logger import logger
from model_codegen.sources.interfaces import ColumnMetadataSource

WILDCARD = "*"

_TABLE_NAME_SEPARATORS = re.compile(r"[,;|]")

# (identity builder, plain builder) per emission flavour
BUILDERS: dict[str, tuple[type[ModelBuilder], type[ModelBuilder]]] = {
    "current": (ModelBuilder, ObjectModelBuilder),
    "legacy": (LegacyModelBuilder, LegacyObjectModelBuilder),
}


def split_table_names(table_names: str | Iterable[str]) -> list[str]:
    """Split a ',', ';' or '|' delimited list of table names.

    Args:
        table_names: Delimited string, or an iterable of names

    Returns:
        Non-empty table names in the given order
    """
    if isinstance(table_names, str):
        parts = _TABLE_NAME_SEPARATORS.split(table_names)
    else:
        parts = list(table_names)
    return [part.strip() for part in parts if part.strip()]


class ModelsGenerator:
    """Generates model classes for database tables.

    This class reads column metadata from a source, chooses the builder for
    each table and optionally writes the results through an OutputManager.
    """

    def __init__(
        self,
        source: ColumnMetadataSource,
        flavor: Literal["current", "legacy"] = config.flavor,
        template: TemplateConfig | None = None,
        file_names: FileNamesConfig | None = None,
    ) -> None:
        """Initialize the models generator.

        Args:
            source: Column metadata source to read tables from
            flavor: Emission flavour, "current" or "legacy"
            template: Template settings (defaults to the loaded configuration)
            file_names: File name settings (defaults to the loaded configuration)
        """
        if flavor not in BUILDERS:
            raise ValueError(f"Unknown flavor: {flavor}")
        self.source = source
        self.flavor = flavor
        self.template = template or config.template
        self.file_names = file_names or config.file_names

    def get_table_list(self) -> list[str]:
        return self.source.get_table_names()

    def select_builder(self, table: TableSchema) -> type[ModelBuilder]:
        """Choose the builder class for a table.

        Tables with an auto-increment key column named 'id' get the identity
        builder, every other table gets the plain object builder.
        """
        identity_builder, plain_builder = BUILDERS[self.flavor]
        identity_column = table.identity_column
        if identity_column is not None:
            logger.debug(
                "Table %s has identity column %s", table.name, identity_column.name
            )
            return identity_builder
        logger.debug("Table %s has no identity column", table.name)
        return plain_builder

    def get_model(self, table_name: str, output_path: Path | str | None = None) -> str:
        """Generate the model text for one table.

        Args:
            table_name: Table to generate
            output_path: Directory to write the model and partial files to

        Returns:
            The generated source text
        """
        table = TableSchema(
            name=table_name, columns=tuple(self.source.get_columns(table_name))
        )
        builder_class = self.select_builder(table)
        contents = builder_class(table, self.template).build()
        logger.info("Generated %s for table %s", builder_class.__name__, table_name)

        if output_path:
            output_manager = OutputManager(
                Path(output_path), self.file_names, self.template
            )
            model_path = output_manager.write_model(table_name, contents)
            logger.info("Model written to: %s", model_path)
            partial_path = output_manager.write_partial(table_name)
            if partial_path is not None:
                logger.info("Partial class written to: %s", partial_path)

        return contents

    def generate_model_from_database(
        self, table_name: str | None, output_path: Path | str | None = None
    ) -> str:
        """Generate one table, or every table for '*' or an empty name.

        Args:
            table_name: Table name, '*' or empty for all tables
            output_path: Directory to write the generated files to

        Returns:
            The generated text, models separated by a blank line
        """
        if not table_name or table_name == WILDCARD:
            tables = self.get_table_list()
            logger.info("Generating models for %d table(s)", len(tables))
            return "\n".join(self.get_model(table, output_path) for table in tables)
        return self.get_model(table_name, output_path)

    def generate_models(
        self,
        table_names: str | Iterable[str],
        output_path: Path | str | None = None,
    ) -> list[str]:
        """Generate every table of a delimited list (entries may be '*').

        An empty list means all tables.

        Returns:
            The generated text per requested entry
        """
        names = split_table_names(table_names) or [WILDCARD]
        return [
            self.generate_model_from_database(table_name, output_path)
            for table_name in names
        ]
