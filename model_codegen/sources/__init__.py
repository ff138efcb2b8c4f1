"""Column metadata sources consumed by the generation driver."""

from model_codegen.sources.interfaces import ColumnMetadataSource
from model_codegen.sources.json_source import JSONSchemaColumnSource
from model_codegen.sources.sqlalchemy_source import SQLAlchemyColumnSource

__all__ = ["ColumnMetadataSource", "JSONSchemaColumnSource", "SQLAlchemyColumnSource"]
