"""Core data models and shared types."""

from model_codegen.core.config import config
from model_codegen.core.exceptions import (
    BuilderStateError,
    CodeGenerationError,
    ConfigurationError,
    MetadataSourceError,
    TableNotFoundError,
)
from model_codegen.core.schemas import ColumnDescriptor, DataType, TableSchema

__all__ = [
    "ColumnDescriptor",
    "DataType",
    "TableSchema",
    "CodeGenerationError",
    "ConfigurationError",
    "MetadataSourceError",
    "TableNotFoundError",
    "BuilderStateError",
    "config",
]
