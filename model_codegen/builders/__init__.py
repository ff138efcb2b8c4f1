"""Class text builders for the generated data models."""

from model_codegen.builders.legacy import LegacyModelBuilder, LegacyObjectModelBuilder
from model_codegen.builders.model_builder import ModelBuilder, get_type_name
from model_codegen.builders.object_model_builder import ObjectModelBuilder

__all__ = [
    "ModelBuilder",
    "ObjectModelBuilder",
    "LegacyModelBuilder",
    "LegacyObjectModelBuilder",
    "get_type_name",
]
