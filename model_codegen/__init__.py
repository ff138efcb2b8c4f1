"""
Model Code Generator

A Python package for generating data model class source text from database
table metadata, plus a member adapter that normalizes field and property
access for reflection-driven object mapping.
"""

from model_codegen.cli.generator import ModelsGenerator
from model_codegen.reflection.member_adapter import MemberAdapter

__all__ = ["ModelsGenerator", "MemberAdapter"]
