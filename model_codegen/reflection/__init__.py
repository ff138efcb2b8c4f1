"""Reflection helpers for the object-mapping runtime."""

from model_codegen.reflection.member_adapter import (
    FieldInfo,
    MemberAdapter,
    PropertyInfo,
    UInt16,
    UInt32,
    UInt64,
    members_of,
)

__all__ = [
    "MemberAdapter",
    "FieldInfo",
    "PropertyInfo",
    "UInt16",
    "UInt32",
    "UInt64",
    "members_of",
]
