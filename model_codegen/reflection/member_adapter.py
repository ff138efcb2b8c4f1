"""Uniform access to the fields and properties of model classes.

The object-mapping runtime reads and writes model members without caring
whether a member is a plain annotated attribute (a field) or a ``property``.
``MemberAdapter.new_object`` wraps either kind behind the same interface.

Members declared with one of the unsigned marker types (``UInt16``,
``UInt32``, ``UInt64``) get an adapter that narrows written values to the
declared width. Values read back from a database arrive as signed integers
of the same width; narrowing reinterprets the two's-complement bit pattern,
so ``-1`` written to a ``UInt32`` member is stored as ``4294967295``.

Custom attributes are ``typing.Annotated`` metadata::

    @dataclass
    class Account:
        id: Annotated[int, DbKey()]
        flags: UInt32 = UInt32(0)
"""

from __future__ import annotations

import inspect
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    ClassVar,
    NewType,
    get_args,
    get_origin,
    get_type_hints,
)

UInt16 = NewType("UInt16", int)
UInt32 = NewType("UInt32", int)
UInt64 = NewType("UInt64", int)

UNSIGNED_MASKS: dict[Any, int] = {
    UInt16: 0xFFFF,
    UInt32: 0xFFFF_FFFF,
    UInt64: 0xFFFF_FFFF_FFFF_FFFF,
}

# Accessor thunks collected by emit_load/emit_store
AccessorContext = list[Callable[..., Any]]


@dataclass(frozen=True)
class FieldInfo:
    """Handle of an annotated attribute declared on a class."""

    owner: type
    name: str


@dataclass(frozen=True)
class PropertyInfo:
    """Handle of a ``property`` found on a class."""

    owner: type
    name: str
    prop: property


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _annotation_metadata(annotation: Any, kind: type) -> list[Any]:
    if get_origin(annotation) is not Annotated:
        return []
    return [item for item in get_args(annotation)[1:] if isinstance(item, kind)]


class MemberAdapter(ABC):
    """Common interface over field and property members."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_property(self) -> bool: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def member_type(self) -> Any: ...

    @abstractmethod
    def get_custom_attributes(self, kind: type, inherit: bool = True) -> list[Any]: ...

    @abstractmethod
    def set_value(self, obj: Any, value: Any) -> None: ...

    @abstractmethod
    def get_value(self, obj: Any) -> Any: ...

    @abstractmethod
    def get_member_info(self) -> FieldInfo | PropertyInfo: ...

    @abstractmethod
    def emit_store(self, context: AccessorContext) -> None: ...

    @abstractmethod
    def emit_load(self, context: AccessorContext) -> None: ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}: {self.member_type!r}>"

    @staticmethod
    def new_object(member: FieldInfo | PropertyInfo) -> MemberAdapter:
        """Create the adapter for a member handle.

        The declared type is inspected once here. Unsigned members get the
        narrowing adapter, everything else the plain one.
        """
        if isinstance(member, PropertyInfo):
            adapter: MemberAdapter = PropertyAdapter(member)
            if adapter.member_type in UNSIGNED_MASKS:
                return UnsignedPropertyAdapter(member)
            return adapter
        adapter = FieldAdapter(member)
        if adapter.member_type in UNSIGNED_MASKS:
            return UnsignedFieldAdapter(member)
        return adapter

    @staticmethod
    def for_member(owner: type, name: str) -> MemberAdapter:
        """Create the adapter for the member ``name`` of ``owner``.

        Raises:
            AttributeError: If the class has neither a property nor an
                annotated attribute of that name
        """
        try:
            attr = inspect.getattr_static(owner, name)
        except AttributeError:
            attr = None
        if isinstance(attr, property):
            return MemberAdapter.new_object(PropertyInfo(owner, name, attr))
        if name not in get_type_hints(owner):
            raise AttributeError(f"{owner.__name__!r} has no member {name!r}")
        return MemberAdapter.new_object(FieldInfo(owner, name))


class FieldAdapter(MemberAdapter):
    __slots__ = ("_field", "_member_type")

    def __init__(self, field: FieldInfo) -> None:
        self._field = field
        self._member_type = get_type_hints(field.owner).get(field.name, Any)

    @property
    def is_property(self) -> bool:
        return False

    @property
    def name(self) -> str:
        return self._field.name

    @property
    def member_type(self) -> Any:
        return self._member_type

    def get_custom_attributes(self, kind: type, inherit: bool = True) -> list[Any]:
        owner = self._field.owner
        if inherit:
            annotations = get_type_hints(owner, include_extras=True)
        else:
            annotations = inspect.get_annotations(owner, eval_str=True)
        return _annotation_metadata(annotations.get(self.name), kind)

    def set_value(self, obj: Any, value: Any) -> None:
        setattr(obj, self._field.name, value)

    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self._field.name)

    def get_member_info(self) -> FieldInfo:
        return self._field

    def emit_store(self, context: AccessorContext) -> None:
        name = self._field.name
        context.append(lambda obj, value: setattr(obj, name, value))

    def emit_load(self, context: AccessorContext) -> None:
        context.append(operator.attrgetter(self._field.name))


class PropertyAdapter(MemberAdapter):
    __slots__ = ("_property", "_member_type")

    def __init__(self, prop: PropertyInfo) -> None:
        self._property = prop
        getter = prop.prop.fget
        self._member_type = (
            get_type_hints(getter).get("return", Any) if getter is not None else Any
        )

    @property
    def is_property(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return self._property.name

    @property
    def member_type(self) -> Any:
        return self._member_type

    def get_custom_attributes(self, kind: type, inherit: bool = True) -> list[Any]:
        info = self._property
        if not inherit and info.owner.__dict__.get(info.name) is not info.prop:
            return []
        getter = info.prop.fget
        if getter is None:
            return []
        annotation = get_type_hints(getter, include_extras=True).get("return")
        return _annotation_metadata(annotation, kind)

    def set_value(self, obj: Any, value: Any) -> None:
        setter = self._property.prop.fset
        if setter is None:
            raise AttributeError(
                f"property {self.name!r} of {self._property.owner.__name__!r} has no setter"
            )
        setter(obj, value)

    def get_value(self, obj: Any) -> Any:
        getter = self._property.prop.fget
        if getter is None:
            raise AttributeError(
                f"property {self.name!r} of {self._property.owner.__name__!r} has no getter"
            )
        return getter(obj)

    def get_member_info(self) -> PropertyInfo:
        return self._property

    def emit_store(self, context: AccessorContext) -> None:
        context.append(self.set_value)

    def emit_load(self, context: AccessorContext) -> None:
        context.append(self.get_value)


def narrow_unsigned(member_type: Any, value: Any) -> int:
    """Reinterpret an integer as the unsigned width of ``member_type``.

    Raises:
        TypeError: If the value is not an integer
    """
    return operator.index(value) & UNSIGNED_MASKS[member_type]


class UnsignedFieldAdapter(FieldAdapter):
    __slots__ = ()

    def set_value(self, obj: Any, value: Any) -> None:
        super().set_value(obj, narrow_unsigned(self.member_type, value))

    def emit_store(self, context: AccessorContext) -> None:
        context.append(self.set_value)


class UnsignedPropertyAdapter(PropertyAdapter):
    __slots__ = ()

    def set_value(self, obj: Any, value: Any) -> None:
        super().set_value(obj, narrow_unsigned(self.member_type, value))


def members_of(cls: type) -> list[MemberAdapter]:
    """Create adapters for every field and property of a class.

    Members are returned base classes first, in declaration order.
    ``ClassVar`` annotations are not members.
    """
    hints = get_type_hints(cls)
    names: dict[str, None] = {}
    for klass in reversed(cls.__mro__[:-1]):
        for name in inspect.get_annotations(klass):
            if not _is_class_var(hints.get(name)):
                names.setdefault(name, None)
        for name, attr in vars(klass).items():
            if isinstance(attr, property):
                names.setdefault(name, None)
    return [MemberAdapter.for_member(cls, name) for name in names]
