"""Immutable per-type property descriptor.

A TypeDescriptor is the query surface a data-binding layer uses to read
and write properties by name. It is built once per type (see
``DescriptorBuilder``) and never mutated afterwards, so one instance can
be shared by any number of threads without locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from typelens.reflection.accessors import Accessor, ConstructorAccessor
from typelens.reflection.errors import NoDefaultConstructorError, NoSuchPropertyError


class TypeDescriptor:
    """Readable/writable properties of one type, with their accessors and types.

    ``readable_names`` and ``writable_names`` follow the order accessors
    were registered in, which callers should not rely on.
    ``find_property_name`` matches case-insensitively by comparing
    ``str.upper()`` of both names (full Unicode mapping, so ``"ß"`` matches
    ``"SS"``); when two names differ only in case, the one registered last wins.
    """

    __slots__ = (
        "_type",
        "_get_accessors",
        "_set_accessors",
        "_get_types",
        "_set_types",
        "_readable_names",
        "_writable_names",
        "_case_insensitive_index",
        "_default_constructor",
    )

    def __init__(
        self,
        tp: Any,
        *,
        get_accessors: Mapping[str, Accessor],
        set_accessors: Mapping[str, Accessor],
        default_constructor: ConstructorAccessor | None = None,
    ) -> None:
        self._type = tp
        self._get_accessors = MappingProxyType(dict(get_accessors))
        self._set_accessors = MappingProxyType(dict(set_accessors))
        self._get_types = MappingProxyType(
            {name: accessor.value_type for name, accessor in self._get_accessors.items()}
        )
        self._set_types = MappingProxyType(
            {name: accessor.value_type for name, accessor in self._set_accessors.items()}
        )
        self._readable_names = tuple(self._get_accessors)
        self._writable_names = tuple(self._set_accessors)

        index: dict[str, str] = {}
        for name in (*self._readable_names, *self._writable_names):
            index[name.upper()] = name
        self._case_insensitive_index = MappingProxyType(index)
        self._default_constructor = default_constructor

    @property
    def type(self) -> Any:
        return self._type

    @property
    def readable_names(self) -> tuple[str, ...]:
        return self._readable_names

    @property
    def writable_names(self) -> tuple[str, ...]:
        return self._writable_names

    @property
    def getter_types(self) -> Mapping[str, Any]:
        return self._get_types

    @property
    def setter_types(self) -> Mapping[str, Any]:
        return self._set_types

    def has_getter(self, name: str) -> bool:
        return name in self._get_accessors

    def has_setter(self, name: str) -> bool:
        return name in self._set_accessors

    def getter_type(self, name: str) -> Any:
        try:
            return self._get_types[name]
        except KeyError:
            raise NoSuchPropertyError(name, self._type, "getter") from None

    def setter_type(self, name: str) -> Any:
        try:
            return self._set_types[name]
        except KeyError:
            raise NoSuchPropertyError(name, self._type, "setter") from None

    def get_accessor(self, name: str) -> Accessor:
        try:
            return self._get_accessors[name]
        except KeyError:
            raise NoSuchPropertyError(name, self._type, "getter") from None

    def set_accessor(self, name: str) -> Accessor:
        try:
            return self._set_accessors[name]
        except KeyError:
            raise NoSuchPropertyError(name, self._type, "setter") from None

    def find_property_name(self, name: str) -> str | None:
        return self._case_insensitive_index.get(name.upper())

    def has_default_constructor(self) -> bool:
        return self._default_constructor is not None

    def default_constructor(self) -> ConstructorAccessor:
        if self._default_constructor is None:
            raise NoDefaultConstructorError(self._type)
        return self._default_constructor

    def __repr__(self) -> str:
        return (
            f"TypeDescriptor({self._type!r}, readable={list(self._readable_names)}, "
            f"writable={list(self._writable_names)})"
        )
