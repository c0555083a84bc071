"""Descriptor construction.

Build order:
1. default constructor (own constructors only)
2. getter methods, conflicts resolved
3. setter methods, conflicts resolved against the getter types from 2
4. fields, for every name 2 and 3 left uncovered
5. snapshot into an immutable TypeDescriptor

An AmbiguousAccessorError in 2 or 3 aborts the build; no partial
descriptor is ever returned.
"""

from __future__ import annotations

from typing import Any

from typelens.config.models import ReflectionConfig
from typelens.core.logging import get_logger
from typelens.reflection.accessors import (
    Accessor,
    ConstructorAccessor,
    FieldAccessor,
    MethodAccessor,
)
from typelens.reflection.collector import (
    classify_accessors,
    collect_methods,
    try_make_accessible,
)
from typelens.reflection.declared import DeclaredIntrospector, DeclaredType
from typelens.reflection.descriptor import TypeDescriptor
from typelens.reflection.members import FieldInfo, Introspector, MethodInfo
from typelens.reflection.naming import PropertyNameFilter
from typelens.reflection.python_types import PythonIntrospector
from typelens.reflection.resolver import resolve_getter_conflicts, resolve_setter_conflicts

log = get_logger(__name__)


def default_introspector(tp: Any, config: ReflectionConfig) -> Introspector:
    """DeclaredIntrospector for DeclaredType tokens, PythonIntrospector for classes."""
    if isinstance(tp, DeclaredType):
        return DeclaredIntrospector(allow_private_access=config.allow_private_access)
    return PythonIntrospector(allow_private_access=config.allow_private_access)


class DescriptorBuilder:
    """Single-use builder of one TypeDescriptor."""

    def __init__(
        self,
        tp: Any,
        *,
        introspector: Introspector | None = None,
        config: ReflectionConfig | None = None,
    ) -> None:
        config = config or ReflectionConfig()
        self._type = tp
        self._introspector = introspector or default_introspector(tp, config)
        self._is_valid_name = PropertyNameFilter.from_config(config)
        self._get_accessors: dict[str, Accessor] = {}
        self._set_accessors: dict[str, Accessor] = {}

    def build(self) -> TypeDescriptor:
        default_constructor = self._find_default_constructor()
        self._add_methods()
        self._add_fields()

        descriptor = TypeDescriptor(
            self._type,
            get_accessors=self._get_accessors,
            set_accessors=self._set_accessors,
            default_constructor=default_constructor,
        )
        log.debug(
            "descriptor_built",
            type=repr(self._type),
            readable=len(descriptor.readable_names),
            writable=len(descriptor.writable_names),
            default_constructor=default_constructor is not None,
        )
        return descriptor

    def _find_default_constructor(self) -> ConstructorAccessor | None:
        found: ConstructorAccessor | None = None
        for constructor in self._introspector.declared_constructors(self._type):
            if constructor.parameter_types:
                continue
            if try_make_accessible(self._introspector, constructor):
                found = ConstructorAccessor(constructor)
        return found

    def _add_methods(self) -> None:
        candidates = classify_accessors(collect_methods(self._type, self._introspector))

        getters = resolve_getter_conflicts(candidates.getters, self._introspector, self._type)
        for name, method in getters.items():
            self._add_get_method(name, method)

        getter_types = {name: accessor.value_type for name, accessor in self._get_accessors.items()}
        setters = resolve_setter_conflicts(
            candidates.setters, getter_types, self._introspector, self._type
        )
        for name, method in setters.items():
            self._add_set_method(name, method)

    def _add_get_method(self, name: str, method: MethodInfo) -> None:
        if self._is_valid_name(name):
            value_type = self._introspector.resolve_return_type(method, self._type)
            self._get_accessors[name] = MethodAccessor(method, value_type)

    def _add_set_method(self, name: str, method: MethodInfo) -> None:
        if self._is_valid_name(name):
            value_type = self._introspector.resolve_parameter_type(method, 0, self._type)
            self._set_accessors[name] = MethodAccessor(method, value_type)

    def _add_fields(self) -> None:
        current = self._type
        while current is not None and current is not self._introspector.root_type:
            for field in self._introspector.declared_fields(current):
                if not try_make_accessible(self._introspector, field):
                    continue
                # A final static field is a constant; only the class body assigns it
                if field.name not in self._set_accessors and field.writable and not field.is_constant:
                    self._add_field(self._set_accessors, field)
                if field.name not in self._get_accessors:
                    self._add_field(self._get_accessors, field)
            current = self._introspector.superclass(current)

    def _add_field(self, accessors: dict[str, Accessor], field: FieldInfo) -> None:
        if self._is_valid_name(field.name):
            value_type = self._introspector.resolve_field_type(field, self._type)
            accessors[field.name] = FieldAccessor(field, value_type)


def build_descriptor(
    tp: Any,
    *,
    introspector: Introspector | None = None,
    config: ReflectionConfig | None = None,
) -> TypeDescriptor:
    """Build a descriptor for tp without caching it."""
    return DescriptorBuilder(tp, introspector=introspector, config=config).build()
