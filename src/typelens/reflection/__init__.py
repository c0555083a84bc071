"""Reflection module exports."""

from typelens.reflection.accessors import (
    Accessor,
    ConstructorAccessor,
    FieldAccessor,
    MethodAccessor,
)
from typelens.reflection.builder import DescriptorBuilder, build_descriptor
from typelens.reflection.declared import DeclaredIntrospector, DeclaredType, TypeBuilder
from typelens.reflection.descriptor import TypeDescriptor
from typelens.reflection.errors import (
    AmbiguousAccessorError,
    InvalidAccessorNameError,
    NoDefaultConstructorError,
    NoSuchPropertyError,
    NotConstructibleError,
    ReflectionError,
)
from typelens.reflection.factory import (
    DescriptorFactory,
    describe,
    get_default_factory,
    set_default_factory,
)
from typelens.reflection.members import (
    BaseIntrospector,
    ConstructorInfo,
    FieldInfo,
    Introspector,
    MethodInfo,
)
from typelens.reflection.python_types import PythonIntrospector

__all__ = [
    # Descriptor
    "TypeDescriptor",
    "DescriptorBuilder",
    "build_descriptor",
    "DescriptorFactory",
    "describe",
    "get_default_factory",
    "set_default_factory",
    # Accessors
    "Accessor",
    "MethodAccessor",
    "FieldAccessor",
    "ConstructorAccessor",
    # Introspection
    "Introspector",
    "BaseIntrospector",
    "PythonIntrospector",
    "DeclaredIntrospector",
    "DeclaredType",
    "TypeBuilder",
    "MethodInfo",
    "FieldInfo",
    "ConstructorInfo",
    # Errors
    "ReflectionError",
    "AmbiguousAccessorError",
    "NoSuchPropertyError",
    "NoDefaultConstructorError",
    "NotConstructibleError",
    "InvalidAccessorNameError",
]
