"""Explicitly registered type metadata.

When a type system cannot be introspected at runtime (generated models,
schemas mirrored from another language, types loaded from metadata), its
members are registered up front with ``TypeBuilder`` and read back through
``DeclaredIntrospector``. Declared types may extend Python classes and may
be used as value types of other declared members.

Usage::

    animal = (
        TypeBuilder("Animal")
        .getter("getName", str)
        .setter("setName", str)
        .constructor(factory=dict)
        .build()
    )
    dog = TypeBuilder("Dog", extends=animal).getter("isGoodBoy", bool).build()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from typelens.reflection.members import (
    BaseIntrospector,
    ConstructorInfo,
    FieldInfo,
    Member,
    MethodInfo,
)
from typelens.reflection.python_types import PythonIntrospector
from typelens.reflection.types import NoneType


@dataclass(eq=False)
class DeclaredType:
    """Type token for explicitly registered metadata. Identity is the type's identity."""

    name: str
    supertype: Any = object
    interfaces: tuple[Any, ...] = ()
    is_interface: bool = False
    methods: list[MethodInfo] = field(default_factory=list)
    fields: list[FieldInfo] = field(default_factory=list)
    constructors: list[ConstructorInfo] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"DeclaredType({self.name!r})"


class TypeBuilder:
    """Fluent registration of a DeclaredType's members."""

    def __init__(
        self,
        name: str,
        *,
        extends: Any = object,
        implements: Sequence[Any] = (),
        interface: bool = False,
    ) -> None:
        self._type = DeclaredType(
            name=name,
            supertype=None if interface else extends,
            interfaces=tuple(implements),
            is_interface=interface,
        )

    def method(
        self,
        name: str,
        returns: Any = NoneType,
        params: Sequence[Any] = (),
        *,
        synthetic: bool = False,
        public: bool = True,
    ) -> TypeBuilder:
        self._type.methods.append(
            MethodInfo(
                name=name,
                declaring_type=self._type,
                return_type=returns,
                parameter_types=tuple(params),
                synthetic=synthetic,
                public=public,
            )
        )
        return self

    def getter(self, name: str, returns: Any, **kwargs: Any) -> TypeBuilder:
        return self.method(name, returns, (), **kwargs)

    def setter(self, name: str, param: Any, **kwargs: Any) -> TypeBuilder:
        return self.method(name, NoneType, (param,), **kwargs)

    def field(
        self,
        name: str,
        type: Any,
        *,
        final: bool = False,
        static: bool = False,
        public: bool = True,
    ) -> TypeBuilder:
        self._type.fields.append(
            FieldInfo(
                name=name,
                declaring_type=self._type,
                type=type,
                final=final,
                static=static,
                public=public,
            )
        )
        return self

    def constructor(
        self,
        *params: Any,
        factory: Callable[..., Any] | None = None,
        public: bool = True,
    ) -> TypeBuilder:
        self._type.constructors.append(
            ConstructorInfo(
                declaring_type=self._type,
                parameter_types=params,
                target=factory,
                public=public,
            )
        )
        return self

    def build(self) -> DeclaredType:
        return self._type


class DeclaredIntrospector(BaseIntrospector):
    """Introspector over DeclaredType metadata.

    Python classes reached through ``extends``/``implements`` are read with
    a PythonIntrospector sharing the same visibility policy.
    """

    def __init__(self, *, allow_private_access: bool = True) -> None:
        super().__init__(allow_private_access=allow_private_access)
        self._python = PythonIntrospector(allow_private_access=allow_private_access)

    def declared_methods(self, tp: Any) -> Iterator[MethodInfo]:
        if isinstance(tp, DeclaredType):
            yield from tp.methods
        else:
            yield from self._python.declared_methods(tp)

    def interface_methods(self, interface: Any) -> Iterator[MethodInfo]:
        if not isinstance(interface, DeclaredType):
            yield from self._python.interface_methods(interface)
            return
        yield from (m for m in interface.methods if m.public)
        for parent in interface.interfaces:
            yield from self.interface_methods(parent)

    def declared_fields(self, tp: Any) -> Iterator[FieldInfo]:
        if isinstance(tp, DeclaredType):
            yield from tp.fields
        else:
            yield from self._python.declared_fields(tp)

    def declared_constructors(self, tp: Any) -> list[ConstructorInfo]:
        if isinstance(tp, DeclaredType):
            return list(tp.constructors)
        return self._python.declared_constructors(tp)

    def superclass(self, tp: Any) -> Any | None:
        if isinstance(tp, DeclaredType):
            return tp.supertype
        return self._python.superclass(tp)

    def interfaces(self, tp: Any) -> Sequence[Any]:
        if isinstance(tp, DeclaredType):
            return tp.interfaces
        return self._python.interfaces(tp)

    def make_accessible(self, member: Member) -> bool:
        if isinstance(member.declaring_type, DeclaredType):
            return super().make_accessible(member)
        return self._python.make_accessible(member)

    def is_assignable(self, target: Any, source: Any) -> bool:
        if target is source or target is self.root_type:
            return True
        if isinstance(source, DeclaredType):
            parents = (source.supertype, *source.interfaces)
            return any(self.is_assignable(target, p) for p in parents if p is not None)
        return super().is_assignable(target, source)
