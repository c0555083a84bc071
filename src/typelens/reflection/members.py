"""Member metadata and the introspection capability.

The descriptor builder never looks at a class directly. It asks an
``Introspector`` for declared methods, fields and constructors, walks
supertypes and interfaces through it, and asks it whether one value type
is assignable from another. Two implementations ship:

- ``PythonIntrospector`` reads live Python classes.
- ``DeclaredIntrospector`` reads explicitly registered ``DeclaredType``
  metadata, for type systems Python cannot introspect on its own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from typelens.reflection.types import erase


@dataclass(frozen=True, slots=True, eq=False)
class MethodInfo:
    """A declared callable member, excluding the receiver."""

    name: str
    declaring_type: Any
    return_type: Any
    parameter_types: tuple[Any, ...] = ()
    synthetic: bool = False  # compiler-generated covariant-override thunk
    public: bool = True

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)


@dataclass(frozen=True, slots=True, eq=False)
class FieldInfo:
    """A declared raw-storage member."""

    name: str
    declaring_type: Any
    type: Any
    final: bool = False
    static: bool = False
    writable: bool = True  # False for storage that rejects assignment outright
    public: bool = True

    @property
    def is_constant(self) -> bool:
        return self.final and self.static


@dataclass(frozen=True, slots=True, eq=False)
class ConstructorInfo:
    """A declared constructor. parameter_types lists required arguments only."""

    declaring_type: Any
    parameter_types: tuple[Any, ...] = ()
    target: Callable[..., Any] | None = None
    public: bool = True


Member = MethodInfo | FieldInfo | ConstructorInfo


class Introspector(Protocol):
    """Capability the descriptor builder consumes."""

    root_type: Any
    boolean_type: Any

    def declared_methods(self, tp: Any) -> Iterable[MethodInfo]: ...

    def interface_methods(self, interface: Any) -> Iterable[MethodInfo]: ...

    def declared_fields(self, tp: Any) -> Iterable[FieldInfo]: ...

    def declared_constructors(self, tp: Any) -> Iterable[ConstructorInfo]: ...

    def superclass(self, tp: Any) -> Any | None: ...

    def interfaces(self, tp: Any) -> Sequence[Any]: ...

    def make_accessible(self, member: Member) -> bool: ...

    def is_assignable(self, target: Any, source: Any) -> bool: ...

    def resolve_return_type(self, method: MethodInfo, owner: Any) -> Any: ...

    def resolve_parameter_type(self, method: MethodInfo, index: int, owner: Any) -> Any: ...

    def resolve_field_type(self, field: FieldInfo, owner: Any) -> Any: ...


class BaseIntrospector:
    """Shared behavior: visibility policy, class assignability, plain erasure.

    Visibility relaxation succeeds for public members, and for non-public
    members only when private access is allowed.
    """

    root_type: Any = object
    boolean_type: Any = bool

    def __init__(self, *, allow_private_access: bool = True) -> None:
        self.allow_private_access = allow_private_access

    def make_accessible(self, member: Member) -> bool:
        return member.public or self.allow_private_access

    def is_assignable(self, target: Any, source: Any) -> bool:
        """True when a value of type ``source`` can be used where ``target`` is expected."""
        if target is source or target is self.root_type:
            return True
        if isinstance(target, type) and isinstance(source, type):
            return issubclass(source, target)
        return False

    def resolve_return_type(self, method: MethodInfo, owner: Any) -> Any:  # noqa: ARG002
        return erase(method.return_type)

    def resolve_parameter_type(self, method: MethodInfo, index: int, owner: Any) -> Any:  # noqa: ARG002
        return erase(method.parameter_types[index])

    def resolve_field_type(self, field: FieldInfo, owner: Any) -> Any:  # noqa: ARG002
        return erase(field.type)
