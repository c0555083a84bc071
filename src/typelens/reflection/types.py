"""Type erasure and method signatures.

Annotations arrive in every shape the typing module allows. Conflict
resolution only ever compares classes, so everything is erased first:

    erase(list[int])        -> list
    erase(Optional[str])    -> str
    erase(int | str)        -> object
    erase(T)                -> T.__bound__ or object
    erase(Final[int])       -> int
"""

from __future__ import annotations

import types
import typing
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Final, ForwardRef, NamedTuple, TypeVar

if TYPE_CHECKING:
    from typelens.reflection.members import MethodInfo

NoneType = type(None)

_UNION_ORIGINS = (typing.Union, types.UnionType)
_QUALIFIERS = (ClassVar, Final)


def erase(tp: Any) -> Any:
    """Reduce an annotation to the class a value of that type is an instance of."""
    if tp is None or tp is NoneType:
        return NoneType

    origin = typing.get_origin(tp)
    if origin is not None:
        args = typing.get_args(tp)
        if origin is Annotated or origin in _QUALIFIERS:
            return erase(args[0]) if args else object
        if origin in _UNION_ORIGINS:
            members = [arg for arg in args if arg is not NoneType]
            return erase(members[0]) if len(members) == 1 else object
        return origin if isinstance(origin, type) else object

    if isinstance(tp, TypeVar):
        return erase(tp.__bound__) if tp.__bound__ is not None else object
    # Any is a class since 3.11
    if tp is Any or tp in _QUALIFIERS or isinstance(tp, (str, ForwardRef)):
        return object
    if isinstance(tp, type):
        return tp

    # typing.NewType
    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return erase(supertype)

    from typelens.reflection.declared import DeclaredType

    if isinstance(tp, DeclaredType):
        return tp
    return object


def type_name(tp: Any) -> str:
    """Human readable name for messages and log events."""
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    name = getattr(tp, "name", None)
    if isinstance(name, str):
        return name
    return repr(tp)


class MethodSignature(NamedTuple):
    """Dedupe key for collected methods: erased return type, name, erased parameters."""

    return_type: Any
    name: str
    parameter_types: tuple[Any, ...]

    def __str__(self) -> str:
        params = ",".join(type_name(p) for p in self.parameter_types)
        rendered = f"{type_name(self.return_type)}#{self.name}"
        return f"{rendered}:{params}" if params else rendered


def signature_of(method: MethodInfo) -> MethodSignature:
    return MethodSignature(
        erase(method.return_type),
        method.name,
        tuple(erase(p) for p in method.parameter_types),
    )
