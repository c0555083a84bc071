"""Introspection of live Python classes.

Mapping of Python constructs onto the member model:

- methods: plain functions in the class ``__dict__`` (static and class
  methods are not instance accessors and are skipped). The receiver is
  dropped from the parameter list.
- fields: own annotations, ``__slots__`` entries and ``property`` objects.
  ``ClassVar`` marks a field static, ``Final`` marks it final, and a
  ``Final`` name with a class-level value is also static. A ``property``
  without a setter is not writable.
- constructors: the effective ``__init__`` signature; only parameters
  without defaults count as required. Abstract classes cannot be
  constructed, so their constructor is never accessible.
- supertype: the first base. Remaining bases are treated as interfaces.
- visibility: names starting with ``_`` are non-public.

Python never emits synthetic override thunks, so every method reports
``synthetic=False``.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Iterator, Sequence
from typing import Any, ClassVar, Final, TypeVar

from typelens.core.logging import get_logger
from typelens.reflection.members import (
    BaseIntrospector,
    ConstructorInfo,
    FieldInfo,
    Member,
    MethodInfo,
)
from typelens.reflection.types import erase

log = get_logger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_SLOT_INTERNALS = frozenset({"__dict__", "__weakref__"})


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _type_hints(obj: Any, *, include_extras: bool = False) -> dict[str, Any]:
    """Evaluated annotations; unresolvable forward references degrade to raw annotations."""
    try:
        return typing.get_type_hints(obj, include_extras=include_extras)
    except (NameError, TypeError, AttributeError) as e:
        log.debug("type_hints_unresolved", target=getattr(obj, "__qualname__", repr(obj)), error=str(e))
        return dict(inspect.get_annotations(obj))


def _rejects_assignment(tp: type) -> bool:
    """Tuples (NamedTuple included) and frozen dataclasses refuse attribute assignment."""
    params = getattr(tp, "__dataclass_params__", None)
    return issubclass(tp, tuple) or (params is not None and params.frozen)


def _builtin_constructor_owner(tp: type) -> type | None:
    """The builtin that supplies tp's constructor, if any."""
    for klass in tp.__mro__:
        if "__new__" in vars(klass) or "__init__" in vars(klass):
            return klass if klass.__module__ == "builtins" else None
    return None


def _accepts_no_arguments(builtin: type) -> bool:
    """Calling a builtin type without arguments has no side effects, so just try it."""
    try:
        builtin()
    except (TypeError, ValueError, RuntimeError):
        return False
    return True


def _qualifiers(hint: Any) -> tuple[bool, bool]:
    """(is_classvar, is_final) for an annotation, looking through one level of nesting."""
    classvar = final = False
    while True:
        if hint is ClassVar:
            return True, final
        if hint is Final:
            return classvar, True
        origin = typing.get_origin(hint)
        if origin is ClassVar:
            classvar = True
        elif origin is Final:
            final = True
        else:
            return classvar, final
        args = typing.get_args(hint)
        if not args:
            return classvar, final
        hint = args[0]


class PythonIntrospector(BaseIntrospector):
    """Introspector for ordinary Python classes."""

    def declared_methods(self, tp: Any) -> Iterator[MethodInfo]:
        for name, attr in vars(tp).items():
            if inspect.isfunction(attr):
                method = self._method_info(tp, name, attr)
                if method is not None:
                    yield method

    def interface_methods(self, interface: Any) -> Iterator[MethodInfo]:
        for klass in interface.__mro__:
            if klass is self.root_type:
                continue
            yield from self.declared_methods(klass)

    def _method_info(self, owner: type, name: str, func: Any) -> MethodInfo | None:
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            return None
        params = list(signature.parameters.values())
        if not params or params[0].kind in _VARIADIC:
            return None  # no receiver
        hints = _type_hints(func)
        return MethodInfo(
            name=name,
            declaring_type=owner,
            return_type=hints.get("return", object),
            parameter_types=tuple(hints.get(p.name, object) for p in params[1:]),
            public=_is_public(name),
        )

    def declared_fields(self, tp: Any) -> Iterator[FieldInfo]:
        own = inspect.get_annotations(tp)
        hints = _type_hints(tp, include_extras=True) if own else {}
        namespace = vars(tp)
        writable = not _rejects_assignment(tp)

        for name in own:
            hint = hints.get(name, own[name])
            classvar, final = _qualifiers(hint)
            yield FieldInfo(
                name=name,
                declaring_type=tp,
                type=hint,
                final=final,
                static=classvar or (final and name in namespace),
                writable=writable,
                public=_is_public(name),
            )

        slots = namespace.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in own or name in _SLOT_INTERNALS:
                continue
            yield FieldInfo(
                name=name,
                declaring_type=tp,
                type=object,
                writable=writable,
                public=_is_public(name),
            )

        for name, attr in namespace.items():
            if isinstance(attr, property) and name not in own:
                getter_hints = _type_hints(attr.fget) if attr.fget is not None else {}
                yield FieldInfo(
                    name=name,
                    declaring_type=tp,
                    type=getter_hints.get("return", object),
                    writable=attr.fset is not None,
                    public=_is_public(name),
                )

    def declared_constructors(self, tp: Any) -> list[ConstructorInfo]:
        try:
            signature = inspect.signature(tp)
        except (TypeError, ValueError):
            # Builtins such as int and dict publish no signature
            owner = _builtin_constructor_owner(tp)
            if owner is None or not _accepts_no_arguments(owner):
                return []
            return [ConstructorInfo(declaring_type=tp, target=tp)]
        hints = _type_hints(tp.__init__) if "__init__" in vars(tp) else {}
        required = tuple(
            hints.get(p.name, object)
            for p in signature.parameters.values()
            if p.default is inspect.Parameter.empty and p.kind not in _VARIADIC
        )
        return [ConstructorInfo(declaring_type=tp, parameter_types=required, target=tp)]

    def superclass(self, tp: Any) -> Any | None:
        bases = getattr(tp, "__bases__", ())
        return bases[0] if bases else None

    def interfaces(self, tp: Any) -> Sequence[Any]:
        return tuple(getattr(tp, "__bases__", ())[1:])

    def make_accessible(self, member: Member) -> bool:
        if isinstance(member, ConstructorInfo) and inspect.isabstract(member.declaring_type):
            return False
        return super().make_accessible(member)

    def resolve_return_type(self, method: MethodInfo, owner: Any) -> Any:
        return self._resolve(method.return_type, owner)

    def resolve_parameter_type(self, method: MethodInfo, index: int, owner: Any) -> Any:
        return self._resolve(method.parameter_types[index], owner)

    def resolve_field_type(self, field: FieldInfo, owner: Any) -> Any:
        return self._resolve(field.type, owner)

    def _resolve(self, hint: Any, owner: Any) -> Any:
        if isinstance(hint, TypeVar):
            bindings = _typevar_bindings(owner)
            seen: set[TypeVar] = set()
            while isinstance(hint, TypeVar) and hint in bindings and hint not in seen:
                seen.add(hint)
                hint = bindings[hint]
        return erase(hint)


def _typevar_bindings(owner: Any) -> dict[TypeVar, Any]:
    """Map each type variable of owner's generic ancestors to its argument.

    ``class IntBox(Box[int])`` binds Box's ``T`` to ``int``. Chains such as
    ``class A(Generic[T])``, ``class B(A[U])``, ``class C(B[str])`` bind
    ``T -> U`` and ``U -> str``; the caller follows the chain.
    """
    bindings: dict[TypeVar, Any] = {}
    for klass in getattr(owner, "__mro__", ()):
        for base in vars(klass).get("__orig_bases__", ()):
            origin = typing.get_origin(base)
            parameters = getattr(origin, "__parameters__", ())
            for parameter, argument in zip(parameters, typing.get_args(base), strict=False):
                bindings.setdefault(parameter, argument)
    return bindings
