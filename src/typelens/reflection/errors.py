"""Reflection module error types."""

from typing import Any

from typelens.reflection.types import type_name


class ReflectionError(Exception):
    """Base error for descriptor construction and queries."""

    pass


class AmbiguousAccessorError(ReflectionError):
    """Two accessor candidates for one property cannot be reconciled."""

    def __init__(self, property_name: str, owner: Any, kind: str, types: tuple[Any, Any]) -> None:
        first, second = (type_name(t) for t in types)
        super().__init__(
            f"Ambiguous {kind} for property '{property_name}' in {type_name(owner)}: "
            f"'{first}' and '{second}' are unrelated or identical non-boolean types"
        )
        self.property_name = property_name
        self.owner = owner
        self.kind = kind
        self.types = types


class NoSuchPropertyError(ReflectionError):
    """No getter or setter registered under the requested name."""

    def __init__(self, property_name: str, owner: Any, kind: str) -> None:
        super().__init__(
            f"There is no {kind} for property named '{property_name}' in {type_name(owner)}"
        )
        self.property_name = property_name
        self.owner = owner
        self.kind = kind


class NoDefaultConstructorError(ReflectionError):
    """Type has no accessible zero-argument constructor."""

    def __init__(self, owner: Any) -> None:
        super().__init__(f"There is no default constructor for {type_name(owner)}")
        self.owner = owner


class NotConstructibleError(ReflectionError):
    """Constructor metadata has nothing to call."""

    def __init__(self, owner: Any) -> None:
        super().__init__(f"Constructor of {type_name(owner)} has no factory to invoke")
        self.owner = owner


class InvalidAccessorNameError(ReflectionError):
    """Method name does not follow the is/get/set naming convention."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Error parsing property name '{name}'. Didn't start with 'is', 'get' or 'set'."
        )
        self.name = name
