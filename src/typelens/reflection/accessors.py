"""Resolved accessors bound to a single property."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from typelens.reflection.errors import NotConstructibleError
from typelens.reflection.members import ConstructorInfo, FieldInfo, MethodInfo


class Accessor(ABC):
    """Read/write operation for one property, backed by a method or by raw storage."""

    __slots__ = ("value_type",)

    def __init__(self, value_type: Any) -> None:
        self.value_type = value_type

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the backing member."""

    @abstractmethod
    def get(self, target: Any) -> Any: ...

    @abstractmethod
    def set(self, target: Any, value: Any) -> None: ...


class MethodAccessor(Accessor):
    """Invokes an accessor method by name, so overrides on the target are honored."""

    __slots__ = ("method",)

    def __init__(self, method: MethodInfo, value_type: Any) -> None:
        super().__init__(value_type)
        self.method = method

    @property
    def name(self) -> str:
        return self.method.name

    def get(self, target: Any) -> Any:
        return getattr(target, self.method.name)()

    def set(self, target: Any, value: Any) -> None:
        getattr(target, self.method.name)(value)

    def __repr__(self) -> str:
        return f"MethodAccessor({self.method.name!r})"


class FieldAccessor(Accessor):
    """Reads and writes raw storage directly."""

    __slots__ = ("field",)

    def __init__(self, field: FieldInfo, value_type: Any) -> None:
        super().__init__(value_type)
        self.field = field

    @property
    def name(self) -> str:
        return self.field.name

    def get(self, target: Any) -> Any:
        return getattr(target, self.field.name)

    def set(self, target: Any, value: Any) -> None:
        setattr(target, self.field.name, value)

    def __repr__(self) -> str:
        return f"FieldAccessor({self.field.name!r})"


class ConstructorAccessor:
    """Zero-argument construction handle."""

    __slots__ = ("constructor",)

    def __init__(self, constructor: ConstructorInfo) -> None:
        self.constructor = constructor

    def new_instance(self) -> Any:
        if self.constructor.target is None:
            raise NotConstructibleError(self.constructor.declaring_type)
        return self.constructor.target()

    def __repr__(self) -> str:
        return f"ConstructorAccessor({self.constructor.declaring_type!r})"
