"""Accessor naming convention and property name validity.

Both camelCase and snake_case spellings are recognized:

    getName / get_name     -> value query      -> "name" / "name"
    isActive / is_active   -> boolean query    -> "active"
    setName / set_name     -> value assignment -> "name"

A prefix only counts when a word boundary follows it, so ``settings``,
``issue`` and ``getattr`` are ordinary methods.
"""

from __future__ import annotations

from collections.abc import Iterable

from typelens.config.constants import (
    BOOLEAN_GETTER_PREFIX,
    GETTER_PREFIX,
    SETTER_PREFIX,
    SNAKE_SEPARATOR,
)
from typelens.config.models import ReflectionConfig
from typelens.reflection.errors import InvalidAccessorNameError


def _has_prefix(name: str, prefix: str) -> bool:
    if not name.startswith(prefix) or len(name) <= len(prefix):
        return False
    boundary = name[len(prefix)]
    if boundary == SNAKE_SEPARATOR:
        return len(name) > len(prefix) + 1
    return boundary.isupper()


def is_boolean_getter_name(name: str) -> bool:
    return _has_prefix(name, BOOLEAN_GETTER_PREFIX)


def is_getter_name(name: str) -> bool:
    return _has_prefix(name, GETTER_PREFIX) or is_boolean_getter_name(name)


def is_setter_name(name: str) -> bool:
    return _has_prefix(name, SETTER_PREFIX)


def is_property_name(name: str) -> bool:
    return is_getter_name(name) or is_setter_name(name)


def method_to_property(name: str) -> str:
    """Convert an accessor name to its property name.

    Raises:
        InvalidAccessorNameError: name is not an accessor name.
    """
    for prefix in (BOOLEAN_GETTER_PREFIX, GETTER_PREFIX, SETTER_PREFIX):
        if _has_prefix(name, prefix):
            rest = name[len(prefix) :]
            break
    else:
        raise InvalidAccessorNameError(name)

    if rest.startswith(SNAKE_SEPARATOR):
        return rest[1:]
    # JavaBeans decapitalization: getURL -> URL, getName -> name
    if len(rest) == 1 or not rest[1].isupper():
        return rest[0].lower() + rest[1:]
    return rest


class PropertyNameFilter:
    """Rejects names that must never become properties."""

    def __init__(self, reserved_prefixes: Iterable[str], excluded_names: Iterable[str]) -> None:
        self._reserved_prefixes = tuple(reserved_prefixes)
        self._excluded_names = frozenset(excluded_names)

    @classmethod
    def from_config(cls, config: ReflectionConfig) -> PropertyNameFilter:
        return cls(config.reserved_prefixes, config.excluded_names)

    def __call__(self, name: str) -> bool:
        return not (name.startswith(self._reserved_prefixes) or name in self._excluded_names)
