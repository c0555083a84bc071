"""Getter and setter conflict resolution.

A property can have several candidate accessors after classification:
an inherited method next to its covariant override, or ``isX`` next to
``getX``. Each group is folded pairwise down to one winner.

Getters:
    same type     -> only legal for bool, the ``is`` form wins
    narrower type -> wins (covariant override)
    unrelated     -> AmbiguousAccessorError

Setters:
    parameter type equal to the resolved getter type -> wins immediately
    narrower type -> wins
    unrelated     -> ambiguity is remembered; an exact getter-type match
                     found later still wins, otherwise the error is raised
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from typelens.core.logging import get_logger
from typelens.reflection.errors import AmbiguousAccessorError
from typelens.reflection.members import Introspector, MethodInfo
from typelens.reflection.naming import is_boolean_getter_name
from typelens.reflection.types import erase

log = get_logger(__name__)


def _ambiguous(
    property_name: str, owner: Any, kind: str, first: Any, second: Any
) -> AmbiguousAccessorError:
    log.debug(
        "ambiguous_accessor",
        property=property_name,
        owner=repr(owner),
        kind=kind,
        types=(repr(first), repr(second)),
    )
    return AmbiguousAccessorError(property_name, owner, kind, (first, second))


def _pick_getter(
    winner: MethodInfo,
    candidate: MethodInfo,
    property_name: str,
    introspector: Introspector,
    owner: Any,
) -> MethodInfo:
    winner_type = erase(winner.return_type)
    candidate_type = erase(candidate.return_type)
    if candidate_type == winner_type:
        if candidate_type is not introspector.boolean_type:
            raise _ambiguous(property_name, owner, "getter", winner_type, candidate_type)
        return candidate if is_boolean_getter_name(candidate.name) else winner
    if introspector.is_assignable(candidate_type, winner_type):
        return winner
    if introspector.is_assignable(winner_type, candidate_type):
        return candidate
    raise _ambiguous(property_name, owner, "getter", winner_type, candidate_type)


def resolve_getter_conflicts(
    getters: Mapping[str, list[MethodInfo]],
    introspector: Introspector,
    owner: Any,
) -> dict[str, MethodInfo]:
    """Reduce each getter group to one method.

    Raises:
        AmbiguousAccessorError: a group cannot be reconciled.
    """
    resolved: dict[str, MethodInfo] = {}
    for property_name, candidates in getters.items():
        winner = candidates[0]
        for candidate in candidates[1:]:
            winner = _pick_getter(winner, candidate, property_name, introspector, owner)
        resolved[property_name] = winner
    return resolved


def _pick_setter(
    current: MethodInfo | None,
    candidate: MethodInfo,
    property_name: str,
    introspector: Introspector,
    owner: Any,
) -> MethodInfo:
    if current is None:
        return candidate
    current_type = erase(current.parameter_types[0])
    candidate_type = erase(candidate.parameter_types[0])
    if introspector.is_assignable(current_type, candidate_type):
        return candidate
    if introspector.is_assignable(candidate_type, current_type):
        return current
    raise _ambiguous(property_name, owner, "setter", current_type, candidate_type)


def resolve_setter_conflicts(
    setters: Mapping[str, list[MethodInfo]],
    getter_types: Mapping[str, Any],
    introspector: Introspector,
    owner: Any,
) -> dict[str, MethodInfo]:
    """Reduce each setter group to one method, preferring the getter's type.

    Raises:
        AmbiguousAccessorError: no exact getter-type match and two
            candidates with unrelated parameter types.
    """
    resolved: dict[str, MethodInfo] = {}
    for property_name, candidates in setters.items():
        getter_type = getter_types.get(property_name)
        match: MethodInfo | None = None
        ambiguity: AmbiguousAccessorError | None = None
        for setter in candidates:
            if getter_type is not None and erase(setter.parameter_types[0]) == getter_type:
                match = setter
                break
            if ambiguity is None:
                try:
                    match = _pick_setter(match, setter, property_name, introspector, owner)
                except AmbiguousAccessorError as e:
                    # An exact getter-type match may still follow
                    match = None
                    ambiguity = e
        if match is None:
            assert ambiguity is not None
            raise ambiguity
        resolved[property_name] = match
    return resolved
