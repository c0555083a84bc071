"""Method collection and accessor classification.

Collection walks from the most-derived type towards the root, recording
each method signature the first time it is seen, which is the override
that dispatch would pick. Interfaces of every class on the chain are
scanned too, because an abstract class need not redeclare the members of
the interfaces it implements.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from typelens.core.logging import get_logger
from typelens.reflection.members import Introspector, Member, MethodInfo
from typelens.reflection.naming import (
    is_getter_name,
    is_setter_name,
    method_to_property,
)
from typelens.reflection.types import MethodSignature, signature_of

log = get_logger(__name__)


def try_make_accessible(introspector: Introspector, member: Member) -> bool:
    """Best-effort visibility relaxation. Refusal is not an error."""
    try:
        accessible = introspector.make_accessible(member)
    except PermissionError:
        accessible = False
    if not accessible:
        log.debug(
            "visibility_relaxation_refused",
            member=getattr(member, "name", None),
            declaring_type=repr(member.declaring_type),
        )
    return accessible


def _add_unique_methods(
    introspector: Introspector,
    unique: dict[MethodSignature, MethodInfo],
    methods: Iterable[MethodInfo],
) -> None:
    for method in methods:
        # Covariant-override thunks duplicate a real override under the wider type
        if method.synthetic:
            continue
        signature = signature_of(method)
        if signature not in unique:
            try_make_accessible(introspector, method)
            unique[signature] = method


def collect_methods(tp: Any, introspector: Introspector) -> list[MethodInfo]:
    """All methods of tp and its ancestors, unique by signature, most-derived first."""
    unique: dict[MethodSignature, MethodInfo] = {}
    current = tp
    while current is not None and current is not introspector.root_type:
        _add_unique_methods(introspector, unique, introspector.declared_methods(current))
        for interface in introspector.interfaces(current):
            _add_unique_methods(introspector, unique, introspector.interface_methods(interface))
        current = introspector.superclass(current)
    return list(unique.values())


@dataclass
class AccessorCandidates:
    """Accessor candidates grouped by property name, before conflict resolution."""

    getters: dict[str, list[MethodInfo]] = field(default_factory=lambda: defaultdict(list))
    setters: dict[str, list[MethodInfo]] = field(default_factory=lambda: defaultdict(list))


def classify_accessors(methods: Iterable[MethodInfo]) -> AccessorCandidates:
    candidates = AccessorCandidates()
    for method in methods:
        if method.parameter_count == 0 and is_getter_name(method.name):
            candidates.getters[method_to_property(method.name)].append(method)
        elif method.parameter_count == 1 and is_setter_name(method.name):
            candidates.setters[method_to_property(method.name)].append(method)
    return candidates
