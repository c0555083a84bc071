"""Per-type property accessor descriptors for data-binding layers."""

from typelens.reflection import TypeDescriptor, describe

__all__ = ["TypeDescriptor", "describe"]
