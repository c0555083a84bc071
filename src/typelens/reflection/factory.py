"""Process-wide descriptor cache.

Descriptors are derived purely from their type, so one per type is enough.
With caching enabled, ``find_descriptor`` builds at most once per type:
the lock is held for the duration of the build. A failed build is cached
as well and the same error is raised again on every later request.
"""

from __future__ import annotations

import threading
from typing import Any

from typelens.config.loader import load_config
from typelens.config.models import ReflectionConfig, TypeLensConfig
from typelens.core.logging import configure_logging, get_logger
from typelens.reflection.builder import build_descriptor
from typelens.reflection.descriptor import TypeDescriptor
from typelens.reflection.errors import ReflectionError
from typelens.reflection.members import Introspector

log = get_logger(__name__)


class DescriptorFactory:
    """Thread-safe descriptor cache keyed by type identity."""

    def __init__(
        self,
        config: ReflectionConfig | None = None,
        *,
        introspector: Introspector | None = None,
    ) -> None:
        self._config = config or ReflectionConfig()
        self._introspector = introspector
        self.cache_enabled = self._config.cache_enabled
        self._lock = threading.Lock()
        self._descriptors: dict[Any, TypeDescriptor | ReflectionError] = {}

    @classmethod
    def from_config(cls, config: TypeLensConfig) -> DescriptorFactory:
        """Factory for config.reflection, with package logging routed per config.logging."""
        configure_logging(config.logging)
        return cls(config.reflection)

    def find_descriptor(self, tp: Any) -> TypeDescriptor:
        """Descriptor for tp, built on first request when caching is enabled.

        Raises:
            ReflectionError: tp cannot be described (e.g. AmbiguousAccessorError).
        """
        if not self.cache_enabled:
            return self._build(tp)

        with self._lock:
            cached = self._descriptors.get(tp)
            if cached is None:
                log.debug("descriptor_cache_miss", type=repr(tp))
                try:
                    cached = self._build(tp)
                except ReflectionError as e:
                    cached = e
                self._descriptors[tp] = cached

        if isinstance(cached, ReflectionError):
            raise cached
        return cached

    def _build(self, tp: Any) -> TypeDescriptor:
        return build_descriptor(tp, introspector=self._introspector, config=self._config)

    def clear(self) -> None:
        with self._lock:
            self._descriptors.clear()

    def __contains__(self, tp: Any) -> bool:
        with self._lock:
            return tp in self._descriptors

    def __len__(self) -> int:
        with self._lock:
            return len(self._descriptors)


_default_factory: DescriptorFactory | None = None
_default_factory_lock = threading.Lock()


def get_default_factory() -> DescriptorFactory:
    """Process-wide factory, configured from load_config() on first use."""
    global _default_factory  # noqa: PLW0603
    with _default_factory_lock:
        if _default_factory is None:
            _default_factory = DescriptorFactory.from_config(load_config())
        return _default_factory


def set_default_factory(factory: DescriptorFactory | None) -> None:
    """Replace the process-wide factory. None resets to a fresh default on next use."""
    global _default_factory  # noqa: PLW0603
    with _default_factory_lock:
        _default_factory = factory


def describe(tp: Any) -> TypeDescriptor:
    """Descriptor for tp from the process-wide factory."""
    return get_default_factory().find_descriptor(tp)
