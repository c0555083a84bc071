"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
Accessor naming prefixes are part of the naming convention itself.

For configurable values, see models.py (ReflectionConfig, LoggingConfig).
"""

# =============================================================================
# Accessor Naming Convention
# =============================================================================

GETTER_PREFIX = "get"
"""Value-query accessor prefix (getName, get_name)."""

BOOLEAN_GETTER_PREFIX = "is"
"""Boolean-query accessor prefix (isActive, is_active)."""

SETTER_PREFIX = "set"
"""Value-assignment accessor prefix (setName, set_name)."""

SNAKE_SEPARATOR = "_"
"""Separator between prefix and property name in snake_case accessors."""

# =============================================================================
# Property Name Validity Defaults
# =============================================================================
# Defaults for ReflectionConfig.reserved_prefixes / excluded_names.

RESERVED_PREFIXES = ("$", "__")
"""Implementation-reserved name markers (synthetic and dunder members)."""

SERIAL_VERSION_NAME = "serialVersionUID"
"""Serialization version marker, never a property."""

META_PROPERTY_NAME = "class"
"""Meta-property denoting the type itself (getClass)."""
