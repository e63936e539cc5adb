"""Core primitives shared across all subsystems.

This module aggregates enums, common types and error classes. Higher level
packages import from here to avoid circular dependencies.
"""

from . import enums, errors, types

__all__ = ["enums", "errors", "types"]
