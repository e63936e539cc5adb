"""Shared type aliases for readability.

Queue ids are plain integers at runtime; the alias keeps signatures honest
about which integer is expected.
"""
from __future__ import annotations

from typing import NewType

QueueId = NewType("QueueId", int)
