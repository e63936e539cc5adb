"""External interfaces (console commands)."""
from .console import ConsoleInterface

__all__ = ["ConsoleInterface"]
