"""Key-based persistence for projects, sheets, screens and rules."""

from .memory import InMemoryStore, NotFoundError, StoreError

__all__ = [
    "InMemoryStore",
    "NotFoundError",
    "StoreError",
]
