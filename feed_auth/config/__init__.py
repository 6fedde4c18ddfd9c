"""Configuration package exports."""

from .store import ConfigStore, JsonConfigStore, MemoryConfigStore

__all__ = [
    "ConfigStore",
    "JsonConfigStore",
    "MemoryConfigStore",
]
