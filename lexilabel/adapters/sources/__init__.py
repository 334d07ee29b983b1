# lexilabel/adapters/sources/__init__.py
from .json_source import JsonLabelSource
from .memory_source import InMemoryLabelSource

__all__ = ["JsonLabelSource", "InMemoryLabelSource"]
