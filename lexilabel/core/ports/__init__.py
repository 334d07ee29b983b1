# lexilabel\core\ports\__init__.py
"""
Core Ports (Interfaces).

Protocols the adapters implement so the core can load label data and
substitute renamed nouns without knowing where either comes from.
"""

from .label_source import ILabelSource
from .renaming import IRenameable, IRenamingProvider

__all__ = [
    "ILabelSource",
    "IRenameable",
    "IRenamingProvider",
]
