# lexilabel\core\domain\declension\__init__.py
"""
Per-language declension rules.

Use `get_declension(language)` rather than instantiating classes directly:
instances are cached and shared process-wide.
"""

from .base import DECLENSION_REGISTRY, LanguageDeclension, register_declension
from .factory import clear_declension_cache, get_declension, registered_languages
from .simple import GenericDeclension, SimpleDeclension

__all__ = [
    "DECLENSION_REGISTRY",
    "GenericDeclension",
    "LanguageDeclension",
    "SimpleDeclension",
    "register_declension",
    "get_declension",
    "registered_languages",
    "clear_declension_cache",
]
