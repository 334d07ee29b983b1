# declension\factory.py
"""
declension/factory.py

Process-wide cache of declension instances.

Declensions are pure rule objects, so one instance per language code is
built on first use and shared by every label set and request. The cache is
never invalidated; `clear_declension_cache()` exists for tests.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Union

import structlog

from lexilabel.core.domain.language import HumanLanguage

# Importing the language modules populates DECLENSION_REGISTRY.
from . import english, germanic, romance, simple, slavic  # noqa: F401
from .base import DECLENSION_REGISTRY, LanguageDeclension
from .simple import GenericDeclension

logger = structlog.get_logger()

# Map: language code -> LanguageDeclension
_DECLENSION_CACHE: Dict[str, LanguageDeclension] = {}

# Lock for double-checked creation
_CACHE_LOCK = threading.RLock()


def _language_code(language: Union[HumanLanguage, str]) -> str:
    if isinstance(language, HumanLanguage):
        return language.code
    return HumanLanguage.parse(str(language)).code


def get_declension(language: Union[HumanLanguage, str]) -> LanguageDeclension:
    """
    Return the shared declension for a language ("de", "de_AT" and
    HumanLanguage("de_AT") all give the German rules).

    Languages with no registered rules get a GenericDeclension.
    """
    code = _language_code(language)

    # Fast path (no lock) for already-built entries.
    existing = _DECLENSION_CACHE.get(code)
    if existing is not None:
        return existing

    with _CACHE_LOCK:
        existing = _DECLENSION_CACHE.get(code)
        if existing is not None:
            return existing

        cls = DECLENSION_REGISTRY.get(code)
        if cls is None:
            logger.debug("declension_generic_fallback", lang=code)
            cls = GenericDeclension
        declension = cls(code)
        _DECLENSION_CACHE[code] = declension
        return declension


def registered_languages() -> List[str]:
    """Language codes with specific declension rules."""
    return sorted(DECLENSION_REGISTRY.keys())


def clear_declension_cache() -> None:
    with _CACHE_LOCK:
        _DECLENSION_CACHE.clear()
