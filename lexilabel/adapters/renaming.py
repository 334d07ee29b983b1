# lexilabel\adapters\renaming.py
"""
In-memory renaming provider.

Renames are registered per language (a full locale such as "en_GB" or a
bare language code such as "en" covering every locale of that language)
and per case-insensitive entity name. Toggling renaming off keeps the
registrations, so toggling it back on restores exactly the same nouns.

Not thread-safe; see `RenamingContext`.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

import structlog

from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.renaming import StandardRenamingProvider
from lexilabel.core.domain.terms import Noun

logger = structlog.get_logger()

_RenameKey = Tuple[str, str]


class MapRenamingProvider(StandardRenamingProvider):
    def __init__(self, use_renamed_nouns: bool = True) -> None:
        super().__init__(use_renamed_nouns)
        self._renames: Dict[_RenameKey, Noun] = {}

    @staticmethod
    def _key(language: Union[HumanLanguage, str], entity_name: str) -> _RenameKey:
        if isinstance(language, HumanLanguage):
            scope = language.locale
        else:
            scope = HumanLanguage(language).locale
        return (scope, entity_name.strip().casefold())

    def rename(self, language: Union[HumanLanguage, str], noun: Noun, entity_name: Optional[str] = None) -> None:
        """Register `noun` as the substitute for `entity_name` (defaults to the noun's name)."""
        key = self._key(language, entity_name or noun.name)
        self._renames[key] = noun
        logger.debug("noun_renamed", lang=key[0], entity=key[1])

    def clear_rename(self, language: Union[HumanLanguage, str], entity_name: str) -> None:
        self._renames.pop(self._key(language, entity_name), None)

    def clear(self) -> None:
        self._renames.clear()

    def get_renamed_noun(self, language: HumanLanguage, entity_name: str) -> Optional[Noun]:
        language = HumanLanguage.parse(language)
        noun = self._renames.get(self._key(language, entity_name))
        if noun is None and language.country:
            noun = self._renames.get(self._key(language.code, entity_name))
        return noun

    def __len__(self) -> int:
        return len(self._renames)
