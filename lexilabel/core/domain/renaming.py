# lexilabel/core/domain/renaming.py
"""
Renaming support shared by the core.

- `StandardEntity`: the plain renameable, just a canonical entity name.
- `StandardRenamingProvider`: renames nothing; every entity renders with its
  canonical noun.
- `RenamingContext`: the explicit per-session holder of the active provider.
  Localizers read `get_provider()` on every render, so swapping providers or
  toggling renaming takes effect without rebuilding labels.
- `rename_noun()`: builds a renamed clone from plain strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lexilabel.core.domain.dictionary import LanguageDictionary
from lexilabel.core.domain.grammar import LanguageGender, LanguageNumber, LanguageStartsWith, NounForm
from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.terms import Noun
from lexilabel.core.ports.renaming import IRenamingProvider


@dataclass(frozen=True)
class StandardEntity:
    """A renameable identified only by its canonical entity name."""

    entity_name: str


class StandardRenamingProvider:
    """Provider with no renames registered."""

    def __init__(self, use_renamed_nouns: bool = True) -> None:
        self._use_renamed_nouns = use_renamed_nouns

    def get_renamed_noun(self, language: HumanLanguage, entity_name: str) -> Optional[Noun]:
        return None

    def get_renameable(self, dictionary: LanguageDictionary, entity_name: str) -> Optional[Noun]:
        if self._use_renamed_nouns:
            renamed = self.get_renamed_noun(dictionary.language, entity_name)
            if renamed is not None:
                return renamed
        return dictionary.get_noun(entity_name)

    def is_renamed(self, language: HumanLanguage, entity_name: str) -> bool:
        return self._use_renamed_nouns and self.get_renamed_noun(language, entity_name) is not None

    def use_renamed_nouns(self) -> bool:
        return self._use_renamed_nouns

    def set_use_renamed_nouns(self, enabled: bool) -> None:
        self._use_renamed_nouns = bool(enabled)


class RenamingContext:
    """
    Holds the renaming provider for one logical session or request.

    Not thread-safe. Create one per session (the container's
    `renaming_context` provider is a Factory for this reason) and complete
    `set_provider` / `set_use_renamed_nouns` calls before rendering from
    several threads.
    """

    def __init__(self, provider: Optional[IRenamingProvider] = None) -> None:
        self._provider: IRenamingProvider = provider if provider is not None else StandardRenamingProvider()

    def get_provider(self) -> IRenamingProvider:
        return self._provider

    def set_provider(self, provider: IRenamingProvider) -> None:
        if provider is None:
            raise ValueError("Renaming provider must be non-null.")
        self._provider = provider

    def use_renamed_nouns(self) -> bool:
        return self._provider.use_renamed_nouns()

    def set_use_renamed_nouns(self, enabled: bool) -> None:
        self._provider.set_use_renamed_nouns(enabled)


def rename_noun(
    noun: Noun,
    singular: str,
    plural: Optional[str] = None,
    gender: Optional[LanguageGender] = None,
    starts_with: Optional[LanguageStartsWith] = None,
) -> Noun:
    """
    Clone `noun` with new display strings.

    The plural is derived by the language rules when omitted, and the
    starts-with class is inferred from `singular` when not given.
    """
    forms = {NounForm(LanguageNumber.SINGULAR): singular}
    if plural is not None and noun.declension.has_plural:
        forms[NounForm(LanguageNumber.PLURAL)] = plural
    return noun.clone(gender=gender, starts_with=starts_with, forms=forms)
