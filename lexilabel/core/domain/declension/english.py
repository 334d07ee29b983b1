# declension\english.py
"""
declension/english.py

English: singular/plural, no case, no gender, a/an chosen by the sound the
next word starts with.
"""

from __future__ import annotations

from typing import Optional

from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageNumber,
    LanguageStartsWith,
    ModifierForm,
    NounForm,
)

from .base import LanguageDeclension, register_declension

_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")


def pluralize(singular: str) -> str:
    """Regular English plural: city -> cities, box -> boxes, account -> accounts."""
    if not singular:
        return singular
    lower = singular.lower()
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        return singular[:-1] + ("IES" if singular.isupper() else "ies")
    if lower.endswith(_SIBILANT_ENDINGS):
        return singular + ("ES" if singular.isupper() else "es")
    return singular + ("S" if singular.isupper() else "s")


@register_declension("en")
class EnglishDeclension(LanguageDeclension):
    article_types = (LanguageArticle.INDEFINITE, LanguageArticle.DEFINITE)
    has_starts_with = True

    def inflect_noun(self, noun, form: NounForm) -> Optional[str]:
        if form.number is LanguageNumber.PLURAL:
            singular = noun.get_explicit(NounForm(LanguageNumber.SINGULAR))
            if singular is not None:
                return pluralize(singular)
        return None

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        if article_type is LanguageArticle.DEFINITE:
            return "the"
        if article_type is LanguageArticle.INDEFINITE:
            if form.number is not LanguageNumber.SINGULAR:
                return None
            return "an" if form.starts_with is LanguageStartsWith.VOWEL else "a"
        return None
