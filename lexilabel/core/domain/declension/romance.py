# declension\romance.py
"""
declension/romance.py

Declensions for Romance languages (FR, ES, IT).

All three have two genders, no case, definite and indefinite articles, and
adjectives agreeing in gender and number. Article choice also depends on
the sound the following word starts with:

- French elides before a vowel: le/la -> l'.
- Italian distinguishes vowel, "impure" onsets (s+consonant, z, gn, ps) and
  plain consonants: il/lo/l', un/uno/un'.
- Spanish uses el/un before a stressed initial a- in feminine nouns
  (el agua); source data marks those with the SPECIAL starts-with class.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageGender,
    LanguageNumber,
    LanguageStartsWith,
    ModifierForm,
    NounForm,
    PluralCategory,
)

from .base import LanguageDeclension, register_declension

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
FEMININE = LanguageGender.FEMININE
MASCULINE = LanguageGender.MASCULINE
DEFINITE = LanguageArticle.DEFINITE
INDEFINITE = LanguageArticle.INDEFINITE
VOWEL = LanguageStartsWith.VOWEL
SPECIAL = LanguageStartsWith.SPECIAL

_ROMANCE_VOWELS = "aeiouàáâäèéêëìíîïòóôöùúûüœæ"


class RomanceDeclension(LanguageDeclension):
    """Shared shape of the Romance declensions; not registered itself."""

    article_types = (INDEFINITE, DEFINITE)
    required_genders = (MASCULINE, FEMININE)
    default_gender = MASCULINE
    has_starts_with = True
    modifier_agreement = frozenset({"number", "gender"})
    vowels = _ROMANCE_VOWELS

    def pluralize(self, singular: str, gender: Optional[LanguageGender]) -> str:
        raise NotImplementedError

    def inflect_noun(self, noun, form: NounForm) -> Optional[str]:
        if form.number is SG:
            return None
        singular = noun.get_explicit(NounForm(SG))
        if singular is None:
            return None
        return self.pluralize(singular, noun.gender)


# ---------------------------------------------------------------------------
# French
# ---------------------------------------------------------------------------


@register_declension("fr")
class FrenchDeclension(RomanceDeclension):
    # Mute h elides in the common case (l'homme, l'hôpital).
    vowels = _ROMANCE_VOWELS + "h"

    def pluralize(self, singular: str, gender: Optional[LanguageGender]) -> str:
        lower = singular.lower()
        if lower.endswith(("s", "x", "z")):
            return singular
        if lower.endswith("al"):
            return singular[:-2] + "aux"
        if lower.endswith(("eau", "eu")):
            return singular + "x"
        return singular + "s"

    def plural_category(self, value: Decimal) -> PluralCategory:
        # Zero is singular in French: "0 compte".
        return PluralCategory.ONE if abs(value) < 2 else PluralCategory.OTHER

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        if article_type is DEFINITE:
            if form.number is not SG:
                return "les"
            if form.starts_with is VOWEL:
                return "l'"
            return "la" if form.gender is FEMININE else "le"
        if article_type is INDEFINITE:
            if form.number is not SG:
                return "des"
            return "une" if form.gender is FEMININE else "un"
        return None

    def derive_adjective_string(self, adjective, form: ModifierForm) -> Optional[str]:
        text = adjective.base
        if form.gender is FEMININE and not text.endswith("e"):
            text += "e"
        if form.number is not SG and not text.endswith(("s", "x")):
            text += "s"
        return text


# ---------------------------------------------------------------------------
# Spanish
# ---------------------------------------------------------------------------


@register_declension("es")
class SpanishDeclension(RomanceDeclension):
    def pluralize(self, singular: str, gender: Optional[LanguageGender]) -> str:
        lower = singular.lower()
        if lower[-1:] in _ROMANCE_VOWELS:
            return singular + "s"
        if lower.endswith("z"):
            return singular[:-1] + "ces"
        return singular + "es"

    def starts_with_for(self, text: str) -> LanguageStartsWith:
        # Vowel onsets do not change Spanish articles; stressed a- needs data.
        return LanguageStartsWith.CONSONANT

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        feminine = form.gender is FEMININE
        if article_type is DEFINITE:
            if form.number is not SG:
                return "las" if feminine else "los"
            return "la" if feminine and form.starts_with is not SPECIAL else "el"
        if article_type is INDEFINITE:
            if form.number is not SG:
                return "unas" if feminine else "unos"
            return "una" if feminine and form.starts_with is not SPECIAL else "un"
        return None

    def derive_adjective_string(self, adjective, form: ModifierForm) -> Optional[str]:
        text = adjective.base
        if form.gender is FEMININE and text.endswith("o"):
            text = text[:-1] + "a"
        if form.number is not SG:
            text = self.pluralize(text, form.gender)
        return text


# ---------------------------------------------------------------------------
# Italian
# ---------------------------------------------------------------------------


@register_declension("it")
class ItalianDeclension(RomanceDeclension):
    _IMPURE_ONSETS = ("z", "gn", "ps", "x", "y")

    def starts_with_for(self, text: str) -> LanguageStartsWith:
        word = text.strip().lower()
        if not word:
            return LanguageStartsWith.CONSONANT
        if word[0] in self.vowels:
            return VOWEL
        if word.startswith("s") and len(word) > 1 and word[1] not in self.vowels:
            return SPECIAL
        if word.startswith(self._IMPURE_ONSETS):
            return SPECIAL
        return LanguageStartsWith.CONSONANT

    def pluralize(self, singular: str, gender: Optional[LanguageGender]) -> str:
        lower = singular.lower()
        if lower.endswith("o"):
            return singular[:-1] + "i"
        if lower.endswith("a"):
            return singular[:-1] + ("e" if gender is FEMININE else "i")
        if lower.endswith("e"):
            return singular[:-1] + "i"
        # Loanwords and accented endings are invariable (il computer, i computer).
        return singular

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        feminine = form.gender is FEMININE
        starts = form.starts_with
        if article_type is DEFINITE:
            if form.number is not SG:
                if feminine:
                    return "le"
                return "i" if starts is LanguageStartsWith.CONSONANT else "gli"
            if starts is VOWEL:
                return "l'"
            if feminine:
                return "la"
            return "lo" if starts is SPECIAL else "il"
        if article_type is INDEFINITE:
            if form.number is not SG:
                return None
            if feminine:
                return "un'" if starts is VOWEL else "una"
            return "uno" if starts is SPECIAL else "un"
        return None

    def derive_adjective_string(self, adjective, form: ModifierForm) -> Optional[str]:
        text = adjective.base
        plural = form.number is not SG
        if text.endswith("o"):
            stem = text[:-1]
            if form.gender is FEMININE:
                return stem + ("e" if plural else "a")
            return stem + ("i" if plural else "o")
        if text.endswith("e") and plural:
            return text[:-1] + "i"
        return text
