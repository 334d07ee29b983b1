# declension\germanic.py
"""
declension/germanic.py

Declensions for the gendered Germanic languages (DE, NL, SV).

- German: four cases, three genders, article tables per case, strong /
  mixed / weak adjective endings, nouns always capitalised.
- Dutch: common/neuter gender, de/het, attributive -e.
- Swedish: common/neuter gender, the definite article is a suffix of the
  noun (konto -> kontot), so it is part of the noun form key.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    ModifierForm,
    NounForm,
)

from .base import LanguageDeclension, register_declension

SG = LanguageNumber.SINGULAR
NOM = LanguageCase.NOMINATIVE
ACC = LanguageCase.ACCUSATIVE
GEN = LanguageCase.GENITIVE
DAT = LanguageCase.DATIVE

NEUTER = LanguageGender.NEUTER
FEMININE = LanguageGender.FEMININE
MASCULINE = LanguageGender.MASCULINE
COMMON = LanguageGender.COMMON

DEFINITE = LanguageArticle.DEFINITE
INDEFINITE = LanguageArticle.INDEFINITE
ZERO = LanguageArticle.ZERO

# Columns: neuter, feminine, masculine, plural
_Row = Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]


def _column(gender: Optional[LanguageGender], number: LanguageNumber) -> int:
    if number is not SG:
        return 3
    return {NEUTER: 0, FEMININE: 1, MASCULINE: 2}.get(gender, 0)


# ---------------------------------------------------------------------------
# German
# ---------------------------------------------------------------------------


@register_declension("de")
class GermanDeclension(LanguageDeclension):
    required_cases = (NOM, ACC, GEN, DAT)
    article_types = (INDEFINITE, DEFINITE)
    required_genders = (NEUTER, FEMININE, MASCULINE)
    default_gender = NEUTER
    modifier_agreement = frozenset({"number", "case", "gender", "article"})

    _ARTICLES: Dict[LanguageArticle, Dict[LanguageCase, _Row]] = {
        DEFINITE: {
            NOM: ("das", "die", "der", "die"),
            ACC: ("das", "die", "den", "die"),
            GEN: ("des", "der", "des", "der"),
            DAT: ("dem", "der", "dem", "den"),
        },
        INDEFINITE: {
            NOM: ("ein", "eine", "ein", None),
            ACC: ("ein", "eine", "einen", None),
            GEN: ("eines", "einer", "eines", None),
            DAT: ("einem", "einer", "einem", None),
        },
    }

    # Weak after the definite article, mixed after ein-words, strong without article.
    _ADJECTIVE_ENDINGS: Dict[LanguageArticle, Dict[LanguageCase, _Row]] = {
        DEFINITE: {
            NOM: ("e", "e", "e", "en"),
            ACC: ("e", "e", "en", "en"),
            GEN: ("en", "en", "en", "en"),
            DAT: ("en", "en", "en", "en"),
        },
        INDEFINITE: {
            NOM: ("es", "e", "er", "en"),
            ACC: ("es", "e", "en", "en"),
            GEN: ("en", "en", "en", "en"),
            DAT: ("en", "en", "en", "en"),
        },
        ZERO: {
            NOM: ("es", "e", "er", "e"),
            ACC: ("es", "e", "en", "e"),
            GEN: ("en", "er", "en", "er"),
            DAT: ("em", "er", "em", "en"),
        },
    }

    def inflect_noun(self, noun, form: NounForm) -> Optional[str]:
        if form.case is NOM:
            return None
        base = noun.get_explicit(NounForm(form.number))
        if base is None:
            return None
        if form.number is SG:
            if form.case is GEN and noun.gender in (MASCULINE, NEUTER):
                return base + ("es" if base.endswith(("s", "ß", "x", "z")) else "s")
            return base
        if form.case is DAT and not base.endswith(("n", "s")):
            return base + "n"
        return base

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        table = self._ARTICLES.get(article_type)
        if table is None:
            return None
        return table[form.case][_column(form.gender, form.number)]

    def derive_adjective_string(self, adjective, form: ModifierForm) -> Optional[str]:
        stem = adjective.base
        ending = self._ADJECTIVE_ENDINGS[form.article][form.case][_column(form.gender, form.number)]
        if stem.endswith("e") and ending.startswith("e"):
            stem = stem[:-1]
        return stem + ending

    def format_lowercase_noun(self, text: str, form: Optional[NounForm] = None) -> str:
        # German nouns are capitalised wherever they appear.
        return text


# ---------------------------------------------------------------------------
# Dutch
# ---------------------------------------------------------------------------


@register_declension("nl")
class DutchDeclension(LanguageDeclension):
    article_types = (INDEFINITE, DEFINITE)
    required_genders = (COMMON, NEUTER)
    default_gender = COMMON
    modifier_agreement = frozenset({"number", "gender", "article"})

    _S_PLURAL_ENDINGS = ("e", "el", "em", "en", "er", "je")

    def inflect_noun(self, noun, form: NounForm) -> Optional[str]:
        if form.number is SG:
            return None
        singular = noun.get_explicit(NounForm(SG))
        if singular is None:
            return None
        if singular.endswith(self._S_PLURAL_ENDINGS):
            return singular + "s"
        return singular + "en"

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        if article_type is DEFINITE:
            return "het" if form.number is SG and form.gender is NEUTER else "de"
        if article_type is INDEFINITE:
            return "een" if form.number is SG else None
        return None

    def derive_adjective_string(self, adjective, form: ModifierForm) -> Optional[str]:
        base = adjective.base
        if form.number is SG and form.gender is NEUTER and form.article is not DEFINITE:
            return base
        return base if base.endswith("e") else base + "e"


# ---------------------------------------------------------------------------
# Swedish
# ---------------------------------------------------------------------------


@register_declension("sv")
class SwedishDeclension(LanguageDeclension):
    noun_articles = (ZERO, DEFINITE)
    article_types = (INDEFINITE,)
    required_genders = (COMMON, NEUTER)
    default_gender = COMMON
    modifier_agreement = frozenset({"number", "gender", "article"})
    vowels = "aeiouyåäö"

    def _ends_with_vowel(self, text: str) -> bool:
        return bool(text) and text[-1].lower() in self.vowels

    def inflect_noun(self, noun, form: NounForm) -> Optional[str]:
        if form.article is not DEFINITE:
            return None
        base = noun.get_explicit(NounForm(form.number))
        if base is None:
            return None
        if form.number is SG:
            if noun.gender is NEUTER:
                return base + ("t" if self._ends_with_vowel(base) else "et")
            return base + ("n" if self._ends_with_vowel(base) else "en")
        if base.endswith("r") or self._ends_with_vowel(base):
            return base + "na"
        if noun.gender is NEUTER and base.endswith("n"):
            return base + "a"
        return base + "en"

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        if article_type is INDEFINITE and form.number is SG:
            return "ett" if form.gender is NEUTER else "en"
        return None

    def derive_adjective_string(self, adjective, form: ModifierForm) -> Optional[str]:
        base = adjective.base
        if form.number is not SG or form.article is DEFINITE:
            return base if base.endswith("a") else base + "a"
        if form.gender is NEUTER:
            return base + "t"
        return base
