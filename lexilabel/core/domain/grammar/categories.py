# lexilabel\core\domain\grammar\categories.py
"""
grammar/categories.py

Closed enumerations of the grammatical categories a term can vary by.

Every category carries short *label codes*, the values used in label
templates and source data (e.g. `plural="y"`, `case="a"`, `gender="f"`).
`from_label_value()` maps either a code or the full member value back to the
member; `label_value` returns the primary code.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Type


class GrammaticalCategory(str, Enum):
    """Base for the category enums below. Defines no members itself."""

    @property
    def label_value(self) -> str:
        return _LABEL_VALUES[type(self)][self][0]

    @classmethod
    def from_label_value(cls, value):
        if isinstance(value, cls):
            return value
        code = str(value).strip().lower()
        for member, codes in _LABEL_VALUES[cls].items():
            if code == member.value or code in codes:
                return member
        raise ValueError(f"Unknown {cls.__name__} label value: {value!r}")


class LanguageNumber(GrammaticalCategory):
    SINGULAR = "singular"
    PLURAL = "plural"
    DUAL = "dual"

    def swap(self) -> "LanguageNumber":
        """Plural for singular and dual, singular for plural."""
        if self is LanguageNumber.PLURAL:
            return LanguageNumber.SINGULAR
        return LanguageNumber.PLURAL


class LanguageCase(GrammaticalCategory):
    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"
    LOCATIVE = "locative"
    VOCATIVE = "vocative"


class LanguageGender(GrammaticalCategory):
    NEUTER = "neuter"
    FEMININE = "feminine"
    MASCULINE = "masculine"
    ANIMATE_MASCULINE = "animate_masculine"
    COMMON = "common"


class LanguageStartsWith(GrammaticalCategory):
    """Sound class of a word's beginning, used for article choice (a/an, le/l')."""

    CONSONANT = "consonant"
    VOWEL = "vowel"
    SPECIAL = "special"


class LanguageArticle(GrammaticalCategory):
    ZERO = "zero"
    INDEFINITE = "indefinite"
    DEFINITE = "definite"


class PluralCategory(GrammaticalCategory):
    """CLDR plural category of a count, used by `<plural num="0">` choices."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class NounType(str, Enum):
    """Classification of a noun, deciding which forms it must carry."""

    ENTITY = "entity"  # renameable entity names (Account, Opportunity)
    FIELD = "field"
    OTHER = "other"

    @classmethod
    def from_api_value(cls, value) -> "NounType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


# Primary code first.
_LABEL_VALUES: Dict[Type[GrammaticalCategory], Dict[GrammaticalCategory, Tuple[str, ...]]] = {
    LanguageNumber: {
        LanguageNumber.SINGULAR: ("sg", "n"),
        LanguageNumber.PLURAL: ("pl", "y"),
        LanguageNumber.DUAL: ("du", "d"),
    },
    LanguageCase: {
        LanguageCase.NOMINATIVE: ("n", "nom"),
        LanguageCase.ACCUSATIVE: ("a", "acc"),
        LanguageCase.GENITIVE: ("g", "gen"),
        LanguageCase.DATIVE: ("d", "dat"),
        LanguageCase.INSTRUMENTAL: ("in", "ins"),
        LanguageCase.PREPOSITIONAL: ("pr", "prep"),
        LanguageCase.LOCATIVE: ("l", "loc"),
        LanguageCase.VOCATIVE: ("v", "voc"),
    },
    LanguageGender: {
        LanguageGender.NEUTER: ("n",),
        LanguageGender.FEMININE: ("f",),
        LanguageGender.MASCULINE: ("m",),
        LanguageGender.ANIMATE_MASCULINE: ("a",),
        LanguageGender.COMMON: ("c", "e"),
    },
    LanguageStartsWith: {
        LanguageStartsWith.CONSONANT: ("c",),
        LanguageStartsWith.VOWEL: ("v",),
        LanguageStartsWith.SPECIAL: ("s",),
    },
    LanguageArticle: {
        LanguageArticle.ZERO: ("z", ""),
        LanguageArticle.INDEFINITE: ("a", "an"),
        LanguageArticle.DEFINITE: ("the",),
    },
    PluralCategory: {
        PluralCategory.ZERO: ("0",),
        PluralCategory.ONE: ("1",),
        PluralCategory.TWO: ("2",),
        PluralCategory.FEW: ("f",),
        PluralCategory.MANY: ("m",),
        PluralCategory.OTHER: ("n",),
    },
}


__all__ = [
    "GrammaticalCategory",
    "LanguageNumber",
    "LanguageCase",
    "LanguageGender",
    "LanguageStartsWith",
    "LanguageArticle",
    "PluralCategory",
    "NounType",
]
