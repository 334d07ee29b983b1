# lexilabel\core\domain\grammar\forms.py
"""
grammar/forms.py

Form keys: immutable tuples of grammatical categories that index one
inflected variant of a term.

Form keys are value objects. Two keys with the same category values are
equal and hash alike, whichever declension produced them. Callers obtain
them through a `LanguageDeclension` (`get_noun_form`, `get_adjective_form`,
`get_article_form`) so that only keys legal for the language are built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .categories import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguageStartsWith,
)

_NO_GENDER = "-"


@dataclass(frozen=True)
class NounForm:
    """
    One inflected variant of a noun.

    Attributes:
        number: grammatical number.
        case: grammatical case (NOMINATIVE in caseless languages).
        article: ZERO unless the language inflects the article into the
            noun itself (e.g. Swedish "kontot").
    """

    number: LanguageNumber
    case: LanguageCase = LanguageCase.NOMINATIVE
    article: LanguageArticle = LanguageArticle.ZERO

    @property
    def key(self) -> str:
        """Stable string key, e.g. "sg.n", "pl.g" or "sg.n.the"."""
        parts = [self.number.label_value, self.case.label_value]
        if self.article is not LanguageArticle.ZERO:
            parts.append(self.article.label_value)
        return ".".join(parts)

    @property
    def is_plural(self) -> bool:
        return self.number is not LanguageNumber.SINGULAR

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class ModifierForm:
    """
    One inflected variant of an adjective or article.

    Axes the language does not distinguish are stored at their neutral value
    (SINGULAR, NOMINATIVE, no gender, CONSONANT, ZERO) so that equal surface
    requirements produce equal keys.
    """

    number: LanguageNumber = LanguageNumber.SINGULAR
    case: LanguageCase = LanguageCase.NOMINATIVE
    gender: Optional[LanguageGender] = None
    starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT
    article: LanguageArticle = LanguageArticle.ZERO

    @property
    def key(self) -> str:
        """Positional key: number.case.gender.starts_with.article."""
        return ".".join(
            [
                self.number.label_value,
                self.case.label_value,
                self.gender.label_value if self.gender is not None else _NO_GENDER,
                self.starts_with.label_value,
                self.article.label_value,
            ]
        )

    @classmethod
    def from_key(cls, key: str) -> "ModifierForm":
        parts = key.strip().split(".")
        if len(parts) != 5:
            raise ValueError(f"Modifier form key must have five parts: {key!r}")
        number, case, gender, starts_with, article = parts
        return cls(
            number=LanguageNumber.from_label_value(number),
            case=LanguageCase.from_label_value(case),
            gender=None if gender == _NO_GENDER else LanguageGender.from_label_value(gender),
            starts_with=LanguageStartsWith.from_label_value(starts_with),
            article=LanguageArticle.from_label_value(article),
        )

    def __str__(self) -> str:
        return self.key
