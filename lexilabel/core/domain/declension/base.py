# declension\base.py
"""
declension/base.py

Shared abstractions for per-language declension rules.

A declension describes, for one language:
- the legal form-key space (numbers, cases, genders, inflected articles),
- a default inflector that fills in forms missing from a dictionary entry,
- article selection from gender, starts-with class, number and case,
- which categories of the governing noun an adjective must mirror.

Declensions are stateless beyond static tables. One instance per language
is created by `declension.factory.get_declension()` and shared process-wide.
"""

from __future__ import annotations

import abc
import itertools
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterator, Optional, Tuple, Type, Union

from lexilabel.core.domain.exceptions import UnsupportedGrammaticalFormError
from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguageStartsWith,
    ModifierForm,
    NounForm,
    NounType,
    PluralCategory,
)

if TYPE_CHECKING:  # pragma: no cover
    from lexilabel.core.domain.terms import Adjective, Noun


SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
ZERO = LanguageArticle.ZERO


class LanguageDeclension(abc.ABC):
    """
    Base class for all language declensions.

    Subclasses describe their form space with the class attributes below and
    override the `inflect_noun`, `get_default_article_string` and
    `derive_adjective_string` hooks where the language has rules.
    """

    #: Codes this class is registered under (set by `register_declension`).
    language_codes: Tuple[str, ...] = ()

    allowed_numbers: Tuple[LanguageNumber, ...] = (SG, PL)
    required_cases: Tuple[LanguageCase, ...] = (NOM,)
    #: Articles carried inside the noun form itself (ZERO everywhere but Scandinavian).
    noun_articles: Tuple[LanguageArticle, ...] = (ZERO,)
    #: Articles rendered as a separate word before the noun phrase.
    article_types: Tuple[LanguageArticle, ...] = ()
    required_genders: Tuple[LanguageGender, ...] = ()
    default_gender: Optional[LanguageGender] = None
    has_starts_with: bool = False
    #: Noun categories an adjective agrees with.
    modifier_agreement: FrozenSet[str] = frozenset({"number"})
    vowels: str = "aeiou"

    def __init__(self, language_code: str) -> None:
        self.language_code = language_code
        self._noun_forms: Dict[Tuple[LanguageNumber, LanguageCase, LanguageArticle], NounForm] = {
            (number, case, article): NounForm(number, case, article)
            for number, article, case in itertools.product(
                self.allowed_numbers, self.noun_articles, self.required_cases
            )
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.language_code!r})"

    # ------------------------------------------------------------------
    # Form-key space
    # ------------------------------------------------------------------

    @property
    def has_gender(self) -> bool:
        return bool(self.required_genders)

    @property
    def has_cases(self) -> bool:
        return len(self.required_cases) > 1

    @property
    def has_plural(self) -> bool:
        return PL in self.allowed_numbers

    @property
    def all_noun_forms(self) -> Tuple[NounForm, ...]:
        return tuple(self._noun_forms.values())

    def get_default_forms(self) -> Tuple[NounForm, ...]:
        """Every legal noun form key, for enumeration and validation."""
        return self.all_noun_forms

    @property
    def entity_forms(self) -> Tuple[NounForm, ...]:
        return self.all_noun_forms

    @property
    def field_forms(self) -> Tuple[NounForm, ...]:
        return tuple(f for f in self.all_noun_forms if f.number is SG)

    @property
    def other_forms(self) -> Tuple[NounForm, ...]:
        return (self._noun_forms[(SG, NOM, ZERO)],)

    def required_forms(self, noun_type: NounType) -> Tuple[NounForm, ...]:
        """Forms a noun of the given type must hold once constructed."""
        if noun_type is NounType.ENTITY:
            return self.entity_forms
        if noun_type is NounType.FIELD:
            return self.field_forms
        return self.other_forms

    def get_noun_form(
        self,
        number: Union[LanguageNumber, str] = SG,
        case: Union[LanguageCase, str] = NOM,
        article: Union[LanguageArticle, str] = ZERO,
    ) -> NounForm:
        """
        Return the canonical noun form key for this language.

        Raises:
            UnsupportedGrammaticalFormError: if the language does not define
                the requested number, case or inflected article.
        """
        number = LanguageNumber.from_label_value(number)
        case = LanguageCase.from_label_value(case)
        article = LanguageArticle.from_label_value(article)

        if number not in self.allowed_numbers:
            raise UnsupportedGrammaticalFormError(self.language_code, "number", number.value)
        if case not in self.required_cases:
            raise UnsupportedGrammaticalFormError(self.language_code, "case", case.value)
        if article not in self.noun_articles:
            raise UnsupportedGrammaticalFormError(self.language_code, "article", article.value)
        return self._noun_forms[(number, case, article)]

    def get_closest_noun_form(
        self,
        number: LanguageNumber = SG,
        case: LanguageCase = NOM,
        article: LanguageArticle = ZERO,
    ) -> NounForm:
        """Like `get_noun_form`, but degrades unsupported axes to the language default."""
        if number not in self.allowed_numbers:
            number = PL if number is not SG and self.has_plural else SG
        if case not in self.required_cases:
            case = NOM
        if article not in self.noun_articles:
            article = ZERO
        return self._noun_forms[(number, case, article)]

    def parse_noun_form_key(self, key: str) -> NounForm:
        """Map "sg", "pl.g" or "sg.n.the" style keys back to a form of this language."""
        parts = key.strip().split(".")
        if not parts[0] or len(parts) > 3:
            raise ValueError(f"Malformed noun form key: {key!r}")
        number = LanguageNumber.from_label_value(parts[0])
        case = LanguageCase.from_label_value(parts[1]) if len(parts) > 1 else NOM
        article = LanguageArticle.from_label_value(parts[2]) if len(parts) > 2 else ZERO
        return self.get_noun_form(number, case, article)

    def coerce_noun_form(self, value: Union[NounForm, str]) -> NounForm:
        if isinstance(value, NounForm):
            return self.get_noun_form(value.number, value.case, value.article)
        return self.parse_noun_form_key(value)

    def check_gender(self, gender: Optional[LanguageGender]) -> Optional[LanguageGender]:
        """Validate a noun gender; genderless languages drop it."""
        if not self.has_gender:
            return None
        if gender is None:
            return self.default_gender
        if gender not in self.required_genders:
            raise UnsupportedGrammaticalFormError(self.language_code, "gender", gender.value)
        return gender

    # ------------------------------------------------------------------
    # Default inflection
    # ------------------------------------------------------------------

    def inflect_noun(self, noun: "Noun", form: NounForm) -> Optional[str]:
        """
        Language-specific rule deriving `form` from the noun's stored values.

        Implementations read only `noun.get_explicit()`, never derived values,
        so derivation cannot recurse. Return None when no rule applies.
        """
        return None

    def closest_forms(self, form: NounForm) -> Iterator[NounForm]:
        """
        Forms to try when `form` has no value: drop the article, then the
        case, then switch the number.
        """
        seen = {form}
        candidates = (
            NounForm(form.number, form.case),
            NounForm(form.number),
            NounForm(form.number.swap()),
            NounForm(SG),
        )
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                yield candidate

    def derive_noun_string(self, noun: "Noun", form: NounForm) -> Optional[str]:
        """Derive an unset form, or None when no derivation path exists."""
        value = self.inflect_noun(noun, form)
        if value is not None:
            return value
        for candidate in self.closest_forms(form):
            value = noun.get_explicit(candidate)
            if value is None:
                value = self.inflect_noun(noun, candidate)
            if value is not None:
                return value
        return None

    # ------------------------------------------------------------------
    # Articles
    # ------------------------------------------------------------------

    def get_article_form(
        self,
        starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT,
        gender: Optional[LanguageGender] = None,
        number: LanguageNumber = SG,
        case: LanguageCase = NOM,
    ) -> ModifierForm:
        """Article form agreeing with a noun; axes the language ignores are neutralised."""
        return ModifierForm(
            number=number if number in self.allowed_numbers else SG,
            case=case if case in self.required_cases else NOM,
            gender=(gender or self.default_gender) if self.has_gender else None,
            starts_with=starts_with if self.has_starts_with else LanguageStartsWith.CONSONANT,
        )

    def get_default_article_string(
        self, form: ModifierForm, article_type: LanguageArticle
    ) -> Optional[str]:
        """Built-in article text for a form, or None when the language uses none there."""
        return None

    def get_article_string(
        self,
        article_type: LanguageArticle,
        starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT,
        gender: Optional[LanguageGender] = None,
        number: LanguageNumber = SG,
        case: LanguageCase = NOM,
    ) -> Optional[str]:
        if article_type is ZERO:
            return None
        form = self.get_article_form(starts_with, gender, number, case)
        return self.get_default_article_string(form, article_type)

    def inflects_article(self, article_type: LanguageArticle) -> bool:
        """True when the article is part of the noun form instead of a separate word."""
        return article_type is not ZERO and article_type in self.noun_articles

    def article_joiner(self, article_text: str) -> str:
        # Elided articles (l', un') attach directly to the next word.
        return "" if article_text.endswith(("'", "’")) else " "

    # ------------------------------------------------------------------
    # Adjectives
    # ------------------------------------------------------------------

    def get_adjective_form(
        self,
        number: LanguageNumber = SG,
        case: LanguageCase = NOM,
        gender: Optional[LanguageGender] = None,
        starts_with: LanguageStartsWith = LanguageStartsWith.CONSONANT,
        article: LanguageArticle = ZERO,
    ) -> ModifierForm:
        """Adjective form keyed only by the categories this language makes it agree with."""
        agree = self.modifier_agreement
        return ModifierForm(
            number=number if "number" in agree and number in self.allowed_numbers else SG,
            case=case if "case" in agree and case in self.required_cases else NOM,
            gender=(gender or self.default_gender) if "gender" in agree and self.has_gender else None,
            starts_with=starts_with if "starts_with" in agree else LanguageStartsWith.CONSONANT,
            article=article if "article" in agree else ZERO,
        )

    def derive_adjective_string(self, adjective: "Adjective", form: ModifierForm) -> Optional[str]:
        return adjective.base

    # ------------------------------------------------------------------
    # Plural rules
    # ------------------------------------------------------------------

    def plural_category(self, value: Decimal) -> PluralCategory:
        """
        Plural category of a count, selecting a `<plural>` branch.

        The default is the one/other split of English and most Germanic and
        Romance languages.
        """
        return PluralCategory.ONE if abs(value) == 1 else PluralCategory.OTHER

    # ------------------------------------------------------------------
    # Orthography
    # ------------------------------------------------------------------

    def starts_with_for(self, text: str) -> LanguageStartsWith:
        """Infer the starts-with class from spelling."""
        word = text.strip()
        if not self.has_starts_with or not word:
            return LanguageStartsWith.CONSONANT
        if word[0].lower() in self.vowels:
            return LanguageStartsWith.VOWEL
        return LanguageStartsWith.CONSONANT

    def format_lowercase_noun(self, text: str, form: Optional[NounForm] = None) -> str:
        return text.lower()

    def format_lowercase_article(self, text: str) -> str:
        return text.lower()

    @staticmethod
    def capitalize(text: str) -> str:
        return text[:1].upper() + text[1:]


# ---------------------------------------------------------------------------
# Declension registry
# ---------------------------------------------------------------------------

DECLENSION_REGISTRY: Dict[str, Type[LanguageDeclension]] = {}
"""
Global registry mapping language code -> LanguageDeclension subclass.

Example keys: "en", "de", "fr".
"""


def register_declension(*codes: str):
    """
    Class decorator to register a LanguageDeclension subclass for one or
    more language codes.

    Usage:

        @register_declension("de")
        class GermanDeclension(LanguageDeclension):
            ...
    """

    def decorator(cls: Type[LanguageDeclension]) -> Type[LanguageDeclension]:
        if not issubclass(cls, LanguageDeclension):
            raise TypeError("Only LanguageDeclension subclasses can be registered")

        for code in codes:
            if code in DECLENSION_REGISTRY:
                raise ValueError(f"Declension already registered for language '{code}'")
            DECLENSION_REGISTRY[code] = cls
        cls.language_codes = tuple(codes)
        return cls

    return decorator
