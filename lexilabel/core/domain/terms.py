# lexilabel/core/domain/terms.py
"""
Dictionary terms: nouns, adjectives and articles.

A term holds a mapping form key -> surface string for one language.
Explicit values come from source data; anything else is derived by the
language's declension. Terms are immutable once built. Derived values are
memoised on first access, which is safe to race because derivation is
deterministic.

A renamed noun is a clone carrying its own gender, starts-with class and
forms; the canonical noun is never modified.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple, Union

from lexilabel.core.domain.declension import LanguageDeclension
from lexilabel.core.domain.exceptions import NoFormAvailableError
from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageGender,
    LanguageNumber,
    LanguageStartsWith,
    ModifierForm,
    NounForm,
    NounType,
)

FormMap = Mapping[Union[NounForm, str], str]


class Noun:
    """
    A noun with its declined forms.

    Identity (equality and hashing) is the case-insensitive name plus the noun
    type; two nouns with different forms but the same identity are the same
    entity for override and renaming purposes. Use `same_values()` to
    compare contents.

    Args:
        declension: rules of the noun's language.
        name: canonical, language-independent key (e.g. "account").
        forms: explicit values keyed by `NounForm` or form-key strings.
        noun_type: ENTITY nouns must carry every form, FIELD nouns every
            singular form, OTHER nouns only the singular nominative.
        gender: validated against the language; genderless languages drop it.
        starts_with: inferred from the singular when omitted.
        plural_alias: alternate tag naming the plural (e.g. "Accounts").
        inflected: False makes the noun invariant; every form resolves to
            the singular nominative unless stored explicitly.

    Raises:
        NoFormAvailableError: a required form can be neither found nor derived.
    """

    def __init__(
        self,
        declension: LanguageDeclension,
        name: str,
        forms: Optional[FormMap] = None,
        noun_type: NounType = NounType.OTHER,
        gender: Optional[LanguageGender] = None,
        starts_with: Optional[LanguageStartsWith] = None,
        plural_alias: Optional[str] = None,
        inflected: bool = True,
    ) -> None:
        if not name:
            raise ValueError("Noun name must be a non-empty string.")
        self.declension = declension
        self.name = name
        self.noun_type = NounType.from_api_value(noun_type)
        self.gender = declension.check_gender(gender)
        self.plural_alias = plural_alias
        self.inflected = inflected
        self._explicit: Dict[NounForm, str] = {
            declension.coerce_noun_form(form): value for form, value in (forms or {}).items()
        }
        self._derived: Dict[NounForm, str] = {}

        if starts_with is None:
            singular = self._explicit.get(NounForm(LanguageNumber.SINGULAR), "")
            starts_with = declension.starts_with_for(singular)
        self.starts_with = starts_with

        for form in declension.required_forms(self.noun_type):
            if form not in self._explicit:
                self._derived[form] = self._derive(form)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def identity(self) -> Tuple[str, NounType]:
        return (self.name.casefold(), self.noun_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Noun):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __repr__(self) -> str:
        return f"Noun({self.name!r}, {self.noun_type.value}, {self.declension.language_code})"

    def same_values(self, other: "Noun") -> bool:
        return (
            self.identity == other.identity
            and self.gender == other.gender
            and self.starts_with == other.starts_with
            and self.all_values() == other.all_values()
        )

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def get_explicit(self, form: NounForm) -> Optional[str]:
        """The value stored in source data for `form`, never a derived one."""
        return self._explicit.get(form)

    def _derive(self, form: NounForm) -> str:
        if not self.inflected:
            value = self._explicit.get(NounForm(LanguageNumber.SINGULAR))
        else:
            value = self.declension.derive_noun_string(self, form)
        if value is None:
            raise NoFormAvailableError(self.name, form.key, self.declension.language_code)
        return value

    def get_string(self, form: NounForm) -> str:
        """
        Value for `form`, derived and memoised when not stored.

        Raises:
            UnsupportedGrammaticalFormError: `form` is not legal in the language.
            NoFormAvailableError: no derivation path exists.
        """
        form = self.declension.coerce_noun_form(form)
        value = self._explicit.get(form)
        if value is not None:
            return value
        value = self._derived.get(form)
        if value is None:
            value = self._derive(form)
            self._derived[form] = value
        return value

    def get_closest_string(self, form: NounForm) -> Optional[str]:
        """Like `get_string`, but returns None instead of raising."""
        try:
            return self.get_string(form)
        except NoFormAvailableError:
            return None

    def get_default_string(self, plural: bool = False) -> str:
        number = LanguageNumber.PLURAL if plural and self.declension.has_plural else LanguageNumber.SINGULAR
        return self.get_string(self.declension.get_noun_form(number))

    def defined_values(self) -> Dict[NounForm, str]:
        """Values available without further derivation (explicit plus required)."""
        values = dict(self._derived)
        values.update(self._explicit)
        return values

    def all_values(self) -> Dict[NounForm, str]:
        """Every legal form of the language, deriving where needed."""
        return {form: self.get_string(form) for form in self.declension.all_noun_forms}

    # ------------------------------------------------------------------
    # Renaming support
    # ------------------------------------------------------------------

    def clone(
        self,
        gender: Optional[LanguageGender] = None,
        starts_with: Optional[LanguageStartsWith] = None,
        forms: Optional[FormMap] = None,
        merge: bool = False,
    ) -> "Noun":
        """
        Return an independent copy with overridden attributes.

        `forms` replaces the stored values unless `merge` is set, in which
        case they are laid over the existing ones. Derived values are always
        recomputed from the new stored values. When the singular changes and
        no starts-with class is given, it is inferred again from the new
        singular.
        """
        if forms is None:
            new_forms: Dict[Union[NounForm, str], str] = dict(self._explicit)
            if starts_with is None:
                starts_with = self.starts_with
        elif merge:
            overlay = {self.declension.coerce_noun_form(f): v for f, v in forms.items()}
            new_forms = dict(self._explicit)
            new_forms.update(overlay)
            if starts_with is None and NounForm(LanguageNumber.SINGULAR) not in overlay:
                starts_with = self.starts_with
        else:
            new_forms = dict(forms)

        return Noun(
            self.declension,
            self.name,
            new_forms,
            noun_type=self.noun_type,
            gender=gender if gender is not None else self.gender,
            starts_with=starts_with,
            plural_alias=self.plural_alias,
            inflected=self.inflected,
        )


class Adjective:
    """
    An adjective, declined to agree with the noun it modifies.

    `base` is the citation form (masculine/neutral singular nominative);
    other forms are explicit or derived by the declension.
    """

    def __init__(
        self,
        declension: LanguageDeclension,
        name: str,
        forms: Optional[Mapping[Union[ModifierForm, str], str]] = None,
        base: Optional[str] = None,
        starts_with: Optional[LanguageStartsWith] = None,
    ) -> None:
        self.declension = declension
        self.name = name
        self._explicit: Dict[ModifierForm, str] = {
            _coerce_modifier_form(form): value for form, value in (forms or {}).items()
        }
        self.base = base or self._explicit.get(ModifierForm()) or name
        self.starts_with = starts_with or declension.starts_with_for(self.base)

    def __repr__(self) -> str:
        return f"Adjective({self.name!r}, {self.declension.language_code})"

    def get_string(self, form: ModifierForm) -> str:
        value = self._explicit.get(form)
        if value is None:
            value = self.declension.derive_adjective_string(self, form)
        if value is None:
            raise NoFormAvailableError(self.name, form.key, self.declension.language_code)
        return value


class Article:
    """An article term overriding the declension's built-in article strings."""

    def __init__(
        self,
        declension: LanguageDeclension,
        name: str,
        article_type: LanguageArticle,
        forms: Optional[Mapping[Union[ModifierForm, str], str]] = None,
    ) -> None:
        self.declension = declension
        self.name = name
        self.article_type = LanguageArticle.from_label_value(article_type)
        self._explicit: Dict[ModifierForm, str] = {
            _coerce_modifier_form(form): value for form, value in (forms or {}).items()
        }

    def __repr__(self) -> str:
        return f"Article({self.name!r}, {self.article_type.value})"

    def get_string(self, form: ModifierForm) -> Optional[str]:
        value = self._explicit.get(form)
        if value is not None:
            return value
        return self.declension.get_default_article_string(form, self.article_type)


def _coerce_modifier_form(value: Union[ModifierForm, str]) -> ModifierForm:
    if isinstance(value, ModifierForm):
        return value
    return ModifierForm.from_key(value)

