# declension\slavic.py
"""
declension/slavic.py

Russian: six cases, three genders, no articles.

Russian case endings depend on stem class and stress, which the source data
supplies explicitly. Without an explicit value, a form degrades to the
nominative of the same number, then to the other number.
"""

from __future__ import annotations

from decimal import Decimal

from lexilabel.core.domain.grammar import LanguageCase, LanguageGender, PluralCategory

from .base import LanguageDeclension, register_declension


@register_declension("ru")
class RussianDeclension(LanguageDeclension):
    required_cases = (
        LanguageCase.NOMINATIVE,
        LanguageCase.GENITIVE,
        LanguageCase.DATIVE,
        LanguageCase.ACCUSATIVE,
        LanguageCase.INSTRUMENTAL,
        LanguageCase.PREPOSITIONAL,
    )
    required_genders = (
        LanguageGender.MASCULINE,
        LanguageGender.FEMININE,
        LanguageGender.NEUTER,
    )
    default_gender = LanguageGender.MASCULINE
    modifier_agreement = frozenset({"number", "case", "gender"})
    vowels = "аеёиоуыэюя"

    def plural_category(self, value: Decimal) -> PluralCategory:
        """1, 21, 101 -> one; 2-4, 22-24 -> few; 0, 5-20, 25 -> many; fractions -> other."""
        value = abs(value)
        if value != value.to_integral_value():
            return PluralCategory.OTHER
        n = int(value)
        mod10, mod100 = n % 10, n % 100
        if mod10 == 1 and mod100 != 11:
            return PluralCategory.ONE
        if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
            return PluralCategory.FEW
        return PluralCategory.MANY
