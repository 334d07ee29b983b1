# declension\simple.py
"""
declension/simple.py

Declensions without grammatical agreement.

- SimpleDeclension: languages whose labels do not vary by number, case,
  gender or article (Japanese, Chinese, Korean, ...).
- GenericDeclension: any language with no registered rules.
"""

from lexilabel.core.domain.grammar import LanguageNumber, PluralCategory

from .base import LanguageDeclension, register_declension


@register_declension("ja", "zh", "ko", "th", "vi")
class SimpleDeclension(LanguageDeclension):
    allowed_numbers = (LanguageNumber.SINGULAR,)
    modifier_agreement = frozenset()

    def format_lowercase_noun(self, text, form=None):
        return text

    def plural_category(self, value):
        return PluralCategory.OTHER


class GenericDeclension(LanguageDeclension):
    """
    Used for languages with no registered rules: singular and plural, a
    single case, no gender. Values the data omits degrade to the closest
    stored form.
    """
