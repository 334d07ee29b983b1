# lexilabel\core\domain\grammar\__init__.py
from .categories import (
    GrammaticalCategory,
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguageStartsWith,
    NounType,
    PluralCategory,
)
from .forms import ModifierForm, NounForm

__all__ = [
    "GrammaticalCategory",
    "LanguageArticle",
    "LanguageCase",
    "LanguageGender",
    "LanguageNumber",
    "LanguageStartsWith",
    "ModifierForm",
    "NounForm",
    "NounType",
    "PluralCategory",
]
