# lexilabel/core/domain/language.py
"""
Human languages (locales) and the locale fallback chain.

A `HumanLanguage` is a normalised locale such as "en_US", "de" or "pt_BR".
The `LanguageProvider` maps caller-supplied locale strings onto languages
and decides which language a translation falls back to when a language has
no value for a label:

    en_IN -> en_GB -> en_US
    de_AT -> de -> en_US
    zh_HK -> zh_TW -> en_US
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

LocaleLike = Union["HumanLanguage", str]


@dataclass(frozen=True)
class HumanLanguage:
    """A normalised locale. `HumanLanguage("en-gb") == HumanLanguage("en_GB")`."""

    locale: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", _normalize_locale(self.locale))

    @classmethod
    def parse(cls, value: LocaleLike) -> "HumanLanguage":
        if isinstance(value, HumanLanguage):
            return value
        return cls(value)

    @property
    def code(self) -> str:
        """ISO language code, e.g. "en"."""
        return self.locale.split("_", 1)[0]

    @property
    def country(self) -> str:
        parts = self.locale.split("_")
        return parts[1] if len(parts) > 1 else ""

    def same_language(self, other: "HumanLanguage") -> bool:
        return self.code == other.code

    def __str__(self) -> str:
        return self.locale


def _normalize_locale(value: str) -> str:
    text = str(value).strip().replace("-", "_")
    parts = [p for p in text.split("_") if p]
    if not parts:
        raise ValueError(f"Invalid locale: {value!r}")
    normalized = [parts[0].lower()]
    if len(parts) > 1:
        normalized.append(parts[1].upper())
        normalized.extend(parts[2:])
    return "_".join(normalized)


# ---------------------------------------------------------------------------
# Well-known languages
# ---------------------------------------------------------------------------

ENGLISH = HumanLanguage("en_US")
ENGLISH_GB = HumanLanguage("en_GB")
ENGLISH_CA = HumanLanguage("en_CA")
ENGLISH_AU = HumanLanguage("en_AU")
ENGLISH_IN = HumanLanguage("en_IN")
GERMAN = HumanLanguage("de")
GERMAN_AT = HumanLanguage("de_AT")
FRENCH = HumanLanguage("fr")
SPANISH = HumanLanguage("es")
ITALIAN = HumanLanguage("it")
DUTCH = HumanLanguage("nl_NL")
SWEDISH = HumanLanguage("sv")
RUSSIAN = HumanLanguage("ru")
JAPANESE = HumanLanguage("ja")
CHINESE_SIMP = HumanLanguage("zh_CN")
CHINESE_TRAD = HumanLanguage("zh_TW")
PORTUGUESE_BR = HumanLanguage("pt_BR")
INDONESIAN = HumanLanguage("id")


class LanguageProvider:
    """
    Resolves locale strings to languages and computes translation fallback.

    The base language (en_US unless configured otherwise) ends every chain.
    """

    def __init__(self, default_locale: str = "en_US") -> None:
        self.base_language = HumanLanguage(default_locale)

    def get_language(self, locale: LocaleLike) -> HumanLanguage:
        return HumanLanguage.parse(locale)

    def get_fallback_language(self, language: LocaleLike) -> Optional[HumanLanguage]:
        """The next language to consult, or None for the base language."""
        language = self.get_language(language)
        if language == self.base_language:
            return None

        code, country = language.code, language.country

        if code == "en":
            if not country or country in ("GB", "CA", "IL", "US"):
                return self._or_base(ENGLISH, language)
            return ENGLISH_GB
        if code == "zh":
            if country == "HK":
                return CHINESE_TRAD
            if country in ("TW", "CN"):
                return self.base_language
            return CHINESE_SIMP
        # pt_BR and nl_NL stand for their whole language.
        if code == "pt":
            return self.base_language if country == "BR" else PORTUGUESE_BR
        if code == "nl":
            return self.base_language if country == "NL" else DUTCH
        if code == "ms":
            return INDONESIAN
        if code == "ht":
            return FRENCH
        if code == "haw":
            return self.base_language
        if country:
            return HumanLanguage(code)
        return self.base_language

    def _or_base(self, candidate: HumanLanguage, language: HumanLanguage) -> HumanLanguage:
        return self.base_language if candidate == language else candidate

    def fallback_chain(self, language: LocaleLike) -> Tuple[HumanLanguage, ...]:
        """The language followed by each successive fallback, most specific first."""
        current: Optional[HumanLanguage] = self.get_language(language)
        chain = []
        while current is not None and current not in chain:
            chain.append(current)
            current = self.get_fallback_language(current)
        return tuple(chain)
