# lexilabel/core/domain/dictionary.py
"""
The per-language term dictionary.

Holds the nouns, adjectives and articles one assembled label set renders
with. Lookups are case-insensitive. A dictionary is filled while a label set
is assembled and is only read afterwards.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Union

from lexilabel.core.domain.declension import LanguageDeclension, get_declension
from lexilabel.core.domain.grammar import LanguageArticle, NounType
from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.models import LayerRecords
from lexilabel.core.domain.terms import Adjective, Article, Noun

Term = Union[Noun, Adjective, Article]


def _norm(name: str) -> str:
    return name.strip().casefold()


class LanguageDictionary:
    def __init__(
        self,
        language: HumanLanguage,
        declension: Optional[LanguageDeclension] = None,
    ) -> None:
        self.language = language
        self.declension = declension or get_declension(language)
        self._nouns: Dict[str, Noun] = {}
        self._plural_aliases: Dict[str, Noun] = {}
        self._adjectives: Dict[str, Adjective] = {}
        self._articles: Dict[str, Article] = {}

    def __repr__(self) -> str:
        return f"LanguageDictionary({self.language}, nouns={len(self._nouns)})"

    def __len__(self) -> int:
        return len(self._nouns) + len(self._adjectives) + len(self._articles)

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def add_noun(self, noun: Noun) -> None:
        key = _norm(noun.name)
        previous = self._nouns.get(key)
        if previous is not None and previous.plural_alias:
            self._plural_aliases.pop(_norm(previous.plural_alias), None)
        self._nouns[key] = noun
        if noun.plural_alias:
            self._plural_aliases[_norm(noun.plural_alias)] = noun

    def add_adjective(self, adjective: Adjective) -> None:
        self._adjectives[_norm(adjective.name)] = adjective

    def add_article(self, article: Article) -> None:
        self._articles[_norm(article.name)] = article

    @classmethod
    def from_records(
        cls,
        language: HumanLanguage,
        records: LayerRecords,
        declension: Optional[LanguageDeclension] = None,
    ) -> "LanguageDictionary":
        dictionary = cls(language, declension)
        decl = dictionary.declension
        for rec in records.nouns:
            dictionary.add_noun(
                Noun(
                    decl,
                    rec.name,
                    rec.forms,
                    noun_type=rec.noun_type,
                    gender=rec.gender,
                    starts_with=rec.starts_with,
                    plural_alias=rec.plural_alias,
                    inflected=rec.inflected,
                )
            )
        for rec in records.adjectives:
            dictionary.add_adjective(
                Adjective(decl, rec.name, rec.forms, base=rec.base, starts_with=rec.starts_with)
            )
        for rec in records.articles:
            dictionary.add_article(Article(decl, rec.name, rec.article_type, rec.forms))
        return dictionary

    def overlay(self, parent: "LanguageDictionary") -> "LanguageDictionary":
        """A new dictionary with `parent`'s terms shadowed by this one's."""
        merged = LanguageDictionary(self.language, self.declension)
        for source in (parent, self):
            for noun in source._nouns.values():
                merged.add_noun(noun)
            merged._adjectives.update(source._adjectives)
            merged._articles.update(source._articles)
        return merged

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_noun(self, name: str, create: bool = False) -> Optional[Noun]:
        """
        Look up a noun by name.

        With `create`, an unknown name yields a new noun whose
        singular is the name itself. It is not added to the dictionary.
        """
        noun = self._nouns.get(_norm(name))
        if noun is None and create:
            noun = Noun(self.declension, name, {"sg": name}, noun_type=NounType.OTHER)
        return noun

    def get_noun_by_plural_alias(self, alias: str) -> Optional[Noun]:
        return self._plural_aliases.get(_norm(alias))

    def get_adjective(self, name: str) -> Optional[Adjective]:
        return self._adjectives.get(_norm(name))

    def get_article(self, name: str) -> Optional[Article]:
        return self._articles.get(_norm(name))

    def get_article_by_type(self, article_type: LanguageArticle) -> Optional[Article]:
        for article in self._articles.values():
            if article.article_type is article_type:
                return article
        return None

    def get_term(self, name: str) -> Optional[Term]:
        return (
            self.get_noun(name)
            or self.get_noun_by_plural_alias(name)
            or self.get_adjective(name)
            or self.get_article(name)
        )

    def nouns(self) -> Iterator[Noun]:
        return iter(self._nouns.values())

    def adjectives(self) -> Iterator[Adjective]:
        return iter(self._adjectives.values())
