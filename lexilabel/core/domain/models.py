# lexilabel\core\domain\models.py
"""
Parsed label-source records.

These are the shapes the loading subsystem hands to the core: terms with
their form maps and label templates grouped by section, for one language
and one label-set layer. Category codes ("m", "v", "the") are validated
here so malformed data fails at load time.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lexilabel.core.domain.grammar import (
    LanguageArticle,
    LanguageGender,
    LanguageStartsWith,
    NounType,
)

# --- Terms ---

class NounRecord(BaseModel):
    """A noun as defined in a label source."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Canonical key, e.g. 'account'")
    noun_type: NounType = Field(NounType.OTHER, alias="type")
    gender: Optional[LanguageGender] = None
    starts_with: Optional[LanguageStartsWith] = None
    # Form key ("sg", "pl", "sg.g", "sg.n.the") -> surface string
    forms: Dict[str, str] = Field(default_factory=dict)
    plural_alias: Optional[str] = None
    inflected: bool = True

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value):
        return None if value in (None, "") else LanguageGender.from_label_value(value)

    @field_validator("starts_with", mode="before")
    @classmethod
    def _parse_starts_with(cls, value):
        return None if value in (None, "") else LanguageStartsWith.from_label_value(value)


class AdjectiveRecord(BaseModel):
    """An adjective; `forms` is keyed by full modifier-form keys."""
    name: str = Field(..., min_length=1)
    base: Optional[str] = None
    starts_with: Optional[LanguageStartsWith] = None
    forms: Dict[str, str] = Field(default_factory=dict)

    @field_validator("starts_with", mode="before")
    @classmethod
    def _parse_starts_with(cls, value):
        return None if value in (None, "") else LanguageStartsWith.from_label_value(value)


class ArticleRecord(BaseModel):
    """An article overriding the built-in article strings of a language."""
    name: str = Field(..., min_length=1)
    article_type: LanguageArticle
    forms: Dict[str, str] = Field(default_factory=dict)

    @field_validator("article_type", mode="before")
    @classmethod
    def _parse_article(cls, value):
        return LanguageArticle.from_label_value(value)

# --- Labels ---

class LabelAlias(BaseModel):
    """A label that redirects to another label, possibly in another section."""
    key: str
    section: Optional[str] = None


LabelEntry = Union[str, LabelAlias]


class LayerRecords(BaseModel):
    """Everything one label-set layer defines for one language."""
    nouns: List[NounRecord] = Field(default_factory=list)
    adjectives: List[AdjectiveRecord] = Field(default_factory=list)
    articles: List[ArticleRecord] = Field(default_factory=list)
    # Section -> key -> template string or alias
    sections: Dict[str, Dict[str, LabelEntry]] = Field(default_factory=dict)

    def labels(self) -> Iterator[Tuple[str, str, LabelEntry]]:
        for section, entries in self.sections.items():
            for key, entry in entries.items():
                yield section, key, entry

    @property
    def is_empty(self) -> bool:
        return not (self.nouns or self.adjectives or self.articles or self.sections)
