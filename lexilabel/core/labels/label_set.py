# lexilabel/core/labels/label_set.py
"""
Assembled label sets.

A `GrammaticalLabelSet` is the immutable view of every label available for
one language. It is built from an explicit, ordered list of layers, most
specific first:

    tenant en_IN, base en_IN, tenant en_GB, base en_GB, tenant en_US, base en_US

A (section, key) defined by an earlier layer shadows the same key in later
ones. Aliases are followed once, when the set is built, so a lookup is a
single dictionary access and never chases redirections.

Nouns, adjectives and articles come from the layers sharing the set's
language code (en_IN, en_GB and en_US all decline as English). When no
layer has the requested language at all, the first language of the chain
that has data supplies the dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import structlog

from lexilabel.core.domain.declension import get_declension
from lexilabel.core.domain.dictionary import LanguageDictionary
from lexilabel.core.domain.exceptions import (
    AliasCycleError,
    LabelAliasError,
    LabelNotFoundError,
    TemplateSyntaxError,
)
from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.models import LabelEntry, LayerRecords
from lexilabel.core.domain.templates import LabelTemplate, RenderContext, compile_template
from lexilabel.core.ports.renaming import IRenameable, IRenamingProvider

logger = structlog.get_logger()

LabelId = Tuple[str, str]


@dataclass(frozen=True)
class LabelLayer:
    """The records one label-set layer defines for one language."""

    set_id: str
    language: HumanLanguage
    records: LayerRecords


@dataclass(frozen=True)
class LabelRef:
    """
    A resolved label: the requested (section, key), where it finally points
    after aliases, its compiled template and the layer it came from.
    """

    section: str
    key: str
    target_section: str
    target_key: str
    template: LabelTemplate
    language: HumanLanguage
    set_id: str

    @property
    def is_alias(self) -> bool:
        return (self.section, self.key) != (self.target_section, self.target_key)

    @property
    def name(self) -> str:
        return f"{self.section}.{self.key}"


class GrammaticalLabelSet:
    """
    Args:
        language: the language this set serves.
        layers: most specific first.
        allow_other_grammatical_forms: inherited flag of a set this one wraps.
            The effective flag is that OR "some layer is in another language".
        fail_on_dangling_alias: raise `LabelAliasError` instead of dropping
            aliases whose target no layer defines.
        fail_on_invalid_template: raise `TemplateSyntaxError` instead of
            dropping labels whose template does not compile.

    Raises:
        AliasCycleError: aliases redirect in a loop.
        LabelAliasError: a dangling alias, with `fail_on_dangling_alias`.
        TemplateSyntaxError: a template does not compile, with
            `fail_on_invalid_template`.
    """

    def __init__(
        self,
        language: HumanLanguage,
        layers: Sequence[LabelLayer],
        allow_other_grammatical_forms: bool = False,
        fail_on_dangling_alias: bool = False,
        fail_on_invalid_template: bool = False,
    ) -> None:
        self.language = language
        self._layers: Tuple[LabelLayer, ...] = tuple(layers)
        self._fail_on_dangling_alias = fail_on_dangling_alias
        self._fail_on_invalid_template = fail_on_invalid_template
        self._allow_other_forms = allow_other_grammatical_forms or any(
            layer.language != language for layer in self._layers
        )
        self.dictionary = self._build_dictionary()
        self._labels = self._resolve_labels()

        logger.debug(
            "label_set_assembled",
            lang=language.locale,
            layers=[f"{layer.set_id}:{layer.language.locale}" for layer in self._layers],
            labels=self.label_count,
        )

    def __repr__(self) -> str:
        return f"GrammaticalLabelSet({self.language.locale}, layers={len(self._layers)})"

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def _dictionary_language(self) -> HumanLanguage:
        for layer in self._layers:
            if layer.language.same_language(self.language):
                return self.language
        for layer in self._layers:
            if layer.records.nouns or layer.records.adjectives or layer.records.articles:
                return layer.language
        return self.language

    def _build_dictionary(self) -> LanguageDictionary:
        dict_language = self._dictionary_language()
        declension = get_declension(dict_language)
        dictionary = LanguageDictionary(self.language, declension)
        for layer in reversed(self._layers):
            if not layer.language.same_language(dict_language):
                continue
            own = LanguageDictionary.from_records(self.language, layer.records, declension)
            dictionary = own.overlay(dictionary)
        return dictionary

    def _resolve_labels(self) -> Mapping[str, Mapping[str, LabelRef]]:
        raw: Dict[LabelId, Tuple[LabelLayer, LabelEntry]] = {}
        for layer in self._layers:
            for section, key, entry in layer.records.labels():
                raw.setdefault((section, key), (layer, entry))

        compiled: Dict[LabelId, LabelTemplate] = {}
        invalid = set()
        sections: Dict[str, Dict[str, LabelRef]] = {}
        for label_id in raw:
            target = self._follow_aliases(label_id, raw)
            if target is None:
                continue
            layer, entry = raw[target]
            if target in invalid:
                continue
            template = compiled.get(target)
            if template is None:
                try:
                    template = compile_template(entry, self.dictionary)
                except TemplateSyntaxError as exc:
                    if self._fail_on_invalid_template:
                        raise
                    # Aliases to this label are dropped with it.
                    invalid.add(target)
                    logger.warning(
                        "label_template_invalid",
                        lang=self.language.locale,
                        label=f"{target[0]}.{target[1]}",
                        layer=f"{layer.set_id}:{layer.language.locale}",
                        error=exc.message,
                    )
                    continue
                compiled[target] = template
            section, key = label_id
            sections.setdefault(section, {})[key] = LabelRef(
                section=section,
                key=key,
                target_section=target[0],
                target_key=target[1],
                template=template,
                language=layer.language,
                set_id=layer.set_id,
            )
        return MappingProxyType({s: MappingProxyType(keys) for s, keys in sections.items()})

    def _follow_aliases(
        self, label_id: LabelId, raw: Mapping[LabelId, Tuple[LabelLayer, LabelEntry]]
    ) -> Optional[LabelId]:
        chain: List[LabelId] = [label_id]
        current = label_id
        while True:
            entry = raw[current][1]
            if isinstance(entry, str):
                return current
            target = (entry.section or current[0], entry.key)
            if target in chain:
                raise AliasCycleError(f"{s}.{k}" for s, k in chain + [target])
            if target not in raw:
                if self._fail_on_dangling_alias:
                    raise LabelAliasError(f"{label_id[0]}.{label_id[1]}", f"{target[0]}.{target[1]}")
                logger.warning(
                    "label_alias_dangling",
                    lang=self.language.locale,
                    label=f"{label_id[0]}.{label_id[1]}",
                    target=f"{target[0]}.{target[1]}",
                )
                return None
            chain.append(target)
            current = target

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def declension(self):
        return self.dictionary.declension

    @property
    def layers(self) -> Tuple[LabelLayer, ...]:
        return self._layers

    @property
    def label_count(self) -> int:
        return sum(len(keys) for keys in self._labels.values())

    def allow_other_grammatical_forms(self) -> bool:
        """
        True when templates may request forms the language lacks; they then
        degrade to the closest legal form instead of failing.
        """
        return self._allow_other_forms

    def contains(self, section: str, key: str) -> bool:
        return key in self._labels.get(section, {})

    def section(self, name: str) -> Mapping[str, LabelRef]:
        return self._labels.get(name, MappingProxyType({}))

    def section_names(self) -> Iterable[str]:
        return tuple(self._labels.keys())

    def get(self, section: str, key: str) -> LabelRef:
        """
        Resolve (section, key) within this set's layers.

        Raises:
            LabelNotFoundError: no layer defines it.
        """
        ref = self._labels.get(section, {}).get(key)
        if ref is None:
            raise LabelNotFoundError(section, key, self.language.locale)
        return ref

    def get_string(
        self,
        section: str,
        key: str,
        renameables: Sequence[IRenameable] = (),
        args: Sequence[object] = (),
        renaming: Optional[IRenamingProvider] = None,
        strict: bool = True,
    ) -> str:
        """Render a label with positional arguments and renameable nouns."""
        ref = self.get(section, key)
        return self.render(ref, renameables, args, renaming, strict)

    def render(
        self,
        ref: LabelRef,
        renameables: Sequence[IRenameable] = (),
        args: Sequence[object] = (),
        renaming: Optional[IRenamingProvider] = None,
        strict: bool = True,
    ) -> str:
        ctx = RenderContext(
            dictionary=self.dictionary,
            label=ref.name,
            renameables=tuple(renameables or ()),
            args=tuple(args or ()),
            renaming=renaming,
            strict=strict,
            allow_other_forms=self._allow_other_forms,
        )
        return ref.template.render(ctx)

    # ------------------------------------------------------------------
    # Layering
    # ------------------------------------------------------------------

    def with_override(self, layer: LabelLayer) -> "GrammaticalLabelSet":
        """
        A new set with `layer` shadowing this one. A layer in the same
        language never changes `allow_other_grammatical_forms()`.
        """
        return GrammaticalLabelSet(
            self.language,
            (layer,) + self._layers,
            allow_other_grammatical_forms=self._allow_other_forms,
            fail_on_dangling_alias=self._fail_on_dangling_alias,
            fail_on_invalid_template=self._fail_on_invalid_template,
        )
