# lexilabel/core/labels/loader.py
"""
Per-language cache of assembled label sets.

A loader owns one label-set layer (`set_id`, e.g. "base" or "tenant_acme")
and optionally a parent loader whose layers its own shadow. For a requested
language it walks the fallback chain and, for each language in it, stacks
its own layer before its parents' layers:

    en_IN: tenant/en_IN, base/en_IN, tenant/en_GB, base/en_GB, tenant/en_US, base/en_US

Assembled sets are cached per language. `reset()` swaps in an empty cache;
callers already holding a set keep using it unchanged.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

import structlog

from lexilabel.core.domain.language import HumanLanguage, LanguageProvider, LocaleLike
from lexilabel.core.labels.label_set import GrammaticalLabelSet, LabelLayer
from lexilabel.core.ports.label_source import ILabelSource

logger = structlog.get_logger()


class GrammaticalLabelSetLoader:
    def __init__(
        self,
        source: ILabelSource,
        set_id: str = "base",
        parent: Optional["GrammaticalLabelSetLoader"] = None,
        language_provider: Optional[LanguageProvider] = None,
        fail_on_dangling_alias: bool = False,
        fail_on_invalid_template: bool = False,
    ) -> None:
        if not set_id:
            raise ValueError("Label set id must be a non-empty string.")
        self.source = source
        self.set_id = set_id
        self.parent = parent
        self.language_provider = language_provider if language_provider is not None else LanguageProvider()
        self.fail_on_dangling_alias = fail_on_dangling_alias
        self.fail_on_invalid_template = fail_on_invalid_template

        self._cache: Dict[HumanLanguage, GrammaticalLabelSet] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"GrammaticalLabelSetLoader({self.set_id!r}, parent={self.parent!r})"

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------

    def own_layers(self, language: HumanLanguage) -> List[LabelLayer]:
        """This loader's layer followed by its ancestors' layers, for exactly `language`."""
        layers: List[LabelLayer] = []
        records = self.source.load_layer(self.set_id, language)
        if records is not None and not records.is_empty:
            layers.append(LabelLayer(self.set_id, language, records))
        if self.parent is not None:
            layers.extend(self.parent.own_layers(language))
        return layers

    def layers_for(self, language: LocaleLike) -> List[LabelLayer]:
        """Every layer that contributes to `language`'s set, most specific first."""
        layers: List[LabelLayer] = []
        for fallback in self.language_provider.fallback_chain(language):
            layers.extend(self.own_layers(fallback))
        return layers

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def get_set(self, language: LocaleLike) -> GrammaticalLabelSet:
        """
        The assembled set for `language`, built on first use.

        Raises:
            LabelSourceError: a layer could not be read.
            AliasCycleError / LabelAliasError / TemplateSyntaxError: invalid label data.
        """
        lang = self.language_provider.get_language(language)

        # Fast path (no lock) for already-assembled sets.
        existing = self._cache.get(lang)
        if existing is not None:
            return existing

        with self._lock:
            existing = self._cache.get(lang)
            if existing is not None:
                return existing

            label_set = GrammaticalLabelSet(
                lang,
                self.layers_for(lang),
                fail_on_dangling_alias=self.fail_on_dangling_alias,
                fail_on_invalid_template=self.fail_on_invalid_template,
            )
            self._cache[lang] = label_set
            logger.info(
                "label_set_loaded",
                set_id=self.set_id,
                lang=lang.locale,
                labels=label_set.label_count,
            )
            return label_set

    def cached_languages(self) -> List[HumanLanguage]:
        return list(self._cache.keys())

    def reset(self) -> None:
        """Forget every assembled set (and the parents' sets) and reload the source."""
        with self._lock:
            self._cache = {}
            if self.parent is not None:
                self.parent.reset()
            # A parent sharing our source has reloaded it already.
            if self.parent is None or self.parent.source is not self.source:
                self.source.reload()
        logger.info("label_sets_reset", set_id=self.set_id)
