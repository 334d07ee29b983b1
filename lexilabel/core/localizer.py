# lexilabel/core/localizer.py
"""
Request-facing label rendering.

A `GrammaticalLocalizer` binds one assembled label set to one renaming
context. The context is consulted on every call, so a rename registered
(or renaming toggled off) between two calls changes the second rendering
without reloading or recompiling any label.

    localizer = factory.get_localizer("de_AT", renaming=session_context)
    localizer.get_label("Buttons", "new_entity", renameables=[StandardEntity("Account")])
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from lexilabel.core.domain.exceptions import LabelNotFoundError
from lexilabel.core.domain.language import HumanLanguage, LanguageProvider, LocaleLike
from lexilabel.core.domain.renaming import RenamingContext
from lexilabel.core.labels.label_set import GrammaticalLabelSet, LabelRef
from lexilabel.core.labels.loader import GrammaticalLabelSetLoader
from lexilabel.core.ports.renaming import IRenameable
from lexilabel.shared.config import Settings
from lexilabel.shared.config import settings as default_settings

logger = structlog.get_logger()


class GrammaticalLocalizer:
    """
    Args:
        label_set: the assembled set for the user's language.
        renaming: the caller's session context; a fresh default context
            (no renames) when omitted.
        settings: missing-label prefix and fallback logging switches.
    """

    def __init__(
        self,
        label_set: GrammaticalLabelSet,
        renaming: Optional[RenamingContext] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.label_set = label_set
        self.renaming = renaming if renaming is not None else RenamingContext()
        self.settings = settings if settings is not None else default_settings

    def __repr__(self) -> str:
        return f"GrammaticalLocalizer({self.language.locale})"

    @property
    def language(self) -> HumanLanguage:
        return self.label_set.language

    @property
    def declension(self):
        return self.label_set.declension

    def label_exists(self, section: str, key: str) -> bool:
        return self.label_set.contains(section, key)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_label(
        self,
        section: str,
        key: str,
        *args: object,
        renameables: Optional[Sequence[IRenameable]] = None,
    ) -> str:
        """
        Best-effort rendering. A missing label yields a visible diagnostic
        string and an unresolvable reference inside a template yields a
        `[[section.key:ref]]` placeholder; neither raises.
        """
        try:
            ref = self.label_set.get(section, key)
        except LabelNotFoundError:
            logger.warning("label_missing", lang=self.language.locale, section=section, key=key)
            return self.missing_label(section, key)
        return self._render(ref, args, renameables, strict=False)

    def get_label_throw(
        self,
        section: str,
        key: str,
        *args: object,
        renameables: Optional[Sequence[IRenameable]] = None,
    ) -> str:
        """
        Strict rendering.

        Raises:
            LabelNotFoundError: the key is absent from every layer.
            LabelRenderError: a reference in the template cannot be resolved.
        """
        ref = self.label_set.get(section, key)
        return self._render(ref, args, renameables, strict=True)

    def get_label_or_default(
        self,
        section: str,
        key: str,
        default: Optional[str],
        *args: object,
        renameables: Optional[Sequence[IRenameable]] = None,
    ) -> Optional[str]:
        """Like `get_label`, but returns `default` when the label does not exist."""
        if not self.label_set.contains(section, key):
            return default
        return self.get_label(section, key, *args, renameables=renameables)

    def missing_label(self, section: str, key: str) -> str:
        return f"{self.settings.MISSING_LABEL_PREFIX}PropertyFile - val {key} not found in section {section}"

    def _render(
        self,
        ref: LabelRef,
        args: Sequence[object],
        renameables: Optional[Sequence[IRenameable]],
        strict: bool,
    ) -> str:
        if self.settings.LOG_FALLBACK_STRINGS and ref.language != self.language:
            logger.info(
                "label_fallback_string",
                lang=self.language.locale,
                served_from=ref.language.locale,
                label=ref.name,
            )
        return self.label_set.render(
            ref,
            renameables=renameables or (),
            args=args,
            renaming=self.renaming.get_provider(),
            strict=strict,
        )


class LocalizerFactory:
    """Hands out localizers over the loader's cached label sets."""

    def __init__(
        self,
        loader: GrammaticalLabelSetLoader,
        language_provider: Optional[LanguageProvider] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.loader = loader
        self.language_provider = language_provider if language_provider is not None else loader.language_provider
        self.settings = settings if settings is not None else default_settings

    def get_localizer(
        self,
        locale: Optional[LocaleLike] = None,
        renaming: Optional[RenamingContext] = None,
    ) -> GrammaticalLocalizer:
        language = (
            self.language_provider.base_language
            if locale is None
            else self.language_provider.get_language(locale)
        )
        return GrammaticalLocalizer(self.loader.get_set(language), renaming, self.settings)
